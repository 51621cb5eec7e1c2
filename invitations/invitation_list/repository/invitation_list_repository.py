import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from functools import partial

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from invitations.config.database import async_session_manager
from invitations.invitation_list.aggregate import InvitationList
from invitations.invitation_list.problems import (
    CreateListFailure,
    RepositoryFailure,
    StaleInvitationList,
)
from invitations.invitation_list.repository.orm_models import (
    GuestRow,
    HouseholdRow,
    InvitationListVersionRow,
)
from invitations.result import Failure, Result, Success

logger = logging.getLogger(__name__)

VERSION_ROW_ID = 1


class _VersionConflict(Exception):
    """Another writer created the version row first."""


class InvitationListRepository(ABC):
    """Loads and stores the whole invitation list aggregate."""

    @abstractmethod
    async def find(self) -> Result[InvitationList, RepositoryFailure | CreateListFailure]:
        """Load the current list together with its stored version (0 when empty)."""
        raise NotImplementedError

    @abstractmethod
    async def save(
        self, invitation_list: InvitationList
    ) -> Result[None, RepositoryFailure | StaleInvitationList]:
        """Persist the list if nobody saved since it was loaded.

        Fails with ``StaleInvitationList`` when the stored version no longer
        equals ``invitation_list.version``.
        """
        raise NotImplementedError


class SqlInvitationListRepository(InvitationListRepository):
    """SQL implementation of the invitation list repository."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def find(self) -> Result[InvitationList, RepositoryFailure | CreateListFailure]:
        try:
            async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
                household_rows = (
                    await session.execute(select(HouseholdRow).order_by(HouseholdRow.id))
                ).scalars().all()
                guest_rows = (
                    await session.execute(
                        select(GuestRow).order_by(GuestRow.list_position, GuestRow.created_at)
                    )
                ).scalars().all()
                # Column select so a version bumped by a bulk UPDATE is read from the database
                version = (
                    await session.execute(
                        select(InvitationListVersionRow.version).where(
                            InvitationListVersionRow.id == VERSION_ROW_ID
                        )
                    )
                ).scalar_one_or_none() or 0
        except SQLAlchemyError as e:
            logger.error("Failed to load invitation list: %s", e)
            return Failure(RepositoryFailure(f"Failed to load invitation list: {e}"))

        rosters = defaultdict(list)
        for row in sorted(
            (g for g in guest_rows if g.household_id is not None),
            key=lambda g: g.household_position or 0,
        ):
            rosters[row.household_id].append(row.id)

        raw_households = [
            {"id": row.id, "code": row.code, "email": row.email, "guests": rosters[row.id]}
            for row in household_rows
        ]
        raw_guests = [
            {
                "id": row.id,
                "name": row.name,
                "dietary_requirements": row.dietary_requirements,
                "attending": row.attending,
                "is_child": row.is_child,
                "household_id": row.household_id,
            }
            for row in guest_rows
        ]
        return InvitationList.create(raw_guests, raw_households, version=version)

    async def save(
        self, invitation_list: InvitationList
    ) -> Result[None, RepositoryFailure | StaleInvitationList]:
        try:
            async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
                if not await self._bump_version(session, invitation_list.version):
                    logger.warning(
                        "Rejected save of invitation list version %s", invitation_list.version
                    )
                    return Failure(
                        StaleInvitationList(
                            f"Invitation list version {invitation_list.version} is out of date"
                        )
                    )

                positions = {}
                for household in invitation_list.households:
                    await session.merge(HouseholdRow(**self._household_values(household)))
                    positions.update({guest_id: i for i, guest_id in enumerate(household.guests)})
                await session.flush()

                for list_position, guest in enumerate(invitation_list.guests):
                    await session.merge(
                        GuestRow(
                            **guest.to_persistence(),
                            household_position=positions.get(guest.id),
                            list_position=list_position,
                        )
                    )
                await session.flush()
        except _VersionConflict as e:
            logger.warning("Concurrent write to invitation list: %s", e)
            return Failure(StaleInvitationList(f"Invitation list was changed concurrently: {e}"))
        except IntegrityError as e:
            logger.error("Invitation list violates a database constraint: %s", e)
            return Failure(RepositoryFailure(f"Failed to save invitation list: {e}"))
        except SQLAlchemyError as e:
            logger.error("Failed to save invitation list: %s", e)
            return Failure(RepositoryFailure(f"Failed to save invitation list: {e}"))

        return Success(None)

    @staticmethod
    def _household_values(household) -> dict:
        values = household.to_persistence()
        values.pop("guests")
        return values

    @staticmethod
    async def _bump_version(session: AsyncSession, expected: int) -> bool:
        if expected == 0:
            existing = await session.get(InvitationListVersionRow, VERSION_ROW_ID)
            if existing is None:
                session.add(InvitationListVersionRow(id=VERSION_ROW_ID, version=1))
                try:
                    await session.flush()
                except IntegrityError as e:
                    raise _VersionConflict(str(e)) from e
                return True

        result = await session.execute(
            update(InvitationListVersionRow)
            .where(
                InvitationListVersionRow.id == VERSION_ROW_ID,
                InvitationListVersionRow.version == expected,
            )
            .values(version=expected + 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1
