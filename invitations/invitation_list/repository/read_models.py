import abc

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from invitations.config.database import async_session_manager
from invitations.invitation_list.dtos import GuestDTO, HouseholdDTO
from invitations.invitation_list.repository.orm_models import GuestRow, HouseholdRow


class InvitationListReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_guests(self) -> list[GuestDTO]:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_guest(self, guest_id: str) -> GuestDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_households(self) -> list[HouseholdDTO]:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_household(self, household_id: int) -> HouseholdDTO | None:
        """
        Get a household with its guest ids in roster order.
        Returns None when no household has that id.
        """
        raise NotImplementedError


def _guest_dto(row: GuestRow) -> GuestDTO:
    return GuestDTO(
        id=row.id,
        name=row.name,
        dietary_requirements=row.dietary_requirements,
        attending=row.attending,
        is_child=row.is_child,
        household=row.household_id,
    )


def _household_dto(row: HouseholdRow) -> HouseholdDTO:
    return HouseholdDTO(
        id=row.id,
        code=row.code,
        email=row.email,
        guests=[member.id for member in row.members],
    )


class SqlInvitationListReadModel(InvitationListReadModel):
    """SQL implementation of the invitation list read model."""

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def get_guests(self) -> list[GuestDTO]:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(select(GuestRow).order_by(GuestRow.list_position))
            return [_guest_dto(row) for row in result.scalars().all()]

    async def get_guest(self, guest_id: str) -> GuestDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            row = await session.get(GuestRow, guest_id)
            return _guest_dto(row) if row else None

    async def get_households(self) -> list[HouseholdDTO]:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(HouseholdRow)
                .options(selectinload(HouseholdRow.members))
                .execution_options(populate_existing=True)
                .order_by(HouseholdRow.id)
            )
            return [_household_dto(row) for row in result.scalars().all()]

    async def get_household(self, household_id: int) -> HouseholdDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(HouseholdRow)
                .options(selectinload(HouseholdRow.members))
                .execution_options(populate_existing=True)
                .where(HouseholdRow.id == household_id)
            )
            row = result.scalar_one_or_none()
            return _household_dto(row) if row else None
