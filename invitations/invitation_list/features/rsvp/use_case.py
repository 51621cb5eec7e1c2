import logging
from dataclasses import dataclass, field

from invitations.invitation_list.dtos import HouseholdDTO
from invitations.invitation_list.guest import GuestUpdate
from invitations.invitation_list.problems import FailToRSVP
from invitations.invitation_list.use_case import InvitationListUseCase
from invitations.result import Result, Success


@dataclass(frozen=True)
class RSVPGuest:
    id: str
    name: str | None = None
    dietary_requirements: str | None = None
    attending: bool | None = None


@dataclass(frozen=True)
class RSVPCommand:
    household_code: str
    email: str | None
    guests: tuple[RSVPGuest, ...] = field(default_factory=tuple)


class RSVPUseCase(InvitationListUseCase):
    """Record a household's response and merge each guest's answers."""

    failure = FailToRSVP
    logger = logging.getLogger(__name__)

    async def execute(self, command: RSVPCommand) -> Result[HouseholdDTO, FailToRSVP]:
        updates = []
        for guest in command.guests:
            update = GuestUpdate.create(
                id=guest.id,
                name=guest.name,
                dietary_requirements=guest.dietary_requirements,
                attending=guest.attending,
            )
            if update.is_failure:
                return self._fail("guest update validation", update.error)
            updates.append(update.value)
        self.logger.info("%d guest update(s) validated", len(updates))

        loaded = await self._load()
        if loaded.is_failure:
            return self._fail("invitation list lookup", loaded.error)

        changed = loaded.value.rsvp(command.household_code, command.email, updates)
        if changed.is_failure:
            return self._fail("rsvp", changed.error)
        self.logger.info("rsvp recorded for household %s", command.household_code)

        committed = await self._commit(changed.value)
        if committed.is_failure:
            return self._fail("saving invitation list", committed.error)

        household = committed.value.invitation_list.find_household_by_code(command.household_code)
        return Success(household.value.to_dto())
