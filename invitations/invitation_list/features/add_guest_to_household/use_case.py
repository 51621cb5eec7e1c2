import logging
from dataclasses import dataclass

from invitations.invitation_list.dtos import HouseholdDTO
from invitations.invitation_list.problems import FailedToAddGuestToHousehold
from invitations.invitation_list.use_case import InvitationListUseCase
from invitations.result import Result, Success


@dataclass(frozen=True)
class AddGuestToHouseholdCommand:
    household_id: int
    guest_id: str


class AddGuestToHouseholdUseCase(InvitationListUseCase):
    """Link an existing guest to an existing household."""

    failure = FailedToAddGuestToHousehold
    logger = logging.getLogger(__name__)

    async def execute(
        self, command: AddGuestToHouseholdCommand
    ) -> Result[HouseholdDTO, FailedToAddGuestToHousehold]:
        loaded = await self._load()
        if loaded.is_failure:
            return self._fail("invitation list lookup", loaded.error)

        changed = loaded.value.add_guest_to_household(command.household_id, command.guest_id)
        if changed.is_failure:
            return self._fail("adding guest to household", changed.error)
        self.logger.info("guest %s added to household %s", command.guest_id, command.household_id)

        committed = await self._commit(changed.value)
        if committed.is_failure:
            return self._fail("saving invitation list", committed.error)

        household = committed.value.invitation_list.find_household(command.household_id)
        return Success(household.to_dto())
