import logging
from dataclasses import dataclass

from invitations.invitation_list.aggregate import InvitationList
from invitations.invitation_list.dtos import HouseholdDTO
from invitations.invitation_list.household import Household
from invitations.invitation_list.problems import FailedToCreateHousehold
from invitations.invitation_list.use_case import InvitationListUseCase
from invitations.result import Result, Success


@dataclass(frozen=True)
class CreateHouseholdCommand:
    pass


class CreateHouseholdUseCase(InvitationListUseCase):
    """Create the next household with a generated id and code."""

    failure = FailedToCreateHousehold
    logger = logging.getLogger(__name__)

    async def execute(
        self, command: CreateHouseholdCommand | None = None
    ) -> Result[HouseholdDTO, FailedToCreateHousehold]:
        loaded = await self._load()
        if loaded.is_failure:
            return self._fail("invitation list lookup", loaded.error)
        invitation_list = loaded.value

        household_id = invitation_list.next_household_id()
        code = InvitationList.generate_household_code(household_id)
        if code.is_failure:
            return self._fail("household code generation", code.error)
        self.logger.info("household code generated: %s", code.value)

        created = Household.create(id=household_id, code=code.value)
        if created.is_failure:
            return self._fail("household creation", created.error)
        household = created.value

        changed = invitation_list.add_household(household)
        if changed.is_failure:
            return self._fail("adding household to list", changed.error)
        self.logger.info("household %s added to list", household.id)

        committed = await self._commit(changed.value)
        if committed.is_failure:
            return self._fail("saving invitation list", committed.error)

        return Success(household.to_dto())
