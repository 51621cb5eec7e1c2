import logging
from dataclasses import dataclass

from invitations.invitation_list.dtos import GuestDTO
from invitations.invitation_list.guest import Guest
from invitations.invitation_list.problems import FailedToAddGuest
from invitations.invitation_list.use_case import InvitationListUseCase
from invitations.result import Result, Success


@dataclass(frozen=True)
class AddGuestCommand:
    name: str
    dietary_requirements: str | None = None
    attending: bool | None = None
    is_child: bool = False
    id: str | None = None


class AddGuestUseCase(InvitationListUseCase):
    """Create a guest and append it to the invitation list."""

    failure = FailedToAddGuest
    logger = logging.getLogger(__name__)

    async def execute(self, command: AddGuestCommand) -> Result[GuestDTO, FailedToAddGuest]:
        created = Guest.create(
            name=command.name,
            dietary_requirements=command.dietary_requirements,
            attending=command.attending,
            is_child=command.is_child,
            id=command.id,
        )
        if created.is_failure:
            return self._fail("guest creation", created.error)
        guest = created.value
        self.logger.info("guest created: %s", guest.id)

        loaded = await self._load()
        if loaded.is_failure:
            return self._fail("invitation list lookup", loaded.error)

        changed = loaded.value.add_guest_to_list(guest)
        if changed.is_failure:
            return self._fail("adding guest to list", changed.error)
        self.logger.info("guest added to list")

        committed = await self._commit(changed.value)
        if committed.is_failure:
            return self._fail("saving invitation list", committed.error)

        return Success(guest.to_dto())
