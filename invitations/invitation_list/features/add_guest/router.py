from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from invitations.event_bus import event_bus
from invitations.invitation_list.features.add_guest.use_case import (
    AddGuestCommand,
    AddGuestUseCase,
)
from invitations.invitation_list.http_errors import to_http_exception
from invitations.invitation_list.repository.invitation_list_repository import (
    SqlInvitationListRepository,
)
from invitations.invitation_list.schemas import GuestResponse
from invitations.invitation_list.urls import GUESTS_URL

router = APIRouter()


class AddGuestRequest(BaseModel):
    name: str
    dietary_requirements: str | None = None
    attending: bool | None = None
    is_child: bool = False


def get_add_guest_use_case() -> AddGuestUseCase:
    """Dependency to get add guest use case instance."""
    return AddGuestUseCase(repository=SqlInvitationListRepository(), event_bus=event_bus)


@router.post(GUESTS_URL, response_model=GuestResponse, status_code=status.HTTP_201_CREATED)
async def add_guest(
    request: AddGuestRequest,
    use_case: AddGuestUseCase = Depends(get_add_guest_use_case),
) -> GuestResponse:
    """
    Add a guest to the invitation list.
    Names must be unique across the list.
    """
    result = await use_case.execute(
        AddGuestCommand(
            name=request.name,
            dietary_requirements=request.dietary_requirements,
            attending=request.attending,
            is_child=request.is_child,
        )
    )
    if result.is_failure:
        raise to_http_exception(result.error)
    return GuestResponse.from_dto(result.value)
