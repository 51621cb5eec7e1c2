from fastapi import APIRouter, Depends

from invitations.event_bus import event_bus
from invitations.invitation_list.features.add_guest_to_household.use_case import (
    AddGuestToHouseholdCommand,
    AddGuestToHouseholdUseCase,
)
from invitations.invitation_list.http_errors import to_http_exception
from invitations.invitation_list.repository.invitation_list_repository import (
    SqlInvitationListRepository,
)
from invitations.invitation_list.schemas import HouseholdResponse
from invitations.invitation_list.urls import HOUSEHOLD_GUEST_URL

router = APIRouter()


def get_add_guest_to_household_use_case() -> AddGuestToHouseholdUseCase:
    """Dependency to get add guest to household use case instance."""
    return AddGuestToHouseholdUseCase(
        repository=SqlInvitationListRepository(), event_bus=event_bus
    )


@router.put(HOUSEHOLD_GUEST_URL, response_model=HouseholdResponse)
async def add_guest_to_household(
    household_id: int,
    guest_id: str,
    use_case: AddGuestToHouseholdUseCase = Depends(get_add_guest_to_household_use_case),
) -> HouseholdResponse:
    """
    Link a guest to a household.
    Repeating the call for a guest already in the household changes nothing.
    """
    result = await use_case.execute(
        AddGuestToHouseholdCommand(household_id=household_id, guest_id=guest_id)
    )
    if result.is_failure:
        raise to_http_exception(result.error)
    return HouseholdResponse.from_dto(result.value)
