from fastapi import APIRouter, Depends, status

from invitations.event_bus import event_bus
from invitations.invitation_list.features.create_household.use_case import (
    CreateHouseholdCommand,
    CreateHouseholdUseCase,
)
from invitations.invitation_list.http_errors import to_http_exception
from invitations.invitation_list.repository.invitation_list_repository import (
    SqlInvitationListRepository,
)
from invitations.invitation_list.schemas import HouseholdResponse
from invitations.invitation_list.urls import HOUSEHOLDS_URL

router = APIRouter()


def get_create_household_use_case() -> CreateHouseholdUseCase:
    """Dependency to get create household use case instance."""
    return CreateHouseholdUseCase(repository=SqlInvitationListRepository(), event_bus=event_bus)


@router.post(HOUSEHOLDS_URL, response_model=HouseholdResponse, status_code=status.HTTP_201_CREATED)
async def create_household(
    use_case: CreateHouseholdUseCase = Depends(get_create_household_use_case),
) -> HouseholdResponse:
    result = await use_case.execute(CreateHouseholdCommand())
    if result.is_failure:
        raise to_http_exception(result.error)
    return HouseholdResponse.from_dto(result.value)
