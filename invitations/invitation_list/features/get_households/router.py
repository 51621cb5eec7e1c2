from fastapi import APIRouter, Depends, HTTPException

from invitations.invitation_list.features.get_guests.router import get_invitation_list_read_model
from invitations.invitation_list.repository.read_models import InvitationListReadModel
from invitations.invitation_list.schemas import HouseholdResponse
from invitations.invitation_list.urls import HOUSEHOLD_URL, HOUSEHOLDS_URL

router = APIRouter()


@router.get(HOUSEHOLDS_URL, response_model=list[HouseholdResponse])
async def get_households(
    read_model: InvitationListReadModel = Depends(get_invitation_list_read_model),
) -> list[HouseholdResponse]:
    households = await read_model.get_households()
    return [HouseholdResponse.from_dto(household) for household in households]


@router.get(HOUSEHOLD_URL, response_model=HouseholdResponse)
async def get_household(
    household_id: int,
    read_model: InvitationListReadModel = Depends(get_invitation_list_read_model),
) -> HouseholdResponse:
    household = await read_model.get_household(household_id)
    if household is None:
        raise HTTPException(status_code=404, detail="Household not found")
    return HouseholdResponse.from_dto(household)
