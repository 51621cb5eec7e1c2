from typing import Literal

from fastapi import APIRouter, Depends
from pydantic import BaseModel, EmailStr

from invitations.event_bus import event_bus
from invitations.invitation_list.features.rsvp.use_case import (
    RSVPCommand,
    RSVPGuest,
    RSVPUseCase,
)
from invitations.invitation_list.http_errors import to_http_exception
from invitations.invitation_list.repository.invitation_list_repository import (
    SqlInvitationListRepository,
)
from invitations.invitation_list.schemas import HouseholdResponse
from invitations.invitation_list.urls import RSVP_URL

router = APIRouter()


class RSVPGuestSubmit(BaseModel):
    id: str
    name: str | None = None
    dietary_requirements: str | None = None
    attending: bool | None = None


class RSVPSubmit(BaseModel):
    household_code: str
    # An empty email clears the stored one
    email: EmailStr | Literal[""]
    guests: list[RSVPGuestSubmit] = []


def get_rsvp_use_case() -> RSVPUseCase:
    """Dependency to get RSVP use case instance."""
    return RSVPUseCase(repository=SqlInvitationListRepository(), event_bus=event_bus)


@router.put(RSVP_URL, response_model=HouseholdResponse)
async def rsvp(
    rsvp_data: RSVPSubmit,
    use_case: RSVPUseCase = Depends(get_rsvp_use_case),
) -> HouseholdResponse:
    """
    Submit the RSVP for a whole household.
    Every guest of the household must be listed exactly once.
    """
    result = await use_case.execute(
        RSVPCommand(
            household_code=rsvp_data.household_code,
            email=rsvp_data.email,
            guests=tuple(
                RSVPGuest(
                    id=guest.id,
                    name=guest.name,
                    dietary_requirements=guest.dietary_requirements,
                    attending=guest.attending,
                )
                for guest in rsvp_data.guests
            ),
        )
    )
    if result.is_failure:
        raise to_http_exception(result.error)
    return HouseholdResponse.from_dto(result.value)
