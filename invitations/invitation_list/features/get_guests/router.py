from fastapi import APIRouter, Depends, HTTPException

from invitations.invitation_list.repository.read_models import (
    InvitationListReadModel,
    SqlInvitationListReadModel,
)
from invitations.invitation_list.schemas import GuestResponse
from invitations.invitation_list.urls import GUEST_URL, GUESTS_URL

router = APIRouter()


def get_invitation_list_read_model() -> InvitationListReadModel:
    """Dependency to get invitation list read model instance."""
    return SqlInvitationListReadModel()


@router.get(GUESTS_URL, response_model=list[GuestResponse])
async def get_guests(
    read_model: InvitationListReadModel = Depends(get_invitation_list_read_model),
) -> list[GuestResponse]:
    guests = await read_model.get_guests()
    return [GuestResponse.from_dto(guest) for guest in guests]


@router.get(GUEST_URL, response_model=GuestResponse)
async def get_guest(
    guest_id: str,
    read_model: InvitationListReadModel = Depends(get_invitation_list_read_model),
) -> GuestResponse:
    guest = await read_model.get_guest(guest_id)
    if guest is None:
        raise HTTPException(status_code=404, detail="Guest not found")
    return GuestResponse.from_dto(guest)
