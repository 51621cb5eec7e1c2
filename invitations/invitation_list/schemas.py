"""Response schemas shared by the invitation list routers."""

from dataclasses import asdict

from pydantic import BaseModel

from invitations.invitation_list.dtos import GuestDTO, HouseholdDTO


class GuestResponse(BaseModel):
    id: str
    name: str
    dietary_requirements: str | None = None
    attending: bool | None = None
    is_child: bool = False
    household: int | None = None

    @classmethod
    def from_dto(cls, dto: GuestDTO) -> "GuestResponse":
        return cls(**asdict(dto))


class HouseholdResponse(BaseModel):
    id: int
    code: str
    email: str | None = None
    guests: list[str] = []

    @classmethod
    def from_dto(cls, dto: HouseholdDTO) -> "HouseholdResponse":
        return cls(**asdict(dto))
