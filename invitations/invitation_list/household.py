from collections.abc import Iterable
from dataclasses import replace

from pydantic import StrictStr, ValidationError, field_validator
from pydantic.dataclasses import dataclass

from invitations.invitation_list.dtos import HouseholdDTO
from invitations.invitation_list.identifiers import (
    GuestId,
    HouseholdCode,
    HouseholdId,
    ValidGuestId,
    ValidHouseholdCode,
    ValidHouseholdId,
)
from invitations.invitation_list.problems import CreateHouseholdFailure
from invitations.result import Failure, Result, Success


@dataclass(frozen=True)
class Household:
    id: ValidHouseholdId
    code: ValidHouseholdCode
    email: StrictStr | None = ""
    guests: tuple[ValidGuestId, ...] = ()

    @field_validator("guests", mode="before")
    @classmethod
    def guests_must_be_a_collection(cls, value):
        if isinstance(value, str):
            raise ValueError("guests must be a collection of ids, not a single string")
        return value

    @field_validator("guests")
    @classmethod
    def guests_must_be_unique(cls, value: tuple[GuestId, ...]) -> tuple[GuestId, ...]:
        if len(set(value)) != len(value):
            raise ValueError("guests must not contain duplicate ids")
        return value

    @classmethod
    def create(
        cls,
        id: HouseholdId,
        code: HouseholdCode,
        email: str | None = None,
        guests: Iterable[GuestId] | None = (),
    ) -> Result["Household", CreateHouseholdFailure]:
        """Build a validated household. A missing email is stored as ``""``."""
        try:
            return Success(
                cls(
                    id=id,
                    code=code,
                    email="" if email is None else email,
                    guests=() if guests is None else guests,
                )
            )
        except ValidationError as e:
            return Failure(CreateHouseholdFailure.from_validation_error(e))

    def has_guest(self, guest_id: GuestId) -> bool:
        return guest_id in self.guests

    def with_guest(self, guest_id: GuestId) -> "Household":
        if self.has_guest(guest_id):
            return self
        return replace(self, guests=(*self.guests, guest_id))

    def without_guest(self, guest_id: GuestId) -> "Household":
        return replace(self, guests=tuple(g for g in self.guests if g != guest_id))

    def with_email(self, email: str | None) -> "Household":
        return replace(self, email=email)

    def to_persistence(self) -> dict:
        return {
            "id": self.id,
            "code": self.code,
            "email": self.email,
            "guests": list(self.guests),
        }

    def to_dto(self) -> HouseholdDTO:
        return HouseholdDTO(id=self.id, code=self.code, email=self.email, guests=list(self.guests))
