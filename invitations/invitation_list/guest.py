from dataclasses import replace
from typing import Annotated

from pydantic import StrictBool, StrictStr, StringConstraints, ValidationError
from pydantic.dataclasses import dataclass

from invitations.invitation_list.dtos import GuestDTO
from invitations.invitation_list.identifiers import (
    GuestId,
    HouseholdId,
    ValidGuestId,
    ValidHouseholdId,
    new_guest_id,
)
from invitations.invitation_list.problems import CreateGuestFailure
from invitations.result import Failure, Result, Success

GUEST_NAME_MIN_LENGTH = 3
GUEST_NAME_MAX_LENGTH = 99

GuestName = Annotated[
    StrictStr, StringConstraints(min_length=GUEST_NAME_MIN_LENGTH, max_length=GUEST_NAME_MAX_LENGTH)
]


@dataclass(frozen=True)
class GuestUpdate:
    """Partial guest values submitted with an RSVP. ``None`` means "not supplied"."""

    id: ValidGuestId
    name: GuestName | None = None
    dietary_requirements: StrictStr | None = None
    attending: StrictBool | None = None
    is_child: StrictBool | None = None
    household: ValidHouseholdId | None = None

    @classmethod
    def create(
        cls,
        id: GuestId,
        name: str | None = None,
        dietary_requirements: str | None = None,
        attending: bool | None = None,
        is_child: bool | None = None,
        household: HouseholdId | None = None,
    ) -> Result["GuestUpdate", CreateGuestFailure]:
        try:
            return Success(
                cls(
                    id=id,
                    name=name,
                    dietary_requirements=dietary_requirements,
                    attending=attending,
                    is_child=is_child,
                    household=household,
                )
            )
        except ValidationError as e:
            return Failure(CreateGuestFailure.from_validation_error(e))


@dataclass(frozen=True)
class Guest:
    id: ValidGuestId
    name: GuestName
    dietary_requirements: StrictStr | None = None
    attending: StrictBool | None = None
    is_child: StrictBool = False
    household: ValidHouseholdId | None = None

    @classmethod
    def create(
        cls,
        name: str,
        dietary_requirements: str | None = None,
        attending: bool | None = None,
        is_child: bool = False,
        household: HouseholdId | None = None,
        id: GuestId | None = None,
    ) -> Result["Guest", CreateGuestFailure]:
        """Build a validated guest, generating an id when none is given."""
        try:
            return Success(
                cls(
                    id=new_guest_id() if id is None else id,
                    name=name,
                    dietary_requirements=dietary_requirements,
                    attending=attending,
                    is_child=is_child,
                    household=household,
                )
            )
        except ValidationError as e:
            return Failure(CreateGuestFailure.from_validation_error(e))

    def with_household(self, household_id: HouseholdId | None) -> "Guest":
        return replace(self, household=household_id)

    def merge(self, update: GuestUpdate) -> "Guest":
        """Apply an RSVP update: the id is kept, supplied fields win, absent fields are kept."""

        def pick(new, old):
            return old if new is None else new

        return replace(
            self,
            name=pick(update.name, self.name),
            dietary_requirements=pick(update.dietary_requirements, self.dietary_requirements),
            attending=pick(update.attending, self.attending),
            is_child=pick(update.is_child, self.is_child),
            household=pick(update.household, self.household),
        )

    def to_persistence(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "dietary_requirements": self.dietary_requirements,
            "attending": self.attending,
            "is_child": self.is_child,
            "household_id": self.household,
        }

    def to_dto(self) -> GuestDTO:
        return GuestDTO(
            id=self.id,
            name=self.name,
            dietary_requirements=self.dietary_requirements,
            attending=self.attending,
            is_child=self.is_child,
            household=self.household,
        )
