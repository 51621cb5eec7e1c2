"""Closed set of problems the invitation list can report.

Problems are exceptions so adapters may raise them, but the domain and the
use cases only ever hand them back inside a ``Failure``.
"""

from enum import Enum
from typing import ClassVar

from pydantic import ValidationError


class ProblemCode(str, Enum):
    FAILED_TO_CREATE_GUEST = "FAILED_TO_CREATE_GUEST"
    FAILED_TO_CREATE_HOUSEHOLD_RECORD = "FAILED_TO_CREATE_HOUSEHOLD_RECORD"
    FAILED_TO_CREATE_INVITATION_LIST = "FAILED_TO_CREATE_INVITATION_LIST"
    FAILED_TO_GENERATE_HOUSEHOLD_CODE = "FAILED_TO_GENERATE_HOUSEHOLD_CODE"
    HOUSEHOLD_NOT_FOUND = "HOUSEHOLD_NOT_FOUND"
    HOUSEHOLD_ALREADY_EXISTS = "HOUSEHOLD_ALREADY_EXISTS"
    GUEST_NOT_FOUND = "GUEST_NOT_FOUND"
    GUEST_WITH_THAT_NAME_ALREADY_EXISTS = "GUEST_WITH_THAT_NAME_ALREADY_EXISTS"
    GUESTS_NOT_FOUND_IN_HOUSEHOLD = "GUESTS_NOT_FOUND_IN_HOUSEHOLD"
    REPOSITORY_FAILURE = "REPOSITORY_FAILURE"
    STALE_INVITATION_LIST = "STALE_INVITATION_LIST"
    FAILED_TO_ADD_GUEST = "FAILED_TO_ADD_GUEST"
    FAILED_TO_CREATE_HOUSEHOLD = "FAILED_TO_CREATE_HOUSEHOLD"
    FAILED_TO_ADD_GUEST_TO_HOUSEHOLD = "FAILED_TO_ADD_GUEST_TO_HOUSEHOLD"
    FAIL_TO_RSVP = "FAIL_TO_RSVP"


class Problem(Exception):
    """Base class for every expected business failure."""

    code: ClassVar[ProblemCode]
    default_message: ClassVar[str] = ""

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> "Problem":
        """Name every invalid field, e.g. ``name: String should have at least 3 characters``."""
        details = "; ".join(
            f"{'.'.join(str(part) for part in e['loc']) or 'value'}: {e['msg']}"
            for e in error.errors()
        )
        return cls(f"{cls.default_message}: {details}")

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def to_dict(self) -> dict:
        return {"code": self.code.value, "message": self.message}


# Entity construction


class CreateGuestFailure(Problem):
    code = ProblemCode.FAILED_TO_CREATE_GUEST
    default_message = "Failed to create guest"


class CreateHouseholdFailure(Problem):
    code = ProblemCode.FAILED_TO_CREATE_HOUSEHOLD_RECORD
    default_message = "Failed to create household"


class CreateListFailure(Problem):
    code = ProblemCode.FAILED_TO_CREATE_INVITATION_LIST
    default_message = "Failed to create invitation list"


class FailedToGenerateHouseholdCode(Problem):
    code = ProblemCode.FAILED_TO_GENERATE_HOUSEHOLD_CODE
    default_message = "Failed to generate household code"


# Aggregate transitions


class HouseholdNotFound(Problem):
    code = ProblemCode.HOUSEHOLD_NOT_FOUND
    default_message = "Household not found"


class HouseholdAlreadyExists(Problem):
    code = ProblemCode.HOUSEHOLD_ALREADY_EXISTS
    default_message = "Household already exists"


class GuestNotFound(Problem):
    code = ProblemCode.GUEST_NOT_FOUND
    default_message = "Guest not found"


class GuestWithThatNameAlreadyExists(Problem):
    code = ProblemCode.GUEST_WITH_THAT_NAME_ALREADY_EXISTS
    default_message = "A guest with that name already exists"


class GuestsNotFoundInHousehold(Problem):
    code = ProblemCode.GUESTS_NOT_FOUND_IN_HOUSEHOLD
    default_message = "Guests do not match the household"


# Repository


class RepositoryFailure(Problem):
    code = ProblemCode.REPOSITORY_FAILURE
    default_message = "Invitation list storage failed"


class StaleInvitationList(Problem):
    code = ProblemCode.STALE_INVITATION_LIST
    default_message = "Invitation list was changed by another command"


# Use cases


class UseCaseFailure(Problem):
    """Coarse per-use-case error. ``cause`` holds the problem that stopped the pipeline."""

    def __init__(self, cause: Problem | None = None, message: str | None = None) -> None:
        self.cause = cause
        super().__init__(message or (cause.message if cause else None))

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other) and self.cause == getattr(other, "cause", None)

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.cause))

    def to_dict(self) -> dict:
        data = super().to_dict()
        if self.cause is not None:
            data["cause"] = self.cause.to_dict()
        return data


class FailedToAddGuest(UseCaseFailure):
    code = ProblemCode.FAILED_TO_ADD_GUEST
    default_message = "Failed to add guest"


class FailedToCreateHousehold(UseCaseFailure):
    code = ProblemCode.FAILED_TO_CREATE_HOUSEHOLD
    default_message = "Failed to create household"


class FailedToAddGuestToHousehold(UseCaseFailure):
    code = ProblemCode.FAILED_TO_ADD_GUEST_TO_HOUSEHOLD
    default_message = "Failed to add guest to household"


class FailToRSVP(UseCaseFailure):
    code = ProblemCode.FAIL_TO_RSVP
    default_message = "Failed to RSVP"
