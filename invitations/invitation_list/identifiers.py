from typing import Annotated, TypeAlias
from uuid import uuid4

import base62
from pydantic import Field, StrictInt, StrictStr, StringConstraints, TypeAdapter, ValidationError

from invitations.invitation_list.problems import FailedToGenerateHouseholdCode
from invitations.result import Failure, Result, Success

GuestId: TypeAlias = str
HouseholdId: TypeAlias = int
HouseholdCode: TypeAlias = str

# Constrained forms used when validating entities
ValidGuestId = Annotated[StrictStr, StringConstraints(pattern=r"\S")]
ValidHouseholdId = Annotated[StrictInt, Field(gt=0)]
ValidHouseholdCode = Annotated[StrictStr, StringConstraints(pattern=r"^[0-9A-Za-z]{1,32}$")]

HOUSEHOLD_CODE_OFFSET = 1000

_household_id_adapter = TypeAdapter(ValidHouseholdId)


def new_guest_id() -> GuestId:
    return str(uuid4())


def is_valid_household_id(value: object) -> bool:
    try:
        _household_id_adapter.validate_python(value)
    except ValidationError:
        return False
    return True


def generate_household_code(
    household_id: HouseholdId,
) -> Result[HouseholdCode, FailedToGenerateHouseholdCode]:
    """Encode the UTF-8 digits of ``household_id + 1000`` as base62 (0-9A-Za-z).

    Household 1 gets ``tqd3B``, household 2 gets ``tqd3C``.
    """
    if not is_valid_household_id(household_id):
        return Failure(FailedToGenerateHouseholdCode(f"Invalid household id: {household_id!r}"))
    try:
        code = base62.encodebytes(str(HOUSEHOLD_CODE_OFFSET + household_id).encode("utf-8"))
    except (TypeError, ValueError) as e:
        return Failure(FailedToGenerateHouseholdCode(str(e)))
    return Success(code)
