import pytest

from invitations.invitation_list.dtos import GuestDTO
from invitations.invitation_list.guest import Guest, GuestUpdate
from invitations.invitation_list.problems import CreateGuestFailure


def test_create_guest_with_defaults():
    guest = Guest.create("Jane Doe").unwrap()

    assert guest.name == "Jane Doe"
    assert guest.id
    assert guest.dietary_requirements is None
    assert guest.attending is None
    assert guest.is_child is False
    assert guest.household is None


def test_create_guest_keeps_supplied_id():
    guest = Guest.create("Jane Doe", id="guest-1").unwrap()

    assert guest.id == "guest-1"


@pytest.mark.parametrize("name", ["Jo", "", "x" * 100])
def test_create_guest_rejects_name_length(name):
    result = Guest.create(name)

    assert result.is_failure
    assert isinstance(result.error, CreateGuestFailure)
    assert "name" in result.error.message


@pytest.mark.parametrize("name", ["Bob", "x" * 99])
def test_create_guest_accepts_name_length_bounds(name):
    assert Guest.create(name).is_success


def test_create_guest_reports_every_invalid_field():
    result = Guest.create("Jo", id="  ", attending="yes", household=0)

    message = result.error.message
    assert "name" in message
    assert "id" in message
    assert "attending" in message
    assert "household" in message


def test_merge_update_takes_supplied_fields_and_keeps_the_rest():
    guest = Guest.create("Jane Doe", dietary_requirements="vegan", is_child=True, household=1).unwrap()
    update = GuestUpdate.create(guest.id, name="Jane Smith", attending=True).unwrap()

    merged = guest.merge(update)

    assert merged.id == guest.id
    assert merged.name == "Jane Smith"
    assert merged.attending is True
    assert merged.dietary_requirements == "vegan"
    assert merged.is_child is True
    assert merged.household == 1


def test_merge_keeps_original_id():
    guest = Guest.create("Jane Doe", id="guest-1").unwrap()

    merged = guest.merge(GuestUpdate(id="other", name="Jane Smith"))

    assert merged.id == "guest-1"


def test_guest_update_validates_present_name():
    assert GuestUpdate.create("guest-1").is_success
    assert GuestUpdate.create("guest-1", name="Jo").is_failure
    assert GuestUpdate.create("").is_failure


def test_to_persistence_and_dto():
    guest = Guest.create("Jane Doe", id="guest-1", attending=False, household=2).unwrap()

    assert guest.to_persistence() == {
        "id": "guest-1",
        "name": "Jane Doe",
        "dietary_requirements": None,
        "attending": False,
        "is_child": False,
        "household_id": 2,
    }
    assert guest.to_dto() == GuestDTO(
        id="guest-1", name="Jane Doe", attending=False, is_child=False, household=2
    )


@pytest.mark.parametrize(
    "field, value",
    [("attending", "true"), ("is_child", None), ("household", True), ("dietary_requirements", 5)],
)
def test_create_guest_does_not_coerce_field_types(field, value):
    result = Guest.create("Jane Doe", **{field: value})

    assert result.is_failure
    assert result.error.message.startswith("Failed to create guest: ")
    assert f"{field}:" in result.error.message


def test_guest_is_immutable():
    guest = Guest.create("Jane Doe").unwrap()

    with pytest.raises(Exception):
        guest.name = "Jane Smith"
