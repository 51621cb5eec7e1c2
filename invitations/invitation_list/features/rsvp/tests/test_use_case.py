"""Tests for RSVPUseCase."""

import pytest

from invitations.events import RSVPedEvent
from invitations.invitation_list.features.rsvp.use_case import RSVPCommand, RSVPGuest, RSVPUseCase
from invitations.invitation_list.problems import (
    CreateGuestFailure,
    FailToRSVP,
    GuestsNotFoundInHousehold,
    HouseholdNotFound,
)
from invitations.invitation_list.tests.inmemory_models import (
    InMemoryInvitationListRepository,
    RecordingEventBus,
    household_with_guests,
    make_guest,
)


@pytest.fixture
def repository():
    return InMemoryInvitationListRepository(
        household_with_guests(
            make_guest("Jane Doe", id="g1", dietary_requirements="none"),
            make_guest("John Doe", id="g2", is_child=True),
        )
    )


@pytest.fixture
def bus():
    return RecordingEventBus()


@pytest.fixture
def use_case(repository, bus):
    return RSVPUseCase(repository=repository, event_bus=bus)


@pytest.mark.asyncio
async def test_rsvp(use_case, repository, bus):
    result = await use_case.execute(
        RSVPCommand(
            household_code="tqd3B",
            email="jane@example.com",
            guests=(
                RSVPGuest(id="g1", name="Jane Smith", dietary_requirements="vegan", attending=True),
                RSVPGuest(id="g2", name="John Doe", attending=False),
            ),
        )
    )

    household = result.unwrap()
    assert household.email == "jane@example.com"
    assert household.guests == ["g1", "g2"]
    stored = repository.invitation_list
    assert stored.find_guest("g1").name == "Jane Smith"
    assert stored.find_guest("g1").dietary_requirements == "vegan"
    assert stored.find_guest("g2").attending is False
    assert stored.find_guest("g2").is_child is True
    assert bus.emitted == [("RSVPedEvent", RSVPedEvent(household_code="tqd3B"))]


@pytest.mark.asyncio
async def test_rsvp_keeps_fields_not_supplied(use_case, repository):
    await use_case.execute(
        RSVPCommand(
            household_code="tqd3B",
            email="jane@example.com",
            guests=(RSVPGuest(id="g1", attending=True), RSVPGuest(id="g2")),
        )
    )

    jane = repository.invitation_list.find_guest("g1")
    assert jane.name == "Jane Doe"
    assert jane.dietary_requirements == "none"
    assert jane.attending is True


@pytest.mark.asyncio
async def test_rsvp_unknown_household(use_case, bus):
    result = await use_case.execute(
        RSVPCommand(household_code="zzz", email="a@b.c", guests=(RSVPGuest(id="g1"),))
    )

    assert isinstance(result.error, FailToRSVP)
    assert isinstance(result.error.cause, HouseholdNotFound)
    assert bus.emitted == []


@pytest.mark.asyncio
async def test_rsvp_missing_household_member(use_case, repository):
    result = await use_case.execute(
        RSVPCommand(household_code="tqd3B", email="a@b.c", guests=(RSVPGuest(id="g1"),))
    )

    assert isinstance(result.error.cause, GuestsNotFoundInHousehold)
    assert repository.saved == []


@pytest.mark.asyncio
async def test_rsvp_invalid_guest_name(use_case):
    result = await use_case.execute(
        RSVPCommand(
            household_code="tqd3B",
            email="a@b.c",
            guests=(RSVPGuest(id="g1", name="Jo"), RSVPGuest(id="g2")),
        )
    )

    assert isinstance(result.error.cause, CreateGuestFailure)
