"""Tests for RSVP endpoint."""

import pytest

from invitations.invitation_list.features.rsvp.router import get_rsvp_use_case
from invitations.invitation_list.features.rsvp.use_case import RSVPUseCase
from invitations.invitation_list.tests.inmemory_models import (
    InMemoryInvitationListRepository,
    RecordingEventBus,
    household_with_guests,
    make_guest,
)
from invitations.invitation_list.urls import RSVP_URL


@pytest.fixture
def repository():
    return InMemoryInvitationListRepository(
        household_with_guests(make_guest("Jane Doe", id="g1"), make_guest("John Doe", id="g2"))
    )


@pytest.fixture
def overrides(repository):
    use_case = RSVPUseCase(repository=repository, event_bus=RecordingEventBus())
    return {get_rsvp_use_case: lambda: use_case}


def rsvp_body(**changes):
    body = {
        "household_code": "tqd3B",
        "email": "jane@example.com",
        "guests": [
            {"id": "g1", "name": "Jane Doe", "dietary_requirements": "vegan", "attending": True},
            {"id": "g2", "name": "John Doe", "dietary_requirements": None, "attending": False},
        ],
    }
    body.update(changes)
    return body


@pytest.mark.asyncio
async def test_rsvp(client_factory, overrides, repository):
    async with client_factory(overrides) as client:
        response = await client.put(url=RSVP_URL, json=rsvp_body())

    assert response.status_code == 200
    assert response.json() == {
        "id": 1,
        "code": "tqd3B",
        "email": "jane@example.com",
        "guests": ["g1", "g2"],
    }
    assert repository.invitation_list.find_guest("g1").attending is True


@pytest.mark.asyncio
async def test_rsvp_unknown_household(client_factory, overrides):
    async with client_factory(overrides) as client:
        response = await client.put(url=RSVP_URL, json=rsvp_body(household_code="nope"))

    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "FAIL_TO_RSVP"


@pytest.mark.asyncio
async def test_rsvp_guest_not_in_household(client_factory, overrides):
    guests = [{"id": "g1"}, {"id": "g3"}]

    async with client_factory(overrides) as client:
        response = await client.put(url=RSVP_URL, json=rsvp_body(guests=guests))

    assert response.status_code == 404
    assert response.json()["detail"]["cause"]["code"] == "GUESTS_NOT_FOUND_IN_HOUSEHOLD"


@pytest.mark.asyncio
async def test_rsvp_invalid_email(client_factory, overrides):
    async with client_factory(overrides) as client:
        response = await client.put(url=RSVP_URL, json=rsvp_body(email="not-an-email"))

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_rsvp_with_empty_email_clears_it(client_factory, overrides, repository):
    async with client_factory(overrides) as client:
        await client.put(url=RSVP_URL, json=rsvp_body())
        response = await client.put(url=RSVP_URL, json=rsvp_body(email=""))

    assert response.status_code == 200
    assert response.json()["email"] == ""
    assert repository.invitation_list.find_household(1).email == ""
