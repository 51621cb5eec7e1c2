"""Tests for household read endpoints."""

import pytest

from invitations.invitation_list.dtos import HouseholdDTO
from invitations.invitation_list.features.get_guests.router import get_invitation_list_read_model
from invitations.invitation_list.tests.inmemory_models import InMemoryInvitationListReadModel
from invitations.invitation_list.urls import HOUSEHOLD_URL, HOUSEHOLDS_URL


@pytest.fixture
def overrides():
    read_model = InMemoryInvitationListReadModel(
        guests=[],
        households=[
            HouseholdDTO(id=1, code="tqd3B", email="jane@example.com", guests=["g1", "g2"]),
            HouseholdDTO(id=2, code="tqd3C", email="", guests=[]),
        ],
    )
    return {get_invitation_list_read_model: lambda: read_model}


@pytest.mark.asyncio
async def test_get_households(client_factory, overrides):
    async with client_factory(overrides) as client:
        response = await client.get(url=HOUSEHOLDS_URL)

    assert response.status_code == 200
    assert [h["code"] for h in response.json()] == ["tqd3B", "tqd3C"]


@pytest.mark.asyncio
async def test_get_household(client_factory, overrides):
    async with client_factory(overrides) as client:
        response = await client.get(url=HOUSEHOLD_URL.format(household_id=1))

    assert response.status_code == 200
    assert response.json()["guests"] == ["g1", "g2"]


@pytest.mark.asyncio
async def test_get_household_not_found(client_factory, overrides):
    async with client_factory(overrides) as client:
        response = await client.get(url=HOUSEHOLD_URL.format(household_id=9))

    assert response.status_code == 404
