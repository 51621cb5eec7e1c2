"""Tests for add guest to household endpoint."""

import pytest

from invitations.invitation_list.aggregate import InvitationList
from invitations.invitation_list.features.add_guest_to_household.router import (
    get_add_guest_to_household_use_case,
)
from invitations.invitation_list.features.add_guest_to_household.use_case import (
    AddGuestToHouseholdUseCase,
)
from invitations.invitation_list.tests.inmemory_models import (
    InMemoryInvitationListRepository,
    RecordingEventBus,
    apply,
    create_next_household,
    make_guest,
)
from invitations.invitation_list.urls import HOUSEHOLD_GUEST_URL


@pytest.fixture
def overrides():
    invitation_list = apply(
        InvitationList(),
        create_next_household,
        lambda lst: lst.add_guest_to_list(make_guest("Jane Doe", id="g1")),
    ).unwrap().invitation_list
    use_case = AddGuestToHouseholdUseCase(
        repository=InMemoryInvitationListRepository(invitation_list),
        event_bus=RecordingEventBus(),
    )
    return {get_add_guest_to_household_use_case: lambda: use_case}


@pytest.mark.asyncio
async def test_add_guest_to_household(client_factory, overrides):
    async with client_factory(overrides) as client:
        response = await client.put(url=HOUSEHOLD_GUEST_URL.format(household_id=1, guest_id="g1"))

    assert response.status_code == 200
    assert response.json() == {"id": 1, "code": "tqd3B", "email": "", "guests": ["g1"]}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "household_id, guest_id, code",
    [(1, "nope", "GUEST_NOT_FOUND"), (7, "g1", "HOUSEHOLD_NOT_FOUND")],
)
async def test_missing_guest_or_household(client_factory, overrides, household_id, guest_id, code):
    url = HOUSEHOLD_GUEST_URL.format(household_id=household_id, guest_id=guest_id)

    async with client_factory(overrides) as client:
        response = await client.put(url=url)

    assert response.status_code == 404
    assert response.json()["detail"]["cause"]["code"] == code


@pytest.mark.asyncio
async def test_household_id_must_be_integer(client_factory, overrides):
    async with client_factory(overrides) as client:
        response = await client.put(url="/api/v1/households/abc/guests/g1")

    assert response.status_code == 422
