"""Tests for SqlInvitationListReadModel."""

import pytest

from invitations.invitation_list.dtos import GuestDTO, HouseholdDTO
from invitations.invitation_list.repository.invitation_list_repository import (
    SqlInvitationListRepository,
)
from invitations.invitation_list.repository.read_models import SqlInvitationListReadModel
from invitations.invitation_list.tests.inmemory_models import (
    apply,
    create_next_household,
    household_with_guests,
    make_guest,
)


@pytest.fixture
async def stored_list(async_session):
    jane = make_guest("Jane Doe", id="g1")
    john = make_guest("John Doe", id="g2", attending=False)
    invitation_list = apply(
        household_with_guests(jane),
        create_next_household,
        lambda lst: lst.add_guest_to_list(john),
    ).unwrap().invitation_list
    await SqlInvitationListRepository(session_overwrite=async_session).save(invitation_list)
    return invitation_list


@pytest.fixture
def read_model(async_session):
    return SqlInvitationListReadModel(session_overwrite=async_session)


@pytest.mark.asyncio
async def test_get_guests(read_model, stored_list):
    guests = await read_model.get_guests()

    assert guests == [
        GuestDTO(id="g1", name="Jane Doe", household=1),
        GuestDTO(id="g2", name="John Doe", attending=False),
    ]


@pytest.mark.asyncio
async def test_get_guest(read_model, stored_list):
    assert (await read_model.get_guest("g2")).name == "John Doe"
    assert await read_model.get_guest("missing") is None


@pytest.mark.asyncio
async def test_get_households(read_model, stored_list):
    households = await read_model.get_households()

    assert households == [
        HouseholdDTO(id=1, code="tqd3B", email="", guests=["g1"]),
        HouseholdDTO(id=2, code="tqd3C", email="", guests=[]),
    ]


@pytest.mark.asyncio
async def test_get_household(read_model, stored_list):
    assert (await read_model.get_household(1)).guests == ["g1"]
    assert await read_model.get_household(99) is None
