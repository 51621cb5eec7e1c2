import json
import logging
from dataclasses import asdict

from invitations.event_bus import InMemoryEventBus
from invitations.events import (
    GuestAddedEvent,
    GuestAddedToHouseholdEvent,
    HouseholdCreatedEvent,
    RSVPedEvent,
)

logger = logging.getLogger(__name__)


def on_guest_added(event: GuestAddedEvent) -> None:
    logger.info("GuestAdded: %s", json.dumps(asdict(event.guest.to_dto())))


def on_household_created(event: HouseholdCreatedEvent) -> None:
    logger.info("HouseholdCreated: %s", json.dumps(asdict(event.household.to_dto())))


def on_guest_added_to_household(event: GuestAddedToHouseholdEvent) -> None:
    logger.info("GuestAddedToHousehold: guest: %s household: %s", event.guest_id, event.household_id)


def on_rsvped(event: RSVPedEvent) -> None:
    logger.info("RSVPed: household: %s", event.household_code)


def register_subscriptions(bus: InMemoryEventBus) -> InMemoryEventBus:
    bus.subscribe(GuestAddedEvent.name, on_guest_added)
    bus.subscribe(HouseholdCreatedEvent.name, on_household_created)
    bus.subscribe(GuestAddedToHouseholdEvent.name, on_guest_added_to_household)
    bus.subscribe(RSVPedEvent.name, on_rsvped)
    return bus
