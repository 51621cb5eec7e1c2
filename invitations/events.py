"""
Domain events for the invitation list.

Events are immutable facts returned beside the invitation list by each
transition. Use cases emit them on the event bus after the list is saved,
keyed by ``event.name``.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from invitations.invitation_list.guest import Guest
    from invitations.invitation_list.household import Household


def _now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """Base domain event."""

    name: ClassVar[str] = "DomainEvent"
    timestamp: datetime = field(default_factory=_now, compare=False)


@dataclass(frozen=True, kw_only=True)
class GuestAddedEvent(DomainEvent):
    """Event fired when a guest joins the invitation list."""

    name: ClassVar[str] = "GuestAddedEvent"
    guest: "Guest"


@dataclass(frozen=True, kw_only=True)
class HouseholdCreatedEvent(DomainEvent):
    """Event fired when a new household is created."""

    name: ClassVar[str] = "HouseholdCreatedEvent"
    household: "Household"


@dataclass(frozen=True, kw_only=True)
class GuestAddedToHouseholdEvent(DomainEvent):
    """Event fired when a guest is linked to a household."""

    name: ClassVar[str] = "GuestAddedToHouseholdEvent"
    guest_id: str
    household_id: int


@dataclass(frozen=True, kw_only=True)
class RSVPedEvent(DomainEvent):
    """Event fired when a household responds to its invitation."""

    name: ClassVar[str] = "RSVPedEvent"
    household_code: str
