import logging

from invitations.event_bus import InMemoryEventBus
from invitations.events import GuestAddedEvent, GuestAddedToHouseholdEvent, RSVPedEvent
from invitations.invitation_list.guest import Guest
from invitations.subscriptions import register_subscriptions


def test_emit_calls_subscribed_handlers_in_order():
    bus = InMemoryEventBus()
    calls = []
    bus.subscribe("RSVPedEvent", lambda event: calls.append(("first", event)))
    bus.subscribe("RSVPedEvent", lambda event: calls.append(("second", event)))
    event = RSVPedEvent(household_code="tqd3B")

    bus.emit(event.name, event)

    assert calls == [("first", event), ("second", event)]
    assert bus.history == [("RSVPedEvent", event)]


def test_emit_without_subscribers_is_recorded():
    bus = InMemoryEventBus()

    bus.emit("Unknown", {"a": 1})

    assert bus.history == [("Unknown", {"a": 1})]


def test_failing_handler_is_logged_and_not_raised(caplog):
    bus = InMemoryEventBus()
    calls = []

    def broken(event):
        raise RuntimeError("boom")

    bus.subscribe("RSVPedEvent", broken)
    bus.subscribe("RSVPedEvent", calls.append)

    with caplog.at_level(logging.ERROR, logger="invitations.event_bus"):
        bus.emit("RSVPedEvent", RSVPedEvent(household_code="tqd3B"))

    assert len(calls) == 1
    assert "RSVPedEvent" in caplog.text


def test_subscribe_same_handler_once():
    bus = InMemoryEventBus()
    calls = []

    bus.subscribe("RSVPedEvent", calls.append)
    bus.subscribe("RSVPedEvent", calls.append)
    bus.emit("RSVPedEvent", "payload")

    assert calls == ["payload"]


def test_subscriptions_log_events(caplog):
    bus = register_subscriptions(InMemoryEventBus())
    guest = Guest.create("Jane Doe", id="g1").unwrap()

    with caplog.at_level(logging.INFO, logger="invitations.subscriptions"):
        bus.emit(GuestAddedEvent.name, GuestAddedEvent(guest=guest))
        bus.emit(
            GuestAddedToHouseholdEvent.name,
            GuestAddedToHouseholdEvent(guest_id="g1", household_id=1),
        )
        bus.emit(RSVPedEvent.name, RSVPedEvent(household_code="tqd3B"))

    assert '"name": "Jane Doe"' in caplog.text
    assert "guest: g1 household: 1" in caplog.text
    assert "household: tqd3B" in caplog.text


def test_clear_history():
    bus = InMemoryEventBus()
    bus.emit("RSVPedEvent", None)

    bus.clear_history()

    assert bus.history == []
