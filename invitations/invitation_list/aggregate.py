"""
The invitation list aggregate.

Every operation is pure: it returns a new ``InvitationList`` (wrapped in a
``ListChange`` together with the events it produced) or a ``Failure``, and
never touches the list it was called on.
"""

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, replace

from invitations.events import (
    DomainEvent,
    GuestAddedEvent,
    GuestAddedToHouseholdEvent,
    HouseholdCreatedEvent,
    RSVPedEvent,
)
from invitations.invitation_list import identifiers
from invitations.invitation_list.dtos import InvitationListDTO
from invitations.invitation_list.guest import Guest, GuestUpdate
from invitations.invitation_list.household import Household
from invitations.invitation_list.identifiers import GuestId, HouseholdCode, HouseholdId
from invitations.invitation_list.problems import (
    CreateListFailure,
    FailedToGenerateHouseholdCode,
    GuestNotFound,
    GuestsNotFoundInHousehold,
    GuestWithThatNameAlreadyExists,
    HouseholdAlreadyExists,
    HouseholdNotFound,
    Problem,
)
from invitations.result import Failure, Result, Success


@dataclass(frozen=True)
class ListChange:
    """A new invitation list plus the events the transition produced."""

    invitation_list: "InvitationList"
    events: tuple[DomainEvent, ...] = ()

    def and_then(
        self, operation: Callable[["InvitationList"], Result["ListChange", Problem]]
    ) -> Result["ListChange", Problem]:
        """Run another transition on the new list, keeping the events in order."""
        return operation(self.invitation_list).map(
            lambda change: ListChange(change.invitation_list, self.events + change.events)
        )


@dataclass(frozen=True)
class InvitationList:
    households: tuple[Household, ...] = ()
    guests: tuple[Guest, ...] = ()
    version: int = 0

    @classmethod
    def create(
        cls,
        raw_guests: Iterable[Mapping] = (),
        raw_households: Iterable[Mapping] = (),
        version: int = 0,
    ) -> Result["InvitationList", CreateListFailure]:
        """Rebuild the list from stored records.

        Records are shaped like ``Guest.to_persistence()`` and
        ``Household.to_persistence()``. If any record is invalid nothing is
        returned but a ``CreateListFailure`` naming every bad record.
        """
        errors = []
        households = []
        for raw in raw_households:
            result = Household.create(
                id=raw.get("id"),
                code=raw.get("code"),
                email=raw.get("email"),
                guests=raw.get("guests") or (),
            )
            if result.is_failure:
                errors.append(f"household {raw.get('id')!r}: {result.error.message}")
            else:
                households.append(result.value)

        guests = []
        for raw in raw_guests:
            result = Guest.create(
                id=raw.get("id") or "",
                name=raw.get("name"),
                dietary_requirements=raw.get("dietary_requirements"),
                attending=raw.get("attending"),
                is_child=bool(raw.get("is_child", False)),
                household=raw.get("household_id"),
            )
            if result.is_failure:
                errors.append(f"guest {raw.get('id')!r}: {result.error.message}")
            else:
                guests.append(result.value)

        if errors:
            return Failure(CreateListFailure(f"Failed to create invitation list: {' | '.join(errors)}"))
        return Success(cls(households=tuple(households), guests=tuple(guests), version=version))

    # Queries

    def next_household_id(self) -> HouseholdId:
        return len(self.households) + 1

    @staticmethod
    def generate_household_code(
        household_id: HouseholdId,
    ) -> Result[HouseholdCode, FailedToGenerateHouseholdCode]:
        return identifiers.generate_household_code(household_id)

    def find_household_by_code(self, code: HouseholdCode) -> Result[Household, HouseholdNotFound]:
        for household in self.households:
            if household.code == code:
                return Success(household)
        return Failure(HouseholdNotFound(f"No household with code {code!r}"))

    def find_household(self, household_id: HouseholdId) -> Household | None:
        return next((h for h in self.households if h.id == household_id), None)

    def find_guest(self, guest_id: GuestId) -> Guest | None:
        return next((g for g in self.guests if g.id == guest_id), None)

    # Transitions

    def add_household(self, household: Household) -> Result[ListChange, HouseholdAlreadyExists]:
        if self.find_household(household.id) is not None:
            return Failure(HouseholdAlreadyExists(f"Household {household.id} already exists"))
        return Success(
            ListChange(
                replace(self, households=(*self.households, household)),
                (HouseholdCreatedEvent(household=household),),
            )
        )

    def add_guest_to_list(self, guest: Guest) -> Result[ListChange, GuestWithThatNameAlreadyExists]:
        if any(g.name == guest.name for g in self.guests):
            return Failure(GuestWithThatNameAlreadyExists(f"A guest named {guest.name!r} already exists"))
        return Success(
            ListChange(
                replace(self, guests=(*self.guests, guest)),
                (GuestAddedEvent(guest=guest),),
            )
        )

    def add_guest_to_household(
        self, household_id: HouseholdId, guest_id: GuestId
    ) -> Result[ListChange, GuestNotFound | HouseholdNotFound]:
        """Link a guest to a household.

        Linking a guest to the household it already belongs to is a no-op that
        emits no event. A guest moving from another household is removed from
        that household's roster.
        """
        guest = self.find_guest(guest_id)
        if guest is None:
            return Failure(GuestNotFound(f"No guest with id {guest_id!r}"))
        household = self.find_household(household_id)
        if household is None:
            return Failure(HouseholdNotFound(f"No household with id {household_id!r}"))

        if guest.household == household_id and household.has_guest(guest_id):
            return Success(ListChange(self))

        def relink(h: Household) -> Household:
            if h.id == household_id:
                return h.with_guest(guest_id)
            if h.has_guest(guest_id):
                return h.without_guest(guest_id)
            return h

        updated_guest = guest.with_household(household_id)
        return Success(
            ListChange(
                replace(
                    self,
                    households=tuple(relink(h) for h in self.households),
                    guests=tuple(updated_guest if g.id == guest_id else g for g in self.guests),
                ),
                (GuestAddedToHouseholdEvent(guest_id=guest_id, household_id=household_id),),
            )
        )

    def rsvp(
        self,
        household_code: HouseholdCode,
        email: str | None,
        guest_updates: Sequence[GuestUpdate],
    ) -> Result[ListChange, HouseholdNotFound | GuestsNotFoundInHousehold | GuestWithThatNameAlreadyExists]:
        """Record a household's response.

        The updates must name exactly the household's guests, in any order.
        The household email is always overwritten and each guest is merged
        with its update.
        """
        found = self.find_household_by_code(household_code)
        if found.is_failure:
            return found
        household = found.value

        update_ids = [update.id for update in guest_updates]
        if len(update_ids) != len(set(update_ids)) or set(update_ids) != set(household.guests):
            return Failure(
                GuestsNotFoundInHousehold(
                    f"Guests {sorted(update_ids)} do not match household {household_code!r}"
                )
            )
        if any(u.household not in (None, household.id) for u in guest_updates):
            return Failure(
                GuestsNotFoundInHousehold(f"Guests must stay in household {household_code!r}")
            )

        updates = {update.id: update for update in guest_updates}
        guests = tuple(g.merge(updates[g.id]) if g.id in updates else g for g in self.guests)

        for merged in (g for g in guests if g.id in updates):
            if any(other.name == merged.name for other in guests if other.id != merged.id):
                return Failure(
                    GuestWithThatNameAlreadyExists(f"A guest named {merged.name!r} already exists")
                )

        households = tuple(
            h.with_email(email) if h.id == household.id else h for h in self.households
        )
        return Success(
            ListChange(
                replace(self, households=households, guests=guests),
                (RSVPedEvent(household_code=household_code),),
            )
        )

    def to_dto(self) -> InvitationListDTO:
        return InvitationListDTO(
            households=[h.to_dto() for h in self.households],
            guests=[g.to_dto() for g in self.guests],
            version=self.version,
        )
