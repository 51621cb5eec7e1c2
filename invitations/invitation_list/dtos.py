from dataclasses import dataclass, field


@dataclass(frozen=True)
class GuestDTO:
    """DTO for guest data returned by use cases and read models."""

    id: str
    name: str
    dietary_requirements: str | None = None
    attending: bool | None = None
    is_child: bool = False
    household: int | None = None


@dataclass(frozen=True)
class HouseholdDTO:
    """DTO for household data returned by use cases and read models."""

    id: int
    code: str
    email: str | None = None
    guests: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class InvitationListDTO:
    households: list[HouseholdDTO] = field(default_factory=list)
    guests: list[GuestDTO] = field(default_factory=list)
    version: int = 0
