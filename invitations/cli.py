"""CLI commands for managing the wedding invitation list."""

import asyncio

import typer

from invitations.config.logging import setup_logging
from invitations.event_bus import event_bus
from invitations.invitation_list.features.add_guest.use_case import (
    AddGuestCommand,
    AddGuestUseCase,
)
from invitations.invitation_list.features.add_guest_to_household.use_case import (
    AddGuestToHouseholdCommand,
    AddGuestToHouseholdUseCase,
)
from invitations.invitation_list.features.create_household.use_case import (
    CreateHouseholdCommand,
    CreateHouseholdUseCase,
)
from invitations.invitation_list.features.rsvp.use_case import (
    RSVPCommand,
    RSVPGuest,
    RSVPUseCase,
)
from invitations.invitation_list.problems import Problem
from invitations.invitation_list.repository.invitation_list_repository import (
    InvitationListRepository,
    SqlInvitationListRepository,
)
from invitations.subscriptions import register_subscriptions

app = typer.Typer(help="CLI commands for wedding invitation list management")


def get_repository() -> InvitationListRepository:
    return SqlInvitationListRepository()


@app.callback()
def main():
    setup_logging()
    register_subscriptions(event_bus)


def _fail(problem: Problem):
    typer.secho(f"{problem.code.value}: {problem.message}", fg=typer.colors.RED)
    cause = getattr(problem, "cause", None)
    if cause is not None:
        typer.secho(f"  Cause: {cause.code.value}", fg=typer.colors.YELLOW)
    raise typer.Exit(1)


def _parse_guest(value: str) -> RSVPGuest:
    guest_id, _, name = value.partition("=")
    return RSVPGuest(id=guest_id.strip(), name=name.strip() or None)


@app.command()
def add_guest(
    name: str = typer.Argument(..., help="Full name of the guest"),
    dietary: str = typer.Option(None, "--dietary", "-d", help="Dietary requirements"),
    child: bool = typer.Option(False, "--child", help="Guest is a child"),
    attending: bool | None = typer.Option(None, "--attending/--not-attending"),
):
    """Add a guest to the invitation list."""
    use_case = AddGuestUseCase(repository=get_repository(), event_bus=event_bus)
    result = asyncio.run(
        use_case.execute(
            AddGuestCommand(
                name=name, dietary_requirements=dietary, attending=attending, is_child=child
            )
        )
    )
    if result.is_failure:
        _fail(result.error)

    guest = result.value
    typer.secho("Guest added!", fg=typer.colors.GREEN)
    typer.secho(f"  Guest ID: {guest.id}", fg=typer.colors.CYAN)
    typer.secho(f"  Name: {guest.name}", fg=typer.colors.BLUE)


@app.command()
def create_household():
    """Create the next household and print its code."""
    use_case = CreateHouseholdUseCase(repository=get_repository(), event_bus=event_bus)
    result = asyncio.run(use_case.execute(CreateHouseholdCommand()))
    if result.is_failure:
        _fail(result.error)

    household = result.value
    typer.secho("Household created!", fg=typer.colors.GREEN)
    typer.secho(f"  Household ID: {household.id}", fg=typer.colors.CYAN)
    typer.secho(f"  Code: {household.code}", fg=typer.colors.CYAN)


@app.command()
def add_to_household(
    household_id: int = typer.Argument(..., help="Household ID"),
    guest_id: str = typer.Argument(..., help="Guest ID to add to the household"),
):
    """Add a guest to a household."""
    use_case = AddGuestToHouseholdUseCase(repository=get_repository(), event_bus=event_bus)
    result = asyncio.run(
        use_case.execute(AddGuestToHouseholdCommand(household_id=household_id, guest_id=guest_id))
    )
    if result.is_failure:
        _fail(result.error)

    household = result.value
    typer.secho("Guest added to household!", fg=typer.colors.GREEN)
    typer.secho(f"  Household: {household.id} ({household.code})", fg=typer.colors.CYAN)
    typer.secho(f"  Guests: {', '.join(household.guests)}", fg=typer.colors.BLUE)


@app.command()
def rsvp(
    code: str = typer.Argument(..., help="Household code"),
    email: str = typer.Argument(..., help="Contact email for the household"),
    guests: list[str] = typer.Option(
        [],
        "--guest",
        "-g",
        help="Guest as ID or ID=NAME, once per household member",
    ),
    attending: bool | None = typer.Option(None, "--attending/--not-attending"),
):
    """Record the RSVP of a household."""
    command = RSVPCommand(
        household_code=code,
        email=email,
        guests=tuple(
            RSVPGuest(id=g.id, name=g.name, attending=attending)
            for g in map(_parse_guest, guests)
        ),
    )
    use_case = RSVPUseCase(repository=get_repository(), event_bus=event_bus)
    result = asyncio.run(use_case.execute(command))
    if result.is_failure:
        _fail(result.error)

    typer.secho("RSVP recorded!", fg=typer.colors.GREEN)
    typer.secho(f"  Household: {result.value.code}", fg=typer.colors.CYAN)
    typer.secho(f"  Email: {result.value.email}", fg=typer.colors.BLUE)


@app.command()
def show_list():
    """Print every household and guest on the list."""
    result = asyncio.run(get_repository().find())
    if result.is_failure:
        _fail(result.error)

    invitation_list = result.value
    typer.secho(f"Invitation list (version {invitation_list.version})", fg=typer.colors.GREEN)
    for household in invitation_list.households:
        typer.secho(
            f"  Household {household.id} [{household.code}] {household.email or ''}",
            fg=typer.colors.CYAN,
        )
        for guest_id in household.guests:
            guest = invitation_list.find_guest(guest_id)
            typer.secho(f"    - {guest.name if guest else guest_id}", fg=typer.colors.BLUE)

    unassigned = [g for g in invitation_list.guests if g.household is None]
    if unassigned:
        typer.echo()
        typer.secho("Without household:", fg=typer.colors.YELLOW)
        for guest in unassigned:
            typer.secho(f"  - {guest.name} ({guest.id})", fg=typer.colors.BLUE)


if __name__ == "__main__":
    app()
