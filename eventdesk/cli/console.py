"""
Interactive console: user selection followed by the booking menu.

Only adapts text to BookingSystem calls and renders the results; all rules
live behind the BookingSystem boundary.
"""

from typing import Optional

import click

from eventdesk.api.system import BookingSystem
from eventdesk.core.access import Gate
from eventdesk.core.config import get_settings
from eventdesk.core.logging import setup_logging
from eventdesk.main import create_system
from eventdesk.schemas.booking import BookingResponse
from eventdesk.schemas.event import EventResponse
from eventdesk.schemas.result import OperationResult
from eventdesk.schemas.user import UserResponse

MENU = """Menu:
1. View events
2. Book an event
3. Cancel a booking
4. (Admin) Add event
5. (Admin) Edit event
6. (Admin) Delete event
7. (Admin) View all bookings
0. Switch user"""


def format_event(event: EventResponse) -> str:
    return f"[{event.id}] {event.title} | {event.date.strftime(get_settings().DATE_FORMAT)} | {event.location}"


def format_user(user: UserResponse) -> str:
    return f"[{user.id}] {user.name} ({user.role.value})"


def format_booking(booking: BookingResponse) -> str:
    title = booking.event_title or f"<deleted event #{booking.event_id}>"
    return f"[{booking.id}] {booking.user_name} -> {title} | Status: {booking.status.value}"


def ask(text: str) -> str:
    return click.prompt(text, default="", show_default=False)


class Console:
    def __init__(self, system: BookingSystem):
        self.system = system

    def report(self, result: OperationResult) -> bool:
        click.echo(f"{result.detail}\n")
        return result.ok

    def login(self) -> Optional[UserResponse]:
        click.echo("Select a user to log in:")
        for user in self.system.list_users().data:
            click.echo(format_user(user))

        result = self.system.login(ask("User ID"))
        if not result.ok:
            click.echo("User not found.\n")
            return None

        click.echo(f"Logged in as: {result.data.name} ({result.data.role.value})\n")
        return result.data

    def show_events(self) -> None:
        click.echo("\nEvents:")
        events = self.system.list_events().data
        if not events:
            click.echo("No events available.\n")
            return
        for event in events:
            click.echo(format_event(event))
        click.echo()

    def allowed(self, user: UserResponse, gate: Gate) -> bool:
        result = self.system.authorize(user.id, gate)
        if not result.ok:
            click.echo(f"{result.detail}\n")
        return result.ok

    def book_event(self, user: UserResponse) -> None:
        if not self.allowed(user, Gate.MEMBER):
            return
        self.show_events()
        result = self.system.create_booking(user.id, ask("Event ID to book"))
        if result.ok:
            click.echo(f"Booking created: {format_booking(result.data)}\n")
        else:
            self.report(result)

    def cancel_booking(self, user: UserResponse) -> None:
        if not self.allowed(user, Gate.MEMBER):
            return
        bookings = self.system.list_user_bookings(user.id, active_only=True).data
        if not bookings:
            click.echo("You have no active bookings.\n")
            return

        click.echo("\nYour active bookings:")
        for booking in bookings:
            click.echo(format_booking(booking))
        self.report(self.system.cancel_booking(user.id, ask("Booking ID to cancel")))

    def add_event(self, user: UserResponse) -> None:
        if not self.allowed(user, Gate.ADMIN):
            return
        title = ask("Title")
        date = ask("Date (dd.mm.yyyy hh:mm)")
        location = ask("Location")

        result = self.system.add_event(user.id, title, date, location)
        if result.ok:
            click.echo(f"Event added: {format_event(result.data)}\n")
        else:
            self.report(result)

    def edit_event(self, user: UserResponse) -> None:
        if not self.allowed(user, Gate.ADMIN):
            return
        self.show_events()
        found = self.system.get_event(ask("Event ID to edit"))
        if not self.report_failure(found):
            return

        event = found.data
        title = ask(f"New title ({event.title})")
        date = ask(f"New date ({event.date.strftime(get_settings().DATE_FORMAT)})")
        location = ask(f"New location ({event.location})")
        self.report(self.system.edit_event(user.id, event.id, title, date, location))

    def delete_event(self, user: UserResponse) -> None:
        if not self.allowed(user, Gate.ADMIN):
            return
        self.show_events()
        self.report(self.system.delete_event(user.id, ask("Event ID to delete")))

    def view_all_bookings(self, user: UserResponse) -> None:
        result = self.system.list_all_bookings(user.id)
        if not self.report_failure(result):
            return

        click.echo("\nAll bookings:")
        if not result.data:
            click.echo("No bookings.\n")
            return
        for booking in result.data:
            click.echo(format_booking(booking))
        click.echo()

    def report_failure(self, result: OperationResult) -> bool:
        if not result.ok:
            click.echo(f"{result.detail}\n")
        return result.ok

    def session(self, user: UserResponse) -> None:
        actions = {
            "1": self.show_events,
            "2": lambda: self.book_event(user),
            "3": lambda: self.cancel_booking(user),
            "4": lambda: self.add_event(user),
            "5": lambda: self.edit_event(user),
            "6": lambda: self.delete_event(user),
            "7": lambda: self.view_all_bookings(user),
        }
        while True:
            click.echo(MENU)
            choice = ask("Choice").strip()
            click.echo()
            if choice == "0":
                return
            action = actions.get(choice)
            if action is None:
                click.echo("Invalid choice.\n")
                continue
            action()

    def run(self, once: bool = False) -> None:
        while True:
            user = self.login()
            if user is None:
                continue
            self.session(user)
            if once:
                return


@click.command()
@click.option("--once", is_flag=True, help="Exit after the first user session")
@click.option("--no-seed", is_flag=True, help="Start with an empty catalog and no users")
@click.version_option(version=get_settings().APP_VERSION, prog_name="eventdesk")
def main(once: bool, no_seed: bool) -> None:
    """Event Desk: browse, book and manage events."""
    setup_logging()
    console = Console(create_system(seed=False if no_seed else None))
    try:
        console.run(once=once)
    except (click.Abort, EOFError):
        # End of input closes the program like switching user and quitting
        click.echo()
