"""
Tests for the interactive console, driven through click's CliRunner.
"""

from click.testing import CliRunner

from eventdesk.cli import main


def run(*lines: str, once: bool = True):
    args = ["--once"] if once else []
    return CliRunner().invoke(main, args, input="\n".join(lines) + "\n")


def test_user_books_and_cancels():
    result = run("2", "2", "1", "3", "1", "0")

    assert result.exit_code == 0
    assert "Logged in as: Ivan (User)" in result.output
    assert "Booking created: [1] Ivan -> FinTech Conference | Status: Active" in result.output
    assert "Your active bookings:" in result.output
    assert "Booking cancelled" in result.output


def test_cancel_with_no_bookings():
    result = run("2", "3", "0")
    assert "You have no active bookings." in result.output


def test_guest_is_refused():
    result = run("1", "2", "4", "0")

    assert "Guests cannot book or cancel events." in result.output
    assert "Access denied: administrator role required." in result.output


def test_admin_adds_event():
    result = run("3", "4", "Workshop", "01.01.2030 10:00", "Room 5", "1", "0")

    assert "Event added: [4] Workshop | 01.01.2030 10:00 | Room 5" in result.output
    assert result.output.count("[4] Workshop") == 2


def test_admin_add_event_bad_date():
    result = run("3", "4", "Workshop", "someday", "Room 5", "0")
    assert "Invalid date format" in result.output


def test_admin_edits_event_title():
    result = run("3", "5", "1", "FinTech Summit", "", "", "1", "0")

    assert "New title (FinTech Conference)" in result.output
    assert "Event updated" in result.output
    assert "FinTech Summit" in result.output


def test_admin_deletes_booked_event():
    """The booking stays visible with a placeholder for the removed event."""
    result = run("3", "2", "1", "6", "1", "7", "0")

    assert "Event deleted" in result.output
    assert "[1] Admin -> <deleted event #1> | Status: Active" in result.output


def test_invalid_inputs_are_reported():
    result = run("9", "abc", "2", "x", "2", "zero", "0")

    assert result.output.count("User not found.") == 2
    assert "Invalid choice." in result.output
    assert "Invalid event ID" in result.output


def test_end_of_input_exits_cleanly():
    result = run("2", "0", once=False)
    assert result.exit_code == 0
    assert result.output.count("Select a user to log in:") == 2
