"""Terminal I/O helpers for Jira CLI."""

import click

__all__ = ["read_line", "clear_screen", "wait_for_key_press"]


def read_line() -> str:
    """Read one line of user input (without the trailing newline)."""
    return input()


def clear_screen() -> None:
    click.clear()


def wait_for_key_press() -> None:
    click.pause("Press any key to continue...")
