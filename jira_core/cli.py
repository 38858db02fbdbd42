"""CLI module for Jira CLI - typer app and the interactive page loop."""

import logging
import os
from typing import Callable

import typer

from jira_core.constants import LOG_LEVEL_ENV
from jira_core.db import get_db, get_db_path
from jira_core.exceptions import JiraError
from jira_core.io_utils import clear_screen, read_line, wait_for_key_press
from jira_core.navigator import Navigator
from jira_core.prompts import Prompts

__all__ = ["app", "main", "run_loop"]

logger = logging.getLogger(__name__)

# Create Typer app
app = typer.Typer(help="Jira CLI - Terminal tracker for epics and stories")


def run_loop(
    nav: Navigator,
    read_line: Callable[[], str] = read_line,
    clear_screen: Callable[[], None] = clear_screen,
    wait_for_key_press: Callable[[], None] = wait_for_key_press,
) -> None:
    """Render, read, parse and dispatch until the page stack is empty.

    Errors from any step are shown to the operator, who must press a key
    before the loop carries on with the same page.
    """
    while True:
        clear_screen()

        page = nav.current()
        if page is None:
            break

        try:
            page.render(nav.db)
        except (JiraError, ValueError) as e:
            print(f"Error rendering page: {e}")
            wait_for_key_press()

        try:
            text = read_line()
        except EOFError:
            logger.info("Input closed, leaving")
            break

        try:
            action = page.parse_input(nav.db, text.strip())
        except (JiraError, ValueError) as e:
            print(f"Error handling input: {e}")
            wait_for_key_press()
            continue

        if action is None:
            continue

        try:
            nav.handle_action(action)
        except EOFError:
            logger.info("Input closed during prompt, leaving")
            break
        except (JiraError, ValueError) as e:
            print(f"Error handling action: {e}")
            wait_for_key_press()


@app.command()
def run():
    """Browse and edit epics and stories interactively."""
    try:
        db = get_db()
    except JiraError as e:
        print(f"Error: Unable to open database {get_db_path()}")
        print(str(e))
        raise typer.Exit(code=1)

    nav = Navigator(db, Prompts(read_line))
    run_loop(nav)


def main():
    """Main CLI entry point."""
    logging.basicConfig(
        level=os.environ.get(LOG_LEVEL_ENV, "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    app()
