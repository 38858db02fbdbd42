"""Interactive prompts that collect data for store mutations."""

from typing import Any, Callable, Dict, Optional

from jira_core.constants import STATUS_CHOICES
from jira_core.io_utils import read_line as _read_line

__all__ = ["Prompts"]

SEPARATOR = "----------------------------"


class Prompts:
    """Asks the operator for new epics, stories, confirmations and statuses.

    Args:
        read_line: Callable returning one line of input (defaults to stdin)
    """

    def __init__(self, read_line: Callable[[], str] = _read_line):
        self.read_line = read_line

    def _ask(self, question: str) -> str:
        print(question)
        return self.read_line().strip()

    def build_epic(self) -> Dict[str, Any]:
        """Ask for the name and description of a new epic."""
        print(SEPARATOR)
        name = self._ask("Epic Name:")
        description = self._ask("Epic Description:")
        return {"name": name, "description": description}

    def build_story(self) -> Dict[str, Any]:
        """Ask for the name and description of a new story."""
        print(SEPARATOR)
        name = self._ask("Story Name:")
        description = self._ask("Story Description:")
        return {"name": name, "description": description}

    def confirm(self, question: str) -> bool:
        """Ask a yes/no question until the answer is y or n."""
        while True:
            print(SEPARATOR)
            answer = self._ask(f"{question} [Y/n]:")

            if answer in ("y", "Y"):
                return True
            if answer in ("n", "N"):
                return False

            print("Invalid input")

    def choose_status(self) -> Optional[str]:
        """Ask for a new status; returns None for an unrecognized answer."""
        print(SEPARATOR)
        answer = self._ask("New Status (1 - OPEN, 2 - IN-PROGRESS, 3 - RESOLVED, 4 - CLOSED):")
        return STATUS_CHOICES.get(answer)
