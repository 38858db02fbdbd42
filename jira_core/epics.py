"""Epic management for Jira CLI - CRUD operations."""

import logging
from typing import Any, Dict, List, Optional

from jira_core.db import JiraDatabase
from jira_core.exceptions import NotFoundError
from jira_core.models import new_epic, validate_status

__all__ = [
    "create_epic",
    "get_epic",
    "list_epics",
    "delete_epic",
    "update_epic_status",
]

logger = logging.getLogger(__name__)


def create_epic(db: JiraDatabase, name: str, description: str) -> int:
    """Create a new epic.

    Args:
        db: Database handle
        name: Epic name
        description: Epic description

    Returns:
        ID of the created epic
    """
    state = db.read_state()

    state["last_item_id"] += 1
    epic_id = state["last_item_id"]
    state["epics"][epic_id] = new_epic(name, description)

    db.write_state(state)
    logger.debug("Created epic %d", epic_id)

    return epic_id


def get_epic(db: JiraDatabase, epic_id: int) -> Optional[Dict[str, Any]]:
    """Get epic by ID.

    Args:
        db: Database handle
        epic_id: Epic ID

    Returns:
        Dict with epic data (including "id"), or None if not found
    """
    epic = db.read_state()["epics"].get(epic_id)

    if epic is None:
        return None

    return {"id": epic_id, **epic}


def list_epics(db: JiraDatabase) -> List[Dict[str, Any]]:
    """List all epics sorted by ID."""
    epics = db.read_state()["epics"]
    return [{"id": epic_id, **epic} for epic_id, epic in sorted(epics.items())]


def delete_epic(db: JiraDatabase, epic_id: int) -> None:
    """Delete an epic and every story it owns.

    Story IDs listed by the epic but already missing from the store
    are skipped.

    Raises:
        NotFoundError: If the epic doesn't exist
    """
    state = db.read_state()

    epic = state["epics"].pop(epic_id, None)
    if epic is None:
        raise NotFoundError(f"Unable to find Epic, ID: {epic_id} when attempting to delete Epic")

    for story_id in epic["stories"]:
        state["stories"].pop(story_id, None)

    db.write_state(state)
    logger.debug("Deleted epic %d with %d stories", epic_id, len(epic["stories"]))


def update_epic_status(db: JiraDatabase, epic_id: int, status: str) -> None:
    """Set the status of an epic.

    Raises:
        ValueError: If status is invalid
        NotFoundError: If the epic doesn't exist
    """
    validate_status(status)

    state = db.read_state()

    epic = state["epics"].get(epic_id)
    if epic is None:
        raise NotFoundError(f"Unable to find Epic, ID: {epic_id} while updating epic status")

    epic["status"] = status

    db.write_state(state)
    logger.debug("Epic %d status set to %s", epic_id, status)
