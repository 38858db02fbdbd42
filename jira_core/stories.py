"""Story management for Jira CLI - CRUD operations.

Each epic keeps its story IDs in strictly ascending order. New IDs come
from a monotonic counter and are appended at the tail, and deletion looks
IDs up by binary search, so both paths check the ordering before relying
on it.
"""

import bisect
import logging
from typing import Any, Dict, List, Optional

from jira_core.db import JiraDatabase
from jira_core.exceptions import InconsistentStateError, NotFoundError
from jira_core.models import new_story, validate_status

__all__ = [
    "create_story",
    "get_story",
    "list_stories",
    "delete_story",
    "update_story_status",
]

logger = logging.getLogger(__name__)


def _is_ascending(story_ids: List[int]) -> bool:
    return all(a < b for a, b in zip(story_ids, story_ids[1:]))


def create_story(db: JiraDatabase, name: str, description: str, epic_id: int) -> int:
    """Create a new story inside an epic.

    Args:
        db: Database handle
        name: Story name
        description: Story description
        epic_id: Epic that will own the story

    Returns:
        ID of the created story

    Raises:
        NotFoundError: If the epic doesn't exist (nothing is written)
    """
    state = db.read_state()

    epic = state["epics"].get(epic_id)
    if epic is None:
        raise NotFoundError(f"Unable to find Epic, ID: {epic_id} when creating new story")

    state["last_item_id"] += 1
    story_id = state["last_item_id"]

    if epic["stories"] and epic["stories"][-1] >= story_id:
        raise InconsistentStateError(
            f"Story list of Epic {epic_id} ends with ID {epic['stories'][-1]}, "
            f"which is not below new story ID {story_id}"
        )

    epic["stories"].append(story_id)
    state["stories"][story_id] = new_story(name, description)

    db.write_state(state)
    logger.debug("Created story %d in epic %d", story_id, epic_id)

    return story_id


def get_story(db: JiraDatabase, story_id: int) -> Optional[Dict[str, Any]]:
    """Get story by ID.

    Returns:
        Dict with story data (including "id"), or None if not found
    """
    story = db.read_state()["stories"].get(story_id)

    if story is None:
        return None

    return {"id": story_id, **story}


def list_stories(db: JiraDatabase, epic_id: int) -> List[Dict[str, Any]]:
    """List the stories of an epic in the epic's order.

    IDs listed by the epic with no matching story are skipped.

    Raises:
        NotFoundError: If the epic doesn't exist
    """
    state = db.read_state()

    epic = state["epics"].get(epic_id)
    if epic is None:
        raise NotFoundError(f"Unable to find Epic, ID: {epic_id}")

    return [
        {"id": story_id, **state["stories"][story_id]}
        for story_id in epic["stories"]
        if story_id in state["stories"]
    ]


def delete_story(db: JiraDatabase, story_id: int, epic_id: int) -> None:
    """Delete a story and remove it from its epic.

    If the story is not in the epic's list, the removed entry is put back
    and nothing is written.

    Args:
        db: Database handle
        story_id: Story to delete
        epic_id: Epic that owns the story

    Raises:
        NotFoundError: If the epic or the story doesn't exist
        InconsistentStateError: If the story is not listed by the epic
    """
    state = db.read_state()

    epic = state["epics"].get(epic_id)
    if epic is None:
        raise NotFoundError(f"Unable to find Epic, ID: {epic_id} while attempting to delete story")

    story = state["stories"].pop(story_id, None)
    if story is None:
        raise NotFoundError(f"Unable to find Story, ID: {story_id} while attempting to delete story")

    story_ids = epic["stories"]

    if not _is_ascending(story_ids):
        state["stories"][story_id] = story
        raise InconsistentStateError(
            f"Story list of Epic {epic_id} is not in ascending order, reverting changes"
        )

    index = bisect.bisect_left(story_ids, story_id)

    if index == len(story_ids) or story_ids[index] != story_id:
        state["stories"][story_id] = story
        logger.warning("Story %d not found in epic %d, reverting delete", story_id, epic_id)
        raise InconsistentStateError(
            f"Unable to find Story {story_id} in Epic {epic_id} when deleting story, reverting changes"
        )

    del story_ids[index]

    db.write_state(state)
    logger.debug("Deleted story %d from epic %d", story_id, epic_id)


def update_story_status(db: JiraDatabase, story_id: int, status: str) -> None:
    """Set the status of a story.

    Raises:
        ValueError: If status is invalid
        NotFoundError: If the story doesn't exist
    """
    validate_status(status)

    state = db.read_state()

    story = state["stories"].get(story_id)
    if story is None:
        raise NotFoundError(f"Unable to find Story, ID: {story_id} while updating story status")

    story["status"] = status

    db.write_state(state)
    logger.debug("Story %d status set to %s", story_id, status)
