"""Data model for Jira CLI - epics, stories, and the store state.

The pydantic models below describe the JSON file. Store operations work on
the plain-dict form produced by ``state_from_json``:

    epic  = {"name": str, "description": str, "status": str, "stories": [int, ...]}
    story = {"name": str, "description": str, "status": str}
    state = {"last_item_id": int, "epics": {int: epic}, "stories": {int: story}}

In memory the ``epics`` and ``stories`` mappings are keyed by int; the file
keys them by decimal string.
"""

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field, ValidationError, conint, field_validator, model_validator

from jira_core.constants import STATUS_OPEN, VALID_STATUSES
from jira_core.exceptions import DataFormatError

__all__ = [
    "Status",
    "Epic",
    "Story",
    "DBState",
    "new_epic",
    "new_story",
    "empty_state",
    "validate_status",
    "state_from_json",
    "state_to_json",
]

Status = Literal["Open", "InProgress", "Resolved", "Closed"]

ItemId = conint(ge=0)


class Epic(BaseModel):
    """Top-level unit of work owning an ordered list of story IDs."""

    name: str
    description: str
    status: Status
    stories: List[int]


class Story(BaseModel):
    """Leaf unit of work belonging to one epic."""

    name: str
    description: str
    status: Status


class DBState(BaseModel):
    """
    Full content of the database file.

    Fields
    - last_item_id: highest ID handed out so far; epics and stories share it.
    - epics: epic ID -> Epic
    - stories: story ID -> Story

    Notes
    - Every epic or story ID must be at most ``last_item_id``, and no ID may
      appear in both mappings. Otherwise the next create would hand out an
      ID that is already in use.
    - Mappings are kept sorted by ID so the file content is deterministic.
    """

    last_item_id: ItemId
    epics: Dict[ItemId, Epic]
    stories: Dict[ItemId, Story]

    @field_validator("epics", "stories")
    @classmethod
    def _sort_by_id(cls, items: Dict[int, Any]) -> Dict[int, Any]:
        return dict(sorted(items.items()))

    @model_validator(mode="after")
    def _check_ids(self) -> "DBState":
        shared = set(self.epics) & set(self.stories)
        if shared:
            raise ValueError(f"IDs used by both an epic and a story: {sorted(shared)}")

        ids = set(self.epics) | set(self.stories)
        if ids and max(ids) > self.last_item_id:
            raise ValueError(
                f"ID {max(ids)} is above last_item_id {self.last_item_id}"
            )

        return self

    @classmethod
    def empty(cls) -> "DBState":
        """Convenience constructor for a fresh, empty database."""
        return cls(last_item_id=0, epics={}, stories={})


def new_epic(name: str, description: str) -> Dict[str, Any]:
    """Build an open epic with no stories."""
    return {
        "name": name,
        "description": description,
        "status": STATUS_OPEN,
        "stories": [],
    }


def new_story(name: str, description: str) -> Dict[str, Any]:
    """Build an open story."""
    return {
        "name": name,
        "description": description,
        "status": STATUS_OPEN,
    }


def empty_state() -> Dict[str, Any]:
    """Build the state of a freshly initialized database."""
    return DBState.empty().model_dump()


def validate_status(status: str) -> None:
    """Validate a status value.

    Raises:
        ValueError: If status is not one of VALID_STATUSES
    """
    if status not in VALID_STATUSES:
        raise ValueError(f"Invalid status: {status}. Must be one of {VALID_STATUSES}")


def _format_errors(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'state'}: {err['msg']}"
        for err in error.errors()
    )


def state_from_json(data: Any) -> Dict[str, Any]:
    """Convert decoded JSON into an in-memory state.

    Args:
        data: Object decoded from the database file

    Returns:
        State dict with int-keyed epics and stories

    Raises:
        DataFormatError: If fields are missing, mistyped, or the IDs clash
    """
    try:
        state = DBState.model_validate(data)
    except ValidationError as e:
        raise DataFormatError(f"Invalid database content: {_format_errors(e)}")

    return state.model_dump()


def state_to_json(state: Dict[str, Any]) -> str:
    """Serialize an in-memory state to JSON text, sorted by ID.

    Raises:
        DataFormatError: If the state breaks the model's rules
    """
    try:
        model = DBState.model_validate(state)
    except ValidationError as e:
        raise DataFormatError(f"Refusing to write invalid state: {_format_errors(e)}")

    return model.model_dump_json(indent=2) + "\n"
