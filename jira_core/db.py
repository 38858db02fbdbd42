"""Database module for Jira CLI - JSON file persistence and configuration."""

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Union

from jira_core.constants import DB_PATH_ENV, DEFAULT_DB_PATH
from jira_core.exceptions import DataFormatError, PersistenceError
from jira_core.models import empty_state, state_from_json, state_to_json

__all__ = [
    "JiraDatabase",
    "init_database",
    "get_db_path",
    "get_db",
    "read_state",
    "write_state",
]

logger = logging.getLogger(__name__)


def get_db_path() -> Path:
    """Get the database file path (./data/db.json).

    Relative to the working directory unless JIRA_DB_PATH names
    another file, e.g. to keep one tracker per project.
    """
    db_path = os.environ.get(DB_PATH_ENV)
    if db_path:
        return Path(db_path)
    return Path(DEFAULT_DB_PATH)


def read_state(path: Union[str, Path]) -> Dict[str, Any]:
    """Load the full store state from a JSON file.

    Args:
        path: Path to the database file

    Returns:
        State dict with int-keyed epics and stories

    Raises:
        PersistenceError: If the file cannot be read
        DataFormatError: If the file is not valid JSON or has the wrong shape
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise PersistenceError(f"Unable to read database {path}: {e}")

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise DataFormatError(f"Database {path} is not valid JSON: {e}")

    return state_from_json(data)


def write_state(path: Union[str, Path], state: Dict[str, Any]) -> None:
    """Write the full store state to a JSON file.

    The content goes to a sibling temp file first and is moved into place
    with os.replace(), so an interrupted write leaves the previous file intact.

    Raises:
        PersistenceError: If the file cannot be written
        DataFormatError: If the state has clashing or out-of-range IDs
    """
    path = Path(path)
    content = state_to_json(state)
    tmp = path.with_suffix(path.suffix + ".tmp")

    try:
        tmp.write_text(content, encoding="utf-8")
        os.replace(tmp, path)
    except OSError as e:
        with contextlib.suppress(OSError):
            tmp.unlink()
        raise PersistenceError(f"Unable to write database {path}: {e}")

    logger.debug("Wrote database %s (last_item_id=%d)", path, state["last_item_id"])


class JiraDatabase:
    """Handle on the JSON database file.

    Holds no cached state: every read goes to disk, so each store
    operation is a full read-modify-write.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def read_state(self) -> Dict[str, Any]:
        return read_state(self.path)

    def write_state(self, state: Dict[str, Any]) -> None:
        write_state(self.path, state)

    def __repr__(self) -> str:
        return f"JiraDatabase({str(self.path)!r})"


def init_database(db_path: Union[str, Path]) -> JiraDatabase:
    """Initialize the database file.

    Creates parent directories and an empty state if the file doesn't exist.
    Safe to call multiple times (idempotent).

    Args:
        db_path: Path to JSON database file

    Returns:
        Database handle

    Raises:
        PersistenceError: If the file cannot be created
    """
    path = Path(db_path)

    if not path.exists():
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistenceError(f"Unable to create database directory {path.parent}: {e}")
        write_state(path, empty_state())
        logger.info("Created empty database at %s", path)

    return JiraDatabase(path)


def get_db() -> JiraDatabase:
    """Get database handle, initializing if needed."""
    return init_database(get_db_path())
