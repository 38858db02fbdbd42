"""Jira CLI - Terminal tracker for epics and stories.

This package provides the core functionality for the Jira CLI.
Import from here for the public API.
"""

from jira_core.exceptions import (
    JiraError,
    NotFoundError,
    InconsistentStateError,
    PersistenceError,
    DataFormatError,
)
from jira_core.constants import (
    STATUS_OPEN,
    STATUS_IN_PROGRESS,
    STATUS_RESOLVED,
    STATUS_CLOSED,
    VALID_STATUSES,
    STATUS_LABELS,
    STATUS_CHOICES,
    DEFAULT_DB_PATH,
)
from jira_core.utils import get_column_string, parse_id
from jira_core.models import (
    Status,
    Epic,
    Story,
    DBState,
    new_epic,
    new_story,
    empty_state,
    validate_status,
    state_from_json,
    state_to_json,
)
from jira_core.db import (
    JiraDatabase,
    init_database,
    get_db_path,
    get_db,
    read_state,
    write_state,
)
from jira_core.epics import (
    create_epic,
    get_epic,
    list_epics,
    delete_epic,
    update_epic_status,
)
from jira_core.stories import (
    create_story,
    get_story,
    list_stories,
    delete_story,
    update_story_status,
)
from jira_core.actions import (
    Action,
    NavigateToEpicDetail,
    NavigateToStoryDetail,
    NavigateToPreviousPage,
    CreateEpic,
    UpdateEpicStatus,
    DeleteEpic,
    CreateStory,
    UpdateStoryStatus,
    DeleteStory,
    Exit,
)
from jira_core.prompts import Prompts
from jira_core.pages import Page, HomePage, EpicDetail, StoryDetail
from jira_core.navigator import Navigator
from jira_core.cli import app, main, run_loop

__all__ = [
    # Exceptions
    "JiraError",
    "NotFoundError",
    "InconsistentStateError",
    "PersistenceError",
    "DataFormatError",
    # Constants
    "STATUS_OPEN",
    "STATUS_IN_PROGRESS",
    "STATUS_RESOLVED",
    "STATUS_CLOSED",
    "VALID_STATUSES",
    "STATUS_LABELS",
    "STATUS_CHOICES",
    "DEFAULT_DB_PATH",
    # Utils
    "get_column_string",
    "parse_id",
    # Models
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
    # Database
    "JiraDatabase",
    "init_database",
    "get_db_path",
    "get_db",
    "read_state",
    "write_state",
    # Epics
    "create_epic",
    "get_epic",
    "list_epics",
    "delete_epic",
    "update_epic_status",
    # Stories
    "create_story",
    "get_story",
    "list_stories",
    "delete_story",
    "update_story_status",
    # Actions
    "Action",
    "NavigateToEpicDetail",
    "NavigateToStoryDetail",
    "NavigateToPreviousPage",
    "CreateEpic",
    "UpdateEpicStatus",
    "DeleteEpic",
    "CreateStory",
    "UpdateStoryStatus",
    "DeleteStory",
    "Exit",
    # Prompts and pages
    "Prompts",
    "Page",
    "HomePage",
    "EpicDetail",
    "StoryDetail",
    # Navigation
    "Navigator",
    # CLI
    "app",
    "main",
    "run_loop",
]
