"""Page stack navigation - dispatches actions to pages and the store."""

import logging
from typing import List, Optional

from jira_core.actions import (
    Action,
    CreateEpic,
    CreateStory,
    DeleteEpic,
    DeleteStory,
    Exit,
    NavigateToEpicDetail,
    NavigateToPreviousPage,
    NavigateToStoryDetail,
    UpdateEpicStatus,
    UpdateStoryStatus,
)
from jira_core.db import JiraDatabase
from jira_core.epics import create_epic, delete_epic, update_epic_status
from jira_core.pages import EpicDetail, HomePage, Page, StoryDetail
from jira_core.prompts import Prompts
from jira_core.stories import create_story, delete_story, update_story_status

__all__ = ["Navigator"]

logger = logging.getLogger(__name__)


class Navigator:
    """Holds the stack of open pages and applies user actions.

    The top of the stack is the current page. An empty stack means the
    session is over.

    Store errors raised while handling an action propagate unchanged, and
    the stack is only modified after the store call succeeds.

    Args:
        db: Database handle, passed to pages when they render or parse input
        prompts: Collects data for create/update/delete actions
    """

    def __init__(self, db: JiraDatabase, prompts: Optional[Prompts] = None):
        self.db = db
        self.prompts = prompts if prompts is not None else Prompts()
        self.pages: List[Page] = [HomePage()]

    def current(self) -> Optional[Page]:
        """Return the top page, or None when the stack is empty."""
        if not self.pages:
            return None
        return self.pages[-1]

    def page_count(self) -> int:
        return len(self.pages)

    def handle_action(self, action: Action) -> None:
        """Apply one action to the page stack and/or the store.

        Raises:
            JiraError: Any store error, unmodified
            ValueError: If the action type is unknown
        """
        logger.debug("Handling %r", action)

        if isinstance(action, NavigateToEpicDetail):
            self.pages.append(EpicDetail(action.epic_id))

        elif isinstance(action, NavigateToStoryDetail):
            self.pages.append(StoryDetail(action.epic_id, action.story_id))

        elif isinstance(action, NavigateToPreviousPage):
            if self.pages:
                self.pages.pop()

        elif isinstance(action, CreateEpic):
            epic = self.prompts.build_epic()
            create_epic(self.db, epic["name"], epic["description"])

        elif isinstance(action, UpdateEpicStatus):
            status = self.prompts.choose_status()
            if status is not None:
                update_epic_status(self.db, action.epic_id, status)

        elif isinstance(action, DeleteEpic):
            question = (
                "Are you sure you want to delete this epic? "
                "All stories in this epic will also be deleted"
            )
            if self.prompts.confirm(question):
                delete_epic(self.db, action.epic_id)
                if self.pages:
                    self.pages.pop()

        elif isinstance(action, CreateStory):
            story = self.prompts.build_story()
            create_story(self.db, story["name"], story["description"], action.epic_id)

        elif isinstance(action, UpdateStoryStatus):
            status = self.prompts.choose_status()
            if status is not None:
                update_story_status(self.db, action.story_id, status)

        elif isinstance(action, DeleteStory):
            if self.prompts.confirm("Are you sure you want to delete this story?"):
                delete_story(self.db, action.story_id, action.epic_id)
                if self.pages:
                    self.pages.pop()

        elif isinstance(action, Exit):
            self.pages.clear()

        else:
            raise ValueError(f"Unknown action: {action!r}")
