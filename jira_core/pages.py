"""Pages for Jira CLI - rendering and input parsing for each screen."""

from typing import Optional

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
from jira_core.constants import STATUS_LABELS
from jira_core.db import JiraDatabase
from jira_core.epics import get_epic, list_epics
from jira_core.exceptions import NotFoundError
from jira_core.stories import get_story, list_stories
from jira_core.utils import get_column_string, parse_id

__all__ = ["Page", "HomePage", "EpicDetail", "StoryDetail"]

ID_WIDTH = 11
NAME_WIDTH = 32
DESCRIPTION_WIDTH = 27
STATUS_WIDTH = 13


def _status_label(status: str) -> str:
    return STATUS_LABELS.get(status, status)


class Page:
    """A screen the navigator can show.

    Subclasses must override both render and parse_input; the base
    versions raise NotImplementedError.
    """

    def render(self, db: JiraDatabase) -> None:
        raise NotImplementedError

    def parse_input(self, db: JiraDatabase, text: str) -> Optional[Action]:
        raise NotImplementedError


class HomePage(Page):
    """List of all epics."""

    def render(self, db: JiraDatabase) -> None:
        print("----------------------------- EPICS -----------------------------")
        print(
            f"{get_column_string('id', ID_WIDTH)}| "
            f"{get_column_string('name', NAME_WIDTH)}| "
            f"{get_column_string('status', STATUS_WIDTH)}"
        )

        for epic in list_epics(db):
            print(
                f"{get_column_string(str(epic['id']), ID_WIDTH)}| "
                f"{get_column_string(epic['name'], NAME_WIDTH)}| "
                f"{get_column_string(_status_label(epic['status']), STATUS_WIDTH)}"
            )

        print()
        print()
        print("[q] quit | [c] create epic | [:id:] navigate to epic")

    def parse_input(self, db: JiraDatabase, text: str) -> Optional[Action]:
        if text == "q":
            return Exit()
        if text == "c":
            return CreateEpic()

        epic_id = parse_id(text)
        if epic_id is not None and get_epic(db, epic_id) is not None:
            return NavigateToEpicDetail(epic_id=epic_id)

        return None

    def __eq__(self, other: object) -> bool:
        return isinstance(other, HomePage)

    def __repr__(self) -> str:
        return "HomePage()"


class EpicDetail(Page):
    """One epic with its stories."""

    def __init__(self, epic_id: int):
        self.epic_id = epic_id

    def render(self, db: JiraDatabase) -> None:
        epic = get_epic(db, self.epic_id)
        if epic is None:
            raise NotFoundError(f"Unable to find Epic, ID: {self.epic_id}")

        print("------------------------------ EPIC ------------------------------")
        print(
            f"{get_column_string('id', 5)}| "
            f"{get_column_string('name', 12)}| "
            f"{get_column_string('description', DESCRIPTION_WIDTH)}| "
            f"{get_column_string('status', STATUS_WIDTH)}"
        )
        print(
            f"{get_column_string(str(epic['id']), 5)}| "
            f"{get_column_string(epic['name'], 12)}| "
            f"{get_column_string(epic['description'], DESCRIPTION_WIDTH)}| "
            f"{get_column_string(_status_label(epic['status']), STATUS_WIDTH)}"
        )

        print()

        print("---------------------------- STORIES ----------------------------")
        print(
            f"{get_column_string('id', ID_WIDTH)}| "
            f"{get_column_string('name', NAME_WIDTH)}| "
            f"{get_column_string('status', STATUS_WIDTH)}"
        )

        for story in list_stories(db, self.epic_id):
            print(
                f"{get_column_string(str(story['id']), ID_WIDTH)}| "
                f"{get_column_string(story['name'], NAME_WIDTH)}| "
                f"{get_column_string(_status_label(story['status']), STATUS_WIDTH)}"
            )

        print()
        print()
        print(
            "[p] previous | [u] update epic | [d] delete epic | "
            "[c] create story | [:id:] navigate to story"
        )

    def parse_input(self, db: JiraDatabase, text: str) -> Optional[Action]:
        if text == "p":
            return NavigateToPreviousPage()
        if text == "u":
            return UpdateEpicStatus(epic_id=self.epic_id)
        if text == "d":
            return DeleteEpic(epic_id=self.epic_id)
        if text == "c":
            return CreateStory(epic_id=self.epic_id)

        story_id = parse_id(text)
        if story_id is not None:
            epic = get_epic(db, self.epic_id)
            if epic is not None and story_id in epic["stories"]:
                return NavigateToStoryDetail(epic_id=self.epic_id, story_id=story_id)

        return None

    def __eq__(self, other: object) -> bool:
        return isinstance(other, EpicDetail) and other.epic_id == self.epic_id

    def __repr__(self) -> str:
        return f"EpicDetail(epic_id={self.epic_id})"


class StoryDetail(Page):
    """One story."""

    def __init__(self, epic_id: int, story_id: int):
        self.epic_id = epic_id
        self.story_id = story_id

    def render(self, db: JiraDatabase) -> None:
        story = get_story(db, self.story_id)
        if story is None:
            raise NotFoundError(f"Unable to find Story, ID: {self.story_id}")

        print("------------------------------ STORY ------------------------------")
        print(
            f"{get_column_string('id', 5)}| "
            f"{get_column_string('name', 12)}| "
            f"{get_column_string('description', DESCRIPTION_WIDTH)}| "
            f"{get_column_string('status', STATUS_WIDTH)}"
        )
        print(
            f"{get_column_string(str(story['id']), 5)}| "
            f"{get_column_string(story['name'], 12)}| "
            f"{get_column_string(story['description'], DESCRIPTION_WIDTH)}| "
            f"{get_column_string(_status_label(story['status']), STATUS_WIDTH)}"
        )

        print()
        print()
        print("[p] previous | [u] update story | [d] delete story")

    def parse_input(self, db: JiraDatabase, text: str) -> Optional[Action]:
        if text == "p":
            return NavigateToPreviousPage()
        if text == "u":
            return UpdateStoryStatus(story_id=self.story_id)
        if text == "d":
            return DeleteStory(epic_id=self.epic_id, story_id=self.story_id)

        return None

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, StoryDetail)
            and other.epic_id == self.epic_id
            and other.story_id == self.story_id
        )

    def __repr__(self) -> str:
        return f"StoryDetail(epic_id={self.epic_id}, story_id={self.story_id})"
