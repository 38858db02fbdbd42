"""User actions produced by page input handling."""

from dataclasses import dataclass
from typing import Union

__all__ = [
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
    "Action",
]


@dataclass(frozen=True)
class NavigateToEpicDetail:
    epic_id: int


@dataclass(frozen=True)
class NavigateToStoryDetail:
    epic_id: int
    story_id: int


@dataclass(frozen=True)
class NavigateToPreviousPage:
    pass


@dataclass(frozen=True)
class CreateEpic:
    pass


@dataclass(frozen=True)
class UpdateEpicStatus:
    epic_id: int


@dataclass(frozen=True)
class DeleteEpic:
    epic_id: int


@dataclass(frozen=True)
class CreateStory:
    epic_id: int


@dataclass(frozen=True)
class UpdateStoryStatus:
    story_id: int


@dataclass(frozen=True)
class DeleteStory:
    epic_id: int
    story_id: int


@dataclass(frozen=True)
class Exit:
    pass


Action = Union[
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
]
