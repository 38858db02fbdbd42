"""Tests for page rendering and input parsing."""

import pytest


@pytest.fixture
def populated(db):
    """Database with one epic holding two stories."""
    from jira_core import create_epic, create_story

    epic_id = create_epic(db, "Checkout", "Payment flow")
    s1 = create_story(db, "Cart", "Cart page", epic_id)
    s2 = create_story(db, "Pay", "Pay button", epic_id)
    return {"epic_id": epic_id, "stories": [s1, s2]}


def test_home_page_renders_epics(db, populated, capsys):
    from jira_core import HomePage, update_epic_status

    update_epic_status(db, populated["epic_id"], "InProgress")

    HomePage().render(db)

    output = capsys.readouterr().out
    assert "EPICS" in output
    assert "Checkout" in output
    assert "IN PROGRESS" in output
    assert "[q] quit" in output


def test_home_page_truncates_long_names(db, capsys):
    from jira_core import HomePage, create_epic

    create_epic(db, "x" * 50, "")

    HomePage().render(db)

    output = capsys.readouterr().out
    assert "x" * 29 + "..." in output
    assert "x" * 30 not in output


def test_home_page_parse_input(db, populated):
    from jira_core import HomePage, Exit, CreateEpic, NavigateToEpicDetail

    page = HomePage()

    assert page.parse_input(db, "q") == Exit()
    assert page.parse_input(db, "c") == CreateEpic()
    assert page.parse_input(db, "1") == NavigateToEpicDetail(epic_id=1)


@pytest.mark.parametrize("text", ["", "x", "2", "99", "-1", "Q"])
def test_home_page_ignores_unknown_input(db, populated, text):
    """Story IDs and unknown IDs are not epics."""
    from jira_core import HomePage

    assert HomePage().parse_input(db, text) is None


def test_epic_detail_renders_epic_and_stories(db, populated, capsys):
    from jira_core import EpicDetail

    EpicDetail(populated["epic_id"]).render(db)

    output = capsys.readouterr().out
    assert "Checkout" in output
    assert "Payment flow" in output
    assert "Cart" in output
    assert "Pay" in output
    assert "OPEN" in output


def test_epic_detail_render_missing_epic_raises(db):
    from jira_core import EpicDetail, NotFoundError

    with pytest.raises(NotFoundError):
        EpicDetail(10).render(db)


def test_epic_detail_parse_input(db, populated):
    from jira_core import (
        EpicDetail,
        NavigateToPreviousPage,
        UpdateEpicStatus,
        DeleteEpic,
        CreateStory,
        NavigateToStoryDetail,
    )

    page = EpicDetail(1)

    assert page.parse_input(db, "p") == NavigateToPreviousPage()
    assert page.parse_input(db, "u") == UpdateEpicStatus(epic_id=1)
    assert page.parse_input(db, "d") == DeleteEpic(epic_id=1)
    assert page.parse_input(db, "c") == CreateStory(epic_id=1)
    assert page.parse_input(db, "2") == NavigateToStoryDetail(epic_id=1, story_id=2)


def test_epic_detail_ignores_stories_of_other_epics(db, populated):
    from jira_core import EpicDetail, create_epic, create_story

    other = create_epic(db, "Other", "")
    foreign = create_story(db, "Foreign", "", other)

    assert EpicDetail(populated["epic_id"]).parse_input(db, str(foreign)) is None
    assert EpicDetail(populated["epic_id"]).parse_input(db, "1") is None


def test_story_detail_renders_story(db, populated, capsys):
    from jira_core import StoryDetail

    StoryDetail(populated["epic_id"], populated["stories"][1]).render(db)

    output = capsys.readouterr().out
    assert "STORY" in output
    assert "Pay button" in output
    assert "[d] delete story" in output


def test_story_detail_render_missing_story_raises(db, populated):
    from jira_core import StoryDetail, NotFoundError

    with pytest.raises(NotFoundError):
        StoryDetail(populated["epic_id"], 42).render(db)


def test_story_detail_parse_input(db, populated):
    from jira_core import StoryDetail, NavigateToPreviousPage, UpdateStoryStatus, DeleteStory

    page = StoryDetail(1, 3)

    assert page.parse_input(db, "p") == NavigateToPreviousPage()
    assert page.parse_input(db, "u") == UpdateStoryStatus(story_id=3)
    assert page.parse_input(db, "d") == DeleteStory(epic_id=1, story_id=3)
    assert page.parse_input(db, "c") is None
    assert page.parse_input(db, "3") is None


def test_base_page_requires_overrides(db):
    from jira_core import Page

    with pytest.raises(NotImplementedError):
        Page().render(db)

    with pytest.raises(NotImplementedError):
        Page().parse_input(db, "q")
