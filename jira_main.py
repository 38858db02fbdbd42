"""Jira CLI - Terminal tracker for epics and stories."""

from jira_core.cli import app, main

__all__ = ["app", "main"]


if __name__ == "__main__":
    main()
