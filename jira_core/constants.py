"""Constants for Jira CLI - statuses, paths, and configuration."""

__all__ = [
    "STATUS_OPEN",
    "STATUS_IN_PROGRESS",
    "STATUS_RESOLVED",
    "STATUS_CLOSED",
    "VALID_STATUSES",
    "STATUS_LABELS",
    "STATUS_CHOICES",
    "DEFAULT_DB_PATH",
    "DB_PATH_ENV",
    "LOG_LEVEL_ENV",
]

# Statuses (serialized form)
STATUS_OPEN = "Open"
STATUS_IN_PROGRESS = "InProgress"
STATUS_RESOLVED = "Resolved"
STATUS_CLOSED = "Closed"

VALID_STATUSES = (STATUS_OPEN, STATUS_IN_PROGRESS, STATUS_RESOLVED, STATUS_CLOSED)

# Display labels for page tables
STATUS_LABELS = {
    STATUS_OPEN: "OPEN",
    STATUS_IN_PROGRESS: "IN PROGRESS",
    STATUS_RESOLVED: "RESOLVED",
    STATUS_CLOSED: "CLOSED",
}

# Menu answers accepted by the status prompt
STATUS_CHOICES = {
    "1": STATUS_OPEN,
    "2": STATUS_IN_PROGRESS,
    "3": STATUS_RESOLVED,
    "4": STATUS_CLOSED,
}

# Storage
DEFAULT_DB_PATH = "./data/db.json"

# Environment overrides
DB_PATH_ENV = "JIRA_DB_PATH"
LOG_LEVEL_ENV = "JIRA_LOG_LEVEL"
