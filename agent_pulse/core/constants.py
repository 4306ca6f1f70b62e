"""Constants used throughout the Agent Pulse application."""

from pathlib import Path


# Store layout
DEFAULT_CLAUDE_DIR = Path.home() / ".claude"
TEAMS_DIR_NAME = "teams"
TASKS_DIR_NAME = "tasks"
TEAM_CONFIG_FILE_NAME = "config.json"
TASK_FILE_SUFFIX = ".json"
HIDDEN_PREFIX = "."

# Polling
DEFAULT_REFRESH_INTERVAL = 5.0  # seconds

# Settings
SETTINGS_FILE = Path.home() / ".config" / "agent-pulse" / "config.json"
ROOT_ENV_VAR = "AGENT_PULSE_ROOT"

# Roles
TEAM_LEAD_AGENT_TYPE = "team-lead"

# Task statuses
STATUS_PENDING = "pending"
STATUS_IN_PROGRESS = "in_progress"
STATUS_COMPLETED = "completed"

# Model families, matched by substring in this order
MODEL_FAMILY_PATTERNS = ["opus", "sonnet", "haiku"]

# Presentation
STATUS_ICONS = {
    STATUS_COMPLETED: "✔",
    STATUS_IN_PROGRESS: "▶",
    STATUS_PENDING: "○",
}
BLOCKED_ICON = "🔒"
UNKNOWN_STATUS_ICON = "?"
LEAD_ICON = "♛"
MEMBER_ICON = "•"
PROGRESS_BAR_WIDTH = 10
