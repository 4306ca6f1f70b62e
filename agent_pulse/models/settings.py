"""Settings model for Agent Pulse."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from ..core.constants import DEFAULT_CLAUDE_DIR, DEFAULT_REFRESH_INTERVAL


class PulseSettings(BaseModel):
    """Where to read from and how often."""
    claude_dir: Path = DEFAULT_CLAUDE_DIR
    refresh_interval: float = Field(DEFAULT_REFRESH_INTERVAL, gt=0, description="Seconds between polls")

    @field_validator("claude_dir")
    @classmethod
    def _expand_home(cls, value: Path) -> Path:
        return value.expanduser()
