"""Snapshot and per-entity load outcome models."""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Generic, Mapping, Optional, Tuple, TypeVar

from ..core.exceptions import TeamNotFoundError
from .task import TaskItem
from .team import TeamConfig

T = TypeVar("T")


class SkipReason(Enum):
    """Why an on-disk entry did not make it into a snapshot."""
    MISSING = "missing"
    UNREADABLE = "unreadable"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class SkippedEntry:
    """A file that was skipped while loading."""
    path: Path
    reason: SkipReason
    detail: str = ""


@dataclass(frozen=True)
class LoadResult(Generic[T]):
    """Outcome of parsing a single file: either a record or a skip."""
    path: Path
    value: Optional[T] = None
    skipped: Optional[SkippedEntry] = None

    @property
    def ok(self) -> bool:
        return self.skipped is None

    @classmethod
    def success(cls, path: Path, value: T) -> "LoadResult[T]":
        return cls(path=path, value=value)

    @classmethod
    def skip(cls, path: Path, reason: SkipReason, detail: str = "") -> "LoadResult[T]":
        return cls(path=path, skipped=SkippedEntry(path, reason, detail))


@dataclass(frozen=True)
class Snapshot:
    """Immutable result of one load cycle.

    Teams are ordered newest first; each team's tasks are ordered by numeric id.
    Every team in ``teams`` has an entry in ``tasks_by_team``.
    """
    teams: Tuple[TeamConfig, ...] = ()
    tasks_by_team: Mapping[str, Tuple[TaskItem, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    taken_at: datetime = field(default_factory=datetime.now)
    skipped: Tuple[SkippedEntry, ...] = ()

    @classmethod
    def empty(cls) -> "Snapshot":
        return cls()

    def get_team(self, name: str) -> Optional[TeamConfig]:
        for team in self.teams:
            if team.name == name:
                return team
        return None

    def require_team(self, name: str) -> TeamConfig:
        team = self.get_team(name)
        if team is None:
            raise TeamNotFoundError(name)
        return team

    def tasks_for(self, name: str) -> Tuple[TaskItem, ...]:
        return self.tasks_by_team.get(name, ())

    def same_content(self, other: "Snapshot") -> bool:
        """Compare teams and tasks, ignoring when each snapshot was taken."""
        return (
            self.teams == other.teams
            and dict(self.tasks_by_team) == dict(other.tasks_by_team)
        )
