"""Models for Agent Pulse."""

from .task import TaskItem, TaskStatus
from .team import ModelFamily, TeamConfig, TeamMember
from .snapshot import LoadResult, SkippedEntry, SkipReason, Snapshot
from .settings import PulseSettings

__all__ = [
    'TaskItem',
    'TaskStatus',
    'ModelFamily',
    'TeamConfig',
    'TeamMember',
    'LoadResult',
    'SkippedEntry',
    'SkipReason',
    'Snapshot',
    'PulseSettings'
]
