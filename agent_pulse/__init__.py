"""Agent Pulse - Watch Claude Code agent teams and their tasks."""

__version__ = "0.1.0"

from .core.store_loader import StoreLoader, refresh
from .core.summary import TaskSummary, is_blocked, task_summary, total_in_progress
from .core.poller import SnapshotPoller

# Export main CLI for convenience
from .cli.main import cli

__all__ = [
    'StoreLoader',
    'refresh',
    'TaskSummary',
    'is_blocked',
    'task_summary',
    'total_in_progress',
    'SnapshotPoller',
    'cli'
]
