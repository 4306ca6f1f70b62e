"""Derived read-only views over a snapshot."""
from typing import Iterable, NamedTuple

from ..models.snapshot import Snapshot
from ..models.task import TaskItem
from .constants import STATUS_COMPLETED, STATUS_IN_PROGRESS, STATUS_PENDING


class TaskSummary(NamedTuple):
    """Task counts for one team.

    ``total`` includes tasks whose status is none of the three known values,
    so the buckets may add up to less than ``total``.
    """
    completed: int
    in_progress: int
    pending: int
    total: int

    @property
    def fraction_completed(self) -> float:
        if self.total == 0:
            return 0.0
        return self.completed / self.total


def summarize_tasks(tasks: Iterable[TaskItem]) -> TaskSummary:
    completed = in_progress = pending = total = 0
    for task in tasks:
        total += 1
        if task.status == STATUS_COMPLETED:
            completed += 1
        elif task.status == STATUS_IN_PROGRESS:
            in_progress += 1
        elif task.status == STATUS_PENDING:
            pending += 1
    return TaskSummary(completed, in_progress, pending, total)


def task_summary(snapshot: Snapshot, team_name: str) -> TaskSummary:
    """Count a team's tasks by status. Unknown teams count as empty."""
    return summarize_tasks(snapshot.tasks_for(team_name))


def total_in_progress(snapshot: Snapshot) -> int:
    """Number of in-progress tasks across all teams."""
    return sum(
        1
        for tasks in snapshot.tasks_by_team.values()
        for task in tasks
        if task.status == STATUS_IN_PROGRESS
    )


def is_blocked(task: TaskItem) -> bool:
    return task.is_blocked


def blocked_count(tasks: Iterable[TaskItem]) -> int:
    return sum(1 for task in tasks if task.is_blocked)
