"""Tests for the summary projections."""
from types import MappingProxyType

import pytest

from agent_pulse.core.store_loader import refresh
from agent_pulse.core.summary import (
    TaskSummary,
    blocked_count,
    is_blocked,
    summarize_tasks,
    task_summary,
    total_in_progress,
)
from agent_pulse.models.snapshot import Snapshot
from agent_pulse.models.task import TaskItem


def make_task(task_id, status, blocked_by=None):
    return TaskItem(id=task_id, subject=f"task {task_id}", description="", status=status, blocked_by=blocked_by)


def snapshot_of(**tasks_by_team):
    return Snapshot(tasks_by_team=MappingProxyType({k: tuple(v) for k, v in tasks_by_team.items()}))


class TestTaskSummary:
    """Test per-team status counts."""

    def test_demo_team(self, demo_dir):
        """Three tasks, one per known status."""
        snapshot = refresh(demo_dir.root)

        summary = task_summary(snapshot, "demo")

        assert summary == TaskSummary(completed=1, in_progress=1, pending=1, total=3)
        assert summary._asdict() == {"completed": 1, "in_progress": 1, "pending": 1, "total": 3}

    def test_unknown_status_counts_toward_total_only(self):
        snapshot = snapshot_of(alpha=[
            make_task("1", "completed"),
            make_task("2", "deleted"),
            make_task("3", "IN_PROGRESS"),
        ])

        summary = task_summary(snapshot, "alpha")

        assert summary == TaskSummary(completed=1, in_progress=0, pending=0, total=3)

    @pytest.mark.parametrize("statuses", [
        [],
        ["pending"],
        ["completed", "completed", "in_progress"],
        ["pending", "blocked", "review"],
        ["unknown"],
    ])
    def test_buckets_never_exceed_total(self, statuses):
        summary = summarize_tasks(make_task(str(i), s) for i, s in enumerate(statuses))

        bucketed = summary.completed + summary.in_progress + summary.pending
        assert bucketed <= summary.total
        known = all(s in ("pending", "in_progress", "completed") for s in statuses)
        assert (bucketed == summary.total) is known

    def test_unknown_team(self):
        assert task_summary(Snapshot.empty(), "ghost") == TaskSummary(0, 0, 0, 0)

    def test_blocked_pending_task_stays_pending(self):
        snapshot = snapshot_of(alpha=[
            make_task("1", "pending", blocked_by=("2",)),
            make_task("2", "in_progress", blocked_by=("3",)),
        ])

        summary = task_summary(snapshot, "alpha")

        assert summary.pending == 1
        assert summary.in_progress == 1
        assert all(is_blocked(t) for t in snapshot.tasks_for("alpha"))

    def test_fraction_completed(self):
        assert TaskSummary(1, 1, 2, 4).fraction_completed == 0.25
        assert TaskSummary(0, 0, 0, 0).fraction_completed == 0.0


class TestTotalInProgress:
    """Test the global in-progress count."""

    def test_counts_across_teams(self):
        snapshot = snapshot_of(
            alpha=[make_task("1", "in_progress"), make_task("2", "pending")],
            beta=[make_task("1", "in_progress"), make_task("2", "in_progress")],
            gamma=[],
        )
        assert total_in_progress(snapshot) == 3

    def test_empty_snapshot(self):
        assert total_in_progress(Snapshot.empty()) == 0


class TestBlocked:
    """Test blocked detection."""

    def test_is_blocked(self):
        assert is_blocked(make_task("1", "pending", blocked_by=("2",)))
        assert not is_blocked(make_task("1", "pending", blocked_by=()))
        assert not is_blocked(make_task("1", "pending"))

    def test_blocked_count_ignores_status(self, demo_dir):
        demo_dir.add_task("demo", "4", status="completed", blockedBy=["1"])
        tasks = refresh(demo_dir.root).tasks_for("demo")

        assert blocked_count(tasks) == 2
