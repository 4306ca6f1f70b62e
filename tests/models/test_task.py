"""Tests for the task model."""
import pytest
from pydantic import ValidationError

from agent_pulse.models.task import TaskItem, TaskStatus


def task(**overrides):
    data = {"id": "1", "subject": "Write tests", "description": "", "status": "pending"}
    data.update(overrides)
    return TaskItem.model_validate(data)


class TestTaskStatus:
    """Test raw status mapping."""

    def test_known_values(self):
        assert TaskStatus.from_raw("pending") is TaskStatus.PENDING
        assert TaskStatus.from_raw("in_progress") is TaskStatus.IN_PROGRESS
        assert TaskStatus.from_raw("completed") is TaskStatus.COMPLETED

    def test_unknown_values(self):
        assert TaskStatus.from_raw("deleted") is TaskStatus.UNKNOWN
        assert TaskStatus.from_raw("Completed") is TaskStatus.UNKNOWN
        assert TaskStatus.from_raw("") is TaskStatus.UNKNOWN


class TestTaskItem:
    """Test TaskItem parsing and derived attributes."""

    def test_parses_optional_camel_case_fields(self):
        t = task(owner="backend", blockedBy=["2"], blocks=["4", "5"], activeForm="Writing tests")
        assert t.owner == "backend"
        assert t.blocked_by == ("2",)
        assert t.blocks == ("4", "5")
        assert t.active_form == "Writing tests"

    def test_unknown_status_is_kept(self):
        t = task(status="deleted")
        assert t.status == "deleted"
        assert t.known_status is TaskStatus.UNKNOWN

    def test_numeric_id_is_rejected(self):
        with pytest.raises(ValidationError):
            task(id=3)

    def test_null_optional_fields(self):
        t = task(owner=None, blockedBy=None)
        assert t.owner is None
        assert not t.is_blocked

    @pytest.mark.parametrize("blocked_by,expected", [
        (None, False),
        ([], False),
        (["2"], True),
        (["2", "3"], True),
    ])
    def test_is_blocked(self, blocked_by, expected):
        assert task(blockedBy=blocked_by).is_blocked is expected

    @pytest.mark.parametrize("task_id,key", [
        ("7", 7),
        ("12", 12),
        ("-1", -1),
        ("+4", 4),
        ("abc", 0),
        ("3a", 0),
        (" 3", 0),
        ("", 0),
        ("007", 7),
        ("9223372036854775807", 9223372036854775807),
        ("-9223372036854775808", -9223372036854775808),
        ("9223372036854775808", 0),
        ("-9223372036854775809", 0),
        ("000000000000000000000042", 42),
        ("9" * 5000, 0),
    ])
    def test_sort_key(self, task_id, key):
        assert task(id=task_id).sort_key == key

    def test_progress_label_only_while_in_progress(self):
        assert task(status="in_progress", activeForm="Running").progress_label == "Running"
        assert task(status="pending", activeForm="Running").progress_label is None
        assert task(status="in_progress").progress_label is None
