import json
from pathlib import Path
from typing import Optional

import pytest
from click.testing import CliRunner


def _make_member(agent_id, name=None, agent_type="general-purpose", model="claude-sonnet-4-5", **extra):
    """Build a member dict as written by Claude Code."""
    member = {
        "agentId": agent_id,
        "name": name or agent_id,
        "agentType": agent_type,
        "model": model,
    }
    member.update(extra)
    return member


class ClaudeDirBuilder:
    """Writes team and task JSON files into a temporary Claude data directory."""

    def __init__(self, root: Path):
        self.root = root

    def add_team(self, dir_name: str, name: Optional[str] = None, created_at: float = 1700000000000,
                 description: str = "", members=None) -> Path:
        config = {
            "name": name or dir_name,
            "description": description,
            "createdAt": created_at,
            "members": members if members is not None else [_make_member("lead", agent_type="team-lead")],
        }
        return self.write_team_config(dir_name, json.dumps(config))

    def write_team_config(self, dir_name: str, content: str) -> Path:
        team_dir = self.root / "teams" / dir_name
        team_dir.mkdir(parents=True, exist_ok=True)
        path = team_dir / "config.json"
        path.write_text(content)
        return path

    def add_task(self, team_name: str, task_id: str, status: str = "pending",
                 subject: Optional[str] = None, **fields) -> Path:
        task = {
            "id": task_id,
            "subject": subject or f"Task {task_id}",
            "description": f"Description of task {task_id}",
            "status": status,
        }
        task.update(fields)
        return self.write_task_file(team_name, f"{task_id}.json", json.dumps(task))

    def write_task_file(self, team_name: str, file_name: str, content: str) -> Path:
        task_dir = self.root / "tasks" / team_name
        task_dir.mkdir(parents=True, exist_ok=True)
        path = task_dir / file_name
        path.write_text(content)
        return path


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def claude_dir(tmp_path):
    """Provides a builder for an empty Claude data directory."""
    root = tmp_path / ".claude"
    root.mkdir()
    return ClaudeDirBuilder(root)


@pytest.fixture
def demo_dir(claude_dir):
    """A data directory with one four-member team and three tasks."""
    claude_dir.add_team(
        "demo",
        description="Demo chat team",
        members=[
            _make_member("lead@demo", "team-lead", agent_type="team-lead", model="claude-opus-4-6"),
            _make_member("backend@demo", "backend", model="claude-sonnet-4-5"),
            _make_member("frontend@demo", "frontend", model="claude-haiku-4-5"),
            _make_member("tester@demo", "tester", model="gpt-5"),
        ],
    )
    claude_dir.add_task("demo", "1", status="completed", owner="backend")
    claude_dir.add_task("demo", "2", status="in_progress", owner="frontend", activeForm="Building the UI")
    claude_dir.add_task("demo", "3", status="pending", blockedBy=["2"])
    return claude_dir


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep tests away from the real settings file and root override."""
    monkeypatch.setattr(
        "agent_pulse.utils.config_manager.SETTINGS_FILE",
        tmp_path / "no-such-settings.json",
    )
    monkeypatch.delenv("AGENT_PULSE_ROOT", raising=False)
