"""Rich renderables for the live ``watch`` view."""

from datetime import datetime
from typing import Optional

from rich.console import Group, RenderableType
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from agent_pulse.core.constants import (
    BLOCKED_ICON,
    LEAD_ICON,
    MEMBER_ICON,
    PROGRESS_BAR_WIDTH,
    STATUS_COMPLETED,
    STATUS_ICONS,
    STATUS_IN_PROGRESS,
    STATUS_PENDING,
)
from agent_pulse.core.summary import summarize_tasks, task_summary, total_in_progress
from agent_pulse.models.snapshot import Snapshot
from agent_pulse.models.task import TaskItem
from agent_pulse.models.team import ModelFamily, TeamConfig

from . import format_relative, plural, status_icon

MODEL_STYLES = {
    ModelFamily.OPUS: "purple",
    ModelFamily.SONNET: "blue",
    ModelFamily.HAIKU: "green",
}

STATUS_STYLES = {
    STATUS_COMPLETED: "green",
    STATUS_IN_PROGRESS: "blue",
}


def _status_style(task: TaskItem) -> str:
    if task.status == STATUS_PENDING and task.is_blocked:
        return "orange3"
    return STATUS_STYLES.get(task.status, "dim")


def _header(title: str, detail: str) -> Table:
    grid = Table.grid(expand=True)
    grid.add_column()
    grid.add_column(justify="right")
    grid.add_row(Text(title, style="bold"), Text(detail, style="dim"))
    return grid


def _footer(snapshot: Snapshot, now: datetime) -> Text:
    footer = Text(f"Updated {format_relative(snapshot.taken_at, now)}", style="dim")
    in_progress = total_in_progress(snapshot)
    if in_progress:
        footer.append(f"  {STATUS_ICONS[STATUS_IN_PROGRESS]} {in_progress} in progress", style="blue")
    footer.append("  (Ctrl-C to quit)", style="dim")
    return footer


def render_team_list(snapshot: Snapshot, now: Optional[datetime] = None) -> RenderableType:
    """Team overview: one row per team with member count and task progress."""
    now = now or datetime.now()
    header = _header("Agent Pulse", plural(len(snapshot.teams), "team"))

    if not snapshot.teams:
        empty = Text.assemble(
            ("No agent teams found\n", "bold"),
            ("Use TeamCreate in Claude Code to spawn a team.", "dim"),
            justify="center",
        )
        return Group(header, Text(""), empty, Text(""), _footer(snapshot, now))

    table = Table(expand=True, box=None, show_header=False, pad_edge=False)
    table.add_column("team", ratio=1)
    table.add_column("members", justify="right")
    table.add_column("tasks")
    table.add_column("progress", width=PROGRESS_BAR_WIDTH)

    for team in snapshot.teams:
        summary = task_summary(snapshot, team.name)
        counts = Text()
        if summary.completed > 0:
            counts.append(f"{STATUS_ICONS[STATUS_COMPLETED]}{summary.completed} ", style="green")
        if summary.in_progress > 0:
            counts.append(f"{STATUS_ICONS[STATUS_IN_PROGRESS]}{summary.in_progress} ", style="blue")
        if summary.pending > 0:
            counts.append(f"{STATUS_ICONS[STATUS_PENDING]}{summary.pending}", style="dim")

        progress: RenderableType = Text("")
        if summary.total > 0:
            progress = ProgressBar(total=summary.total, completed=summary.completed,
                                   width=PROGRESS_BAR_WIDTH, complete_style="green",
                                   finished_style="green")

        table.add_row(Text(team.name, style="bold"), f"{MEMBER_ICON} {len(team.members)}", counts, progress)

    return Group(header, table, Text(""), _footer(snapshot, now))


def render_team_detail(snapshot: Snapshot, team: TeamConfig,
                       now: Optional[datetime] = None) -> RenderableType:
    """Detail of one team: description, members and tasks."""
    now = now or datetime.now()
    tasks = snapshot.tasks_for(team.name)
    parts: list = [_header(team.name, f"Created {format_relative(team.created_date, now)}")]

    if team.description:
        parts.append(Text(team.description, style="dim"))

    parts.append(Text(""))
    parts.append(_header("MEMBERS", str(len(team.members))))
    for member in team.members:
        line = Text()
        if member.is_team_lead:
            line.append(f"{LEAD_ICON} ", style="yellow")
        else:
            line.append(f"{MEMBER_ICON} ", style="dim")
        line.append(member.name, style="bold")
        line.append(f"  {member.model_short}", style=MODEL_STYLES.get(member.model_family, "dim"))
        parts.append(line)

    if tasks:
        summary = summarize_tasks(tasks)
        parts.append(Text(""))
        parts.append(_header("TASKS", f"{summary.completed}/{summary.total} done"))
        parts.append(ProgressBar(total=summary.total, completed=summary.completed,
                                 complete_style="green", finished_style="green"))
        for task in tasks:
            completed = task.status == STATUS_COMPLETED
            line = Text()
            line.append(f"{status_icon(task)} ", style=_status_style(task))
            line.append(task.subject, style="dim strike" if completed else "")
            if task.owner:
                line.append(f"  @{task.owner}", style="dim")
            if task.progress_label:
                line.append(f"  {task.progress_label}", style="italic blue")
            if task.is_blocked:
                line.append(f"  {BLOCKED_ICON} blocked", style="orange3")
            parts.append(line)

    parts.append(Text(""))
    parts.append(_footer(snapshot, now))
    return Group(*parts)


def render_view(snapshot: Snapshot, team_name: Optional[str] = None,
                now: Optional[datetime] = None) -> RenderableType:
    """Team detail when ``team_name`` is present in the snapshot, else the team list."""
    if team_name is not None:
        team = snapshot.get_team(team_name)
        if team is not None:
            return render_team_detail(snapshot, team, now)
    return render_team_list(snapshot, now)
