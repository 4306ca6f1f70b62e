"""CLI Helper Functions for Agent Pulse.

This module provides reusable helper functions for CLI commands so that the
one-shot commands and the live view present teams, members and tasks the
same way.

The helpers provide:
- Snapshot loading and team name resolution with prefix support
- Relative time and progress bar formatting
- Status, role and model presentation (icons and colours)
- Consistent table and line formatting for output
"""

import sys
from datetime import datetime
from typing import List, Optional

import click
from tabulate import tabulate

from agent_pulse.core.constants import (
    BLOCKED_ICON,
    LEAD_ICON,
    MEMBER_ICON,
    PROGRESS_BAR_WIDTH,
    STATUS_COMPLETED,
    STATUS_ICONS,
    STATUS_IN_PROGRESS,
    STATUS_PENDING,
    UNKNOWN_STATUS_ICON,
)
from agent_pulse.core.exceptions import TeamNotFoundError
from agent_pulse.core.store_loader import refresh
from agent_pulse.core.summary import TaskSummary, task_summary
from agent_pulse.models.settings import PulseSettings
from agent_pulse.models.snapshot import Snapshot
from agent_pulse.models.task import TaskItem
from agent_pulse.models.team import ModelFamily, TeamConfig, TeamMember

MODEL_COLORS = {
    ModelFamily.OPUS: 'magenta',
    ModelFamily.SONNET: 'blue',
    ModelFamily.HAIKU: 'green',
}

STATUS_COLORS = {
    STATUS_COMPLETED: 'green',
    STATUS_IN_PROGRESS: 'blue',
}

_TIME_UNITS = [
    (86400, "day"),
    (3600, "hour"),
    (60, "minute"),
    (1, "second"),
]


def load_snapshot(settings: PulseSettings) -> Snapshot:
    """Load a fresh snapshot from the configured data directory."""
    return refresh(settings.claude_dir)


def resolve_team(snapshot: Snapshot, name: str) -> TeamConfig:
    """Resolve a team name with prefix support.

    Args:
        snapshot: The snapshot to search
        name: Full team name or a unique prefix of one

    Returns:
        The matching team

    Note:
        Exits with error if the team is not found or the prefix is ambiguous.
    """
    try:
        return snapshot.require_team(name)
    except TeamNotFoundError as e:
        matching = [team for team in snapshot.teams if team.name.startswith(name)]
        if len(matching) == 1:
            return matching[0]
        if len(matching) > 1:
            click.echo(f"Error: Multiple teams found starting with '{name}':", err=True)
            for team in matching:
                click.echo(f"  - {team.name}", err=True)
        else:
            click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def format_relative(moment: datetime, now: Optional[datetime] = None) -> str:
    """Format the time elapsed since ``moment``, e.g. '3 minutes ago'."""
    now = now or datetime.now()
    seconds = max(0, int((now - moment).total_seconds()))
    if seconds < 1:
        return "just now"
    for size, unit in _TIME_UNITS:
        if seconds >= size:
            value = seconds // size
            return f"{value} {unit}{'' if value == 1 else 's'} ago"
    return "just now"


def format_progress_bar(summary: TaskSummary, width: int = PROGRESS_BAR_WIDTH) -> str:
    """Text progress bar of completed over total tasks."""
    filled = round(summary.fraction_completed * width)
    return "█" * filled + "░" * (width - filled)


def plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


def status_icon(task: TaskItem) -> str:
    if task.status == STATUS_PENDING and task.is_blocked:
        return BLOCKED_ICON
    return STATUS_ICONS.get(task.status, UNKNOWN_STATUS_ICON)


def status_color(task: TaskItem) -> str:
    if task.status == STATUS_PENDING and task.is_blocked:
        return 'yellow'
    return STATUS_COLORS.get(task.status, 'bright_black')


def model_color(member: TeamMember) -> Optional[str]:
    return MODEL_COLORS.get(member.model_family)


def format_summary_counts(summary: TaskSummary) -> str:
    """Completed, in-progress and pending counts, omitting zero buckets."""
    parts = []
    if summary.completed > 0:
        parts.append(click.style(f"{STATUS_ICONS[STATUS_COMPLETED]} {summary.completed}", fg='green'))
    if summary.in_progress > 0:
        parts.append(click.style(f"{STATUS_ICONS[STATUS_IN_PROGRESS]} {summary.in_progress}", fg='blue'))
    if summary.pending > 0:
        parts.append(click.style(f"{STATUS_ICONS[STATUS_PENDING]} {summary.pending}", fg='bright_black'))
    return "  ".join(parts)


def format_team_table(snapshot: Snapshot, now: Optional[datetime] = None) -> str:
    """Format the team list as a table, newest team first.

    Args:
        snapshot: The snapshot to render
        now: Reference time for relative dates

    Returns:
        Formatted table string
    """
    headers = ["TEAM", "MEMBERS", "TASKS", "PROGRESS", "CREATED"]

    table_data = []
    for team in snapshot.teams:
        summary = task_summary(snapshot, team.name)
        progress = ""
        if summary.total > 0:
            progress = f"{click.style(format_progress_bar(summary), fg='green')} {summary.completed}/{summary.total}"

        table_data.append([
            team.name,
            len(team.members),
            format_summary_counts(summary),
            progress,
            format_relative(team.created_date, now),
        ])

    return tabulate(table_data, headers=headers, tablefmt="simple",
                    colalign=("left", "right", "left", "left", "left"))


def format_member_line(member: TeamMember) -> str:
    """One roster line: role icon, name and model badge."""
    if member.is_team_lead:
        icon = click.style(LEAD_ICON, fg='yellow')
    else:
        icon = click.style(MEMBER_ICON, fg='bright_black')
    badge = click.style(f"[{member.model_short}]", fg=model_color(member))
    return f"   {icon} {member.name}  {badge}"


def format_task_lines(task: TaskItem) -> List[str]:
    """Subject line plus an optional detail line for a task."""
    completed = task.status == STATUS_COMPLETED
    icon = click.style(status_icon(task), fg=status_color(task))
    subject = click.style(task.subject, dim=completed, strikethrough=completed)
    lines = [f"   {icon} #{task.id} {subject}"]

    details = []
    if task.owner:
        details.append(click.style(f"@{task.owner}", fg='bright_black'))
    if task.progress_label:
        details.append(click.style(task.progress_label, fg='blue', italic=True))
    if task.is_blocked:
        details.append(click.style(f"blocked by {', '.join(task.blocked_by)}", fg='yellow'))
    if details:
        lines.append("      " + "  ".join(details))
    return lines


# Re-export commonly used functions for convenience
__all__ = [
    'load_snapshot',
    'resolve_team',
    'format_relative',
    'format_progress_bar',
    'plural',
    'status_icon',
    'status_color',
    'model_color',
    'format_summary_counts',
    'format_team_table',
    'format_member_line',
    'format_task_lines',
]
