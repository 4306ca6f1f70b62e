"""Show team command."""

import click

from agent_pulse.cli.helpers import (
    format_member_line,
    format_progress_bar,
    format_relative,
    format_task_lines,
    load_snapshot,
    resolve_team,
)
from agent_pulse.core.summary import blocked_count, summarize_tasks


@click.command()
@click.argument('team_name')
@click.pass_obj
def show(settings, team_name):
    """Show members and tasks of a team"""
    snapshot = load_snapshot(settings)
    team = resolve_team(snapshot, team_name)
    tasks = snapshot.tasks_for(team.name)

    click.echo("\n" + "=" * 60)
    click.echo(f"Team: {team.name}")
    click.echo("=" * 60)

    if team.description:
        for line in team.description.split('\n'):
            click.echo(f"   {line}")
    click.echo(click.style(f"   Created {format_relative(team.created_date)}", fg='bright_black'))

    click.echo(f"\n👥 Members ({len(team.members)}):")
    for member in team.members:
        click.echo(format_member_line(member))

    if tasks:
        summary = summarize_tasks(tasks)
        click.echo(f"\n📋 Tasks ({summary.completed}/{summary.total} done):")
        click.echo(f"   {click.style(format_progress_bar(summary), fg='green')}")
        for task in tasks:
            for line in format_task_lines(task):
                click.echo(line)

        blocked = blocked_count(tasks)
        if blocked:
            click.echo(click.style(f"\n   {blocked} blocked", fg='yellow'))
