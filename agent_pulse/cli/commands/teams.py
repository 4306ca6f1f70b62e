"""List teams command."""

import click

from agent_pulse.cli.helpers import format_team_table, load_snapshot, plural
from agent_pulse.core.summary import total_in_progress


@click.command()
@click.option('--show-skipped', is_flag=True, help='List team and task files that could not be loaded')
@click.pass_obj
def teams(settings, show_skipped):
    """List agent teams, newest first"""
    snapshot = load_snapshot(settings)

    if not snapshot.teams:
        click.echo("No agent teams found")
        click.echo(click.style("Use TeamCreate in Claude Code to spawn a team.", fg='bright_black'))
    else:
        click.echo(f"\n👥 Agent Pulse: {plural(len(snapshot.teams), 'team')}")
        in_progress = total_in_progress(snapshot)
        if in_progress:
            click.echo(click.style(f"   {in_progress} task{'' if in_progress == 1 else 's'} in progress", fg='blue'))
        click.echo("")
        click.echo(format_team_table(snapshot))

    if show_skipped and snapshot.skipped:
        click.echo(f"\n⚠️  Skipped {plural(len(snapshot.skipped), 'file')}:", err=True)
        for entry in snapshot.skipped:
            detail = f": {entry.detail}" if entry.detail else ""
            click.echo(f"   {entry.path} ({entry.reason.value}){detail}", err=True)
