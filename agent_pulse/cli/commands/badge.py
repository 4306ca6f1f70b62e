"""Badge command."""

import click

from agent_pulse.cli.helpers import load_snapshot
from agent_pulse.core.summary import total_in_progress


@click.command()
@click.pass_obj
def badge(settings):
    """Print the number of in-progress tasks (nothing when zero)"""
    in_progress = total_in_progress(load_snapshot(settings))
    if in_progress > 0:
        click.echo(in_progress)
