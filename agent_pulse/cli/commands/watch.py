"""Live watch command."""

import time

import click
from rich.console import Console
from rich.live import Live

from agent_pulse.cli.helpers.live_view import render_view
from agent_pulse.core.poller import SnapshotPoller


def wait_until_interrupted(poll_seconds: float = 0.5) -> None:
    """Block the main thread until Ctrl-C."""
    while True:
        time.sleep(poll_seconds)


@click.command()
@click.option('--interval', type=click.FloatRange(min=0, min_open=True),
              help='Seconds between refreshes (defaults to the configured interval)')
@click.option('--team', 'team_name', help='Show the detail view of one team')
@click.pass_obj
def watch(settings, interval, team_name):
    """Continuously display teams and tasks as they change"""
    poller = SnapshotPoller(settings.claude_dir, interval=interval or settings.refresh_interval)
    console = Console()

    with Live(get_renderable=lambda: render_view(poller.snapshot, team_name),
              console=console, refresh_per_second=1) as live:
        unsubscribe = poller.subscribe(lambda _snapshot: live.refresh())
        poller.start()
        try:
            wait_until_interrupted()
        except KeyboardInterrupt:
            pass
        finally:
            unsubscribe()
            poller.stop()
