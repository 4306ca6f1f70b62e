"""Main CLI entry point for Agent Pulse."""

import logging
import sys
from pathlib import Path

import click

from ..core.constants import ROOT_ENV_VAR
from ..core.exceptions import SettingsError
from ..utils.config_manager import ConfigManager
from .commands.badge import badge
from .commands.show import show
from .commands.teams import teams
from .commands.watch import watch

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@click.group()
@click.option('--root', type=click.Path(file_okay=False, path_type=Path), envvar=ROOT_ENV_VAR,
              help='Claude data directory containing teams/ and tasks/ (default: ~/.claude)')
@click.option('--config', 'config_file', type=click.Path(dir_okay=False, path_type=Path),
              help='Settings file (default: ~/.config/agent-pulse/config.json)')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, root, config_file, verbose):
    """Agent Pulse - Watch Claude Code agent teams and their tasks"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    try:
        ctx.obj = ConfigManager(config_file).load_settings(claude_dir=root)
    except SettingsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


# Register commands
cli.add_command(teams)
cli.add_command(show)
cli.add_command(badge)
cli.add_command(watch)


if __name__ == '__main__':
    cli()
