"""Allow running as ``python -m agent_pulse``."""

from .cli.main import cli

if __name__ == '__main__':
    cli()
