"""Agent Pulse CLI commands."""
