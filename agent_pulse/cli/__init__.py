"""Command-line interface for Agent Pulse."""
