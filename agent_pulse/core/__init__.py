"""Core functionality for Agent Pulse: loading, summarising and polling."""
