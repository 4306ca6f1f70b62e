"""Utilities for Agent Pulse."""

from .config_manager import ConfigManager

__all__ = [
    'ConfigManager'
]
