"""Custom exceptions for Agent Pulse."""


class AgentPulseError(Exception):
    """Base exception for all Agent Pulse errors."""

    pass


class TeamNotFoundError(AgentPulseError):
    """Exception raised when a team is not present in a snapshot."""

    def __init__(self, team_name: str):
        super().__init__(f"No team found with name: {team_name}")
        self.team_name = team_name


class PollerAlreadyRunningError(AgentPulseError):
    """Exception raised when starting a poller that is already running."""

    pass


class SettingsError(AgentPulseError):
    """Exception raised when a settings file cannot be loaded."""

    pass
