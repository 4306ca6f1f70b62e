"""Settings file loading."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from ..core.constants import SETTINGS_FILE
from ..core.exceptions import SettingsError
from ..models.settings import PulseSettings

logger = logging.getLogger(__name__)


class ConfigManager:
    """Reads Agent Pulse settings. Never writes."""

    def __init__(self, settings_file: Optional[Union[str, Path]] = None):
        """Initialize config manager.

        Args:
            settings_file: Explicit settings file. When omitted the default
                location is used and problems with it fall back to defaults.
        """
        self.explicit = settings_file is not None
        self.settings_file = Path(settings_file).expanduser() if self.explicit else SETTINGS_FILE

    def load_settings(self, **overrides: Any) -> PulseSettings:
        """Load settings, applying any non-None overrides on top.

        Raises:
            SettingsError: if an explicitly requested file is missing or invalid,
                or an override is invalid
        """
        data = self._read_file()
        data.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return PulseSettings(**data)
        except ValidationError as e:
            raise SettingsError(f"Invalid settings: {e}") from e

    def _read_file(self) -> Dict[str, Any]:
        if not self.settings_file.exists():
            if self.explicit:
                raise SettingsError(f"Settings file not found: {self.settings_file}")
            return {}

        try:
            data = PulseSettings.model_validate_json(self.settings_file.read_bytes())
        except (OSError, ValidationError) as e:
            if self.explicit:
                raise SettingsError(f"Could not load settings from {self.settings_file}: {e}") from e
            logger.warning(f"Ignoring invalid settings file {self.settings_file}: {e}")
            return {}
        return data.model_dump(exclude_unset=True)
