"""Configuration management."""

from pathlib import Path
from typing import Optional

import platformdirs
import tomli
import tomli_w
from pydantic import ValidationError

from paysim.exceptions import ConfigValidationError
from paysim.models import PaysimConfig


class ConfigManager:
    """Manages the TOML settings file."""

    CONFIG_FILENAME = "settings.toml"

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        """Initialize config manager.

        Args:
            config_dir: Override config directory (for testing)
        """
        if config_dir:
            self._config_dir = Path(config_dir)
        else:
            self._config_dir = Path(platformdirs.user_config_dir("paysim"))

    @property
    def config_path(self) -> Path:
        """Path to settings file."""
        return self._config_dir / self.CONFIG_FILENAME

    @property
    def exists(self) -> bool:
        """Check if settings file exists."""
        return self.config_path.exists()

    def save(self, config: PaysimConfig) -> None:
        """Save configuration to the settings file."""
        self._config_dir.mkdir(parents=True, exist_ok=True)
        config_dict = config.model_dump(mode="json", exclude_none=True)
        self.config_path.write_text(tomli_w.dumps(config_dict), encoding="utf-8")

    def load(self) -> PaysimConfig:
        """Load configuration, falling back to defaults if no file exists.

        Returns:
            Loaded and validated PaysimConfig

        Raises:
            ConfigValidationError: If the file is not valid TOML or has bad values
        """
        if not self.exists:
            return PaysimConfig()

        try:
            config_dict = tomli.loads(self.config_path.read_text(encoding="utf-8"))
        except tomli.TOMLDecodeError as e:
            raise ConfigValidationError(self.CONFIG_FILENAME, str(e))

        try:
            return PaysimConfig.model_validate(config_dict)
        except ValidationError as e:
            field = ".".join(str(p) for p in e.errors()[0]["loc"]) or "config"
            raise ConfigValidationError(field, str(e))

    def delete(self) -> bool:
        """Delete settings file.

        Returns:
            True if file was deleted, False if it didn't exist
        """
        if self.exists:
            self.config_path.unlink()
            return True
        return False
