"""Configuration loader for hero-refactor."""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from .errors import ConfigError


class Config:
    """Configuration manager for hero-refactor.

    Every setting has a default, so a missing configuration file simply
    means the tool behaves with its stock output names.
    """

    def __init__(self, config_path: str = "config/config.yaml"):
        """Initialize configuration.

        Args:
            config_path: Path to the YAML configuration file
        """
        load_dotenv()
        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from the YAML file, if there is one."""
        if not self.config_path.exists():
            return

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid configuration file {self.config_path}: {e}") from e

        if data is None:
            return
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file {self.config_path} must contain a mapping")
        self._config = data

    def _substitute_env_vars(self, value: str) -> str:
        """Substitute environment variables in configuration values.

        Args:
            value: String that may contain a ${VAR} pattern

        Returns:
            String with the environment variable substituted
        """
        if isinstance(value, str) and value.startswith("${") and value.endswith("}"):
            var_name = value[2:-1]
            return os.environ.get(var_name, "")
        return value

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot-separated key.

        Args:
            key: Dot-separated configuration key (e.g., 'output.hero_dir')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        if isinstance(value, str):
            value = self._substitute_env_vars(value)

        return value

    @property
    def output_dir(self) -> Path:
        """Get the directory receiving every output file."""
        return Path(self.get("paths.output_dir", ".") or ".")

    @property
    def log_dir(self) -> Optional[Path]:
        """Get log directory path, or None to log to the console only."""
        log_dir = self.get("paths.log_dir")
        return Path(log_dir) if log_dir else None

    @property
    def hero_dir(self) -> Path:
        """Get the root of the rebuilt hero tree."""
        return self.output_dir / self.get("output.hero_dir", "hero")

    @property
    def deleted_skill_report(self) -> Path:
        """Get the report path for unclassifiable skill files."""
        return self.output_dir / self.get("output.deleted_skill_report", "DeletedSkillPath.txt")

    @property
    def deleted_skin_report(self) -> Path:
        """Get the report path for unclassifiable skin files."""
        return self.output_dir / self.get("output.deleted_skin_report", "DeletedSkinPath.txt")

    @property
    def hero_spine_file(self) -> Path:
        """Get the hero spine JSON path."""
        return self.output_dir / self.get("output.hero_spine", "heroSpine.json")

    @property
    def hero_skill_file(self) -> Path:
        """Get the hero skill JSON path."""
        return self.output_dir / self.get("output.hero_skill", "heroSkill.json")

    @property
    def wrong_sync_report(self) -> Path:
        """Get the report path for icon/name mismatches."""
        return self.output_dir / self.get("output.wrong_sync_report", "WrongSynchronizedData.txt")

    @property
    def skills_per_hero(self) -> int:
        """Get the number of skill slots every hero has."""
        value = self.get("skills.per_hero", 4)
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"skills.per_hero must be an integer, got {value!r}") from e
