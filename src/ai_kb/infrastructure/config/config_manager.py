"""Configuration manager for loading and validating .ai-kb.yml"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from ai_kb.domain.config import AppConfig, OutputConfig, RunOptions
from ai_kb.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = ".ai-kb.yml"


class ConfigManager:
    """Manages settings from .ai-kb.yml and environment variables

    Configuration priority:
    1. Default values (defined in Pydantic models)
    2. .ai-kb.yml file (searched from current directory upwards)
    3. Environment variables (AI_KB_CONFIG, AI_KB_OUTPUT_DIR)
    4. CLI arguments (passed as overrides)
    """

    def __init__(
        self,
        settings_path: Optional[Path] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ):
        """Initialize config manager

        Args:
            settings_path: Path to .ai-kb.yml (searches from current dir if None)
            overrides: Nested dict of values set on the command line

        Raises:
            ConfigurationError: If configuration validation fails
        """
        if isinstance(settings_path, str):
            settings_path = Path(settings_path)
        self.settings_path = settings_path or self._find_settings_file()
        self.overrides = overrides or {}
        try:
            self.config: AppConfig = self._load_config()
        except ValidationError as e:
            errors = []
            for error in e.errors():
                field = ".".join(str(x) for x in error["loc"])
                errors.append(f"  - {field}: {error['msg']}")
            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(errors)
            ) from e

    def _find_settings_file(self) -> Optional[Path]:
        current = Path.cwd()
        for parent in [current] + list(current.parents):
            candidate = parent / SETTINGS_FILENAME
            if candidate.is_file():
                logger.info(f"Found settings file: {candidate}")
                return candidate
        logger.debug(f"No {SETTINGS_FILENAME} found, using defaults")
        return None

    def _load_config(self) -> AppConfig:
        """Load settings from file, environment and overrides, then validate

        Returns:
            Validated AppConfig instance

        Raises:
            ValidationError: If configuration is invalid
            ConfigurationError: If the settings file is unreadable or not a mapping
        """
        config_dict = AppConfig().model_dump()

        if self.settings_path and self.settings_path.exists():
            try:
                with open(self.settings_path, "r", encoding="utf-8") as f:
                    file_config = yaml.safe_load(f) or {}
            except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
                raise ConfigurationError(
                    f"Failed to load settings from {self.settings_path}: {e}"
                ) from e
            if not isinstance(file_config, dict):
                raise ConfigurationError(
                    f"Settings file {self.settings_path} must contain a mapping"
                )
            config_dict = self._merge_config(config_dict, file_config)
            logger.info(f"Loaded settings from {self.settings_path}")

        config_dict = self._apply_env_overrides(config_dict)
        config_dict = self._merge_config(config_dict, self._drop_unset(self.overrides))
        return AppConfig(**config_dict)

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge configuration dictionaries"""
        result = copy.deepcopy(base)
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value
        return result

    def _drop_unset(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """Remove None entries so unset CLI options don't mask lower layers"""
        cleaned = {}
        for key, value in values.items():
            if isinstance(value, dict):
                value = self._drop_unset(value)
                if not value:
                    continue
            elif value is None:
                continue
            cleaned[key] = value
        return cleaned

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        if os.getenv("AI_KB_CONFIG"):
            config["sections_file"] = os.getenv("AI_KB_CONFIG")

        if os.getenv("AI_KB_OUTPUT_DIR"):
            config["output"]["directory"] = os.getenv("AI_KB_OUTPUT_DIR")

        return config

    @property
    def root(self) -> Path:
        return Path(self.config.root)

    @property
    def sections_path(self) -> Path:
        """Sections file path, resolved against the project root when relative"""
        path = Path(self.config.sections_file)
        if path.is_absolute():
            return path
        return self.root / path

    def get_run_options(self) -> RunOptions:
        return self.config.run

    def get_output_config(self) -> OutputConfig:
        """Get output configuration

        Returns:
            Output configuration model
        """
        return self.config.output

    @property
    def output_directory(self) -> Path:
        """Output directory, resolved against the project root when relative"""
        path = Path(self.config.output.directory)
        if path.is_absolute():
            return path
        return self.root / path
