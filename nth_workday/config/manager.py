"""
Configuration manager for loading and validating settings.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from nth_workday.core.errors import InvalidArgumentError
from nth_workday.core.weekday_parser import parse_excluded_days, parse_weekdays
from nth_workday.data.schemas import Config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading from YAML files and environment variables."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the config manager.

        Args:
            config_path: Optional path to config file. If not provided, uses default.
        """
        self.config_path = config_path or self._get_default_config_path()

    def _get_default_config_path(self) -> str:
        """Get the default configuration file path."""
        package_dir = Path(__file__).parent.parent
        return str(package_dir / "config" / "settings.yaml")

    def load_config(self) -> Config:
        """
        Load configuration from YAML file with environment variable overrides.

        Returns:
            Config: Validated configuration object.

        Raises:
            ValueError: If config is invalid.
        """
        config_dict = self._load_yaml()
        config_dict = self._apply_env_overrides(config_dict)

        try:
            config_dict = self._normalize(config_dict)
            return Config(**config_dict)
        except (InvalidArgumentError, ValueError) as e:
            raise ValueError(f"Invalid configuration: {e}")

    def _load_yaml(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        config_path = Path(self.config_path)

        if not config_path.exists():
            logger.debug("No config file at %s, using defaults", config_path)
            return {}

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
                return self._flatten_config(config) if config else {}
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing YAML config file: {e}")

    def _flatten_config(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Flatten nested YAML config to match Config model fields.

        Args:
            config: Nested configuration dictionary.

        Returns:
            Flattened configuration dictionary.
        """
        result = {}

        if "calendar" in config:
            cal = config["calendar"] or {}
            if "working_weekdays" in cal:
                result["working_weekdays"] = cal["working_weekdays"]
            if "excluded_days" in cal:
                result["excluded_days"] = cal["excluded_days"]

        if "output" in config:
            out = config["output"] or {}
            if "format" in out:
                result["output_format"] = out["format"]
            if "directory" in out:
                result["output_directory"] = out["directory"]

        if "api" in config:
            api = config["api"] or {}
            if "host" in api:
                result["api_host"] = api["host"]
            if "port" in api:
                result["api_port"] = api["port"]

        if "logging" in config:
            log = config["logging"] or {}
            if "level" in log:
                result["log_level"] = log["level"]

        return result

    def _normalize(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """Convert human weekday and exclusion input to canonical values."""
        if config_dict.get("working_weekdays") is not None:
            config_dict["working_weekdays"] = sorted(
                parse_weekdays(config_dict["working_weekdays"])
            )
        if config_dict.get("excluded_days") is not None:
            config_dict["excluded_days"] = sorted(
                parse_excluded_days(config_dict["excluded_days"])
            )
        return config_dict

    def _apply_env_overrides(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Environment variables:
        - NTH_WORKDAY_WORKING_WEEKDAYS -> working_weekdays (e.g. "mon-fri")
        - NTH_WORKDAY_EXCLUDED_DAYS -> excluded_days (e.g. "1,25")
        - NTH_WORKDAY_OUTPUT_FORMAT -> output_format
        - NTH_WORKDAY_OUTPUT_DIRECTORY -> output_directory
        - NTH_WORKDAY_API_HOST -> api_host
        - NTH_WORKDAY_API_PORT -> api_port
        - NTH_WORKDAY_LOG_LEVEL -> log_level

        Args:
            config_dict: Configuration dictionary from YAML.

        Returns:
            Updated configuration dictionary.
        """
        env_mappings = {
            "NTH_WORKDAY_WORKING_WEEKDAYS": "working_weekdays",
            "NTH_WORKDAY_EXCLUDED_DAYS": "excluded_days",
            "NTH_WORKDAY_OUTPUT_FORMAT": "output_format",
            "NTH_WORKDAY_OUTPUT_DIRECTORY": "output_directory",
            "NTH_WORKDAY_API_HOST": "api_host",
            "NTH_WORKDAY_API_PORT": ("api_port", int),
            "NTH_WORKDAY_LOG_LEVEL": "log_level",
        }

        for env_var, mapping in env_mappings.items():
            env_value = os.environ.get(env_var)
            if env_value is not None:
                if isinstance(mapping, tuple):
                    config_key, type_converter = mapping
                    try:
                        config_dict[config_key] = type_converter(env_value)
                    except ValueError:
                        logger.warning("Ignoring invalid value for %s: %r", env_var, env_value)
                else:
                    config_dict[mapping] = env_value

        return config_dict

    def save_config(self, config: Config, output_path: Optional[str] = None) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: Configuration object to save.
            output_path: Optional output path. If not provided, uses default.
        """
        output_path = output_path or self.config_path

        config_dict = {
            "calendar": {
                "working_weekdays": [w.label.lower() for w in config.working_weekdays],
                "excluded_days": config.excluded_days,
            },
            "output": {
                "format": config.output_format,
                "directory": config.output_directory,
            },
            "api": {
                "host": config.api_host,
                "port": config.api_port,
            },
            "logging": {
                "level": config.log_level,
            },
        }

        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
