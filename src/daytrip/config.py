"""
Configuration management for Daytrip.

Loads and validates TOML config against strict bounds.
The schedule is read once at startup and handed to the selectors as an
immutable TripSettings value.
"""

import copy
import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional
import toml

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when config validation fails."""
    pass


class Config:
    """Configuration loader and validator."""

    # Hours in a week is the longest visit window we accept
    PARAM_BOUNDS = {
        "schedule": {
            "visit_window_hours": (0.0, 168.0),
            "rest_time_hours": (0.0, 168.0),
        },
        "selection": {
            "presort_secondary": None,  # Bool type
        },
    }

    DEFAULT_CONFIG = {
        "config_version": "1.0",
        "schedule": {
            "visit_window_hours": 48.0,
            "rest_time_hours": 16.0,
        },
        "selection": {
            "presort_secondary": False,
        },
    }

    def __init__(self, config_dict: Dict[str, Any]):
        """Initialize config from dictionary."""
        self.data = config_dict
        self._validate()

    @classmethod
    def defaults(cls) -> "Config":
        """Config built from DEFAULT_CONFIG only."""
        return cls(copy.deepcopy(cls.DEFAULT_CONFIG))

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Config":
        """
        Load config from TOML file.

        Args:
            config_path: Path to daytrip.toml. If None, uses DAYTRIP_CONFIG_PATH env var
                        or defaults to configs/daytrip.toml.

        Returns:
            Config instance.

        Raises:
            ConfigError: If config is invalid or unreadable.
        """
        if config_path is None:
            config_path = os.getenv("DAYTRIP_CONFIG_PATH", "configs/daytrip.toml")

        config_path = Path(config_path)

        if not config_path.exists():
            logger.warning(f"Config file not found: {config_path}. Using defaults.")
            return cls.defaults()

        try:
            config_dict = toml.load(config_path)
        except (OSError, UnicodeDecodeError, toml.TomlDecodeError) as e:
            raise ConfigError(f"Failed to load config from {config_path}: {e}") from e

        logger.info(f"Loaded config from {config_path}")
        return cls(config_dict)

    def _validate(self) -> None:
        """
        Validate all config parameters against PARAM_BOUNDS.

        Raises:
            ConfigError: If any parameter is out of bounds or has the wrong type.
        """
        for section, params in self.PARAM_BOUNDS.items():
            if section not in self.data:
                logger.warning(f"Missing config section: {section}. Using defaults.")
                self.data[section] = copy.deepcopy(self.DEFAULT_CONFIG[section])
                continue

            section_data = self.data[section]
            if not isinstance(section_data, dict):
                raise ConfigError(f"Config section {section} must be a table")

            for param, bounds in params.items():
                if param not in section_data:
                    default_val = self.DEFAULT_CONFIG[section][param]
                    logger.warning(f"Missing param {section}.{param}. Using default: {default_val}")
                    section_data[param] = default_val
                    continue

                value = section_data[param]

                # Flags have no bounds, only a type
                if bounds is None:
                    if not isinstance(value, bool):
                        raise ConfigError(f"Parameter {section}.{param}={value!r} must be true or false")
                    continue

                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise ConfigError(f"Parameter {section}.{param}={value!r} must be a number")

                min_val, max_val = bounds
                if not (min_val <= value <= max_val):
                    raise ConfigError(
                        f"Parameter {section}.{param}={value} out of bounds "
                        f"[{min_val}, {max_val}]"
                    )

        schedule = self.data["schedule"]
        if schedule["rest_time_hours"] > schedule["visit_window_hours"]:
            raise ConfigError(
                f"schedule.rest_time_hours={schedule['rest_time_hours']} exceeds "
                f"schedule.visit_window_hours={schedule['visit_window_hours']}"
            )

        logger.info("✅ Config validation passed")

    def get(self, section: str, param: str, default: Any = None) -> Any:
        """Get a config parameter safely."""
        return self.data.get(section, {}).get(param, default)

    def __getitem__(self, section: str) -> Dict[str, Any]:
        """Allow dict-like access: config["schedule"]"""
        return self.data.get(section, {})

    def __repr__(self) -> str:
        version = self.data.get('config_version', 'unknown')
        return f"Config(version={version})"


@dataclass(frozen=True)
class TripSettings:
    """Read-only schedule handed to every selector."""

    visit_window: float = 48.0
    rest_time: float = 16.0
    presort_secondary: bool = False

    @property
    def available_time(self) -> float:
        """Hours left for sightseeing once rest is taken out."""
        return self.visit_window - self.rest_time

    @classmethod
    def from_config(cls, config: Config) -> "TripSettings":
        return cls(
            visit_window=float(config.get("schedule", "visit_window_hours")),
            rest_time=float(config.get("schedule", "rest_time_hours")),
            presort_secondary=config.get("selection", "presort_secondary"),
        )
