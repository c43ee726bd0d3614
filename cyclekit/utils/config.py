"""
Engine settings loaded from the environment.

Only application start-up should call get_settings(); engine functions take a
CycleSettings argument and fall back to the defaults, never to the
environment.

Usage::

    from cyclekit.utils.config import get_settings

    settings = get_settings()
    length = calculate_average_cycle_length(cycles, settings)
"""
import os
from typing import Dict, Mapping, Optional
from pydantic import ValidationError

from cyclekit.models.settings import CycleSettings
from cyclekit.services.exceptions import SettingsError
from cyclekit.utils.logging import logger

# Environment variable -> CycleSettings field
ENV_SETTINGS: Dict[str, str] = {
    "CYCLE_DEFAULT_CYCLE_LENGTH": "default_cycle_length",
    "CYCLE_DEFAULT_PERIOD_LENGTH": "default_period_length",
    "CYCLE_OVULATION_OFFSET": "ovulation_offset",
    "CYCLE_FERTILE_WINDOW_BEFORE": "fertile_window_before",
    "CYCLE_FERTILE_WINDOW_AFTER": "fertile_window_after",
    "CYCLE_STATS_WINDOW": "stats_window",
    "CYCLE_PREDICTION_HORIZON_DAYS": "prediction_horizon_days",
    "CYCLE_MAX_CYCLE_LENGTH": "max_cycle_length",
}

# Singleton instance
_settings_instance = None

def load_settings(environ: Optional[Mapping[str, str]] = None) -> CycleSettings:
    """
    Build settings from environment variables, defaulting unset ones.

    Args:
        environ: Mapping to read from, os.environ by default

    Returns:
        Validated CycleSettings

    Raises:
        SettingsError: If a variable is not a valid value for its field
    """
    environ = os.environ if environ is None else environ
    overrides = {
        field: environ[name]
        for name, field in ENV_SETTINGS.items()
        if environ.get(name) not in (None, "")
    }

    try:
        settings = CycleSettings(**overrides)
    except ValidationError as e:
        raise SettingsError(f"Invalid cycle settings in environment: {e}") from e

    if overrides:
        logger.info("Loaded cycle settings overrides", extra={"overrides": overrides})
    return settings

def get_settings() -> CycleSettings:
    """
    Get or create the process-wide settings instance.

    Raises:
        SettingsError: If the environment holds invalid values
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = load_settings()
    return _settings_instance

def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings_instance
    _settings_instance = None
