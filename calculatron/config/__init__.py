"""Configuration package."""

from calculatron.config.settings import (
    AppSettings,
    CalculatorSettings,
    Settings,
    SliderBounds,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "CalculatorSettings",
    "Settings",
    "SliderBounds",
    "get_settings",
    "validate_all_settings",
]
