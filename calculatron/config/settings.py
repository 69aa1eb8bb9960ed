"""
Configuration Management for Income Calculatron

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: Only presentation concerns are configurable here
(slider ranges, defaults, currency symbol, logging). The unit
conventions of the calculator (52 weeks, 4 weeks/month, 12 months)
live in the calculator module and are not configurable.
"""

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SliderBounds(BaseModel):
    """Inclusive range (and step) of an input widget."""

    minimum: int = 0
    maximum: int
    step: int = Field(default=1, ge=1)

    @model_validator(mode='after')
    def validate_range(self) -> 'SliderBounds':
        if self.maximum < self.minimum:
            raise ValueError("Slider maximum cannot be below its minimum")
        return self


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Minimum level for local log output"
    )
    log_json: bool = Field(
        default=True,
        description="Render log lines as JSON (False = console renderer)"
    )
    audit_trail_size: int = Field(
        default=200,
        ge=1,
        le=10000,
        description="How many audit events a session keeps in memory"
    )


class CalculatorSettings(BaseSettings):
    """Input ranges and display defaults for the calculator page."""

    model_config = SettingsConfigDict(
        env_prefix="CALCULATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    currency_symbol: str = Field(
        default="$",
        max_length=5,
        description="Symbol prefixed to money values (display only)"
    )
    default_weeks_off: int = Field(
        default=4,
        ge=0,
        le=52,
        description="Vacation weeks a new session starts with"
    )

    # Slider ranges
    salary_rate_max: int = Field(
        default=500000,
        ge=1,
        description="Maximum annual salary on the salary slider"
    )
    salary_rate_step: int = Field(
        default=10,
        ge=1,
        description="Step of the salary slider"
    )
    hourly_rate_max: int = Field(
        default=300,
        ge=1,
        description="Maximum hourly rate on the rate slider"
    )
    passive_rate_max: int = Field(
        default=10000,
        ge=1,
        description="Maximum passive income rate"
    )
    weekly_hours_max: int = Field(
        default=120,
        ge=1,
        le=168,
        description="Maximum weekly hours on the hours slider"
    )
    weeks_off_max: int = Field(
        default=52,
        ge=0,
        le=52,
        description="Maximum vacation weeks"
    )
    expense_cost_max: int = Field(
        default=10000,
        ge=1,
        description="Maximum monthly cost on an expense slider"
    )

    def bounds_for(self, field: str, kind: Optional[str] = None) -> SliderBounds:
        """
        Get the input range for a field.

        Args:
            field: One of rate, weekly_hours, weeks_off, cost.
            kind: Job kind value, required when field is "rate".
        """
        if field == "rate":
            if kind == "salary":
                return SliderBounds(maximum=self.salary_rate_max, step=self.salary_rate_step)
            if kind == "hourly":
                return SliderBounds(maximum=self.hourly_rate_max)
            if kind == "passive":
                return SliderBounds(maximum=self.passive_rate_max)
            raise ValueError(f"Unknown job kind for rate bounds: {kind!r}")
        if field == "weekly_hours":
            return SliderBounds(maximum=self.weekly_hours_max)
        if field == "weeks_off":
            return SliderBounds(maximum=self.weeks_off_max)
        if field == "cost":
            return SliderBounds(maximum=self.expense_cost_max)
        raise ValueError(f"No bounds configured for field: {field!r}")


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def app(self) -> AppSettings:
        return AppSettings()

    @property
    def calculator(self) -> CalculatorSettings:
        return CalculatorSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, object]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus
    {setting_name}_error entries for the failures.
    """
    results: dict[str, object] = {}

    settings = get_settings()

    for name in ("app", "calculator"):
        try:
            _ = getattr(settings, name)
            results[name] = True
        except Exception as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
