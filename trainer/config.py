"""
Trainer application settings.

Extends the base settings with check-in intake and plan configuration.
"""

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Trainer-specific settings."""

    # ==========================================================================
    # Check-in Field Bounds
    # ==========================================================================
    # Some clients collect sleep quality on a 1-5 scale instead of 1-10
    SLEEP_QUALITY_MAX: int = 10

    # ==========================================================================
    # Intake Settings
    # ==========================================================================
    # Recent conversation turns sent to the model each turn
    INTAKE_HISTORY_LIMIT: int = 8
    INTAKE_TEMPERATURE: float = 0.8
    INTAKE_MAX_TOKENS: int = 600

    # ==========================================================================
    # Plan Settings
    # ==========================================================================
    PLAN_TEMPERATURE: float = 0.2
    PLAN_MAX_TOKENS: int = 1200


# Global settings instance
settings = Settings()
