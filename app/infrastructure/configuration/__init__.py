"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the repository
server using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    LocalizationSettings: Translation source settings class (for testing)

Example:
    ```python
    from infrastructure.configuration import settings

    log_level = settings.LOG_LEVEL
    source_mode = settings.localization.SOURCE
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.infrastructure.localization import (
    LocalizationSettings,
)

__all__ = ["Settings", "settings", "LocalizationSettings"]
