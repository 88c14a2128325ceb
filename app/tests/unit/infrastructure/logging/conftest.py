"""Fixtures for infrastructure.logging tests."""

import pytest
from unittest.mock import Mock

from infrastructure.configuration import LocalizationSettings, Settings


@pytest.fixture
def mock_settings():
    """Mock Settings instance for a development deployment."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.PREFIX = "dev-"
    settings.is_production = False
    settings.localization = LocalizationSettings()
    return settings
