"""Infrastructure modules for the repository server.

Centralized infrastructure components:
- configuration: Settings management (settings, Settings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Localization of server messages (Translator, t)
"""

# Configuration
from infrastructure.configuration import settings

__all__ = [
    "settings",
]
