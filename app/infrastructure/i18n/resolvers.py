"""Language catalog discovery and system language detection.

Decides which languages the server supports and which one it starts in,
from the translation source and the POSIX locale environment.
"""

import os
import sys
from typing import List, Mapping, Optional

from infrastructure.i18n.models import DEFAULT_LANGUAGE, LOCALE_ENV_VARS
from infrastructure.i18n.sources import TranslationSource
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# Platform where the default language wins over the first discovered one.
DEFAULT_PREFERRING_PLATFORM = "win32"


def discover_languages(source: TranslationSource) -> List[str]:
    """Discover the supported languages offered by a source.

    Args:
        source: TranslationSource to scan.

    Returns:
        Language codes in first-seen order, or [DEFAULT_LANGUAGE] when the
        source offers none.
    """
    languages = source.list_languages()
    if not languages:
        logger.info("no_translations_discovered", fallback_language=DEFAULT_LANGUAGE)
        return [DEFAULT_LANGUAGE]
    return languages


def _candidate_from_env(value: str) -> str:
    # "ru_RU.UTF-8" -> "ru"
    return value.split("_", 1)[0].lower()


def detect_system_language(
    supported: List[str],
    environ: Optional[Mapping[str, str]] = None,
    platform: Optional[str] = None,
) -> str:
    """Pick the starting language from the environment.

    Resolution order:
    1. LANG, LC_ALL, LC_MESSAGES, LANGUAGE: the first variable whose language
       part is a prefix of a supported code selects that code
    2. The default language on Windows, when supported
    3. The first supported language
    4. The default language, when nothing is supported

    Args:
        supported: Supported language codes in discovery order.
        environ: Environment mapping (default: os.environ).
        platform: Platform identifier (default: sys.platform).

    Returns:
        Detected language code.
    """
    environ = os.environ if environ is None else environ
    platform = sys.platform if platform is None else platform

    for name in LOCALE_ENV_VARS:
        value = environ.get(name, "")
        if not value:
            continue
        candidate = _candidate_from_env(value)
        for language in supported:
            if language.startswith(candidate):
                logger.info(
                    "language_detected_from_environment",
                    variable=name,
                    value=value,
                    language=language,
                )
                return language

    if platform == DEFAULT_PREFERRING_PLATFORM and DEFAULT_LANGUAGE in supported:
        return DEFAULT_LANGUAGE

    if supported:
        return supported[0]

    return DEFAULT_LANGUAGE
