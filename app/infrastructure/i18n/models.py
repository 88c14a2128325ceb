"""Translation models for the localization system.

Language codes are plain strings ("en", "ru", "en-US") and translation tables
are plain ``dict[str, str]`` mappings from message key to a ``%``-style
template. This module holds the naming conventions shared by every source.
"""

import re
from typing import Dict, Optional

DEFAULT_LANGUAGE = "en"

TRANSLATIONS_DIR_NAME = "locale"

# Environment variables inspected for the system language, in priority order.
LOCALE_ENV_VARS = ("LANG", "LC_ALL", "LC_MESSAGES", "LANGUAGE")

TRANSLATION_FILE_PATTERN = re.compile(r"^translations_([a-z]{2}(?:-[A-Z]{2})?)\.json$")

TranslationTable = Dict[str, str]


def translation_filename(language: str) -> str:
    """Return the file name holding translations for a language.

    Args:
        language: Language code (e.g., "ru", "en-US").

    Returns:
        File name (e.g., "translations_ru.json").
    """
    return f"translations_{language}.json"


def language_from_filename(filename: str) -> Optional[str]:
    """Extract the language code from a translation file name.

    Args:
        filename: Bare file name (no directory part).

    Returns:
        Language code, or None if the name does not follow the convention.
    """
    match = TRANSLATION_FILE_PATTERN.match(filename)
    if match is None:
        return None
    return match.group(1)
