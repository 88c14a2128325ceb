"""i18n system - localization of repository server messages.

Resolves message keys into strings in the server's active language, loading
translations from a directory of JSON files or from the set bundled with the
package.

Main components:
- models: naming conventions (DEFAULT_LANGUAGE, translation file pattern)
- sources: TranslationSource, DirectoryTranslationSource, BundledTranslationSource
- resolvers: language discovery and system language detection
- translator: Translator with lookup, merge and export
- factory: create_translator, create_default_translator
- service: shared Translator and the t() shortcut
"""

from infrastructure.i18n.exceptions import (
    LanguageNotFoundError,
    LocalizationError,
    TranslationParseError,
    TranslationReadError,
    TranslationWriteError,
    UnsupportedLanguageError,
)
from infrastructure.i18n.factory import (
    create_default_translator,
    create_translator,
    select_source,
)
from infrastructure.i18n.models import DEFAULT_LANGUAGE
from infrastructure.i18n.resolvers import detect_system_language, discover_languages
from infrastructure.i18n.service import (
    get_language,
    get_translator,
    set_language,
    set_translator,
    t,
)
from infrastructure.i18n.sources import (
    BundledTranslationSource,
    DirectoryTranslationSource,
    TranslationSource,
    bundled_languages,
)
from infrastructure.i18n.translator import Translator

__all__ = [
    "DEFAULT_LANGUAGE",
    "TranslationSource",
    "DirectoryTranslationSource",
    "BundledTranslationSource",
    "bundled_languages",
    "discover_languages",
    "detect_system_language",
    "Translator",
    "create_translator",
    "create_default_translator",
    "select_source",
    "get_translator",
    "set_translator",
    "t",
    "set_language",
    "get_language",
    "LocalizationError",
    "TranslationReadError",
    "TranslationParseError",
    "UnsupportedLanguageError",
    "LanguageNotFoundError",
    "TranslationWriteError",
]
