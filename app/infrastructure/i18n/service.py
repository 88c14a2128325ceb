"""Process-wide translation accessor.

Most of the server only needs "key in, message out". These helpers share
one lazily created Translator so callers do not have to wire it through.

Usage:
    from infrastructure.i18n import t

    logger.info(t("server_started", 8080))

    # In tests
    from infrastructure.i18n import set_translator

    set_translator(create_translator(translations_dir=tmp_path))
"""

import threading
from typing import Any, Optional

import structlog
from infrastructure.i18n.factory import create_default_translator
from infrastructure.i18n.translator import Translator

logger = structlog.get_logger()

_global_translator: Optional[Translator] = None
_global_translator_lock = threading.Lock()


def get_translator() -> Translator:
    """Get the shared Translator, creating it on first call.

    Thread-safe singleton pattern: concurrent first callers build exactly one
    instance and never see a partially initialized one.

    Returns:
        Global Translator instance.
    """
    global _global_translator

    if _global_translator is None:
        with _global_translator_lock:
            # Double-check locking pattern
            if _global_translator is None:
                _global_translator = create_default_translator()
                logger.debug("global_translator_initialized")

    return _global_translator


def set_translator(translator: Optional[Translator]) -> None:
    """Replace the shared Translator.

    Args:
        translator: Translator to share, or None to rebuild lazily on next use.
    """
    global _global_translator

    with _global_translator_lock:
        _global_translator = translator


def t(key: str, *args: Any) -> str:
    """Translate a message key with the shared Translator."""
    return get_translator().translate(key, *args)


def set_language(language: str) -> None:
    """Switch the shared Translator's active language.

    Raises:
        UnsupportedLanguageError: If the language has no translation table.
    """
    get_translator().set_language(language)


def get_language() -> str:
    """Return the shared Translator's active language."""
    return get_translator().get_language()
