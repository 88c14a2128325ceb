"""Custom exceptions for the localization system.

Only administrative operations (merging a translation file, exporting a
table, switching the active language) raise these. Resolving a message key
never does.
"""


class LocalizationError(Exception):
    """Base exception for all localization errors.

    Example:
        try:
            translator.load_translations_from_file("ru", path)
        except LocalizationError as e:
            logger.error("localization_error", error=str(e))
    """

    pass


class TranslationReadError(LocalizationError):
    """Raised when a translation file cannot be read.

    Example:
        >>> translator.load_translations_from_file("ru", "missing.json")
        Traceback (most recent call last):
        ...
        TranslationReadError: Cannot read translations for ru from missing.json
    """

    pass


class TranslationParseError(LocalizationError):
    """Raised when translation content is not a flat JSON object of strings."""

    pass


class UnsupportedLanguageError(LocalizationError):
    """Raised when switching to a language that has no translation table.

    Example:
        >>> translator.set_language("xx")
        Traceback (most recent call last):
        ...
        UnsupportedLanguageError: Unsupported language: xx
    """

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Unsupported language: {language}")


class LanguageNotFoundError(LocalizationError):
    """Raised when exporting a language that has no translation table."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Language not found: {language}")


class TranslationWriteError(LocalizationError):
    """Raised when a translation table cannot be written to disk."""

    pass
