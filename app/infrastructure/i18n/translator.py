"""Translation service for resolving localized server messages.

Core component for i18n: holds one translation table per language, the
active language, and the read/write lock guarding both.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from infrastructure.i18n.defaults import get_default_translations
from infrastructure.i18n.exceptions import (
    LanguageNotFoundError,
    TranslationParseError,
    TranslationReadError,
    TranslationWriteError,
    UnsupportedLanguageError,
)
from infrastructure.i18n.locks import ReadWriteLock
from infrastructure.i18n.models import DEFAULT_LANGUAGE, TranslationTable
from infrastructure.i18n.resolvers import detect_system_language, discover_languages
from infrastructure.i18n.sources import TranslationSource, parse_translations
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Process-wide message translator.

    Construction scans the source for languages, detects the starting
    language from the environment and loads a table for every discovered
    language, falling back to the built-in minimal set when a file is
    missing or broken. After that the instance is read-mostly and safe to
    share between threads.

    Attributes:
        source: TranslationSource the tables were loaded from.
        translations: Tables by language code.
    """

    def __init__(
        self,
        source: TranslationSource,
        environ: Optional[Mapping[str, str]] = None,
        platform: Optional[str] = None,
    ):
        """Initialize Translator.

        Args:
            source: TranslationSource to discover and load languages from.
            environ: Environment used for language detection (default: os.environ).
            platform: Platform identifier used for detection (default: sys.platform).
        """
        self.source = source
        self.translations: Dict[str, TranslationTable] = {}
        self._lock = ReadWriteLock()

        self._supported_languages = discover_languages(source)
        self._current_language = detect_system_language(
            self._supported_languages, environ=environ, platform=platform
        )
        self._initialize_translations()

        logger.info(
            "initialized_translator",
            source=type(source).__name__,
            languages=self._supported_languages,
            language=self._current_language,
        )

    def _initialize_translations(self) -> None:
        with self._lock.write():
            for language in self._supported_languages:
                self.translations[language] = {}
                try:
                    self.translations[language].update(self.source.load(language))
                except (OSError, TranslationParseError) as e:
                    logger.warning(
                        "using_builtin_translations",
                        language=language,
                        location=self.source.describe(language),
                        error=str(e),
                    )
                    self.translations[language] = get_default_translations(language)

    @property
    def is_bundled(self) -> bool:
        """Whether translations come from the bundled set."""
        return self.source.bundled

    @property
    def supported_languages(self) -> List[str]:
        """Languages discovered at construction, in discovery order."""
        return list(self._supported_languages)

    def set_language(self, language: str) -> None:
        """Switch the active language.

        Args:
            language: Language code to activate.

        Raises:
            UnsupportedLanguageError: If no table exists for the language.
        """
        with self._lock.write():
            if language not in self.translations:
                logger.warning("unsupported_language", language=language)
                raise UnsupportedLanguageError(language)
            previous = self._current_language
            self._current_language = language

        logger.info("language_changed", previous=previous, language=language)

    def get_language(self) -> str:
        """Return the active language code."""
        with self._lock.read():
            return self._current_language

    def translate(self, key: str, *args: Any) -> str:
        """Resolve a message key in the active language.

        With arguments, the template is formatted with the ``%`` operator.
        A placeholder/argument mismatch is logged and the template comes back
        with an inline ``%!(args=...)`` marker appended, so a broken
        translation never raises. Without arguments the template is returned
        as is.

        Args:
            key: Message key (e.g., "server_started").
            *args: Positional values for the template placeholders.

        Returns:
            Translated message, or the key itself when no translation exists.
        """
        with self._lock.read():
            table = self._active_table()
            template = table.get(key)
            language = self._current_language

        if template is None:
            return key
        if not args:
            return template
        try:
            return template % args
        except (TypeError, ValueError) as e:
            logger.warning(
                "translation_format_failed",
                key=key,
                language=language,
                error=str(e),
            )
            return f"{template} %!(args={args!r})"

    def _active_table(self) -> TranslationTable:
        # Caller holds the read lock.
        table = self.translations.get(self._current_language)
        if table is not None:
            return table
        table = self.translations.get(DEFAULT_LANGUAGE)
        if table is not None:
            return table
        if self._supported_languages:
            return self.translations.get(self._supported_languages[0], {})
        return {}

    def has_message(self, key: str, language: Optional[str] = None) -> bool:
        """Check if a translation exists for key.

        Args:
            key: Message key to check.
            language: Language to check (default: active language).

        Returns:
            True if the language's table holds the key, False otherwise.
        """
        with self._lock.read():
            if language is None:
                language = self._current_language
            table = self.translations.get(language, {})
            return key in table

    def list_supported_languages(self) -> List[str]:
        """List languages that currently have a translation table.

        Includes languages added by load_translations_from_file after
        construction, so it can be longer than supported_languages.
        """
        with self._lock.read():
            return list(self.translations.keys())

    def get_table(self, language: str) -> Optional[TranslationTable]:
        """Return a copy of a language's table, or None if it has none."""
        with self._lock.read():
            table = self.translations.get(language)
            return dict(table) if table is not None else None

    def load_translations_from_file(
        self, language: str, file_path: Union[str, Path]
    ) -> None:
        """Merge translations from a JSON file into a language's table.

        Keys from the file overwrite existing keys of the same name; other
        existing keys are kept. The table is created if the language has none.

        Args:
            language: Language code to merge into.
            file_path: Path to a flat JSON object of key -> template.

        Raises:
            TranslationReadError: If the file cannot be read.
            TranslationParseError: If the content is not a flat string mapping.
        """
        file_path = Path(file_path)
        with self._lock.write():
            try:
                data = file_path.read_bytes()
            except OSError as e:
                logger.error(
                    "translation_file_read_failed",
                    language=language,
                    file=str(file_path),
                    error=str(e),
                )
                raise TranslationReadError(
                    f"Cannot read translations for {language} from {file_path}: {e}"
                ) from e

            loaded = parse_translations(data, str(file_path))
            self.translations.setdefault(language, {}).update(loaded)

        logger.info(
            "translations_merged",
            language=language,
            file=str(file_path),
            key_count=len(loaded),
        )

    def save_translations_to_file(
        self, language: str, file_path: Union[str, Path]
    ) -> None:
        """Write a language's table to a JSON file.

        Parent directories are created as needed. Key order in the output is
        not guaranteed.

        Args:
            language: Language code to export.
            file_path: Destination path.

        Raises:
            LanguageNotFoundError: If no table exists for the language.
            TranslationWriteError: If the file cannot be written.
        """
        table = self.get_table(language)
        if table is None:
            raise LanguageNotFoundError(language)

        file_path = Path(file_path)
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, "w", encoding="utf-8") as f:
                json.dump(table, f, ensure_ascii=False, indent=2)
        except OSError as e:
            logger.error(
                "translation_file_write_failed",
                language=language,
                file=str(file_path),
                error=str(e),
            )
            raise TranslationWriteError(
                f"Cannot write translations for {language} to {file_path}: {e}"
            ) from e

        logger.info(
            "translations_saved",
            language=language,
            file=str(file_path),
            key_count=len(table),
        )
