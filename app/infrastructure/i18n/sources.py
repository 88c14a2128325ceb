"""Translation source interface and implementations.

Defines where translation files come from: a directory on disk, or the
translation set bundled inside this package. Both expose the same two
capabilities, listing available language codes and reading the raw bytes of
one language's file.
"""

import json
from abc import ABC, abstractmethod
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Iterator, List, Tuple, Union

from infrastructure.i18n.exceptions import TranslationParseError
from infrastructure.i18n.models import (
    TRANSLATIONS_DIR_NAME,
    TranslationTable,
    language_from_filename,
    translation_filename,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

BUNDLE_PACKAGE = "infrastructure.i18n"


def parse_translations(data: bytes, origin: str = "<memory>") -> TranslationTable:
    """Parse translation file content into a flat key -> template mapping.

    Args:
        data: Raw file content (UTF-8 JSON).
        origin: Where the data came from, used in error messages.

    Returns:
        Mapping of message key to template string.

    Raises:
        TranslationParseError: If the content is not a JSON object whose
            values are all strings.
    """
    try:
        parsed = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
        raise TranslationParseError(f"Failed to parse {origin}: {e}") from e

    if not isinstance(parsed, dict):
        raise TranslationParseError(
            f"Failed to parse {origin}: expected a JSON object, got {type(parsed).__name__}"
        )

    for key, value in parsed.items():
        if not isinstance(value, str):
            raise TranslationParseError(
                f"Failed to parse {origin}: value for {key!r} is not a string"
            )

    return parsed


def _unique(codes: Iterator[str]) -> List[str]:
    seen = set()
    result = []
    for code in codes:
        if code not in seen:
            seen.add(code)
            result.append(code)
    return result


class TranslationSource(ABC):
    """Abstract base for translation sources.

    Implementations must define how to discover language codes and how to
    read the file for one language.
    """

    bundled: bool = False

    @abstractmethod
    def list_languages(self) -> List[str]:
        """List language codes available from this source.

        Codes are deduplicated and returned in first-seen order. Failures
        while scanning are logged and yield an empty or partial list; they
        are never raised.

        Returns:
            List of language codes.
        """
        pass

    @abstractmethod
    def read(self, language: str) -> bytes:
        """Read the raw translation file for a language.

        Args:
            language: Language code.

        Returns:
            File content.

        Raises:
            OSError: If the file is missing or unreadable.
        """
        pass

    @abstractmethod
    def describe(self, language: str) -> str:
        """Human-readable location of a language's file, for logs and errors."""
        pass

    def load(self, language: str) -> TranslationTable:
        """Read and parse the translation table for a language.

        Raises:
            OSError: If the file is missing or unreadable.
            TranslationParseError: If the content is malformed.
        """
        return parse_translations(self.read(language), self.describe(language))


class DirectoryTranslationSource(TranslationSource):
    """Source backed by translations_<code>.json files in one directory.

    Attributes:
        translations_dir: Directory holding the translation files.
    """

    def __init__(self, translations_dir: Union[str, Path] = TRANSLATIONS_DIR_NAME):
        self.translations_dir = Path(translations_dir)

    def list_languages(self) -> List[str]:
        try:
            entries = sorted(self.translations_dir.iterdir(), key=lambda p: p.name)
        except OSError as e:
            logger.warning(
                "translation_directory_unreadable",
                translations_dir=str(self.translations_dir),
                error=str(e),
            )
            return []

        def codes() -> Iterator[str]:
            for entry in entries:
                if entry.is_dir():
                    continue
                code = language_from_filename(entry.name)
                if code is not None:
                    yield code

        languages = _unique(codes())
        logger.info(
            "translation_directory_scanned",
            translations_dir=str(self.translations_dir),
            languages=languages,
        )
        return languages

    def path_for(self, language: str) -> Path:
        """Return the file path for a language's translations."""
        return self.translations_dir / translation_filename(language)

    def read(self, language: str) -> bytes:
        return self.path_for(language).read_bytes()

    def describe(self, language: str) -> str:
        return str(self.path_for(language))


class BundledTranslationSource(TranslationSource):
    """Source backed by the translation files shipped inside this package.

    Files live under ``<package>/locale/`` and are read through
    ``importlib.resources``, so they resolve the same way from a source
    checkout, a wheel, or a zip import.

    Attributes:
        package: Package that carries the bundled files.
        root: Name of the bundle directory inside the package.
    """

    bundled = True

    def __init__(self, package: str = BUNDLE_PACKAGE, root: str = TRANSLATIONS_DIR_NAME):
        self.package = package
        self.root = root

    def _root(self) -> Traversable:
        return resources.files(self.package).joinpath(self.root)

    def _walk(self, node: Traversable, prefix: str) -> Iterator[Tuple[str, Traversable]]:
        try:
            children = sorted(node.iterdir(), key=lambda child: child.name)
        except OSError as e:
            logger.warning("translation_bundle_walk_failed", path=prefix, error=str(e))
            return
        for child in children:
            path = f"{prefix}/{child.name}"
            try:
                is_dir = child.is_dir()
            except OSError as e:
                logger.warning("translation_bundle_entry_skipped", path=path, error=str(e))
                continue
            if is_dir:
                yield from self._walk(child, path)
            else:
                yield path, child

    def list_languages(self) -> List[str]:
        try:
            root = self._root()
            is_dir = root.is_dir()
        except (ModuleNotFoundError, OSError) as e:
            logger.warning("translation_bundle_unavailable", package=self.package, error=str(e))
            return []

        if not is_dir:
            logger.debug("translation_bundle_empty", package=self.package, root=self.root)
            return []

        def codes() -> Iterator[str]:
            for path, _ in self._walk(root, self.root):
                directory, _, filename = path.rpartition("/")
                if directory != self.root:
                    continue
                code = language_from_filename(filename)
                if code is not None:
                    yield code

        return _unique(codes())

    def read(self, language: str) -> bytes:
        return self._root().joinpath(translation_filename(language)).read_bytes()

    def describe(self, language: str) -> str:
        return f"{self.package}:{self.root}/{translation_filename(language)}"


def bundled_languages() -> List[str]:
    """List language codes shipped in the bundled translation set.

    Returns:
        Language codes, empty when the package carries no translations.
    """
    return BundledTranslationSource().list_languages()
