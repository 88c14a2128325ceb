"""Feature-level fixtures for i18n system tests.

Provides translation directories, sources and translators isolated from the
host environment and from the shared translator.
"""

import pytest

from infrastructure.i18n import (
    DirectoryTranslationSource,
    Translator,
    service,
)
from infrastructure.i18n.models import LOCALE_ENV_VARS
from tests.factories.i18n import write_translation_file


@pytest.fixture(autouse=True)
def clean_locale_env(monkeypatch):
    """Remove POSIX locale variables so detection is deterministic."""
    for name in LOCALE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_global_translator():
    """Drop the shared translator before and after each test."""
    service.set_translator(None)
    yield
    service.set_translator(None)


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample translation files.

    Returns a directory structure like:
    - translations_en.json
    - translations_ru.json
    - notes.txt
    - archive/translations_de.json
    """
    write_translation_file(tmp_path, "en")
    write_translation_file(tmp_path, "ru")
    (tmp_path / "notes.txt").write_text("not a translation", encoding="utf-8")
    archive = tmp_path / "archive"
    archive.mkdir()
    write_translation_file(archive, "de")
    return tmp_path


@pytest.fixture
def directory_source(temp_translations_dir):
    """Create DirectoryTranslationSource for the temporary directory."""
    return DirectoryTranslationSource(temp_translations_dir)


@pytest.fixture
def translator(directory_source):
    """Create Translator over the temporary directory, starting in English."""
    return Translator(directory_source, environ={}, platform="linux")


@pytest.fixture
def builtin_translator(tmp_path):
    """Create Translator over a missing directory (built-in English only)."""
    return Translator(
        DirectoryTranslationSource(tmp_path / "missing"),
        environ={},
        platform="linux",
    )


@pytest.fixture
def merge_dir(temp_translations_dir):
    """Directory for files merged or exported after construction.

    Lives inside the translations directory as a subdirectory, so the
    source never picks its files up.
    """
    path = temp_translations_dir / "merge"
    path.mkdir()
    return path
