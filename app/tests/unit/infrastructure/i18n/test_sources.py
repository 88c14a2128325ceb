"""Tests for infrastructure.i18n.sources module."""

from unittest.mock import MagicMock, patch

import pytest

from infrastructure.i18n import (
    BundledTranslationSource,
    DirectoryTranslationSource,
    TranslationParseError,
    bundled_languages,
)
from infrastructure.i18n.sources import parse_translations
from tests.factories.i18n import make_translation_table, write_translation_file


@pytest.mark.unit
class TestParseTranslations:
    """Tests for parse_translations."""

    def test_parses_flat_object(self):
        """parse_translations() returns the key -> template mapping."""
        data = '{"greeting": "Привет", "server_started": "Port %d"}'.encode("utf-8")
        assert parse_translations(data) == {
            "greeting": "Привет",
            "server_started": "Port %d",
        }

    def test_empty_object(self):
        """parse_translations() accepts an empty object."""
        assert parse_translations(b"{}") == {}

    def test_invalid_json_raises_error(self):
        """parse_translations() raises TranslationParseError for bad JSON."""
        with pytest.raises(TranslationParseError):
            parse_translations(b'{"greeting": ')

    def test_non_object_raises_error(self):
        """parse_translations() rejects JSON that is not an object."""
        with pytest.raises(TranslationParseError):
            parse_translations(b'["greeting", "Hello"]')

    def test_non_string_value_raises_error(self):
        """parse_translations() rejects nested or numeric values."""
        with pytest.raises(TranslationParseError):
            parse_translations(b'{"greeting": {"nested": "Hello"}}')
        with pytest.raises(TranslationParseError):
            parse_translations(b'{"count": 3}')

    def test_invalid_utf8_raises_error(self):
        """parse_translations() rejects content that is not UTF-8."""
        with pytest.raises(TranslationParseError):
            parse_translations(b'{"greeting": "\xff\xfe"}')

    def test_deeply_nested_json_raises_error(self):
        """Nesting deep enough to exhaust recursion is a parse error."""
        with pytest.raises(TranslationParseError):
            parse_translations(b"[" * 100000)

    def test_error_mentions_origin(self):
        """Parse errors name where the content came from."""
        with pytest.raises(TranslationParseError, match="translations_ru.json"):
            parse_translations(b"nope", "locale/translations_ru.json")


@pytest.mark.unit
class TestDirectoryTranslationSource:
    """Tests for DirectoryTranslationSource."""

    def test_default_directory(self):
        """DirectoryTranslationSource defaults to ./locale."""
        source = DirectoryTranslationSource()
        assert str(source.translations_dir) == "locale"
        assert source.bundled is False

    def test_list_languages(self, directory_source):
        """list_languages() finds matching files only, ignoring subdirectories."""
        assert directory_source.list_languages() == ["en", "ru"]

    def test_list_languages_single_file(self, tmp_path):
        """A directory with one translation file yields exactly that language."""
        write_translation_file(tmp_path, "ru")
        assert DirectoryTranslationSource(tmp_path).list_languages() == ["ru"]

    def test_list_languages_region_codes(self, tmp_path):
        """Region-qualified files are discovered."""
        write_translation_file(tmp_path, "en-US")
        write_translation_file(tmp_path, "pt-BR")
        assert DirectoryTranslationSource(tmp_path).list_languages() == [
            "en-US",
            "pt-BR",
        ]

    def test_list_languages_ignores_directory_named_like_file(self, tmp_path):
        """A subdirectory whose name matches the pattern is not a language."""
        (tmp_path / "translations_fr.json").mkdir()
        assert DirectoryTranslationSource(tmp_path).list_languages() == []

    def test_list_languages_missing_directory(self, tmp_path):
        """list_languages() returns an empty list for a missing directory."""
        source = DirectoryTranslationSource(tmp_path / "missing")
        assert source.list_languages() == []

    def test_list_languages_path_is_file(self, tmp_path):
        """list_languages() returns an empty list when the path is a file."""
        path = tmp_path / "locale"
        path.write_text("", encoding="utf-8")
        assert DirectoryTranslationSource(path).list_languages() == []

    def test_read_and_load(self, directory_source):
        """load() reads and parses a language's file."""
        assert directory_source.load("ru") == make_translation_table("ru")
        assert directory_source.read("en").startswith(b"{")

    def test_read_missing_language_raises_oserror(self, directory_source):
        """read() raises FileNotFoundError for a language without a file."""
        with pytest.raises(FileNotFoundError):
            directory_source.read("fr")

    def test_describe(self, tmp_path):
        """describe() returns the file path."""
        source = DirectoryTranslationSource(tmp_path)
        assert source.describe("ru") == str(tmp_path / "translations_ru.json")


@pytest.mark.unit
class TestBundledTranslationSource:
    """Tests for BundledTranslationSource."""

    def test_bundled_flag(self):
        """BundledTranslationSource reports itself as bundled."""
        assert BundledTranslationSource().bundled is True

    def test_list_languages(self):
        """The package ships English, Russian, German and French."""
        assert sorted(BundledTranslationSource().list_languages()) == [
            "de",
            "en",
            "fr",
            "ru",
        ]

    def test_load_english(self):
        """Bundled English contains the core server messages."""
        table = BundledTranslationSource().load("en")
        assert table["server_started"] == "Server started on port %d"
        assert table["package_not_found"] == "Package not found"

    def test_missing_root(self):
        """A bundle root that does not exist yields no languages."""
        source = BundledTranslationSource(root="no_such_bundle")
        assert source.list_languages() == []

    def test_missing_package(self):
        """A package that cannot be imported yields no languages."""
        source = BundledTranslationSource(package="no_such_package_for_bundle")
        assert source.list_languages() == []

    def test_root_check_failure_yields_no_languages(self):
        """An OSError while inspecting the bundle root is logged, not raised."""
        root = MagicMock()
        root.is_dir.side_effect = OSError("unreadable")
        source = BundledTranslationSource()

        with patch.object(source, "_root", return_value=root):
            assert source.list_languages() == []

    def test_read_missing_language_raises_oserror(self):
        """read() raises OSError for a language that is not bundled."""
        with pytest.raises(OSError):
            BundledTranslationSource().read("xx")

    def test_describe(self):
        """describe() names the package and bundle path."""
        assert (
            BundledTranslationSource().describe("ru")
            == "infrastructure.i18n:locale/translations_ru.json"
        )

    def test_bundled_languages(self):
        """bundled_languages() lists the shipped languages."""
        assert set(bundled_languages()) == {"en", "ru", "de", "fr"}
