"""Factory functions for creating i18n components.

Provides convenience functions for building translators from explicit
arguments or from the application settings.
"""

from pathlib import Path
from typing import Mapping, Optional, Union

import structlog
from infrastructure.configuration import LocalizationSettings, settings
from infrastructure.i18n.sources import (
    BundledTranslationSource,
    DirectoryTranslationSource,
    TranslationSource,
    bundled_languages,
)
from infrastructure.i18n.translator import Translator

logger = structlog.get_logger()


def create_translator(
    translations_dir: Union[str, Path, None] = None,
    source: Optional[TranslationSource] = None,
    environ: Optional[Mapping[str, str]] = None,
    platform: Optional[str] = None,
) -> Translator:
    """Create a Translator for an explicit directory or source.

    Args:
        translations_dir: Directory with translations_<code>.json files
            (default: the configured LOCALIZATION_DIR). Ignored when source
            is given.
        source: Pre-built TranslationSource to use instead of a directory.
        environ: Environment used for language detection (default: os.environ).
        platform: Platform identifier used for detection (default: sys.platform).

    Returns:
        Translator: Configured translator instance

    Usage:
        # Configured directory
        translator = create_translator()

        # Custom directory
        translator = create_translator(translations_dir="/srv/repo/locale")
    """
    if source is None:
        if translations_dir is None:
            translations_dir = settings.localization.TRANSLATIONS_DIR
        source = DirectoryTranslationSource(translations_dir)

    return Translator(source, environ=environ, platform=platform)


def select_source(
    localization_settings: Optional[LocalizationSettings] = None,
) -> TranslationSource:
    """Choose the translation source from settings.

    In "auto" mode the bundled set is used when the package ships any
    translations, otherwise the configured directory.

    Args:
        localization_settings: Settings to use (default: application settings).

    Returns:
        TranslationSource for the configured mode.
    """
    config = localization_settings or settings.localization
    mode = config.SOURCE

    if mode == "bundle" or (mode == "auto" and bundled_languages()):
        source: TranslationSource = BundledTranslationSource()
    else:
        source = DirectoryTranslationSource(config.TRANSLATIONS_DIR)

    logger.info(
        "translation_source_selected",
        mode=mode,
        source=type(source).__name__,
        translations_dir=config.TRANSLATIONS_DIR,
    )
    return source


def create_default_translator(
    localization_settings: Optional[LocalizationSettings] = None,
) -> Translator:
    """Create the Translator the server uses when none is wired explicitly.

    Args:
        localization_settings: Settings to use (default: application settings).

    Returns:
        Translator: Translator over the selected source
    """
    return create_translator(source=select_source(localization_settings))
