"""Localization infrastructure settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings

SOURCE_MODES = ("auto", "bundle", "directory")


class LocalizationSettings(InfrastructureSettings):
    """Translation source configuration.

    Environment Variables:
        LOCALIZATION_DIR: Directory holding translations_<code>.json files
            (default: locale)
        LOCALIZATION_SOURCE: Where translations come from. One of "auto",
            "bundle" or "directory" (default: auto). "auto" uses the bundled
            translations when the installed package ships any, and the
            directory otherwise.

    Example:
        ```python
        from infrastructure.configuration import settings

        translations_dir = settings.localization.TRANSLATIONS_DIR
        source_mode = settings.localization.SOURCE
        ```
    """

    TRANSLATIONS_DIR: str = Field(default="locale", alias="LOCALIZATION_DIR")
    SOURCE: str = Field(default="auto", alias="LOCALIZATION_SOURCE")

    @field_validator("SOURCE", mode="before")
    @classmethod
    def validate_source(cls, v: object) -> str:
        """Normalize and validate the LOCALIZATION_SOURCE field."""
        if v is None or v == "":
            return "auto"
        mode = str(v).strip().lower()
        if mode not in SOURCE_MODES:
            raise ValueError(
                f"LOCALIZATION_SOURCE must be one of {', '.join(SOURCE_MODES)}: {v}"
            )
        return mode
