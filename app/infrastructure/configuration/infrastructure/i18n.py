"""Translation and inflection infrastructure settings."""

from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Translation catalog and inflection configuration.

    Environment Variables:
        I18N_TRANSLATIONS_DIR: Directory with <domain>.<locale>.yml files
            (default: app/locales)
        I18N_DEFAULT_LOCALE: Locale used when a call names none (default: en-US)
        I18N_FALLBACK_LOCALE: Locale used when a key is missing (default: en-US)
        I18N_INFLECTIONS_KEY: Dotted catalog path holding inflection kinds
            (default: i18n.inflections)
        I18N_USE_CACHE: Cache parsed YAML catalogs (default: True)
        I18N_PRELOAD: Load every locale when the translator is created
            (default: True)

    Example:
        ```python
        from infrastructure.configuration import settings

        default_locale = settings.i18n.DEFAULT_LOCALE
        inflections_key = settings.i18n.INFLECTIONS_KEY
        ```
    """

    TRANSLATIONS_DIR: Optional[str] = Field(
        default=None, alias="I18N_TRANSLATIONS_DIR"
    )
    DEFAULT_LOCALE: str = Field(default="en-US", alias="I18N_DEFAULT_LOCALE")
    FALLBACK_LOCALE: str = Field(default="en-US", alias="I18N_FALLBACK_LOCALE")
    INFLECTIONS_KEY: str = Field(
        default="i18n.inflections", alias="I18N_INFLECTIONS_KEY"
    )
    USE_CACHE: bool = Field(default=True, alias="I18N_USE_CACHE")
    PRELOAD: bool = Field(default=True, alias="I18N_PRELOAD")

    @field_validator("INFLECTIONS_KEY")
    @classmethod
    def validate_inflections_key(cls, v: str) -> str:
        """Reject empty or malformed dotted paths.

        Args:
            cls: The class itself.
            v: The value of the INFLECTIONS_KEY field.

        Returns:
            The stripped dotted path.
        """
        v = v.strip()
        if not v or any(not part for part in v.split(".")):
            raise ValueError(f"Invalid I18N_INFLECTIONS_KEY: {v!r}")
        return v
