"""Internationalization feature settings."""

from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from infrastructure.configuration.base import FeatureSettings


class LanguageSettings(BaseModel):
    """Registry entry for one language as it appears in configuration.

    Both fields are optional here on purpose: an incomplete entry is only
    reported when the catalogs are loaded.
    """

    name: Optional[str] = None
    plurals: Optional[str] = None


class I18nSettings(FeatureSettings):
    """Translation catalog and locale negotiation configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Fallback language code (default: en). An empty
            value means the first language to finish loading becomes the default.
        I18N_LANGUAGES: JSON object ``{code: {name, plurals}}``
        I18N_LANGUAGES_FILE: YAML file with the same shape as I18N_LANGUAGES
        I18N_TRANSLATIONS_PATH: Root of the catalog tree (default: <cwd>/i18n)
        I18N_DOMAIN: gettext domain injected in every catalog (default: mobile_web)
        I18N_QUERY_PARAM: Query parameter carrying an explicit locale
        I18N_COOKIE_NAME: Cookie carrying an explicit locale
        I18N_LEGACY_HELPER_ARGS: Strip template bookkeeping arguments from
            helper calls before formatting (default: False)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        path = settings.i18n.translations_path / "de" / "LC_MESSAGES" / "messages.po"
        ```
    """

    default_locale: Optional[str] = Field(default="en", alias="I18N_DEFAULT_LOCALE")
    languages: Dict[str, LanguageSettings] = Field(
        default_factory=dict, alias="I18N_LANGUAGES"
    )
    languages_file: Optional[Path] = Field(default=None, alias="I18N_LANGUAGES_FILE")
    translations_path: Path = Field(
        default_factory=lambda: Path.cwd() / "i18n",
        alias="I18N_TRANSLATIONS_PATH",
    )
    domain: str = Field(default="mobile_web", alias="I18N_DOMAIN")
    query_param: str = Field(default="locale", alias="I18N_QUERY_PARAM")
    cookie_name: str = Field(default="locale", alias="I18N_COOKIE_NAME")
    legacy_helper_args: bool = Field(default=False, alias="I18N_LEGACY_HELPER_ARGS")

    @field_validator("default_locale", mode="before")
    @classmethod
    def validate_default_locale(cls, v: Any) -> Optional[str]:
        """Treat an empty default as "first loaded wins"."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v
