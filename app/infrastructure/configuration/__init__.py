"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    Settings: Main settings class
    I18nSettings: Translation catalog and negotiation settings
    LanguageSettings: One registry entry of I18nSettings.languages

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()
    codes = list(settings.i18n.languages)
    ```
"""

from infrastructure.configuration.i18n import I18nSettings, LanguageSettings
from infrastructure.configuration.settings import Settings

__all__ = ["Settings", "I18nSettings", "LanguageSettings"]
