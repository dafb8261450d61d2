"""Custom exceptions for the i18n system.

Per-language load failures are collected during initialization and never
abort the loading of sibling languages.
"""

from pathlib import Path
from typing import Optional


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            locale = service.get_locale_for_language("de")
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class LanguageLoadError(I18nError):
    """Raised when the catalog of a single language cannot be loaded.

    Attributes:
        code: Language code whose load failed.
    """

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


class MissingPluralRuleError(LanguageLoadError):
    """Raised when a registry entry lacks a name or a plural rule."""

    def __init__(self, code: str):
        super().__init__(code, f"No plural information for {code}")


class MissingCatalogFileError(LanguageLoadError):
    """Raised when the PO file of a language does not exist.

    Attributes:
        path: Location that was checked.
    """

    def __init__(self, code: str, path: Path):
        super().__init__(code, f"Could not locate language file {path}")
        self.path = path


class CatalogParseError(LanguageLoadError):
    """Raised when a PO file cannot be parsed into a runtime catalog.

    The underlying parser error is chained as ``__cause__``.
    """

    def __init__(self, code: str, reason: Optional[object] = None):
        super().__init__(code, f"Error parsing po file for {code}: {reason}")


class DefaultLocaleNotLoadedError(I18nError):
    """Raised when falling back to a default locale that never loaded.

    Attributes:
        requested: Language code originally requested.
        default: Default language code that is unavailable.
    """

    def __init__(self, requested: Optional[str], default: Optional[str]):
        super().__init__(
            f"Default locale {default!r} is not loaded; cannot serve language {requested!r}"
        )
        self.requested = requested
        self.default = default
