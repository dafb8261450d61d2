"""i18n system - gettext catalogs and per-request locale resolution.

Loads a PO catalog per configured language, wraps each in translation
helpers and injects them into requests.

Main components:
- models: LanguageConfig, CatalogMetadata
- loader: CatalogLoader and POCatalogLoader
- translator: LoadedLocale with singular and plural translation
- service: I18nService (registry, initialization, locale resolution)
- resolvers: LocaleResolver and LanguageNegotiator for request negotiation
- middleware: I18nMiddleware
- renderer: LocaleRenderer for templates
"""

from infrastructure.i18n.exceptions import (
    CatalogParseError,
    DefaultLocaleNotLoadedError,
    I18nError,
    LanguageLoadError,
    MissingCatalogFileError,
    MissingPluralRuleError,
)
from infrastructure.i18n.factory import create_i18n_service
from infrastructure.i18n.loader import CatalogLoader, POCatalogLoader
from infrastructure.i18n.middleware import I18nMiddleware
from infrastructure.i18n.models import CatalogMetadata, LanguageConfig
from infrastructure.i18n.renderer import LocaleRenderer
from infrastructure.i18n.resolvers import LanguageNegotiator, LocaleResolver
from infrastructure.i18n.service import I18nService
from infrastructure.i18n.translator import LoadedLocale

__all__ = [
    "LanguageConfig",
    "CatalogMetadata",
    "CatalogLoader",
    "POCatalogLoader",
    "LoadedLocale",
    "I18nService",
    "LocaleResolver",
    "LanguageNegotiator",
    "I18nMiddleware",
    "LocaleRenderer",
    "create_i18n_service",
    "I18nError",
    "LanguageLoadError",
    "MissingPluralRuleError",
    "MissingCatalogFileError",
    "CatalogParseError",
    "DefaultLocaleNotLoadedError",
]
