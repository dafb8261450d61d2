"""Locale context: language registry, catalog loading and locale resolution.

An I18nService holds everything one set of translations needs (settings,
registry, loaded locales, log callbacks) so several independent contexts can
coexist in one process.
"""

import asyncio
import inspect
from pathlib import Path
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Union

from infrastructure.i18n.exceptions import (
    DefaultLocaleNotLoadedError,
    I18nError,
    LanguageLoadError,
)
from infrastructure.i18n.loader import CatalogLoader, POCatalogLoader
from infrastructure.i18n.models import DEFAULT_DOMAIN, LanguageConfig
from infrastructure.i18n.translator import LoadedLocale, LogFn
from infrastructure.logging import get_module_logger

logger = get_module_logger()

InitializationCallback = Callable[[Optional[I18nError]], Union[None, Awaitable[None]]]


class I18nService:
    """Loads gettext catalogs per language and resolves locales.

    Attributes:
        default_locale: Default language code, or None until the first
            language finishes loading when no default was configured.
        languages: Read-only registry of configured languages.
        path_to_translations: Root of the catalog tree.
        loader: CatalogLoader used to parse catalogs.
        loaded_languages: Read-only view of successfully loaded locales.

    Usage:
        service = I18nService(
            languages={"de": {"name": "Deutsch", "plurals": "nplurals=2; plural=(n != 1);"}},
            path_to_translations=Path("i18n"),
        )
        error = await service.initialize()
        locale = service.get_locale_for_language("de")
        locale.translate("Hello")
    """

    def __init__(
        self,
        default_locale: Optional[str] = "en",
        languages: Optional[Mapping[str, Any]] = None,
        path_to_translations: Optional[Path] = None,
        domain: str = DEFAULT_DOMAIN,
        loader: Optional[CatalogLoader] = None,
        log_debug: Optional[LogFn] = None,
        log_info: Optional[LogFn] = None,
        log_warn: Optional[LogFn] = None,
        log_error: Optional[LogFn] = None,
    ):
        """Configure the service.

        Args:
            default_locale: Fallback language code. None or "" makes the first
                loaded language the default.
            languages: Registry mapping codes to ``{name, plurals}`` entries.
            path_to_translations: Root of the catalog tree (default: <cwd>/i18n).
            domain: gettext domain injected into every catalog.
            loader: Custom CatalogLoader; a POCatalogLoader by default.
            log_debug: Debug log callback (default: module logger).
            log_info: Info log callback (default: module logger).
            log_warn: Warning log callback (default: module logger).
            log_error: Error log callback (default: module logger).
        """
        self.default_locale: Optional[str] = default_locale or None
        self._default_configured = self.default_locale is not None

        registry = {
            code: LanguageConfig.from_value(code, value)
            for code, value in (languages or {}).items()
        }
        self.languages: Mapping[str, LanguageConfig] = MappingProxyType(registry)

        self.path_to_translations = (
            Path(path_to_translations)
            if path_to_translations is not None
            else Path.cwd() / "i18n"
        )

        self.log_debug = log_debug or logger.debug
        self.log_info = log_info or logger.info
        self.log_warn = log_warn or logger.warning
        self.log_error = log_error or logger.error

        self.loader = loader or POCatalogLoader(self.path_to_translations, domain=domain)

        self._loaded: Dict[str, LoadedLocale] = {}
        self.loaded_languages: Mapping[str, LoadedLocale] = MappingProxyType(self._loaded)

        if not self.languages:
            self.log_warn("no_languages_defined")

    @property
    def language_codes(self) -> List[str]:
        """Codes of every configured language, in registry order."""
        return list(self.languages)

    async def initialize(
        self, callback: Optional[InitializationCallback] = None
    ) -> Optional[I18nError]:
        """Load the catalog of every configured language concurrently.

        A failing language never aborts the others; it is simply absent from
        ``loaded_languages``. Calling this again reloads every language.

        Args:
            callback: Called with the first error, or None, once every
                language has been attempted. May be a coroutine function.

        Returns:
            The first error encountered, in completion order, or None.
        """
        if not self._default_configured:
            self.default_locale = None

        errors: List[I18nError] = []

        async def _load(language: LanguageConfig) -> None:
            try:
                await self.load_language(language)
            except LanguageLoadError as e:
                errors.append(e)

        await asyncio.gather(*(_load(language) for language in self.languages.values()))

        error = errors[0] if errors else None
        if error is not None:
            self.log_error(
                "i18n_loading_failed",
                error=str(error),
                failed_codes=[e.code for e in errors if isinstance(e, LanguageLoadError)],
            )
        else:
            self.log_info("i18n_loading_finished", loaded_codes=sorted(self._loaded))

        if self.default_locale is not None and self.default_locale not in self._loaded:
            self.log_error(
                "default_locale_not_loaded",
                default_locale=self.default_locale,
                loaded_codes=sorted(self._loaded),
            )

        if callback is not None:
            result = callback(error)
            if inspect.isawaitable(result):
                await result

        return error

    async def load_language(self, language: LanguageConfig) -> LoadedLocale:
        """Load one language and register its locale.

        Args:
            language: Registry entry to load.

        Returns:
            The registered LoadedLocale.

        Raises:
            LanguageLoadError: If the entry is incomplete or its catalog
                cannot be found or parsed.
        """
        translations = await self.loader.load(language)

        locale = LoadedLocale(language.code, translations, log_error=self.log_error)
        self._loaded[language.code] = locale

        # First one loaded becomes the default unless one was configured
        if self.default_locale is None:
            self.default_locale = language.code

        self.log_info("language_loaded", code=language.code)
        return locale

    def get_locale_for_language(self, code: Optional[str]) -> LoadedLocale:
        """Return the locale for a language code, falling back to the default.

        Args:
            code: Requested language code (may be None).

        Returns:
            The matching LoadedLocale, or the default one.

        Raises:
            DefaultLocaleNotLoadedError: If falling back and the default
                language is not loaded.
        """
        if code and code in self._loaded:
            return self._loaded[code]

        self.log_debug(
            "using_default_locale",
            default_locale=self.default_locale,
            requested_locale=code,
        )

        default = self._loaded.get(self.default_locale) if self.default_locale else None
        if default is None:
            raise DefaultLocaleNotLoadedError(code, self.default_locale)
        return default
