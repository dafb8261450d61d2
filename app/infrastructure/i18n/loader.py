"""Catalog loading interface and implementations.

Defines the contract for turning a language's catalog file into a gettext
runtime object and provides the PO-file based loader.
"""

from abc import ABC, abstractmethod
from io import BytesIO
from pathlib import Path
from typing import Iterable, Tuple

from babel.core import UnknownLocaleError
from babel.messages.catalog import Catalog
from babel.messages.mofile import write_mo
from babel.messages.pofile import PoFileError, PoFileParser
from babel.support import Translations
from starlette.concurrency import run_in_threadpool

from infrastructure.i18n.exceptions import (
    CatalogParseError,
    MissingCatalogFileError,
    MissingPluralRuleError,
)
from infrastructure.i18n.models import DEFAULT_DOMAIN, CatalogMetadata, LanguageConfig
from infrastructure.logging import get_module_logger

logger = get_module_logger()

CATALOG_SUBDIR = "LC_MESSAGES"
CATALOG_FILENAME = "messages.po"


class CatalogLoader(ABC):
    """Abstract base for catalog loaders.

    Implementations define where a language's catalog lives and how it is
    parsed into a gettext runtime object.
    """

    @abstractmethod
    def catalog_path(self, code: str) -> Path:
        """Return the location of the catalog for a language code."""
        pass

    @abstractmethod
    def parse(self, language: LanguageConfig, path: Path) -> Translations:
        """Parse a catalog file into a runtime catalog.

        Args:
            language: Registry entry of the language being loaded.
            path: Catalog file to parse.

        Returns:
            Runtime catalog with the language's plural rule applied.

        Raises:
            CatalogParseError: If the file cannot be parsed.
        """
        pass

    async def load(self, language: LanguageConfig) -> Translations:
        """Validate, locate and parse the catalog of one language.

        File access and parsing run in the threadpool so other requests are
        not blocked.

        Args:
            language: Registry entry to load.

        Returns:
            Runtime catalog for the language.

        Raises:
            MissingPluralRuleError: If the entry lacks a name or plural rule.
            MissingCatalogFileError: If the catalog file does not exist.
            CatalogParseError: If the file cannot be parsed.
        """
        if not language.has_plural_info:
            raise MissingPluralRuleError(language.code)

        path = self.catalog_path(language.code)
        if not await run_in_threadpool(path.is_file):
            raise MissingCatalogFileError(language.code, path)

        logger.info(
            "loading_language_catalog",
            code=language.code,
            language_name=language.name,
            file=str(path),
        )
        return await run_in_threadpool(self.parse, language, path)


class PinnedHeaderCatalog(Catalog):
    """Catalog whose Language and Plural-Forms headers stay fixed.

    Whatever header a PO file carries is applied first and then overridden
    by the metadata block. Plural entries are therefore validated against
    the configured rule rather than the file's own.
    """

    def __init__(self, metadata: CatalogMetadata):
        self.metadata = metadata
        super().__init__(domain=metadata.domain)
        Catalog.mime_headers.fset(self, metadata.as_headers())

    def _set_pinned_mime_headers(self, headers: Iterable[Tuple[str, str]]) -> None:
        Catalog.mime_headers.fset(self, headers)
        Catalog.mime_headers.fset(self, self.metadata.as_headers())

    mime_headers = property(Catalog.mime_headers.fget, _set_pinned_mime_headers)


class POCatalogLoader(CatalogLoader):
    """Loader for gettext PO files.

    Expects files at ``<translations_dir>/<code>/LC_MESSAGES/messages.po``.
    The PO header's language and plural rule are replaced by the registry's,
    then the catalog is compiled in memory; no MO file is needed on disk.

    Attributes:
        translations_dir: Root of the catalog tree.
        domain: gettext domain the catalogs are registered under.
    """

    def __init__(self, translations_dir: Path, domain: str = DEFAULT_DOMAIN):
        """Initialize PO catalog loader.

        Args:
            translations_dir: Root directory of the catalog tree.
            domain: gettext domain name.
        """
        self.translations_dir = Path(translations_dir)
        self.domain = domain

        if not self.translations_dir.is_dir():
            logger.warning(
                "translations_directory_not_found",
                translations_dir=str(self.translations_dir),
            )

    def catalog_path(self, code: str) -> Path:
        return self.translations_dir / code / CATALOG_SUBDIR / CATALOG_FILENAME

    def metadata_for(self, language: LanguageConfig) -> CatalogMetadata:
        """Build the metadata block injected into the language's catalog."""
        return CatalogMetadata(
            domain=self.domain,
            lang=language.code,
            plural_forms=language.plurals or "",
        )

    def parse(self, language: LanguageConfig, path: Path) -> Translations:
        metadata = self.metadata_for(language)
        try:
            with open(path, "rb") as f:
                catalog = PinnedHeaderCatalog(metadata)
                PoFileParser(catalog, abort_invalid=True).parse(f)

            buffer = BytesIO()
            write_mo(buffer, catalog)
            buffer.seek(0)
            translations = Translations(fp=buffer, domain=metadata.domain)
        except (
            PoFileError,
            UnknownLocaleError,
            OSError,
            UnicodeDecodeError,
            ValueError,
            SyntaxError,
        ) as e:
            logger.error(
                "catalog_parse_error",
                code=language.code,
                file=str(path),
                error=str(e),
            )
            raise CatalogParseError(language.code, e) from e

        logger.info(
            "parsed_language_catalog",
            code=language.code,
            domain=metadata.domain,
            message_count=len(catalog),
        )
        return translations
