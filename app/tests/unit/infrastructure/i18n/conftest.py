"""Feature-level fixtures for i18n system tests.

Provides catalog trees on disk and services built over them.
"""

import asyncio
from unittest.mock import MagicMock

import pytest

from infrastructure.i18n import I18nService
from tests.factories.i18n import (
    RUSSIAN_FORMS,
    TWO_FORMS,
    make_po_content,
    write_catalog,
)

GERMAN_MESSAGES = {
    "Hello": "Hallo",
    "Hello %s": "Hallo %s",
    "%s of %s": "%s von %s",
    ("1 item", "%d items"): ("1 Artikel", "%d Artikel"),
}

RUSSIAN_MESSAGES = {
    "Hello": "Привет",
    ("%d file", "%d files"): ("%d файл", "%d файла", "%d файлов"),
}

ENGLISH_MESSAGES = {
    "Hello": "Hello",
}


@pytest.fixture
def translations_dir(tmp_path):
    """Create a catalog tree with en, de and ru PO files.

    Returns a directory structure like:
    - en/LC_MESSAGES/messages.po
    - de/LC_MESSAGES/messages.po
    - ru/LC_MESSAGES/messages.po
    """
    root = tmp_path / "i18n"
    write_catalog(root, "en", make_po_content(ENGLISH_MESSAGES, language="en"))
    write_catalog(root, "de", make_po_content(GERMAN_MESSAGES, language="de"))
    write_catalog(root, "ru", make_po_content(RUSSIAN_MESSAGES, language="ru"))
    return root


@pytest.fixture
def languages():
    """Registry matching the translations_dir fixture."""
    return {
        "en": {"name": "English", "plurals": TWO_FORMS},
        "de": {"name": "Deutsch", "plurals": TWO_FORMS},
        "ru": {"name": "Русский", "plurals": RUSSIAN_FORMS},
    }


@pytest.fixture
def log_fns():
    """Mock log callbacks keyed by I18nService argument name."""
    return {
        "log_debug": MagicMock(),
        "log_info": MagicMock(),
        "log_warn": MagicMock(),
        "log_error": MagicMock(),
    }


@pytest.fixture
def service(translations_dir, languages, log_fns):
    """I18nService over the fixture catalogs, not yet initialized."""
    return I18nService(
        default_locale="en",
        languages=languages,
        path_to_translations=translations_dir,
        **log_fns,
    )


@pytest.fixture
def loaded_service(service):
    """I18nService with every fixture catalog loaded."""
    error = asyncio.run(service.initialize())
    assert error is None
    return service


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_en": "en",
        "specific_en_us": "en-US",
        "with_quality": "en-US,en;q=0.9,fr;q=0.8",
        "multiple": "fr-FR,fr;q=0.9,de-DE;q=0.8,en;q=0.7",
        "wildcard": "en-US,en;q=0.9,*;q=0.8",
        "invalid_quality": "en;q=invalid,fr",
    }
