"""Fixtures for server module unit tests."""

import pytest

from infrastructure.configuration import I18nSettings, Settings
from tests.factories.i18n import TWO_FORMS, make_po_content, write_catalog


@pytest.fixture
def server_settings(tmp_path):
    """Settings serving English and German from a temporary catalog tree."""
    root = tmp_path / "i18n"
    write_catalog(root, "en", make_po_content({"Hello": "Hello"}, language="en"))
    write_catalog(root, "de", make_po_content({"Hello": "Hallo"}, language="de"))

    return Settings(
        PREFIX="test-",
        i18n=I18nSettings(
            default_locale="en",
            languages={
                "en": {"name": "English", "plurals": TWO_FORMS},
                "de": {"name": "Deutsch", "plurals": TWO_FORMS},
                "fr": {"name": "Français", "plurals": TWO_FORMS},
            },
            translations_path=root,
        ),
    )
