"""Tests for infrastructure.i18n.translator module."""

from unittest.mock import MagicMock

import pytest

from infrastructure.i18n import LoadedLocale, POCatalogLoader
from infrastructure.i18n.translator import HELPER_NAMES, compact_helper_args
from tests.factories.i18n import RUSSIAN_FORMS, make_language_config


@pytest.fixture
def german(translations_dir):
    """LoadedLocale over the German fixture catalog."""
    loader = POCatalogLoader(translations_dir)
    translations = loader.parse(make_language_config("de"), loader.catalog_path("de"))
    return LoadedLocale("de", translations, log_error=MagicMock())


@pytest.fixture
def russian(translations_dir):
    """LoadedLocale over the Russian fixture catalog."""
    loader = POCatalogLoader(translations_dir)
    language = make_language_config("ru", name="Русский", plurals=RUSSIAN_FORMS)
    translations = loader.parse(language, loader.catalog_path("ru"))
    return LoadedLocale("ru", translations, log_error=MagicMock())


@pytest.fixture
def untranslated():
    """LoadedLocale without a runtime catalog."""
    return LoadedLocale("en", None, log_error=MagicMock())


class TestLoadedLocaleTranslate:
    """Tests for LoadedLocale.translate()."""

    def test_translate_known_message(self, german):
        """translate() returns the catalog translation."""
        assert german.translate("Hello") == "Hallo"

    def test_translate_unknown_message(self, german):
        """translate() returns the message id when no translation exists."""
        assert german.translate("Goodbye") == "Goodbye"

    def test_translate_with_arguments(self, german):
        """translate() substitutes positional arguments."""
        assert german.translate("Hello %s", "Anna") == "Hallo Anna"
        assert german.translate("%s of %s", 3, 7) == "3 von 7"

    def test_translate_without_catalog(self, untranslated):
        """translate() returns the text unchanged without a catalog."""
        assert untranslated.translate("Hello") == "Hello"

    def test_translate_without_catalog_formats(self, untranslated):
        """translate() formats the source text without a catalog."""
        assert untranslated.translate("Hello %s", "Anna") == "Hello Anna"

    def test_translate_no_arguments_keeps_placeholders(self, german):
        """translate() does not format when no arguments are given."""
        assert german.translate("Hello %s") == "Hallo %s"

    def test_translate_format_failure_returns_template(self, german):
        """translate() logs and returns the unformatted text on format errors."""
        assert german.translate("Hello %s", "a", "b") == "Hallo %s"
        german._log_error.assert_called_once()
        assert german._log_error.call_args.args[0] == "translation_format_failed"

    def test_translate_format_failure_without_catalog(self, untranslated):
        """Format errors on the no-catalog path never reach the caller."""
        assert untranslated.translate("%d apples", "many") == "%d apples"
        untranslated._log_error.assert_called_once()


class TestLoadedLocaleTranslatePlural:
    """Tests for LoadedLocale.translate_plural()."""

    def test_plural_selects_singular(self, german):
        """translate_plural() picks the singular form for one."""
        assert german.translate_plural("1 item", "%d items", 1) == "1 Artikel"

    def test_plural_selects_plural(self, german):
        """translate_plural() picks the plural form for other counts."""
        assert german.translate_plural("1 item", "%d items", 5) == "%d Artikel"
        assert german.translate_plural("1 item", "%d items", 5, 5) == "5 Artikel"

    def test_plural_three_forms(self, russian):
        """translate_plural() follows a three-form plural rule."""
        assert russian.translate_plural("%d file", "%d files", 1, 1) == "1 файл"
        assert russian.translate_plural("%d file", "%d files", 2, 2) == "2 файла"
        assert russian.translate_plural("%d file", "%d files", 11, 11) == "11 файлов"

    def test_plural_unknown_message(self, german):
        """translate_plural() falls back to the source forms."""
        assert german.translate_plural("one cat", "%d cats", 1) == "one cat"
        assert german.translate_plural("one cat", "%d cats", 4, 4) == "4 cats"

    def test_plural_without_catalog(self, untranslated):
        """Without a catalog, count == 1 selects the singular text."""
        assert untranslated.translate_plural("1 item", "%d items", 1) == "1 item"
        assert untranslated.translate_plural("1 item", "%d items", 0, 0) == "0 items"

    def test_plural_format_failure_returns_template(self, untranslated):
        """translate_plural() degrades to the selected text on format errors."""
        assert untranslated.translate_plural("1 item", "%d items", 2, "x") == "%d items"
        untranslated._log_error.assert_called_once()


class TestHelpers:
    """Tests for helper bundles."""

    def test_helpers_names(self, german):
        """helpers exposes both naming conventions."""
        assert tuple(german.helpers) == HELPER_NAMES

    def test_helpers_delegate(self, german):
        """Both names of a helper translate identically."""
        helpers = german.helpers
        assert helpers["tr"]("Hello") == helpers["__"]("Hello") == "Hallo"
        assert helpers["trn"]("1 item", "%d items", 3, 3) == "3 Artikel"
        assert helpers["_n"]("1 item", "%d items", 1) == "1 Artikel"

    def test_legacy_helpers_strip_bookkeeping_argument(self, german):
        """Legacy tr drops the trailing template argument."""
        tr = german.legacy_helpers()["tr"]
        assert tr("Hello %s", "Anna", {"context": True}) == "Hallo Anna"

    def test_legacy_helpers_bare_call(self, german):
        """Legacy tr with only the message does not format."""
        assert german.legacy_helpers()["__"]("Hello") == "Hallo"

    def test_legacy_plural_passes_count(self, german):
        """Legacy trn formats with the count and drops the last argument."""
        trn = german.legacy_helpers()["trn"]
        assert trn("1 item", "%d items", 4, {"context": True}) == "4 Artikel"

    def test_legacy_plural_missing_arguments(self, german, untranslated):
        """Legacy trn with missing slots still returns text."""
        trn = german.legacy_helpers()["trn"]

        assert trn("1 item", "%d items") == "1 Artikel"
        assert trn("1 item") == "1 Artikel"
        assert trn("1 item", "%d items", None) == "1 Artikel"
        assert trn() == ""
        assert untranslated.legacy_helpers()["_n"]("file", "files") == "file"

    def test_legacy_singular_without_arguments(self, german):
        """Legacy tr called with nothing returns an empty string."""
        assert german.legacy_helpers()["tr"]() == ""


class TestCompactHelperArgs:
    """Tests for compact_helper_args()."""

    def test_singular_strips_first_and_last(self):
        """The message and trailing argument are removed."""
        assert compact_helper_args(("text", "a", "b", "ctx"), 1) == ("a", "b")

    def test_plural_keeps_count(self):
        """For plural calls the count becomes the first value."""
        assert compact_helper_args(("s", "p", 3, "x", "ctx"), 2) == (3, "x")

    def test_falsy_values_dropped(self):
        """Falsy values are compacted away."""
        assert compact_helper_args(("text", 0, "", None, "a", "ctx"), 1) == ("a",)

    def test_short_calls_have_no_values(self):
        """Calls without a bookkeeping argument yield no values."""
        assert compact_helper_args(("text",), 1) == ()
        assert compact_helper_args(("s", "p", 2), 2) == ()
