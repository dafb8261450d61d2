"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_language_config,
    make_po_content,
    write_catalog,
)

__all__ = [
    "make_language_config",
    "make_po_content",
    "write_catalog",
]
