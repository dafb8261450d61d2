"""Data models for the i18n system.

Defines the language registry entries and the metadata block injected into
every parsed catalog.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

DEFAULT_DOMAIN = "mobile_web"


@dataclass(frozen=True)
class LanguageConfig:
    """Registry entry describing one configured language.

    Attributes:
        code: Language code, also the catalog directory name (e.g. "de", "pt_BR").
        name: Human readable language name.
        plurals: gettext Plural-Forms rule (e.g. "nplurals=2; plural=(n != 1);").
            Passed through untouched to the gettext runtime.
    """

    code: str
    name: Optional[str] = None
    plurals: Optional[str] = None

    @property
    def has_plural_info(self) -> bool:
        """Whether the entry carries everything needed to load its catalog."""
        return bool(self.name and self.plurals)

    @classmethod
    def from_value(cls, code: str, value: Any) -> "LanguageConfig":
        """Build an entry from a registry value.

        Accepts an existing LanguageConfig, a mapping with ``name`` and
        ``plurals`` keys, or any object exposing those attributes (such as
        ``LanguageSettings``).

        Args:
            code: Language code the value is registered under.
            value: Registry value.

        Returns:
            LanguageConfig for ``code``.
        """
        if isinstance(value, LanguageConfig):
            if value.code == code:
                return value
            return cls(code=code, name=value.name, plurals=value.plurals)
        if value is None:
            return cls(code=code)
        if isinstance(value, Mapping):
            return cls(code=code, name=value.get("name"), plurals=value.get("plurals"))
        return cls(
            code=code,
            name=getattr(value, "name", None),
            plurals=getattr(value, "plurals", None),
        )


@dataclass(frozen=True)
class CatalogMetadata:
    """Configuration block the gettext runtime needs to select plural forms.

    Attributes:
        domain: gettext domain the catalog is registered under.
        lang: Language code.
        plural_forms: Plural-Forms rule for the language.
    """

    domain: str
    lang: str
    plural_forms: str

    def as_headers(self) -> List[Tuple[str, str]]:
        """Return the block as PO header fields."""
        return [
            ("Language", self.lang),
            ("Plural-Forms", self.plural_forms),
        ]
