"""Factory functions for creating i18n components.

Builds an I18nService from application settings, optionally reading the
language registry from a YAML file.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from infrastructure.configuration import I18nSettings
from infrastructure.i18n.service import I18nService
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def load_languages_file(path: Path) -> Dict[str, Any]:
    """Read a language registry from a YAML file.

    Expected format:
        de:
          name: Deutsch
          plurals: "nplurals=2; plural=(n != 1);"

    Args:
        path: YAML file to read.

    Returns:
        Mapping of language code to its ``{name, plurals}`` entry.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the YAML cannot be parsed or is not a mapping.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error("yaml_parse_error", file=str(path), error=str(e))
        raise ValueError(f"Failed to parse {path}: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(f"Language registry in {path} must be a mapping")

    return {str(code): entry for code, entry in data.items()}


def create_i18n_service(
    settings: Optional[I18nSettings] = None,
    **kwargs: Any,
) -> I18nService:
    """Create an I18nService configured from settings.

    Languages from ``settings.languages_file`` are merged over
    ``settings.languages``. The service is returned unloaded; await
    ``initialize()`` before serving requests.

    Args:
        settings: i18n settings (default: read from environment).
        **kwargs: Extra I18nService arguments such as log callbacks.

    Returns:
        I18nService: Configured, not yet initialized service.

    Usage:
        service = create_i18n_service()
        await service.initialize()
    """
    if settings is None:
        settings = I18nSettings()

    languages: Dict[str, Any] = dict(settings.languages)
    if settings.languages_file is not None:
        languages.update(load_languages_file(settings.languages_file))

    service = I18nService(
        default_locale=settings.default_locale,
        languages=languages,
        path_to_translations=settings.translations_path,
        domain=settings.domain,
        **kwargs,
    )

    logger.info(
        "i18n_service_created",
        translations_path=str(settings.translations_path),
        language_count=len(languages),
        default_locale=settings.default_locale,
    )
    return service
