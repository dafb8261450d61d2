from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.i18n import I18nService
from infrastructure.logging.setup import configure_logging

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    logger.info(
        "configuration_initialized",
        log_level=settings.LOG_LEVEL,
        is_production=settings.is_production,
        default_locale=settings.i18n.default_locale,
        translations_path=str(settings.i18n.translations_path),
        languages=sorted(settings.i18n.languages),
    )


async def _load_translations(
    app: FastAPI, i18n: I18nService, logger: BoundLogger
) -> None:
    error = await i18n.initialize()
    app.state.i18n = i18n
    app.state.i18n_error = error
    if error is not None:
        logger.warning(
            "translations_partially_loaded",
            error=str(error),
            loaded=sorted(i18n.loaded_languages),
        )


def build_lifespan(settings: "Settings", i18n: I18nService):
    """Create the application lifespan loading every catalog before serving."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger = configure_logging(settings=settings)
        logger.info("application_startup")
        _list_configs(settings, logger)

        await _load_translations(app, i18n, logger)

        yield

        logger.info("application_shutdown")

    return lifespan
