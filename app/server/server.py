from typing import Optional

from fastapi import FastAPI, Request

from infrastructure.configuration import Settings
from infrastructure.i18n import I18nMiddleware, I18nService, create_i18n_service
from infrastructure.services import LocaleDep, get_settings
from server.lifespan import build_lifespan


def create_app(
    settings: Optional[Settings] = None,
    i18n: Optional[I18nService] = None,
) -> FastAPI:
    """Create the ASGI application with translation helpers on every request."""
    if settings is None:
        settings = get_settings()

    if i18n is None:
        i18n = create_i18n_service(settings.i18n)

    app = FastAPI(lifespan=build_lifespan(settings, i18n))
    app.add_middleware(
        I18nMiddleware,
        i18n=i18n,
        query_param=settings.i18n.query_param,
        cookie_name=settings.i18n.cookie_name,
        legacy_helper_args=settings.i18n.legacy_helper_args,
    )

    @app.get("/health")
    def health_check(request: Request):
        """Report which languages are being served."""
        service: I18nService = request.app.state.i18n
        return {
            "status": "ok",
            "default_locale": service.default_locale,
            "languages": sorted(service.loaded_languages),
        }

    @app.get("/locale")
    def current_locale(locale: LocaleDep):
        """Return the locale negotiated for this request."""
        return {"locale": locale.code}

    return app
