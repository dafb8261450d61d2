"""ASGI middleware injecting locale-aware helpers into each request."""

from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.service import I18nService
from infrastructure.logging import bind_request_context


class I18nMiddleware(BaseHTTPMiddleware):
    """Resolve the request's locale and expose translation helpers.

    After this middleware runs, ``request.state`` carries:

    - ``language``: negotiated language code (None when nothing matched)
    - ``locale``: the LoadedLocale serving the request
    - ``tr`` / ``__``: singular translation function
    - ``trn`` / ``_n``: plural translation function
    - ``helpers``: dict of the four functions above, for templates

    The negotiation resolver is built on the first request, once the
    service's registry is final, and reused afterwards.
    """

    def __init__(
        self,
        app: ASGIApp,
        i18n: I18nService,
        query_param: Optional[str] = "locale",
        cookie_name: Optional[str] = "locale",
        legacy_helper_args: bool = False,
    ):
        super().__init__(app)
        self.i18n = i18n
        self.query_param = query_param
        self.cookie_name = cookie_name
        self.legacy_helper_args = legacy_helper_args
        self.resolver: Optional[LocaleResolver] = None

    def _get_resolver(self) -> LocaleResolver:
        if self.resolver is None:
            self.resolver = LocaleResolver(
                self.i18n.language_codes,
                query_param=self.query_param,
                cookie_name=self.cookie_name,
            )
        return self.resolver

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        language = self._get_resolver().resolve_from_request(request)
        locale = self.i18n.get_locale_for_language(language)

        helpers = locale.legacy_helpers() if self.legacy_helper_args else locale.helpers

        request.state.language = language
        request.state.locale = locale
        request.state.helpers = helpers
        for name, fn in helpers.items():
            setattr(request.state, name, fn)

        with bind_request_context(
            request_path=request.url.path,
            request_method=request.method,
            locale=locale.code,
        ):
            response = await call_next(request)
        return response
