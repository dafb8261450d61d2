"""FastAPI dependencies exposing the request's locale."""

from typing import Annotated

from fastapi import Depends, Request

from infrastructure.i18n.translator import LoadedLocale


def get_request_locale(request: Request) -> LoadedLocale:
    """Return the LoadedLocale the middleware resolved for this request.

    Raises:
        RuntimeError: If I18nMiddleware is not installed.
    """
    locale = getattr(request.state, "locale", None)
    if locale is None:
        raise RuntimeError("No locale on request; is I18nMiddleware installed?")
    return locale


LocaleDep = Annotated[LoadedLocale, Depends(get_request_locale)]
