"""Template rendering with translation helpers.

Instead of patching a response's render method, views render through a
LocaleRenderer that merges the helper bundle into the template model.
"""

from typing import Any, Callable, Dict, Mapping, Optional

from starlette.requests import Request
from starlette.responses import Response
from starlette.templating import Jinja2Templates


class LocaleRenderer:
    """Renders templates with the request's translation helpers.

    Usage:
        renderer = LocaleRenderer(Jinja2Templates(directory="templates"))

        @router.get("/")
        def index(request: Request):
            return renderer.render(request, "index.html", {"user": user})

        # in the template: {{ helpers.tr("Hello %s", user.name) }}
    """

    def __init__(self, templates: Jinja2Templates):
        self.templates = templates

    def render(
        self,
        request: Request,
        view: str,
        model: Optional[Mapping[str, Any]] = None,
        helpers: Optional[Mapping[str, Callable[..., str]]] = None,
        status_code: int = 200,
    ) -> Response:
        """Render a view with the helpers merged into its model.

        Args:
            request: Current request.
            view: Template name.
            model: Template context.
            helpers: Helper bundle; taken from ``request.state.helpers`` when omitted.
            status_code: HTTP status of the response.

        Returns:
            The rendered template response.

        Raises:
            RuntimeError: If no helpers are given and the request carries none.
        """
        if helpers is None:
            helpers = getattr(request.state, "helpers", None)
            if helpers is None:
                raise RuntimeError(
                    "No translation helpers on request; is I18nMiddleware installed?"
                )

        context: Dict[str, Any] = dict(model or {})
        context["helpers"] = dict(helpers)

        return self.templates.TemplateResponse(
            request, view, context, status_code=status_code
        )
