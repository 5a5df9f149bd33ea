"""Route definitions, per-request context and dispatch.

Route handlers receive the request state explicitly through a
``RequestContext`` instead of reading process-wide globals. A handler may
swap ``ctx.current_route`` to have another route run in the same request,
or call ``ctx.redirect()`` to end the request with a redirect.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from basecoat.exceptions import RouteNotFoundException, RoutingException
from basecoat.logging_config import get_logger, log_with_context
from basecoat.messages import Messages
from basecoat.state_managers import SessionState
from basecoat.views.template_renderer import TemplateRenderer

logger = get_logger(__name__)

LOGIN_ROUTE = "login"
MAX_ROUTE_SWAPS = 5


@dataclass
class RequestContext:
    """State of the request being dispatched."""

    current_route: str
    session: SessionState
    default_route: str = "home"
    method: str = "GET"
    form: Mapping[str, str] = field(default_factory=dict)
    redirect_to: str | None = None

    @property
    def is_logged_in(self) -> bool:
        return self.session.is_logged_in

    @property
    def messages(self) -> Messages:
        return self.session.messages

    def redirect(self, url: str) -> None:
        self.redirect_to = url

    def template_data(self) -> dict[str, Any]:
        """Values exposed to route templates as data tags."""
        return {
            "current_route": self.current_route,
            "is_logged_in": self.is_logged_in,
            "login_state": "in" if self.is_logged_in else "out",
        }


Handler = Callable[[RequestContext, TemplateRenderer, "RouteDefinition"], None]


@dataclass(frozen=True)
class RouteDefinition:
    """A named route: the template it renders and the handler that runs it.

    ``remember`` controls whether a completed visit is recorded as the
    session's last-run route (the login route returns there).
    """

    template: str
    title: str
    handler: Handler
    requires_login: bool = False
    remember: bool = True


def dispatch(
    ctx: RequestContext,
    page: TemplateRenderer,
    routes: Mapping[str, RouteDefinition],
    login_route: str = LOGIN_ROUTE,
) -> RouteDefinition:
    """Run the handler for ``ctx.current_route`` against the page renderer.

    Routes that require a login are swapped for the login route when the
    session is logged out. When a handler swaps the current route the new
    route runs next, without the submitted form.

    Returns:
        The route that completed the request

    Raises:
        RouteNotFoundException: If a route is not in the route table
        RoutingException: If handlers keep swapping routes
    """
    for _ in range(MAX_ROUTE_SWAPS):
        route_name = ctx.current_route
        route = routes.get(route_name)
        if route is None:
            raise RouteNotFoundException(route_name)

        if route.requires_login and not ctx.is_logged_in:
            log_with_context(
                logger,
                "info",
                "Login required, switching to login route",
                route=route_name,
                event_type="login_required",
            )
            ctx.session.last_run_route = route_name
            ctx.current_route = login_route
            continue

        route.handler(ctx, page, route)

        if ctx.redirect_to is not None:
            return route

        if ctx.current_route == route_name:
            if route.remember:
                ctx.session.last_run_route = route_name
            return route

        log_with_context(
            logger,
            "debug",
            "Route swapped by handler",
            from_route=route_name,
            to_route=ctx.current_route,
            event_type="route_swap",
        )
        ctx.method = "GET"
        ctx.form = {}

    raise RoutingException(
        "Too many route swaps",
        details={"route": ctx.current_route, "max_swaps": MAX_ROUTE_SWAPS},
    )
