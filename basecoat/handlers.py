"""Route handlers for the example site."""

from basecoat.logging_config import get_logger, log_with_context
from basecoat.routing import RequestContext, RouteDefinition
from basecoat.views.template_renderer import TemplateRenderer

logger = get_logger(__name__)


def render_route_template(ctx: RequestContext, page: TemplateRenderer, template: str) -> int:
    """Process a route template and merge its blocks into the page.

    Returns:
        Number of blocks merged into the page
    """
    content = page.spawn()
    content.multiadd(ctx.template_data())
    content.process_template(template)
    return content.add_to_view(page)


def page_handler(ctx: RequestContext, page: TemplateRenderer, route: RouteDefinition) -> None:
    """Render a plain content page."""
    page.add("title", route.title)
    render_route_template(ctx, page, route.template)


def login_handler(ctx: RequestContext, page: TemplateRenderer, route: RouteDefinition) -> None:
    """Toggle the session login state, or render the login form.

    Posting ``loginout=in`` logs in and returns to the last route that ran.
    Posting any other ``loginout`` value logs out and redirects home.
    """
    action = ctx.form.get("loginout")

    if action == "in":
        ctx.session.is_logged_in = True
        target = ctx.session.last_run_route
        if not target or target == ctx.current_route:
            target = ctx.default_route
        ctx.session.last_run_route = ctx.current_route
        ctx.current_route = target
        log_with_context(logger, "info", "Logged in", return_route=target, event_type="login")
        return

    if action is not None:
        ctx.session.is_logged_in = False
        ctx.messages.info("You have been logged out.")
        ctx.redirect("/")
        log_with_context(logger, "info", "Logged out", event_type="logout")
        return

    page.add("title", route.title)
    render_route_template(ctx, page, route.template)


def messages_handler(ctx: RequestContext, page: TemplateRenderer, route: RouteDefinition) -> None:
    """Demonstrate the three flash message levels."""
    page.add("title", route.title)

    ctx.messages.info("This is an example of an information message")
    ctx.messages.warn("This is an example of a warning message")
    ctx.messages.error("This is an example of an error message")

    render_route_template(ctx, page, route.template)
