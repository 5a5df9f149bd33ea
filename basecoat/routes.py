"""Route table for the example site. Templates are relative to the templates directory."""

from basecoat.handlers import login_handler, messages_handler, page_handler
from basecoat.routing import RouteDefinition

ROUTES: dict[str, RouteDefinition] = {
    "home": RouteDefinition(template="home.html", title="Home", handler=page_handler),
    "blocks": RouteDefinition(template="blocks.html", title="Content Blocks", handler=page_handler),
    "login": RouteDefinition(template="login.html", title="Login", handler=login_handler, remember=False),
    "messages": RouteDefinition(template="messages.html", title="Messaging", handler=messages_handler),
    "members": RouteDefinition(
        template="members.html",
        title="Members",
        handler=page_handler,
        requires_login=True,
    ),
}
