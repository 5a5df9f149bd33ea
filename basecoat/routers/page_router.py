"""Page routes: dispatch a named route and render it inside the page layout."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from basecoat.config import Settings, get_settings
from basecoat.dependencies import get_page_renderer, get_session_manager
from basecoat.exceptions import RouteNotFoundException
from basecoat.routes import ROUTES
from basecoat.routing import RequestContext, dispatch
from basecoat.state_managers import SessionManager
from basecoat.views.page import render_page
from basecoat.views.template_renderer import TemplateRenderer

router = APIRouter()


def _set_session_cookie(response: Response, settings: Settings, session_id: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session_id,
        max_age=settings.session_ttl_seconds,
        httponly=True,
        samesite="lax",
    )


@router.get("/", include_in_schema=False)
async def index(settings: Settings = Depends(get_settings)):
    """Redirect to the default route."""
    return RedirectResponse(f"/{settings.default_route}")


@router.api_route("/{route_name}", methods=["GET", "POST"], response_class=HTMLResponse)
async def route_page(
    route_name: str,
    request: Request,
    settings: Settings = Depends(get_settings),
    sessions: SessionManager = Depends(get_session_manager),
    page: TemplateRenderer = Depends(get_page_renderer),
):
    """Run a route and render the resulting page.

    Returns:
        HTML page, or a 303 redirect when the route asks for one

    Raises:
        RouteNotFoundException: If the route is not in the route table (404)
        TemplateNotFoundException: If a route or layout template is missing (404)
    """
    if route_name not in ROUTES:
        raise RouteNotFoundException(route_name)

    session_id, session = await sessions.get_or_create(request.cookies.get(settings.session_cookie_name))

    form: dict[str, str] = {}
    if request.method == "POST":
        submitted = await request.form()
        form = {key: value for key, value in submitted.items() if isinstance(value, str)}

    ctx = RequestContext(
        current_route=route_name,
        session=session,
        default_route=settings.default_route,
        method=request.method,
        form=form,
    )
    dispatch(ctx, page, ROUTES)

    if ctx.redirect_to is not None:
        response: Response = RedirectResponse(ctx.redirect_to, status_code=303)
    else:
        response = HTMLResponse(render_page(page, session.messages))

    _set_session_cookie(response, settings, session_id)
    return response
