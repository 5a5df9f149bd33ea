"""Page assembly: the page renderer collects route blocks, the layout wraps them."""

from basecoat.config import Settings
from basecoat.exceptions import ConfigurationException
from basecoat.logging_config import get_logger, log_with_context
from basecoat.messages import Messages
from basecoat.views.template_renderer import TemplateRenderer

logger = get_logger(__name__)


def build_renderer(settings: Settings) -> TemplateRenderer:
    """Create a renderer configured from settings with the default layout selected.

    Raises:
        ConfigurationException: If the default layout is not a registered layout
    """
    if settings.default_layout not in settings.layouts:
        raise ConfigurationException(
            f"Default layout '{settings.default_layout}' is not registered",
            details={"default_layout": settings.default_layout, "available": sorted(settings.layouts)},
        )

    renderer = TemplateRenderer(
        templates_path=settings.templates_path,
        default_namespace=settings.default_namespace,
        enable_data_tags=settings.enable_data_tags,
        data_tag_prefix=settings.data_tag_prefix,
        data_tag_suffix=settings.data_tag_suffix,
        block_name_max_length=settings.block_name_max_length,
        strict_blocks=settings.strict_blocks,
    )
    renderer.set_layouts(settings.layouts, settings.default_layout)
    return renderer


def render_page(page: TemplateRenderer, messages: Messages, layout: str | None = None) -> str:
    """Render the page layout with the page's data and pending flash messages.

    Rendered messages are removed from the collection. Tags the page never
    filled are stripped from the output.

    Args:
        page: Page renderer holding title, merged blocks and other data
        messages: Pending flash messages
        layout: Layout name, the page's selected layout by default

    Returns:
        The final document
    """
    page.add("messages", messages.render(), append=False)
    message_count = len(messages)
    messages.clear()

    layout_path = page.get_layout(layout)
    output = page.process_template(layout_path, parse=False)

    log_with_context(
        logger,
        "debug",
        "Page rendered",
        layout=layout_path,
        messages_shown=message_count,
        event_type="page_rendered",
    )
    return page.strip_data_tags(output)
