"""Template rendering: data tags, content blocks and layouts.

A template is plain text. Rendering a template loads the file, replaces
``{{:key}}`` data tags with scalar values from the renderer's data store and,
optionally, splits the result into named content blocks. A block starts with a
marker line such as ``@head>`` and runs until the next marker or the end of
the template; unmarked content lands in the default namespace.

Blocks from a content renderer are merged into a page renderer with
``add_to_view()`` and the page's layout template is rendered last.
"""

import re
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from basecoat.exceptions import DataTypeMismatchException, LayoutNotFoundException, TemplateNotFoundException
from basecoat.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

DEFAULT_BLOCK_TAG_REGEX = r"^@(\S+)>[\r\n]"
DEFAULT_BLOCK_NAME_MAX_LENGTH = 30

SCALAR_TYPES = (str, int, float, bool)

# Stripped from the front of a template before block parsing
LEADING_WHITESPACE = " \t\n\r\0\x0b"


def to_text(value: Any) -> str:
    """Coerce a scalar data value to text (True -> "1", False and None -> "")."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)


class TemplateRenderer:
    """Renders template files and collects their data and content blocks.

    Each instance owns a data store (values available to data tags) and a
    block store (named regions of rendered output). Both accumulate until
    ``clear()`` is called.
    """

    def __init__(
        self,
        templates_path: str | Path | None = None,
        layouts: Mapping[str, str] | None = None,
        default_layout: str | None = None,
        *,
        default_namespace: str = "body",
        enable_data_tags: bool = True,
        data_tag_prefix: str = "{{:",
        data_tag_suffix: str = "}}",
        block_tag_regex: str = DEFAULT_BLOCK_TAG_REGEX,
        block_name_max_length: int = DEFAULT_BLOCK_NAME_MAX_LENGTH,
        strict_blocks: bool = False,
    ):
        self.templates_path: Path | None = None
        self.set_templates_path(templates_path)
        self.layouts: dict[str, str] = dict(layouts or {})
        self.layout: str | None = default_layout

        self.default_namespace = default_namespace
        self.enable_data_tags = enable_data_tags
        self.data_tag_prefix = data_tag_prefix
        self.data_tag_suffix = data_tag_suffix
        self.block_tag_pattern = re.compile(block_tag_regex, re.MULTILINE)
        self.block_name_max_length = block_name_max_length
        self.strict_blocks = strict_blocks

        self._data: dict[str, Any] = {}
        self._blocks: dict[str, str] = {}

    def spawn(self) -> "TemplateRenderer":
        """Create an empty renderer with the same configuration."""
        return TemplateRenderer(
            templates_path=self.templates_path,
            layouts=self.layouts,
            default_layout=self.layout,
            default_namespace=self.default_namespace,
            enable_data_tags=self.enable_data_tags,
            data_tag_prefix=self.data_tag_prefix,
            data_tag_suffix=self.data_tag_suffix,
            block_tag_regex=self.block_tag_pattern.pattern,
            block_name_max_length=self.block_name_max_length,
            strict_blocks=self.strict_blocks,
        )

    # Layouts

    def set_layouts(self, layouts: Mapping[str, str], default: str | None = None) -> None:
        """Replace the layout registry, optionally selecting a default layout.

        Args:
            layouts: Layout names mapped to paths relative to the templates directory
            default: Name of the layout to select
        """
        self.layouts = dict(layouts)
        if default is not None:
            self.set_layout(default)

    def set_layout(self, layout_name: str) -> None:
        """Select the layout used for output. Not checked until get_layout()."""
        self.layout = layout_name

    def get_layout(self, layout_name: str | None = None) -> str:
        """Get the path of a layout file, the selected layout by default.

        Raises:
            LayoutNotFoundException: If the layout is not registered
        """
        if layout_name is None:
            layout_name = self.layout
        if layout_name is None or layout_name not in self.layouts:
            raise LayoutNotFoundException(layout_name, details={"available": sorted(self.layouts)})
        return self.layouts[layout_name]

    def set_templates_path(self, path: str | Path | None) -> None:
        """Set the directory used as a prefix when resolving templates."""
        self.templates_path = Path(path) if path is not None else None

    # Data

    @property
    def context(self) -> Mapping[str, Any]:
        """Read-only live view of the data store."""
        return MappingProxyType(self._data)

    def get(self, name: str, default: Any = None) -> Any:
        return self._data.get(name, default)

    def add(self, name: str, content: Any, append: bool = True) -> None:
        """Add content under a data name.

        By default content is appended to an existing string value with the
        same name. Scalars are coerced to text when appended and None appends
        nothing.

        Raises:
            DataTypeMismatchException: If appending onto a non-string value or
                appending a compound value
        """
        existing = self._data.get(name)
        if append and existing is not None:
            if not isinstance(existing, str) or not (content is None or isinstance(content, SCALAR_TYPES)):
                raise DataTypeMismatchException(name, existing, content)
            self._data[name] = existing + to_text(content)
        else:
            self._data[name] = content

    def multiadd(self, name_vals: Mapping[str, Any], prefix: str | None = None) -> None:
        """Add several data items, optionally prefixing every name."""
        for name, value in name_vals.items():
            self.add(f"{prefix or ''}{name}", value)

    def get_data(self) -> Mapping[str, Any]:
        return MappingProxyType(dict(self._data))

    # Data tags

    def replace_data_tags(self, text: str) -> str:
        """Replace ``{{:key}}`` tags with scalar data values.

        All tags are replaced in one pass, so a value containing another tag
        is left as is. Compound values are never substituted.
        """
        if not self.enable_data_tags or not self._data:
            return text

        tags = {
            f"{self.data_tag_prefix}{key}{self.data_tag_suffix}": to_text(value)
            for key, value in self._data.items()
            if isinstance(value, SCALAR_TYPES)
        }
        if not tags:
            return text

        # Longest first so a tag never shadows a longer one it prefixes
        pattern = re.compile("|".join(re.escape(tag) for tag in sorted(tags, key=len, reverse=True)))
        return pattern.sub(lambda match: tags[match.group(0)], text)

    def strip_data_tags(self, text: str) -> str:
        """Remove data tags that were left unreplaced."""
        pattern = re.escape(self.data_tag_prefix) + r".+?" + re.escape(self.data_tag_suffix)
        return re.sub(pattern, "", text)

    # Blocks

    def add_block(self, block_name: str, content: str) -> None:
        """Append content to a block namespace, creating it if needed."""
        self._blocks[block_name] = self._blocks.get(block_name, "") + content

    def get_blocks(self) -> Mapping[str, str]:
        return MappingProxyType(dict(self._blocks))

    def parse_blocks(self, text: str) -> int:
        """Parse rendered text into block namespaces.

        The text is split on marker lines, keeping the marker names. Without
        markers the whole text goes to the default namespace. Otherwise
        segments alternate between names and content. A segment in a name
        position that is longer than ``block_name_max_length`` is treated as
        content of the current namespace instead.

        Args:
            text: Rendered template text

        Returns:
            Number of content blocks discovered
        """
        if self.strict_blocks:
            return self._parse_blocks_strict(text)

        segments = [segment for segment in self.block_tag_pattern.split(text.lstrip(LEADING_WHITESPACE)) if segment]
        if len(segments) == 1:
            self.add_block(self.default_namespace, segments[0])
            return 1

        namespace = self.default_namespace
        for index, segment in enumerate(segments):
            if index % 2 == 0 and len(segment) <= self.block_name_max_length:
                namespace = segment
            else:
                self.add_block(namespace, segment)
        return len(segments) // 2

    def _parse_blocks_strict(self, text: str) -> int:
        """Parse blocks where every marker line names a block.

        Content before the first marker belongs to the default namespace.
        Returns the number of non-empty content segments stored.
        """
        text = text.lstrip(LEADING_WHITESPACE)
        namespace = self.default_namespace
        position = 0
        stored = 0
        for match in self.block_tag_pattern.finditer(text):
            content = text[position : match.start()]
            if content:
                self.add_block(namespace, content)
                stored += 1
            namespace = match.group(1)
            position = match.end()

        tail = text[position:]
        if tail:
            self.add_block(namespace, tail)
            stored += 1
        return stored

    # Templates

    def resolve_template(self, template: str | Path) -> Path:
        """Find a template file, trying the templates directory first.

        Raises:
            TemplateNotFoundException: If neither location is a file
        """
        candidates = []
        if self.templates_path is not None:
            candidates.append(self.templates_path / template)
        candidates.append(Path(template))

        for candidate in candidates:
            if candidate.is_file():
                return candidate

        log_with_context(
            logger,
            "warning",
            "Template not found",
            template=str(template),
            templates_path=str(self.templates_path) if self.templates_path else None,
            event_type="template_not_found",
        )
        raise TemplateNotFoundException(str(template))

    def process_template(self, template: str | Path, parse: bool = True) -> str | int:
        """Load and process a template, optionally parsing it into blocks.

        Args:
            template: Template file, relative to the templates directory or as a plain path
            parse: Whether to parse the output into block namespaces (default True)

        Returns:
            Number of blocks parsed, or the processed text when parse is False

        Raises:
            TemplateNotFoundException: If the template file does not exist
        """
        path = self.resolve_template(template)
        content = self.replace_data_tags(path.read_text(encoding="utf-8"))

        if not parse:
            return content

        blocks_parsed = self.parse_blocks(content)
        log_with_context(
            logger,
            "debug",
            "Template processed",
            template=str(path),
            blocks_parsed=blocks_parsed,
            event_type="template_processed",
        )
        return blocks_parsed

    # Lifecycle

    def clear(self) -> None:
        """Clear all data and content blocks."""
        self._data.clear()
        self._blocks.clear()

    def add_to_view(self, view: "TemplateRenderer", prefix: str | None = None) -> int:
        """Merge this renderer's blocks into another renderer's data.

        Blocks are appended to existing data items of the same name.

        Returns:
            Number of content blocks merged
        """
        view.multiadd(self._blocks, prefix)
        return len(self._blocks)

    def __str__(self) -> str:
        return "\n".join(to_text(value) for value in self._data.values())
