"""Flash messages shown on the next rendered page."""

import html
from enum import Enum

from pydantic import BaseModel


class MessageLevel(str, Enum):
    """Severity of a flash message."""

    INFO = "info"
    WARN = "warn"
    ERROR = "error"


class FlashMessage(BaseModel):
    """A single message queued for display."""

    level: MessageLevel
    text: str


class Messages:
    """Ordered collection of flash messages.

    Messages are kept in the session until a page renders them, so a
    message added before a redirect is shown on the following page.
    """

    def __init__(self):
        self._messages: list[FlashMessage] = []

    def add(self, level: MessageLevel | str, text: str) -> None:
        self._messages.append(FlashMessage(level=MessageLevel(level), text=text))

    def info(self, text: str) -> None:
        self.add(MessageLevel.INFO, text)

    def warn(self, text: str) -> None:
        self.add(MessageLevel.WARN, text)

    def error(self, text: str) -> None:
        self.add(MessageLevel.ERROR, text)

    def all(self) -> list[FlashMessage]:
        return list(self._messages)

    def clear(self) -> None:
        self._messages.clear()

    def render(self) -> str:
        """Render messages as an HTML list, empty string when there are none."""
        if not self._messages:
            return ""
        items = "".join(
            f'<li class="message message-{message.level.value}">{html.escape(message.text)}</li>'
            for message in self._messages
        )
        return f'<ul class="messages">{items}</ul>'

    def __len__(self) -> int:
        return len(self._messages)
