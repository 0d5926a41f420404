from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from enum import StrEnum

from PySide6.QtCore import QObject, Signal

from textdisplay.config import DISPLAY_PLACEHOLDER, EMPTY_INPUT_MESSAGE

logger = logging.getLogger(__name__)


class Emphasis(StrEnum):
    """How the display label styles its text."""
    BOLD_LARGE = "bold-large"
    ITALIC_LARGE = "italic-large"


_MARKUP_TEMPLATES: dict[Emphasis, str] = {
    Emphasis.BOLD_LARGE: "<big><b>{}</b></big>",
    Emphasis.ITALIC_LARGE: "<big><i>{}</i></big>",
}

# Rich text collapses runs of spaces unless told otherwise
_PRESERVE_SPACES = '<span style="white-space:pre-wrap;">{}</span>'


@dataclass(frozen=True)
class DisplayContent:
    """Text shown in the display label together with its emphasis."""
    text: str
    emphasis: Emphasis = Emphasis.BOLD_LARGE

    def to_markup(self) -> str:
        """Render as Qt rich text. The text is escaped and its spacing kept, so it shows literally."""
        escaped = html.escape(self.text, quote=False)
        return _MARKUP_TEMPLATES[self.emphasis].format(_PRESERVE_SPACES.format(escaped))


PLACEHOLDER_CONTENT = DisplayContent(DISPLAY_PLACEHOLDER, Emphasis.BOLD_LARGE)
EMPTY_INPUT_CONTENT = DisplayContent(EMPTY_INPUT_MESSAGE, Emphasis.ITALIC_LARGE)


def project_input(text: str) -> DisplayContent:
    """
    Map the input field's text to what the display label should show.

    Blank input (empty or whitespace only) yields the fallback message.
    Anything else is shown as typed: the strip is only used for the check.
    """
    if text.strip():
        return DisplayContent(text, Emphasis.BOLD_LARGE)
    return EMPTY_INPUT_CONTENT


class DisplayStore(QObject):
    """Holds the current display content and announces changes."""
    display_changed = Signal(object)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._content: DisplayContent = PLACEHOLDER_CONTENT

    @property
    def content(self) -> DisplayContent:
        return self._content

    def show_input(self, text: str) -> DisplayContent:
        content = project_input(text)
        self._set_content(content)
        return content

    def _set_content(self, content: DisplayContent) -> None:
        # Emitted even when unchanged; the label re-renders on every trigger
        self._content = content
        logger.debug(f"Display set to {content.emphasis}: {content.text!r}")
        self.display_changed.emit(self._content)
