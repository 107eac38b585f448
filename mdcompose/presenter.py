"""Interactive text presenter: tap-to-open links and lazy inline images.

The host lays a TextBlock out with its own text engine, reports the realized
layout through `on_text_layout`, and forwards taps to `on_tap`.
"""

from typing import NamedTuple, Protocol

from loguru import logger

from mdcompose.images import AsyncImage, ImageLoader
from mdcompose.links import LinkOpener
from mdcompose.render.layout import TextBlock, placeholder_for
from mdcompose.styled.styles import TextStyle
from mdcompose.styled.text import AnnotationKind, StyledText


class Offset(NamedTuple):
    x: float
    y: float


class TextLayoutResult(Protocol):
    def get_offset_for_position(self, position: Offset) -> int:
        """Map a point in the laid-out text to a character offset."""
        ...


class GridTextLayout:
    """Realized layout for text drawn on a fixed cell grid (terminals, monospace canvases).

    Lines break only at newline characters.
    """

    def __init__(self, text: str, cell_width: float, line_height: float):
        if cell_width <= 0 or line_height <= 0:
            raise ValueError(f"Cell size must be positive, got {cell_width}x{line_height}")
        self.lines = text.split("\n")
        self.cell_width = cell_width
        self.line_height = line_height

    def get_offset_for_position(self, position: Offset) -> int:
        row = min(max(int(position.y // self.line_height), 0), len(self.lines) - 1)
        column = min(max(int(position.x // self.cell_width), 0), len(self.lines[row]))
        return sum(len(line) + 1 for line in self.lines[:row]) + column


class MarkdownText:
    """Presents one TextBlock and dispatches taps on its annotations."""

    def __init__(self, block: TextBlock, link_opener: LinkOpener, image_loader: ImageLoader | None = None):
        self.block = block
        self.link_opener = link_opener
        self.image_loader = image_loader
        self.layout_result: TextLayoutResult | None = None

    @property
    def text(self) -> StyledText:
        return self.block.text

    def on_text_layout(self, layout_result: TextLayoutResult) -> None:
        """Record the layout realized by the latest layout pass."""
        self.layout_result = layout_result

    def on_tap(self, position: Offset) -> None:
        if self.layout_result is None:
            return
        offset = self.layout_result.get_offset_for_position(position)
        annotations = self.text.get_annotations(offset, offset)
        if not annotations:
            return
        annotation = annotations[0]
        if annotation.kind == AnnotationKind.URL:
            logger.debug(f"Opening link {annotation.value}")
            self.link_opener.open(annotation.value)

    def inline_images(self) -> dict[int, AsyncImage]:
        """Start loading every inline image, keyed by the offset of its placeholder."""
        if self.image_loader is None:
            return {}
        return {
            a.start: self.image_loader.load(a.value)
            for a in self.text.annotations
            if a.kind == AnnotationKind.INLINE_IMAGE
        }


def present(
    text: StyledText,
    style: TextStyle,
    link_opener: LinkOpener,
    image_loader: ImageLoader | None = None,
) -> MarkdownText:
    """Wrap styled text for display; `result.block` is the layout and `result.on_tap` the tap handler."""
    block = TextBlock(text=text, style=style, placeholder=placeholder_for(style))
    return MarkdownText(block, link_opener, image_loader)
