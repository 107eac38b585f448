"""Toolkit-agnostic layout tree produced by the block renderer.

Hosts walk this tree and map each node onto their own widgets. All values are
plain data, so two renders of the same document compare equal.
"""

from collections.abc import Iterator
from enum import StrEnum, auto
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from mdcompose.styled.styles import Color, TextStyle
from mdcompose.styled.text import StyledText


class Alignment(StrEnum):
    START = auto()
    CENTER = auto()


class VerticalAlign(StrEnum):
    TOP = auto()
    CENTER = auto()
    BOTTOM = auto()


class Padding(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: float = 0
    top: float = 0
    end: float = 0
    bottom: float = 0


class VerticalRule(BaseModel):
    """A line drawn behind a box, from its top to its bottom, at `offset` from its start edge."""

    model_config = ConfigDict(frozen=True)

    color: Color
    stroke_width: float = 2
    offset: float = 12


class Placeholder(BaseModel):
    """Space reserved in a text flow for inline content such as an image."""

    model_config = ConfigDict(frozen=True)

    width: float
    height: float
    vertical_align: VerticalAlign = VerticalAlign.BOTTOM


class TextBlock(BaseModel):
    kind: Literal["text"] = "text"
    text: StyledText
    style: TextStyle = TextStyle()
    placeholder: Placeholder | None = None


class ImageBlock(BaseModel):
    kind: Literal["image"] = "image"
    url: str
    fill_max_width: bool = True
    alignment: Alignment = Alignment.CENTER


class Box(BaseModel):
    kind: Literal["box"] = "box"
    padding: Padding = Padding()
    rule: VerticalRule | None = None
    fill_max_width: bool = False
    alignment: Alignment = Alignment.START
    children: list["LayoutNode"] = Field(default_factory=list)


class Column(BaseModel):
    kind: Literal["column"] = "column"
    children: list["LayoutNode"] = Field(default_factory=list)


LayoutNode = Annotated[TextBlock | ImageBlock | Box | Column, Field(discriminator="kind")]

Box.model_rebuild()
Column.model_rebuild()


def iter_layout(node: TextBlock | ImageBlock | Box | Column) -> Iterator[TextBlock | ImageBlock | Box | Column]:
    """Yield `node` and every descendant in document order."""
    yield node
    if isinstance(node, Box | Column):
        for child in node.children:
            yield from iter_layout(child)


def iter_text_blocks(node: TextBlock | ImageBlock | Box | Column) -> Iterator[TextBlock]:
    return (n for n in iter_layout(node) if isinstance(n, TextBlock))


def iter_image_blocks(node: TextBlock | ImageBlock | Box | Column) -> Iterator[ImageBlock]:
    return (n for n in iter_layout(node) if isinstance(n, ImageBlock))


def placeholder_for(style: TextStyle) -> Placeholder | None:
    """Square inline-content slot sized to the style's font, if it has one."""
    if style.font_size is None:
        return None
    return Placeholder(width=style.font_size, height=style.font_size)
