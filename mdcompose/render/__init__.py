"""Tree-to-layout rendering: block renderer, inline renderer and list numbering."""

from mdcompose.render.blocks import DocumentRenderer, render_document, render_raw_text
from mdcompose.render.inline import append_inline
from mdcompose.render.layout import (
    Alignment,
    Box,
    Column,
    ImageBlock,
    LayoutNode,
    Padding,
    Placeholder,
    TextBlock,
    VerticalAlign,
    VerticalRule,
    iter_image_blocks,
    iter_layout,
    iter_text_blocks,
)
from mdcompose.render.lists import list_markers, render_list

__all__ = [
    # Renderers
    "DocumentRenderer",
    "render_document",
    "render_raw_text",
    "append_inline",
    "list_markers",
    "render_list",
    # Layout
    "LayoutNode",
    "Column",
    "Box",
    "TextBlock",
    "ImageBlock",
    "Padding",
    "Placeholder",
    "VerticalRule",
    "Alignment",
    "VerticalAlign",
    "iter_layout",
    "iter_text_blocks",
    "iter_image_blocks",
]
