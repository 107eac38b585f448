"""List numbering policy: item markers and nested list layout."""

import itertools
from collections.abc import Callable, Iterator

from mdcompose.markdown.nodes import BulletList, Document, ListBlock, Node, OrderedList
from mdcompose.render.layout import Box, LayoutNode, Padding

# Renders one non-list child of a list item, given the marker for that line
ItemRenderer = Callable[[Node, str], LayoutNode]

LIST_SPACING = 8
NESTED_LIST_INDENT = 8


def list_markers(list_block: ListBlock) -> Iterator[str]:
    """Infinite iterator of item prefixes for `list_block`.

    Ordered lists count up from their start number, one per rendered item line;
    bullet lists repeat their marker.
    """
    if isinstance(list_block, OrderedList):
        delimiter = list_block.delimiter
        return (f"{number}{delimiter} " for number in itertools.count(list_block.start_number))
    marker = list_block.bullet_marker if isinstance(list_block, BulletList) else "-"
    return itertools.repeat(f"{marker} ")


def list_padding(list_block: ListBlock) -> Padding:
    if isinstance(list_block.parent, Document):
        return Padding(bottom=LIST_SPACING, start=0)
    return Padding(bottom=0, start=NESTED_LIST_INDENT)


def render_list(list_block: ListBlock, item_renderer: ItemRenderer) -> Box:
    """Lay out the items of `list_block`.

    A list nested inside a list item becomes an indented child list with its own
    markers; every other child of an item is rendered with the next marker.
    """
    markers = list_markers(list_block)
    children: list[LayoutNode] = []
    for list_item in list_block.children:
        for child in list_item.children:
            if isinstance(child, ListBlock):
                children.append(render_list(child, item_renderer))
            else:
                children.append(item_renderer(child, next(markers)))
    return Box(padding=list_padding(list_block), children=children)
