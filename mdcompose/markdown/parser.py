"""Markdown parsing using markdown-it-py.

Parses CommonMark source with markdown-it and converts the resulting
SyntaxTreeNode into the node model from `mdcompose.markdown.nodes`.
"""

from collections.abc import Callable
from typing import cast

from loguru import logger
from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from mdcompose.markdown.nodes import (
    BlockQuote,
    BulletList,
    Code,
    Document,
    Emphasis,
    FencedCodeBlock,
    HardLineBreak,
    Heading,
    HtmlBlock,
    HtmlInline,
    Image,
    IndentedCodeBlock,
    Link,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    SoftLineBreak,
    StrongEmphasis,
    Text,
    ThematicBreak,
)


def create_parser() -> MarkdownIt:
    """Create configured markdown-it parser."""
    return MarkdownIt("commonmark")


# Singleton parser instance
_parser: MarkdownIt | None = None


def get_parser() -> MarkdownIt:
    """Get or create the singleton parser instance."""
    global _parser
    if _parser is None:
        _parser = create_parser()
    return _parser


def parse_markdown(text: str) -> Document:
    """Parse markdown text into a Document tree.

    Args:
        text: Markdown text to parse

    Returns:
        Root Document node
    """
    tokens = get_parser().parse(text)
    return NodeConverter().convert(SyntaxTreeNode(tokens))


class NodeConverter:
    """Converts a markdown-it SyntaxTreeNode into the CommonMark node model."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[SyntaxTreeNode], Node]] = {
            # blocks
            "heading": self._convert_heading,
            "paragraph": self._convert_paragraph,
            "bullet_list": self._convert_bullet_list,
            "ordered_list": self._convert_ordered_list,
            "list_item": self._convert_list_item,
            "blockquote": self._convert_blockquote,
            "fence": self._convert_fence,
            "code_block": self._convert_code_block,
            "hr": self._convert_hr,
            "html_block": self._convert_html_block,
            # inlines
            "text": self._convert_text,
            "em": self._convert_em,
            "strong": self._convert_strong,
            "code_inline": self._convert_code_inline,
            "hardbreak": self._convert_hardbreak,
            "softbreak": self._convert_softbreak,
            "link": self._convert_link,
            "image": self._convert_image,
            "html_inline": self._convert_html_inline,
        }

    def convert(self, root: SyntaxTreeNode) -> Document:
        return Document(children=self._convert_children(root))

    def _convert_children(self, node: SyntaxTreeNode) -> list[Node]:
        children: list[Node] = []
        for child in node.children:
            # Paragraph and heading content sits in an "inline" wrapper
            if child.type == "inline":
                children.extend(self._convert_children(child))
                continue
            # Newer markdown-it versions emit empty text tokens beside delimiters
            if child.type == "text" and not child.content:
                continue
            handler = self._handlers.get(child.type)
            if handler is None:
                logger.debug(f"Dropping unsupported markdown node type {child.type!r}")
                continue
            children.append(handler(child))
        return children

    # === BLOCKS ===

    def _convert_heading(self, node: SyntaxTreeNode) -> Heading:
        level = int(node.tag[1:])  # h1 -> 1, h2 -> 2, etc.
        return Heading(level=level, children=self._convert_children(node))

    def _convert_paragraph(self, node: SyntaxTreeNode) -> Paragraph:
        return Paragraph(children=self._convert_children(node))

    def _convert_bullet_list(self, node: SyntaxTreeNode) -> BulletList:
        return BulletList(bullet_marker=node.markup or "-", children=self._convert_children(node))

    def _convert_ordered_list(self, node: SyntaxTreeNode) -> OrderedList:
        start = cast(int | str | None, node.attrs.get("start"))
        return OrderedList(
            start_number=int(start) if start is not None else 1,
            delimiter=node.markup or ".",
            children=self._convert_children(node),
        )

    def _convert_list_item(self, node: SyntaxTreeNode) -> ListItem:
        return ListItem(children=self._convert_children(node))

    def _convert_blockquote(self, node: SyntaxTreeNode) -> BlockQuote:
        return BlockQuote(children=self._convert_children(node))

    def _convert_fence(self, node: SyntaxTreeNode) -> FencedCodeBlock:
        return FencedCodeBlock(
            literal=node.content or "",
            info=node.info or "",
            fence_char=(node.markup or "`")[0],
        )

    def _convert_code_block(self, node: SyntaxTreeNode) -> IndentedCodeBlock:
        return IndentedCodeBlock(literal=node.content or "")

    def _convert_hr(self, node: SyntaxTreeNode) -> ThematicBreak:
        return ThematicBreak()

    def _convert_html_block(self, node: SyntaxTreeNode) -> HtmlBlock:
        return HtmlBlock(literal=node.content or "")

    # === INLINES ===

    def _convert_text(self, node: SyntaxTreeNode) -> Text:
        return Text(literal=node.content or "")

    def _convert_em(self, node: SyntaxTreeNode) -> Emphasis:
        return Emphasis(delimiter=node.markup or "*", children=self._convert_children(node))

    def _convert_strong(self, node: SyntaxTreeNode) -> StrongEmphasis:
        return StrongEmphasis(delimiter=node.markup or "**", children=self._convert_children(node))

    def _convert_code_inline(self, node: SyntaxTreeNode) -> Code:
        return Code(literal=node.content or "")

    def _convert_hardbreak(self, node: SyntaxTreeNode) -> HardLineBreak:
        return HardLineBreak()

    def _convert_softbreak(self, node: SyntaxTreeNode) -> SoftLineBreak:
        return SoftLineBreak()

    def _convert_link(self, node: SyntaxTreeNode) -> Link:
        return Link(
            destination=cast(str, node.attrs.get("href", "")),
            title=cast(str | None, node.attrs.get("title")),
            children=self._convert_children(node),
        )

    def _convert_image(self, node: SyntaxTreeNode) -> Image:
        # Alt text lives in the image's children, as in CommonMark
        return Image(
            destination=cast(str, node.attrs.get("src", "")),
            title=cast(str | None, node.attrs.get("title")),
            children=self._convert_children(node),
        )

    def _convert_html_inline(self, node: SyntaxTreeNode) -> HtmlInline:
        return HtmlInline(literal=node.content or "")
