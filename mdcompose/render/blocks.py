"""Block renderer: turns a Document tree into a layout tree.

Walks block-level children, dispatching per node kind. Text-bearing blocks go
through the inline renderer; lists and quotes recurse. Spacing depends on
whether a block sits directly under the Document.
"""

from collections.abc import Callable

from loguru import logger

from mdcompose.markdown.nodes import (
    BlockQuote,
    BulletList,
    Document,
    FencedCodeBlock,
    Heading,
    Image,
    IndentedCodeBlock,
    ListBlock,
    Node,
    OrderedList,
    Paragraph,
    ThematicBreak,
)
from mdcompose.render.inline import append_inline
from mdcompose.render.layout import (
    Alignment,
    Box,
    Column,
    ImageBlock,
    LayoutNode,
    Padding,
    TextBlock,
    VerticalRule,
    placeholder_for,
)
from mdcompose.render.lists import render_list
from mdcompose.styled.styles import ITALIC, FontFamily, SpanStyle, TextStyle
from mdcompose.styled.text import StyledText, StyledTextBuilder
from mdcompose.theme import Theme, light_theme

BLOCK_SPACING = 8
CODE_INDENT = 8
QUOTE_PADDING = Padding(start=16, top=4, bottom=4)
QUOTE_RULE_WIDTH = 2
QUOTE_RULE_OFFSET = 12

CODE_STYLE = TextStyle(font_family=FontFamily.MONOSPACE)


def _bottom_spacing(node: Node) -> float:
    return BLOCK_SPACING if isinstance(node.parent, Document) else 0


class DocumentRenderer:
    """Renders Document trees with a fixed theme.

    Holds no per-render state: rendering the same tree twice gives equal layouts.
    """

    def __init__(self, theme: Theme | None = None):
        self.theme = theme or light_theme()
        self._handlers: dict[type[Node], Callable[[Node], LayoutNode | None]] = {
            BlockQuote: self._render_blockquote,
            ThematicBreak: self._render_thematic_break,
            Heading: self._render_heading,
            Paragraph: self._render_paragraph,
            FencedCodeBlock: self._render_fenced_code,
            IndentedCodeBlock: self._render_indented_code,
            Image: self._render_image,
            BulletList: self._render_list,
            OrderedList: self._render_list,
        }

    def render_document(self, root: Document) -> Column:
        return self.render_block_children(root)

    def render_block_children(self, parent: Node) -> Column:
        """Render every direct child of `parent` in document order."""
        children: list[LayoutNode] = []
        for child in parent.children:
            rendered = self._render_block(child)
            if rendered is not None:
                children.append(rendered)
        return Column(children=children)

    def render_raw_text(self, source: str) -> TextBlock:
        """Plain, unstyled rendering of markdown source."""
        return TextBlock(text=StyledText.plain(source))

    def _render_block(self, node: Node) -> LayoutNode | None:
        handler = self._handlers.get(type(node))
        if handler is None:
            logger.debug(f"Skipping unsupported block {type(node).__name__}")
            return None
        return handler(node)

    def _text_block(self, text: StyledText, style: TextStyle) -> TextBlock:
        return TextBlock(text=text, style=style, placeholder=placeholder_for(style))

    def _body_text(self, nodes: list[Node], prefix: str = "", extra: SpanStyle | None = None) -> TextBlock:
        """Body-styled text for the inline content of `nodes`, with an optional literal prefix."""
        body = self.theme.typography.body1
        builder = StyledTextBuilder()
        with builder.style(body.to_span_style().merge(extra)):
            builder.append(prefix)
            for node in nodes:
                append_inline(node, builder, self.theme.colors)
        return self._text_block(builder.to_styled_text(), body)

    # === BLOCKS ===

    def _render_heading(self, node: Node) -> LayoutNode:
        assert isinstance(node, Heading)
        style = self.theme.heading_style(node.level)
        if style is None:
            logger.debug(f"Invalid heading level {node.level}, rendering children as plain blocks")
            return self.render_block_children(node)

        builder = StyledTextBuilder()
        append_inline(node, builder, self.theme.colors)
        return Box(
            padding=Padding(bottom=_bottom_spacing(node)),
            children=[self._text_block(builder.to_styled_text(), style)],
        )

    def _render_paragraph(self, node: Node) -> LayoutNode:
        assert isinstance(node, Paragraph)
        first = node.first_child
        if isinstance(first, Image) and first is node.last_child:
            # Paragraph with a single image
            return self._render_image(first)
        return Box(padding=Padding(bottom=_bottom_spacing(node)), children=[self._body_text([node])])

    def _render_image(self, node: Node) -> LayoutNode:
        assert isinstance(node, Image)
        return Box(
            fill_max_width=True,
            alignment=Alignment.CENTER,
            children=[ImageBlock(url=node.destination)],
        )

    def _render_list(self, node: Node) -> LayoutNode:
        assert isinstance(node, ListBlock)
        return render_list(node, self._render_list_item)

    def _render_list_item(self, node: Node, marker: str) -> LayoutNode:
        return self._body_text([node], prefix=marker)

    def _render_blockquote(self, node: Node) -> LayoutNode:
        """Quote with a left rule. Runs of paragraphs merge into one italic text;
        other blocks render nested, with the quote as their parent."""
        assert isinstance(node, BlockQuote)
        children: list[LayoutNode] = []
        paragraphs: list[Node] = []

        def flush() -> None:
            if paragraphs:
                children.append(self._body_text(list(paragraphs), extra=ITALIC))
                paragraphs.clear()

        for child in node.children:
            if isinstance(child, Paragraph):
                paragraphs.append(child)
                continue
            flush()
            rendered = self._render_block(child)
            if rendered is not None:
                children.append(rendered)
        flush()

        return Box(
            padding=QUOTE_PADDING,
            rule=VerticalRule(
                color=self.theme.colors.on_background,
                stroke_width=QUOTE_RULE_WIDTH,
                offset=QUOTE_RULE_OFFSET,
            ),
            children=children,
        )

    def _render_fenced_code(self, node: Node) -> LayoutNode:
        assert isinstance(node, FencedCodeBlock)
        return Box(
            padding=Padding(bottom=_bottom_spacing(node), start=CODE_INDENT),
            children=[TextBlock(text=StyledText.plain(node.literal), style=CODE_STYLE)],
        )

    def _render_indented_code(self, node: Node) -> None:
        # Ignored
        return None

    def _render_thematic_break(self, node: Node) -> None:
        # Ignored
        return None


def render_document(root: Document, theme: Theme | None = None) -> Column:
    """Render a parsed Document into a layout tree."""
    return DocumentRenderer(theme).render_document(root)


def render_raw_text(source: str, theme: Theme | None = None) -> TextBlock:
    """Render markdown source verbatim, without interpreting it."""
    return DocumentRenderer(theme).render_raw_text(source)
