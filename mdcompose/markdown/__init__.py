"""Markdown parsing into the CommonMark node model."""

from mdcompose.markdown.nodes import (
    Block,
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
    Inline,
    Link,
    ListBlock,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    SoftLineBreak,
    StrongEmphasis,
    Text,
    ThematicBreak,
)
from mdcompose.markdown.parser import NodeConverter, parse_markdown

__all__ = [
    # Parser
    "parse_markdown",
    "NodeConverter",
    # Nodes
    "Node",
    "Block",
    "Inline",
    "Document",
    "Heading",
    "Paragraph",
    "ListBlock",
    "BulletList",
    "OrderedList",
    "ListItem",
    "BlockQuote",
    "FencedCodeBlock",
    "IndentedCodeBlock",
    "ThematicBreak",
    "HtmlBlock",
    "Text",
    "Emphasis",
    "StrongEmphasis",
    "Code",
    "HardLineBreak",
    "SoftLineBreak",
    "Link",
    "Image",
    "HtmlInline",
]
