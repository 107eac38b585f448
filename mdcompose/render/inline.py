"""Inline renderer: appends a block's inline content to a StyledTextBuilder."""

from loguru import logger

from mdcompose.markdown.nodes import (
    Code,
    Emphasis,
    HardLineBreak,
    Image,
    Link,
    Node,
    Paragraph,
    SoftLineBreak,
    StrongEmphasis,
    Text,
)
from mdcompose.styled.styles import BOLD, ITALIC, MONOSPACE, SpanStyle, TextDecoration
from mdcompose.styled.text import AnnotationKind, StyledTextBuilder
from mdcompose.theme import Colors


def link_style(colors: Colors) -> SpanStyle:
    return SpanStyle(color=colors.primary, text_decoration=TextDecoration.UNDERLINE)


def append_inline(parent: Node, builder: StyledTextBuilder, colors: Colors) -> None:
    """Append the inline children of `parent` to `builder`.

    Every style or annotation opened for a child is closed before moving on to
    its next sibling, so the builder's stack depth is unchanged on return.
    """
    for child in parent.children:
        match child:
            case Paragraph():
                append_inline(child, builder, colors)
            case Text():
                builder.append(child.literal)
            case Image():
                builder.append_inline_content(AnnotationKind.INLINE_IMAGE, child.destination)
            case Emphasis():
                with builder.style(ITALIC):
                    append_inline(child, builder, colors)
            case StrongEmphasis():
                with builder.style(BOLD):
                    append_inline(child, builder, colors)
            case Code():
                with builder.style(MONOSPACE):
                    builder.append(child.literal)
            case HardLineBreak():
                # Monospace around the newline keeps line metrics identical to earlier output
                with builder.style(MONOSPACE):
                    builder.append("\n")
            case SoftLineBreak():
                builder.append(" ")
            case Link():
                with builder.style(link_style(colors)), builder.annotation(AnnotationKind.URL, child.destination):
                    append_inline(child, builder, colors)
            case _:
                logger.debug(f"Skipping {type(child).__name__} in inline content")
