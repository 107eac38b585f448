"""Styled text values and the builder that accumulates them."""

from mdcompose.styled.styles import (
    BOLD,
    ITALIC,
    MONOSPACE,
    FontFamily,
    FontStyle,
    FontWeight,
    SpanStyle,
    TextDecoration,
    TextStyle,
)
from mdcompose.styled.text import (
    PLACEHOLDER_CHAR,
    Annotation,
    AnnotationKind,
    StyledRun,
    StyledText,
    StyledTextBuilder,
    StyleSpan,
)

__all__ = [
    "SpanStyle",
    "TextStyle",
    "FontStyle",
    "FontWeight",
    "FontFamily",
    "TextDecoration",
    "BOLD",
    "ITALIC",
    "MONOSPACE",
    "PLACEHOLDER_CHAR",
    "Annotation",
    "AnnotationKind",
    "StyleSpan",
    "StyledRun",
    "StyledText",
    "StyledTextBuilder",
]
