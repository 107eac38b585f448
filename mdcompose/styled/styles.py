from enum import StrEnum, auto
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

Color = Annotated[str, Field(pattern=r"^#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")]


class FontStyle(StrEnum):
    NORMAL = auto()
    ITALIC = auto()


class FontWeight(StrEnum):
    LIGHT = auto()
    NORMAL = auto()
    MEDIUM = auto()
    BOLD = auto()


class FontFamily(StrEnum):
    DEFAULT = auto()
    SANS_SERIF = auto()
    SERIF = auto()
    MONOSPACE = auto()


class TextDecoration(StrEnum):
    NONE = auto()
    UNDERLINE = auto()
    LINE_THROUGH = auto()


class SpanStyle(BaseModel):
    """Character-level style attributes. None means inherit."""

    model_config = ConfigDict(frozen=True)

    color: Color | None = None
    font_size: float | None = None
    font_weight: FontWeight | None = None
    font_style: FontStyle | None = None
    font_family: FontFamily | None = None
    text_decoration: TextDecoration | None = None

    def merge(self, other: "SpanStyle | None") -> "SpanStyle":
        """Return this style overlaid with the non-null attributes of `other`."""
        if other is None:
            return self
        overrides = {name: value for name in SpanStyle.model_fields if (value := getattr(other, name)) is not None}
        return self.model_copy(update=overrides)


class TextStyle(SpanStyle):
    """Span attributes plus paragraph-level attributes for a whole text block."""

    line_height: float | None = None

    def to_span_style(self) -> SpanStyle:
        return SpanStyle(**{name: getattr(self, name) for name in SpanStyle.model_fields})


ITALIC = SpanStyle(font_style=FontStyle.ITALIC)
BOLD = SpanStyle(font_weight=FontWeight.BOLD)
MONOSPACE = SpanStyle(font_family=FontFamily.MONOSPACE)
