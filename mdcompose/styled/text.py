"""Styled text: flattened text plus style spans and position-addressable annotations.

`StyledTextBuilder` accumulates text while a single stack tracks the style
spans and annotations that are currently open. `StyledText` is the immutable
result handed to the presenter.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from mdcompose.exceptions import StyleStackError
from mdcompose.styled.styles import SpanStyle

# Stand-in character occupying the slot of inline content (e.g. an image)
PLACEHOLDER_CHAR = "�"


class AnnotationKind(StrEnum):
    URL = "url"
    INLINE_IMAGE = "inline_image"


class Annotation(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: AnnotationKind
    value: str
    start: int
    end: int

    def covers(self, offset: int) -> bool:
        if self.start == self.end:
            return offset == self.start
        return self.start <= offset < self.end


class StyleSpan(BaseModel):
    model_config = ConfigDict(frozen=True)

    style: SpanStyle
    start: int
    end: int


class StyledRun(BaseModel):
    """A maximal stretch of text sharing one merged style."""

    model_config = ConfigDict(frozen=True)

    text: str
    start: int
    style: SpanStyle


class StyledText(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    spans: tuple[StyleSpan, ...] = ()
    annotations: tuple[Annotation, ...] = ()

    @classmethod
    def plain(cls, text: str) -> "StyledText":
        """Unstyled text without annotations."""
        return cls(text=text)

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    def get_annotations(self, start: int, end: int, kind: AnnotationKind | None = None) -> list[Annotation]:
        """Return annotations intersecting [start, end], in the order they were pushed.

        A point query (start == end) returns the annotations covering that offset.
        """
        if start == end:
            matches = [a for a in self.annotations if a.covers(start)]
        else:
            matches = [a for a in self.annotations if max(start, a.start) < min(end, a.end)]
        if kind is not None:
            matches = [a for a in matches if a.kind == kind]
        return matches

    def styles_at(self, offset: int) -> SpanStyle:
        """Merged style of every span covering `offset`; later spans win."""
        style = SpanStyle()
        for span in self.spans:
            if span.start <= offset < span.end:
                style = style.merge(span.style)
        return style

    def runs(self) -> list[StyledRun]:
        """Split the text into runs, each carrying the merged style active over it."""
        boundaries = {0, len(self.text)}
        for span in self.spans:
            boundaries.update((span.start, span.end))
        points = sorted(b for b in boundaries if 0 <= b <= len(self.text))

        runs: list[StyledRun] = []
        for start, end in zip(points, points[1:]):
            if start == end:
                continue
            style = self.styles_at(start)
            if runs and runs[-1].style == style:
                previous = runs.pop()
                runs.append(StyledRun(text=previous.text + self.text[start:end], start=previous.start, style=style))
            else:
                runs.append(StyledRun(text=self.text[start:end], start=start, style=style))
        return runs


@dataclass
class _OpenRange:
    start: int
    seq: int
    style: SpanStyle | None = None
    annotation_idx: int | None = None


@dataclass
class _PendingAnnotation:
    kind: AnnotationKind
    value: str
    start: int
    end: int | None = None


class StyledTextBuilder:
    """Mutable accumulator for StyledText.

    Styles and annotations share one stack; `pop()` closes whichever was pushed last.
    Prefer the `style()` and `annotation()` context managers, which always pop
    exactly what they pushed.
    """

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._length = 0
        self._pushes = 0
        self._stack: list[_OpenRange] = []
        # Closed spans with their push sequence, so outer spans merge before inner ones
        self._spans: list[tuple[int, StyleSpan]] = []
        self._annotations: list[_PendingAnnotation] = []

    def __len__(self) -> int:
        return self._length

    @property
    def depth(self) -> int:
        """Number of currently open styles and annotations."""
        return len(self._stack)

    def active_styles(self) -> list[SpanStyle]:
        return [r.style for r in self._stack if r.style is not None]

    def append(self, text: str) -> None:
        self._parts.append(text)
        self._length += len(text)

    def push_style(self, style: SpanStyle) -> int:
        """Open a style span at the current end. Returns the stack index."""
        self._stack.append(_OpenRange(start=self._length, seq=self._next_seq(), style=style))
        return len(self._stack) - 1

    def push_annotation(self, kind: AnnotationKind, value: str) -> int:
        """Open an annotation at the current end. Returns the stack index."""
        self._annotations.append(_PendingAnnotation(kind=kind, value=value, start=self._length))
        self._stack.append(
            _OpenRange(start=self._length, seq=self._next_seq(), annotation_idx=len(self._annotations) - 1)
        )
        return len(self._stack) - 1

    def _next_seq(self) -> int:
        self._pushes += 1
        return self._pushes

    def pop(self, index: int | None = None) -> None:
        """Close the most recently opened range, or every range down to `index`."""
        if not self._stack:
            raise StyleStackError("pop() called on an empty style stack")
        if index is None:
            self._close(self._stack.pop())
            return
        if not 0 <= index < len(self._stack):
            raise StyleStackError(f"Style stack index {index} out of range (depth {len(self._stack)})")
        while len(self._stack) > index:
            self._close(self._stack.pop())

    def _close(self, open_range: _OpenRange) -> None:
        if open_range.style is not None:
            span = StyleSpan(style=open_range.style, start=open_range.start, end=self._length)
            self._spans.append((open_range.seq, span))
        elif open_range.annotation_idx is not None:
            self._annotations[open_range.annotation_idx].end = self._length

    def append_inline_content(self, kind: AnnotationKind, value: str, alternate_text: str = PLACEHOLDER_CHAR) -> None:
        """Append a placeholder for inline content, covered by a `kind` annotation carrying `value`."""
        with self.annotation(kind, value):
            self.append(alternate_text)

    @contextmanager
    def style(self, style: SpanStyle) -> Iterator[None]:
        index = self.push_style(style)
        try:
            yield
        finally:
            self.pop(index)

    @contextmanager
    def annotation(self, kind: AnnotationKind, value: str) -> Iterator[None]:
        index = self.push_annotation(kind, value)
        try:
            yield
        finally:
            self.pop(index)

    def to_styled_text(self) -> StyledText:
        """Snapshot the builder; ranges still open are closed at the current end."""
        end = self._length
        spans = list(self._spans)
        spans.extend(
            (r.seq, StyleSpan(style=r.style, start=r.start, end=end)) for r in self._stack if r.style is not None
        )
        spans.sort(key=lambda item: item[0])
        annotations = tuple(
            Annotation(kind=a.kind, value=a.value, start=a.start, end=end if a.end is None else a.end)
            for a in self._annotations
        )
        return StyledText(text="".join(self._parts), spans=tuple(span for _, span in spans), annotations=annotations)
