"""CommonMark object model consumed by the renderers.

Every node owns its ordered children. `parent` and `next` are back references
wired once by the parent's constructor; they are query-only and take no part
in equality or repr.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(kw_only=True)
class Node:
    children: list["Node"] = field(default_factory=list)
    parent: "Node | None" = field(default=None, init=False, repr=False, compare=False)
    next: "Node | None" = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        previous: Node | None = None
        for child in self.children:
            child.parent = self
            if previous is not None:
                previous.next = child
            previous = child

    @property
    def first_child(self) -> "Node | None":
        return self.children[0] if self.children else None

    @property
    def last_child(self) -> "Node | None":
        return self.children[-1] if self.children else None

    def walk(self) -> Iterator["Node"]:
        """Yield this node and all descendants in document order."""
        yield self
        for child in self.children:
            yield from child.walk()


class Block(Node):
    pass


class Inline(Node):
    pass


# === BLOCKS ===


@dataclass(kw_only=True)
class Document(Block):
    pass


@dataclass(kw_only=True)
class Heading(Block):
    level: int


@dataclass(kw_only=True)
class Paragraph(Block):
    pass


class ListBlock(Block):
    pass


@dataclass(kw_only=True)
class BulletList(ListBlock):
    bullet_marker: str = "-"


@dataclass(kw_only=True)
class OrderedList(ListBlock):
    start_number: int = 1
    delimiter: str = "."


@dataclass(kw_only=True)
class ListItem(Block):
    pass


@dataclass(kw_only=True)
class BlockQuote(Block):
    pass


@dataclass(kw_only=True)
class FencedCodeBlock(Block):
    literal: str
    info: str = ""
    fence_char: str = "`"


@dataclass(kw_only=True)
class IndentedCodeBlock(Block):
    literal: str


@dataclass(kw_only=True)
class ThematicBreak(Block):
    pass


@dataclass(kw_only=True)
class HtmlBlock(Block):
    literal: str


# === INLINES ===


@dataclass(kw_only=True)
class Text(Inline):
    literal: str


@dataclass(kw_only=True)
class Emphasis(Inline):
    delimiter: str = "*"


@dataclass(kw_only=True)
class StrongEmphasis(Inline):
    delimiter: str = "**"


@dataclass(kw_only=True)
class Code(Inline):
    literal: str


@dataclass(kw_only=True)
class HardLineBreak(Inline):
    pass


@dataclass(kw_only=True)
class SoftLineBreak(Inline):
    pass


@dataclass(kw_only=True)
class Link(Inline):
    destination: str
    title: str | None = None


@dataclass(kw_only=True)
class Image(Inline):
    destination: str
    title: str | None = None


@dataclass(kw_only=True)
class HtmlInline(Inline):
    literal: str
