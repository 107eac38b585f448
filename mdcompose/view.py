"""Document view: switches between the rendered document and its raw source on double tap."""

from enum import StrEnum, auto

from mdcompose.config import Settings
from mdcompose.images import AsyncImage, HttpImageLoader, ImageLoader
from mdcompose.links import BrowserLinkOpener, LinkOpener
from mdcompose.markdown.parser import parse_markdown
from mdcompose.presenter import MarkdownText
from mdcompose.render.blocks import DocumentRenderer
from mdcompose.render.layout import Box, Column, Padding, iter_image_blocks, iter_text_blocks
from mdcompose.theme import Theme, get_theme

SURFACE_PADDING = Padding(start=16, end=16)


class ViewMode(StrEnum):
    RENDERED = auto()
    RAW_TEXT = auto()


class MarkdownView:
    def __init__(
        self,
        source: str,
        link_opener: LinkOpener,
        image_loader: ImageLoader | None = None,
        theme: Theme | None = None,
    ):
        self.source = source
        self.document = parse_markdown(source)
        self.link_opener = link_opener
        self.image_loader = image_loader
        self.renderer = DocumentRenderer(theme)
        self.mode = ViewMode.RENDERED
        self.text_presenters: list[MarkdownText] = []
        self._surface: Box | None = None

    @classmethod
    def from_settings(cls, source: str, settings: Settings) -> "MarkdownView":
        return cls(
            source,
            link_opener=BrowserLinkOpener(),
            image_loader=HttpImageLoader(
                timeout=settings.image_timeout_seconds,
                max_workers=settings.image_max_workers,
            ),
            theme=get_theme(settings.theme),
        )

    def on_double_tap(self) -> ViewMode:
        """Toggle between the rendered and raw views. Returns the new mode."""
        self.mode = ViewMode.RAW_TEXT if self.mode == ViewMode.RENDERED else ViewMode.RENDERED
        return self.mode

    def render(self) -> Box:
        """Build the surface for the current mode and one presenter per text block."""
        if self.mode == ViewMode.RENDERED:
            content = self.renderer.render_document(self.document)
        else:
            content = Column(children=[self.renderer.render_raw_text(self.source)])
        self._surface = Box(padding=SURFACE_PADDING, children=[content])
        self.text_presenters = [
            MarkdownText(block, self.link_opener, self.image_loader) for block in iter_text_blocks(self._surface)
        ]
        return self._surface

    def images(self) -> dict[str, AsyncImage]:
        """Start loading the block-level images of the last rendered surface, keyed by URL."""
        if self.image_loader is None or self._surface is None:
            return {}
        return {block.url: self.image_loader.load(block.url) for block in iter_image_blocks(self._surface)}
