"""Render CommonMark documents into styled, interactive layout trees."""

from mdcompose.config import Settings
from mdcompose.logging_config import configure_logging, configure_logging_from_settings
from mdcompose.markdown import parse_markdown
from mdcompose.presenter import MarkdownText, Offset, present
from mdcompose.render import DocumentRenderer, render_document, render_raw_text
from mdcompose.view import MarkdownView, ViewMode

__all__ = [
    "parse_markdown",
    "render_document",
    "render_raw_text",
    "DocumentRenderer",
    "present",
    "MarkdownText",
    "Offset",
    "MarkdownView",
    "ViewMode",
    "Settings",
    "configure_logging",
    "configure_logging_from_settings",
]
