import abc
import webbrowser

from loguru import logger


class LinkOpener(abc.ABC):
    @abc.abstractmethod
    def open(self, url: str) -> None:
        """Open `url`. Fire-and-forget; callers do not inspect a result."""


class BrowserLinkOpener(LinkOpener):
    """Opens links in the system web browser."""

    def open(self, url: str) -> None:
        if not webbrowser.open(url):
            logger.warning(f"No browser available to open {url}")
