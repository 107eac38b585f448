import pytest

from mdcompose.images import AsyncImage, ImageLoader
from mdcompose.links import LinkOpener


class RecordingLinkOpener(LinkOpener):
    def __init__(self) -> None:
        self.opened: list[str] = []

    def open(self, url: str) -> None:
        self.opened.append(url)


class StaticImageLoader(ImageLoader):
    """Resolves every URL immediately to fake bytes."""

    def __init__(self) -> None:
        self.requested: list[str] = []

    def load(self, url: str) -> AsyncImage:
        self.requested.append(url)
        return AsyncImage.ready(url, f"img:{url}".encode())


@pytest.fixture
def link_opener() -> RecordingLinkOpener:
    return RecordingLinkOpener()


@pytest.fixture
def image_loader() -> StaticImageLoader:
    return StaticImageLoader()
