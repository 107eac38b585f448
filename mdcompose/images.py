"""Image loading collaborator.

Renderers never load images themselves; they only reserve space and hand the
destination string to an ImageLoader at presentation time. Loading happens off
the caller's thread and completion is observed through the returned AsyncImage.
"""

import abc
import threading
from collections.abc import Callable
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from enum import StrEnum, auto
from pathlib import Path
from urllib.parse import unquote, urlparse

import httpx
from loguru import logger

from mdcompose.exceptions import ImageLoadError


class ImageState(StrEnum):
    PENDING = auto()
    READY = auto()
    FAILED = auto()


class AsyncImage:
    """Image content that is either pending, ready, or failed."""

    def __init__(self, url: str, future: Future[bytes]):
        self.url = url
        self._future = future

    @property
    def state(self) -> ImageState:
        if not self._future.done():
            return ImageState.PENDING
        return ImageState.FAILED if self.error is not None else ImageState.READY

    @property
    def content(self) -> bytes | None:
        """Raw image bytes once ready, None while pending or after a failure."""
        if self.state != ImageState.READY:
            return None
        return self._future.result()

    @property
    def error(self) -> BaseException | None:
        if not self._future.done():
            return None
        # Loads still queued when the loader closes are cancelled
        if self._future.cancelled():
            return ImageLoadError(self.url, "cancelled")
        return self._future.exception()

    def wait(self, timeout: float | None = None) -> bytes:
        """Block until loaded. Raises ImageLoadError on failure or cancellation."""
        try:
            return self._future.result(timeout=timeout)
        except CancelledError as e:
            raise ImageLoadError(self.url, "cancelled") from e

    def add_done_callback(self, fn: Callable[["AsyncImage"], None]) -> None:
        self._future.add_done_callback(lambda _: fn(self))

    @classmethod
    def ready(cls, url: str, content: bytes) -> "AsyncImage":
        future: Future[bytes] = Future()
        future.set_result(content)
        return cls(url, future)


class ImageLoader(abc.ABC):
    @abc.abstractmethod
    def load(self, url: str) -> AsyncImage:
        """Start loading `url` and return immediately. The URL scheme is not interpreted by callers."""


class HttpImageLoader(ImageLoader):
    """Loads http(s) images with httpx and file:// URIs or bare paths from disk.

    Loads run on a small thread pool; each URL is fetched at most once.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        max_workers: int = 4,
        transport: httpx.BaseTransport | None = None,
    ):
        self._client = httpx.Client(
            follow_redirects=True,
            timeout=timeout,
            headers={"User-Agent": "mdcompose/0.1 (image loader)"},
            transport=transport,
        )
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="mdcompose-image")
        self._images: dict[str, AsyncImage] = {}
        self._lock = threading.Lock()

    def load(self, url: str) -> AsyncImage:
        with self._lock:
            image = self._images.get(url)
            if image is not None and image.state != ImageState.FAILED:
                return image
            image = AsyncImage(url, self._executor.submit(self._fetch, url))
            self._images[url] = image
        # Registered outside the lock: the callback runs inline if the load already finished
        image.add_done_callback(self._forget_failed)
        return image

    def _forget_failed(self, image: AsyncImage) -> None:
        """Drop failed loads from the cache so the next load() retries."""
        if image.state != ImageState.FAILED:
            return
        with self._lock:
            if self._images.get(image.url) is image:
                del self._images[image.url]

    def close(self) -> None:
        self._executor.shutdown(wait=True, cancel_futures=True)
        self._client.close()

    def __enter__(self) -> "HttpImageLoader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _fetch(self, url: str) -> bytes:
        try:
            scheme = urlparse(url).scheme
            if scheme in ("http", "https"):
                return self._fetch_http(url)
            if scheme in ("", "file"):
                return self._read_file(url)
            raise ImageLoadError(url, f"unsupported scheme {scheme!r}")
        except ImageLoadError as e:
            logger.warning(f"Image load failed: {e}")
            raise

    def _fetch_http(self, url: str) -> bytes:
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ImageLoadError(url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise ImageLoadError(url, str(e) or type(e).__name__) from e
        logger.debug(f"Loaded image {url} ({len(response.content)} bytes)")
        return response.content

    def _read_file(self, url: str) -> bytes:
        parsed = urlparse(url)
        path = Path(unquote(parsed.path)) if parsed.scheme == "file" else Path(url)
        try:
            return path.read_bytes()
        except OSError as e:
            raise ImageLoadError(url, e.strerror or str(e)) from e
