"""Links and server images found in chat logs, and the on-disk image cache."""

from __future__ import annotations

import posixpath
import re
from collections.abc import Callable
from enum import Enum
from os import PathLike
from pathlib import Path
from urllib.parse import urlsplit

from .textutil import debug_message

__all__ = [
    "PROFILE_PREFIX",
    "LinkKind",
    "ResourceCache",
    "classify_link",
    "find_resource_urls",
    "cache_directory",
]

PROFILE_PREFIX = "https://www.f-list.net/c/"
_CHANNEL_PREFIX = "#AHI-"
_REPORT_PREFIX = "#CSA-"

# Only emoticons and avatars served by the chat site are fetched.
_IMAGE = re.compile(
    r"""<img class="e?icon" src="https://static\.f-list\.net/images/[^()"' ]*""",
    re.IGNORECASE | re.DOTALL | re.MULTILINE,
)
_SCHEME = re.compile("https", re.IGNORECASE)
_GIF_MAGIC = (b"GIF87a", b"GIF89a")

Fetcher = Callable[[str], bytes]


class LinkKind(Enum):
    """What a link under the mouse in a chat log points to."""

    NONE = "none"
    PROFILE = "profile"
    CHANNEL = "channel"
    REPORT = "report"
    OTHER = "other"


def classify_link(link: str) -> tuple[LinkKind, str]:
    """Return the kind of ``link`` and the name it carries.

    For a profile link the name is the character, for a channel link the
    channel id, for a staff report the call id. Other links carry no name.
    """
    if not link:
        return LinkKind.NONE, ""
    if link.startswith(PROFILE_PREFIX):
        name = link[len(PROFILE_PREFIX):]
        if name.endswith("/"):
            name = name[:-1]
        return LinkKind.PROFILE, name
    if link.startswith(_CHANNEL_PREFIX):
        return LinkKind.CHANNEL, link[len(_CHANNEL_PREFIX):]
    if link.startswith(_REPORT_PREFIX):
        return LinkKind.REPORT, link[len(_REPORT_PREFIX):]
    return LinkKind.OTHER, ""


def find_resource_urls(text: str) -> list[str]:
    """Return the URLs of the icon and emoticon images in ``text``, in order."""
    urls = []
    for match in _IMAGE.finditer(text):
        found = match.group(0)
        start = _SCHEME.search(found)
        urls.append(found[start.start():] if start else found)
    return urls


def cache_directory(url: str, root: str | PathLike[str] = "cache") -> Path:
    """Return, creating it if needed, the cache directory for ``url``.

    Emoticons go to ``eicon``, avatars to ``avatar``, anything else to the
    root itself.
    """
    directory = Path(root)
    if "eicon" in url:
        directory = directory / "eicon"
    elif "avatar" in url:
        directory = directory / "avatar"
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def _file_name(url: str) -> str:
    return posixpath.basename(urlsplit(url).path)


class ResourceCache:
    """Downloads images referenced by chat lines and keeps them on disk.

    ``fetcher`` is called with a URL and returns the body; it may raise
    OSError. Animated images are listed in ``animations``; still images are
    kept in ``images`` keyed by URL.
    """

    def __init__(self, root: str | PathLike[str] = "cache", fetcher: Fetcher | None = None) -> None:
        self.root = Path(root)
        self.fetcher = fetcher
        self.animations: list[str] = []
        self.images: dict[str, bytes] = {}
        self._loaded: set[str] = set()

    def is_loaded(self, url: str) -> bool:
        return url in self._loaded

    def path_for(self, url: str) -> Path:
        """The file the image at ``url`` is cached in."""
        return cache_directory(url, self.root) / _file_name(url)

    def request_resources(self, text: str) -> list[str]:
        """Fetch and store every image in ``text`` not yet loaded.

        Returns the URLs that were fetched. A failed download is skipped.
        """
        fetched = []
        if self.fetcher is None:
            return fetched
        for url in find_resource_urls(text):
            if self.is_loaded(url):
                continue
            try:
                data = self.fetcher(url)
            except OSError as exc:
                debug_message(f"Could not load resource {url}: {exc}")
                continue
            self.store(url, data)
            fetched.append(url)
        return fetched

    def store(self, url: str, data: bytes) -> Path:
        """Write ``data`` to the cache file for ``url`` unless already loaded."""
        path = self.path_for(url)
        if self.is_loaded(url):
            return path
        path.write_bytes(data)
        self._loaded.add(url)
        if data.startswith(_GIF_MAGIC):
            self.animations.append(url)
        else:
            self.images[url] = data
        return path