"""Avatar images of characters, downloaded once and kept in memory."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable

from .textutil import debug_message

__all__ = ["AVATAR_URL_PREFIX", "AvatarCache", "avatar_url", "name_from_avatar_url"]

AVATAR_URL_PREFIX = "https://static.f-list.net/images/avatar/"
_SUFFIX = ".png"
_IMAGE_MAGIC = (b"\x89PNG\r\n\x1a\n", b"GIF87a", b"GIF89a", b"\xff\xd8\xff")

Fetcher = Callable[[str], bytes]
Callback = Callable[[bytes], None]


def avatar_url(name: str) -> str:
    """The URL of the avatar of character ``name``."""
    return f"{AVATAR_URL_PREFIX}{name.lower()}{_SUFFIX}"


def name_from_avatar_url(url: str) -> str:
    """The character name an avatar URL was built from."""
    if not (url.startswith(AVATAR_URL_PREFIX) and url.endswith(_SUFFIX)):
        raise ValueError(f"Not an avatar URL: {url}")
    return url[len(AVATAR_URL_PREFIX):-len(_SUFFIX)]


def _looks_like_image(data: bytes) -> bool:
    return bool(data) and data.startswith(_IMAGE_MAGIC)


class AvatarCache:
    """Fetches avatars and hands them to whoever asked for them.

    ``fetcher`` is called with a URL and returns the image bytes; it may
    raise OSError.
    """

    def __init__(self, fetcher: Fetcher) -> None:
        self.fetcher = fetcher
        self._images: dict[str, bytes] = {}
        self._pending: defaultdict[str, list[Callback]] = defaultdict(list)

    def get_avatar(self, name: str) -> bytes | None:
        """Return the cached avatar of ``name``, or None.

        Only avatars already fetched through :meth:`request` are returned.
        """
        key = name.lower()
        if key in self._images:
            return self._images[key]
        self._download(avatar_url(key))
        return None

    def request(self, name: str, callback: Callback) -> None:
        """Pass the avatar of ``name`` to ``callback`` once it is available."""
        key = name.lower()
        if key in self._images:
            callback(self._images[key])
            return
        self._pending[key].append(callback)
        self._download(avatar_url(key))

    def _download(self, url: str) -> None:
        try:
            data = self.fetcher(url)
        except OSError as exc:
            self.handle_download(url, b"", str(exc))
            return
        self.handle_download(url, data, None)

    def handle_download(self, url: str, data: bytes, error: str | None = None) -> bool:
        """Process a finished download; True if an avatar was delivered."""
        name = name_from_avatar_url(url)
        callbacks = self._pending.pop(name, [])
        if not callbacks:
            debug_message(f"Download with no button for {name}.")
            return False
        debug_message(f"Finished avatar download for {name}")
        if error or not _looks_like_image(data):
            return False
        self._images[name] = data
        for callback in callbacks:
            callback(data)
        return True