"""Small text helpers shared across the client."""

from __future__ import annotations

import re

__all__ = [
    "debug_message",
    "is_broken_escaped_apos",
    "fix_broken_escaped_apos",
    "escape_file_name",
    "html_to_plain_text",
]

_SAFE_FILE_BYTES = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_ ."
)
_TAG = re.compile(r"<[^>]*>")
_ENTITIES = (
    ("&quot;", '"'),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&apos;", "'"),
    ("&nbsp;", " "),
    ("&amp;", "&"),
)


def debug_message(text: object) -> None:
    """Write a diagnostic line to standard output."""
    print(text, flush=True)


def is_broken_escaped_apos(data: str, n: int) -> bool:
    """Tell whether ``data`` holds a backslash-escaped apostrophe at index ``n``."""
    return n + 2 <= len(data) and data[n] == "\\" and data[n + 1] == "'"


def fix_broken_escaped_apos(data: str) -> str:
    """Return ``data`` with every backslash-escaped apostrophe unescaped."""
    return data.replace("\\'", "'")


def escape_file_name(name: str) -> str:
    """Make ``name`` safe for use as a file name.

    Letters, digits, ``-``, ``_``, space and ``.`` are kept; every other UTF-8
    byte becomes ``%`` followed by its lower-case hex value without padding.
    """
    parts = []
    for byte in name.encode("utf-8"):
        if byte in _SAFE_FILE_BYTES:
            parts.append(chr(byte))
        else:
            parts.append(f"%{byte:x}")
    return "".join(parts)


def html_to_plain_text(text: str) -> str:
    """Strip markup and decode the common ASCII entities.

    Every occurrence of the first tag found is removed; entities are then
    decoded, ``&amp;`` last.
    """
    output = text
    match = _TAG.search(output)
    if match:
        output = output.replace(match.group(0), "")
    for entity, char in _ENTITIES:
        output = output.replace(entity, char)
    return output