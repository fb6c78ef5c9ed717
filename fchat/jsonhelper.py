"""Helpers that build small JSON objects from strings."""

from __future__ import annotations

import json
from collections.abc import Mapping

__all__ = ["json_from_map", "json_key_value"]


def _dump(obj: dict[str, str]) -> str:
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)


def json_from_map(mapping: Mapping[str, str]) -> str:
    """Return a compact JSON object holding ``mapping`` with keys in sorted order."""
    return _dump({str(key): str(mapping[key]) for key in sorted(mapping)})


def json_key_value(key: str, value: str) -> str:
    """Return a compact JSON object holding the single pair ``key: value``."""
    return _dump({str(key): str(value)})