"""Enumerations used throughout the client and a string/integer lookup table."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "EnumLookup",
    "MessageType",
    "TypingStatus",
    "ChannelMode",
    "AttentionMode",
    "BoolTristate",
    "CHANNEL_MODE_ENUM",
    "CHANNEL_MODE_DEFAULT",
    "ATTENTION_MODE_ENUM",
    "BOOL_TRISTATE_ENUM",
    "CHANNEL_MODE_LOOKUP",
    "ATTENTION_MODE_LOOKUP",
    "BOOL_TRISTATE_LOOKUP",
]


class EnumLookup:
    """Bidirectional mapping between textual keys and their positions in a list.

    The list is given as a comma separated string; surrounding whitespace of
    each key is ignored. The position of a key is its value.
    """

    def __init__(self, enumlist: str, default: str = "") -> None:
        keys = [key.strip() for key in enumlist.split(",")]
        self._values: dict[str, int] = {}
        self._keys: dict[int, str] = {}
        for index, key in enumerate(keys):
            self._values[key] = index
            self._keys[index] = key
        if not default:
            self.default_value = 0
            self.default_key = self._keys.get(0, "")
        else:
            self.default_key = default
            self.default_value = self._values.get(default, 0)

    def key_to_value(self, key: str, default: int | None = None) -> int:
        """Return the value for ``key``, or ``default`` (the table default if None)."""
        if default is None:
            default = self.default_value
        return self._values.get(key, default)

    def value_to_key(self, value: int) -> str:
        """Return the key for ``value``, or an empty string if there is none."""
        return self._keys.get(int(value), "")

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._values


class MessageType(IntEnum):
    LOGIN = 0
    ONLINE = 1
    OFFLINE = 2
    STATUS = 3
    CHANNEL_DESCRIPTION = 4
    CHANNEL_MODE = 5
    JOIN = 6
    LEAVE = 7
    CHANNEL_INVITE = 8
    KICK = 9
    KICKBAN = 10
    TIMEOUT = 11
    IGNORE_UPDATE = 12
    SYSTEM = 13
    REPORT = 14
    ERROR = 15
    BROADCAST = 16
    FEEDBACK = 17
    RPAD = 18
    CHAT = 19
    ROLL = 20
    NOTE = 21
    BOOKMARK = 22
    FRIEND = 23


class TypingStatus(IntEnum):
    CLEAR = 0
    TYPING = 1
    PAUSED = 2


class ChannelMode(IntEnum):
    UNKNOWN = 0
    CHAT = 1
    ADS = 2
    BOTH = 3


class AttentionMode(IntEnum):
    DEFAULT = 0
    NEVER = 1
    IFNOTFOCUSED = 2
    ALWAYS = 3


class BoolTristate(IntEnum):
    FALSE = 0
    TRUE = 1
    DEFAULT = 2


CHANNEL_MODE_ENUM = "unknown, chat, ads, both"
CHANNEL_MODE_DEFAULT = "unknown"
ATTENTION_MODE_ENUM = "default, never, ifnotfocused, always"
BOOL_TRISTATE_ENUM = "false, true, default"

CHANNEL_MODE_LOOKUP = EnumLookup(CHANNEL_MODE_ENUM, CHANNEL_MODE_DEFAULT)
ATTENTION_MODE_LOOKUP = EnumLookup(ATTENTION_MODE_ENUM)
BOOL_TRISTATE_LOOKUP = EnumLookup(BOOL_TRISTATE_ENUM)