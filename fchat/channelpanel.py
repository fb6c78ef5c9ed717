"""State of one chat tab: its occupants, operators, lines and log file."""

from __future__ import annotations

import configparser
import json
import time
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from os import PathLike
from pathlib import Path
from typing import Any

from .channel import ChannelType
from .character import Character, Color
from .enums import ChannelMode, TypingStatus
from .textutil import debug_message, escape_file_name

__all__ = ["MAX_LINES", "ButtonColors", "ChannelPanel", "load_button_colors"]

MAX_LINES = 256

_VALID_TYPE_LIMIT = len(ChannelType)

_MODE_NAMES = {
    ChannelMode.CHAT: "Chat",
    ChannelMode.ADS: "Ads",
    ChannelMode.BOTH: "Both",
}

_TYPE_NAMES = {
    ChannelType.NORMAL: "Normal",
    ChannelType.ADHOC: "Adhoc",
    ChannelType.CONSOLE: "CONSOLE",
}

_LOG_DIRECTORIES = {
    ChannelType.NORMAL: "public",
    ChannelType.ADHOC: "private",
    ChannelType.PM: "pm",
    ChannelType.CONSOLE: "console",
}


@dataclass
class ButtonColors:
    """Background colours of a tab button in its different states."""

    inactive: Color = field(default_factory=lambda: Color(255, 255, 255))
    highlighted: Color = field(default_factory=lambda: Color(0, 255, 0))
    new_messages: Color = field(default_factory=lambda: Color(204, 255, 153))
    typing: Color = field(default_factory=lambda: Color(255, 153, 0))
    paused: Color = field(default_factory=lambda: Color(128, 128, 255))


_BUTTON_KEYS = {
    "inactive": "inactive",
    "highlighted": "highlighted",
    "newmessages": "new_messages",
    "typing": "typing",
    "paused": "paused",
}


def _to_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def load_button_colors(path: str | PathLike[str]) -> ButtonColors:
    """Read button colours from the ``[buttons]`` section of an INI file.

    Each entry is a comma separated ``red, green, blue`` triple; entries with
    fewer parts, and a missing or unreadable file, keep the defaults.
    """
    colors = ButtonColors()
    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read(path, encoding="utf-8")
    except (configparser.Error, UnicodeDecodeError):
        return colors
    if not parser.has_section("buttons"):
        return colors
    for key, attribute in _BUTTON_KEYS.items():
        raw = parser.get("buttons", key, fallback=None)
        if raw is None:
            continue
        parts = raw.strip().strip('"').split(",")
        if len(parts) >= 3:
            setattr(colors, attribute, Color(*(_to_int(part) for part in parts[:3])))
    return colors


class ChannelPanel:
    """One tab of the chat window: a channel, a private chat or the console.

    ``ui`` provides ``get_session(session_id)``, whose result has a
    ``character`` attribute; it is used to name log files. Logs are written
    below ``log_root``.
    """

    def __init__(
        self,
        ui: Any,
        session_id: str,
        panel_name: str,
        channel_name: str,
        channel_type: ChannelType,
        log_root: str | PathLike[str] = "logs",
    ) -> None:
        self.ui = ui
        self.session_id = session_id
        self.panel_name = panel_name
        self.channel_name = channel_name
        self.channel_type = ChannelType(channel_type)
        self.log_root = Path(log_root)
        self.title = channel_name
        self.description = ""
        self.recipient = ""
        self.input = ""
        self.active = True
        self.typing = TypingStatus.CLEAR
        self.typing_self = TypingStatus.CLEAR
        self.mode = ChannelMode.BOTH
        self.highlighted = False
        self.has_new_messages = False
        self.always_ping = False
        self.creation_time = int(time.time())
        self.keywords: list[str] = []
        self.owner = ""
        self._ops: dict[str, str] = {}
        self._characters: list[Character] = []
        self._lines: deque[str] = deque(maxlen=MAX_LINES)

    # -- type and operators ------------------------------------------------

    def set_type(self, channel_type: ChannelType) -> None:
        """Change the panel type; raises ValueError for an invalid type."""
        value = int(channel_type)
        if not 0 < value < _VALID_TYPE_LIMIT:
            raise ValueError(f"Tried to set an invalid channel type. {value}")
        self.channel_type = ChannelType(value)

    @property
    def ops(self) -> dict[str, str]:
        """Operators keyed by lower-case name."""
        return dict(self._ops)

    def set_ops(self, oplist: Iterable[str]) -> None:
        """Replace the operator list; its first entry is the channel owner."""
        names = list(oplist)
        self._ops = {name.lower(): name for name in names}
        self.owner = names[0] if names else ""

    def add_op(self, character_name: str) -> None:
        self._ops[character_name.lower()] = character_name

    def remove_op(self, character_name: str) -> None:
        self._ops.pop(character_name.lower(), None)

    # -- characters --------------------------------------------------------

    @property
    def characters(self) -> list[Character]:
        return list(self._characters)

    def add_char(self, character: Character, sort_list: bool = True) -> bool:
        """Add a character; False if it was already present."""
        if character is None:
            raise ValueError("Received null character.")
        if character in self._characters:
            debug_message(
                "[SERVER BUG] Server gave us a person joining a channel who was "
                f"already in the channel.{character.name}"
            )
            return False
        self._characters.append(character)
        if sort_list:
            self.sort_chars()
        return True

    def remove_char(self, character: Character) -> None:
        self._characters = [c for c in self._characters if c is not character]

    def has_character(self, character: Character) -> bool:
        return character in self._characters

    def empty_char_list(self) -> None:
        self._characters.clear()

    def _level(self, character: Character) -> int:
        return (
            (1 if character.friend else 0)
            + (2 if self.is_op(character) else 0)
            + (4 if self.is_owner(character) else 0)
            + (8 if character.chat_op else 0)
        )

    def sort_chars(self) -> None:
        """Order characters by rank, then by lower-case name.

        Chat operators rank above the owner, the owner above channel
        operators, and operators above friends.
        """
        self._characters.sort(key=lambda c: (-self._level(c), c.name.lower()))

    def is_op(self, character: Character | None) -> bool:
        if character is None:
            return False
        return character.name.lower() in self._ops

    def is_owner(self, character: Character | None) -> bool:
        if character is None:
            return False
        return character.name.lower() == self.owner.lower()

    # -- lines and logging -------------------------------------------------

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def add_line(self, line: str, log: bool = False) -> None:
        """Append a line, keeping the newest MAX_LINES; optionally log it."""
        self._lines.append(line)
        if log:
            self.log_line(line)

    def clear_lines(self) -> None:
        self._lines.clear()

    def log_path(self) -> Path:
        """The file today's lines of this panel are logged to."""
        name = ""
        session = self.ui.get_session(self.session_id) if self.ui is not None else None
        if session:
            name = escape_file_name(session.character) + "~"
        if self.channel_type == ChannelType.ADHOC:
            name += f"{escape_file_name(self.channel_name)}~{escape_file_name(self.title)}"
        else:
            name += escape_file_name(self.channel_name)
        name += f"~{date.today().strftime('%Y-%m-%d')}.html"
        directory = self.log_root / _LOG_DIRECTORIES.get(self.channel_type, "")
        return directory / name

    def log_line(self, line: str) -> Path:
        """Append ``line`` to the log file and return the file's path."""
        path = self.log_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("ab") as handle:
            handle.write((line + "<br />\n").encode("utf-8"))
        return path

    # -- presentation ------------------------------------------------------

    def button_style(self, checked: bool, colors: ButtonColors | None = None) -> str:
        """Style sheet for the tab button; a checked tab clears its alerts."""
        colors = colors or ButtonColors()
        if checked:
            self.highlighted = False
            self.has_new_messages = False
        if self.highlighted:
            color = colors.highlighted
        elif self.has_new_messages:
            color = colors.new_messages
        elif self.typing == TypingStatus.TYPING:
            color = colors.typing
        elif self.typing == TypingStatus.PAUSED:
            color = colors.paused
        else:
            color = colors.inactive
        return f"background-color: {color.hex};"

    def render_html(self, css: str = "") -> str:
        """The lines as one HTML document, preceded by ``css``."""
        return css + "<br />".join(self._lines)

    def to_json(self) -> str:
        """The lines as a JSON array of chat nodes."""
        nodes = [{"type": "chat", "by": "", "html": line} for line in self._lines]
        return json.dumps(nodes, separators=(",", ":"), ensure_ascii=False)

    def load_keywords(self, keywords: str) -> list[str]:
        """Set the highlight keywords from a comma separated string."""
        self.keywords = [word.strip() for word in keywords.split(",") if word.strip()]
        return list(self.keywords)

    def __str__(self) -> str:
        if self.channel_type == ChannelType.PM:
            type_name = f"PM to: {self.recipient}"
        else:
            type_name = _TYPE_NAMES.get(self.channel_type, "INVALID TYPE")
        return (
            f"Channel: {self.title}\n"
            f"Name: {self.channel_name}\n"
            f"Type: {type_name}\n"
            f"Lines: {len(self._lines)}\n"
            f"Active: {'Yes' if self.active else 'No'}\n"
            f"Mode: {_MODE_NAMES.get(self.mode, 'INVALID MODE')}"
        )