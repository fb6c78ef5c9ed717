"""Chat messages routed from sessions to the user interface."""

from __future__ import annotations

from datetime import datetime

from .enums import MessageType
from .textutil import html_to_plain_text

__all__ = ["Message"]


def _clock(timestamp: datetime) -> str:
    hour = timestamp.hour % 12 or 12
    suffix = "AM" if timestamp.hour < 12 else "PM"
    return f"{hour:02d}:{timestamp.minute:02d}:{timestamp.second:02d} {suffix}"


class Message:
    """A message with its source, destinations and delivery flags.

    The routing methods return the message itself so calls can be chained.
    """

    def __init__(self, message: str = "", message_type: MessageType = MessageType.ERROR) -> None:
        self.timestamp = datetime.now()
        self.message = message
        self.message_type = message_type
        self.session_id = ""
        self.destination_channels: list[str] = []
        self.destination_characters: list[str] = []
        self.source_channel = ""
        self.source_character = ""
        self.console = False
        self.notify = False
        self.broadcast = False
        self._formatted: str | None = None
        self._plain_text = ""

    def to_user(self, notify: bool = True, console: bool = True) -> "Message":
        self.notify = notify
        self.console = console
        return self

    def to_broadcast(self, broadcast: bool = True) -> "Message":
        self.broadcast = broadcast
        return self

    def to_channel(self, channel_name: str) -> "Message":
        if channel_name not in self.destination_channels:
            self.destination_channels.append(channel_name)
        return self

    def to_character(self, character_name: str) -> "Message":
        if character_name not in self.destination_characters:
            self.destination_characters.append(character_name)
        return self

    def from_session(self, session_id: str) -> "Message":
        self.session_id = session_id
        return self

    def from_channel(self, channel_name: str) -> "Message":
        self.source_channel = channel_name
        return self

    def from_character(self, character_name: str) -> "Message":
        self.source_character = character_name
        return self

    def formatted(self) -> str:
        """The message as HTML prefixed with its time; computed once."""
        if self._formatted is None:
            self._formatted = f"<small>[{_clock(self.timestamp)}]</small> {self.message}"
            self._plain_text = html_to_plain_text(self._formatted)
        return self._formatted

    def plain_text(self) -> str:
        """The formatted message with markup stripped."""
        self.formatted()
        return self._plain_text