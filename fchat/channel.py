"""Chat channels and the interface through which they report to the user."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import TYPE_CHECKING, Any

from .enums import ChannelMode, MessageType, TypingStatus

if TYPE_CHECKING:
    from .message import Message

__all__ = ["ChannelType", "UserInterface", "Channel"]


class ChannelType(IntEnum):
    NORMAL = 0
    ADHOC = 1
    PM = 2
    CONSOLE = 3


class UserInterface(ABC):
    """What a session needs from the user interface it reports to."""

    @abstractmethod
    def get_session(self, session_id: str) -> Any:
        """Return the session with ``session_id``, or None."""

    @abstractmethod
    def set_chat_operator(self, session: Any, character_operator: str, op_status: bool) -> None:
        """Mark a character as a global chat operator or not."""

    @abstractmethod
    def open_character_profile(self, session: Any, character_name: str) -> None:
        """Show the profile of a character."""

    @abstractmethod
    def add_character_chat(self, session: Any, character_name: str) -> None:
        """Open a private chat with a character."""

    @abstractmethod
    def add_channel(self, session: Any, name: str, title: str) -> None:
        """Make a channel known to the interface."""

    @abstractmethod
    def remove_channel(self, session: Any, name: str) -> None:
        """Forget a channel."""

    @abstractmethod
    def add_channel_character(
        self, session: Any, channel_name: str, character_name: str, notify: bool
    ) -> None:
        """A character entered a channel."""

    @abstractmethod
    def remove_channel_character(self, session: Any, channel_name: str, character_name: str) -> None:
        """A character left a channel."""

    @abstractmethod
    def set_channel_operator(
        self, session: Any, channel_name: str, character_name: str, op_status: bool
    ) -> None:
        """A character gained or lost operator status in a channel."""

    @abstractmethod
    def join_channel(self, session: Any, channel_name: str) -> None:
        """The session joined a channel."""

    @abstractmethod
    def leave_channel(self, session: Any, channel_name: str) -> None:
        """The session left a channel."""

    @abstractmethod
    def set_channel_description(self, session: Any, channel_name: str, description: str) -> None:
        """A channel's description changed."""

    @abstractmethod
    def set_channel_mode(self, session: Any, channel_name: str, mode: ChannelMode) -> None:
        """A channel's mode changed."""

    @abstractmethod
    def notify_channel_ready(self, session: Any, channel_name: str) -> None:
        """A channel finished its initial setup."""

    @abstractmethod
    def notify_character_online(self, session: Any, character_name: str, online: bool) -> None:
        """A character came online or went offline."""

    @abstractmethod
    def notify_character_status_update(self, session: Any, character_name: str) -> None:
        """A character's status changed."""

    @abstractmethod
    def set_character_typing_status(
        self, session: Any, character_name: str, typing_status: TypingStatus
    ) -> None:
        """A character's typing status changed."""

    @abstractmethod
    def notify_character_custom_kink_data_updated(self, session: Any, character_name: str) -> None:
        """New custom kink data arrived for a character."""

    @abstractmethod
    def notify_character_profile_data_updated(self, session: Any, character_name: str) -> None:
        """New profile data arrived for a character."""

    @abstractmethod
    def message_message(self, message: "Message") -> None:
        """Deliver a routed message."""

    @abstractmethod
    def message_many(
        self,
        session: Any,
        channels: list[str],
        characters: list[str],
        system: bool,
        message: str,
        message_type: MessageType,
    ) -> None:
        """Deliver a message to several channels and characters."""

    @abstractmethod
    def message_all(self, session: Any, message: str, message_type: MessageType) -> None:
        """Deliver a message everywhere."""

    @abstractmethod
    def message_channel(
        self,
        session: Any,
        channel_name: str,
        message: str,
        message_type: MessageType,
        console: bool = False,
        notify: bool = False,
    ) -> None:
        """Deliver a message to a channel."""

    @abstractmethod
    def message_character(
        self, session: Any, character_name: str, message: str, message_type: MessageType
    ) -> None:
        """Deliver a message to a private chat."""

    @abstractmethod
    def message_system(self, session: Any, message: str, message_type: MessageType) -> None:
        """Deliver a system message."""

    @abstractmethod
    def update_known_channel_list(self, session: Any) -> None:
        """The list of public channels changed."""

    @abstractmethod
    def update_known_open_room_list(self, session: Any) -> None:
        """The list of open private rooms changed."""


class Channel:
    """A channel a session takes part in.

    ``session`` must have an ``account`` whose ``ui`` is a
    :class:`UserInterface`; every change is reported there.
    """

    def __init__(self, session: Any, name: str, title: str) -> None:
        self.session = session
        self.name = name
        self.title = title
        self.description = ""
        self.joined = True
        self.mode = ChannelMode.BOTH
        self.type = ChannelType.ADHOC if name.startswith("ADH-") else ChannelType.NORMAL
        self._characters: dict[str, str] = {}
        self._operators: dict[str, str] = {}

    @property
    def _ui(self) -> UserInterface:
        return self.session.account.ui

    @property
    def characters(self) -> list[str]:
        """Names of the characters present, ordered by lower-case name."""
        return [self._characters[key] for key in sorted(self._characters)]

    @property
    def operators(self) -> list[str]:
        """Names of the channel operators, ordered by lower-case name."""
        return [self._operators[key] for key in sorted(self._operators)]

    def is_character_present(self, character_name: str) -> bool:
        return character_name.lower() in self._characters

    def is_character_operator(self, character_name: str) -> bool:
        return character_name.lower() in self._operators

    def add_character(self, character_name: str, notify: bool = False) -> None:
        """Record a character as present; the first spelling seen is kept."""
        key = character_name.lower()
        if not self._characters.get(key):
            self._characters[key] = character_name
        self._ui.add_channel_character(self.session, self.name, character_name, notify)

    def remove_character(self, character_name: str) -> None:
        self._characters.pop(character_name.lower(), None)
        self._ui.remove_channel_character(self.session, self.name, character_name)

    def add_operator(self, character_name: str) -> None:
        """Record a channel operator; the first spelling seen is kept."""
        key = character_name.lower()
        if not self._operators.get(key):
            self._operators[key] = character_name
        self._ui.set_channel_operator(self.session, self.name, character_name, True)

    def remove_operator(self, character_name: str) -> None:
        self._operators.pop(character_name.lower(), None)
        self._ui.set_channel_operator(self.session, self.name, character_name, False)

    def join(self) -> None:
        self.joined = True
        self._ui.join_channel(self.session, self.name)

    def leave(self) -> None:
        """Mark the channel as left and forget its occupants and operators."""
        self.joined = False
        self._characters.clear()
        self._operators.clear()
        self._ui.leave_channel(self.session, self.name)