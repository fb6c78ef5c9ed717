"""Characters known to a chat session: status, gender and profile data."""

from __future__ import annotations

import configparser
import time
from enum import IntEnum
from os import PathLike
from typing import NamedTuple

__all__ = [
    "Color",
    "CharacterStatus",
    "CharacterGender",
    "Character",
    "STATUS_STRINGS",
    "STATUS_ICONS",
    "GENDER_STRINGS",
    "DEFAULT_GENDER_COLORS",
    "GENDER_COLORS",
    "load_gender_colors",
]


class Color(NamedTuple):
    """An RGB colour."""

    red: int
    green: int
    blue: int

    @property
    def hex(self) -> str:
        """The colour as ``#rrggbb``."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


class CharacterStatus(IntEnum):
    ONLINE = 0
    LOOKING = 1
    BUSY = 2
    DND = 3
    CROWN = 4
    AWAY = 5


class CharacterGender(IntEnum):
    NONE = 0
    MALE = 1
    FEMALE = 2
    TRANSGENDER = 3
    SHEMALE = 4
    HERM = 5
    MALEHERM = 6
    CUNTBOY = 7
    OFFLINE_UNKNOWN = 8


STATUS_STRINGS: dict[CharacterStatus, str] = {
    CharacterStatus.ONLINE: "Online",
    CharacterStatus.LOOKING: "Looking",
    CharacterStatus.BUSY: "Busy",
    CharacterStatus.DND: "Do Not Disturb",
    CharacterStatus.CROWN: "Crowned",
    CharacterStatus.AWAY: "Away",
}

STATUS_ICONS: dict[CharacterStatus, str] = {
    CharacterStatus.ONLINE: ":/images/status-default.png",
    CharacterStatus.LOOKING: ":/images/status.png",
    CharacterStatus.BUSY: ":/images/status-away.png",
    CharacterStatus.DND: ":/images/status-busy.png",
    CharacterStatus.CROWN: ":/images/crown.png",
    CharacterStatus.AWAY: ":/images/status-blue",
}

GENDER_STRINGS: dict[CharacterGender, str] = {
    CharacterGender.NONE: "None",
    CharacterGender.MALE: "Male",
    CharacterGender.FEMALE: "Female",
    CharacterGender.TRANSGENDER: "Transgender",
    CharacterGender.SHEMALE: "Shemale",
    CharacterGender.HERM: "Hermaphrodite",
    CharacterGender.MALEHERM: "Male Hermaphrodite",
    CharacterGender.CUNTBOY: "Cunt-Boy",
    CharacterGender.OFFLINE_UNKNOWN: "Offline/Unknown",
}

DEFAULT_GENDER_COLORS: dict[CharacterGender, Color] = {
    CharacterGender.NONE: Color(255, 255, 255),
    CharacterGender.MALE: Color(102, 247, 255),
    CharacterGender.FEMALE: Color(255, 102, 184),
    CharacterGender.TRANSGENDER: Color(102, 255, 166),
    CharacterGender.SHEMALE: Color(224, 255, 102),
    CharacterGender.HERM: Color(212, 102, 255),
    CharacterGender.MALEHERM: Color(255, 189, 102),
    CharacterGender.CUNTBOY: Color(115, 102, 255),
    CharacterGender.OFFLINE_UNKNOWN: Color(127, 127, 127),
}

# The palette in use; load_gender_colors() updates it.
GENDER_COLORS: dict[CharacterGender, Color] = dict(DEFAULT_GENDER_COLORS)

_STATUS_NAMES = {
    "online": CharacterStatus.ONLINE,
    "looking": CharacterStatus.LOOKING,
    "busy": CharacterStatus.BUSY,
    "dnd": CharacterStatus.DND,
    "crown": CharacterStatus.CROWN,
    "away": CharacterStatus.AWAY,
}

_GENDER_NAMES = {
    "male": CharacterGender.MALE,
    "female": CharacterGender.FEMALE,
    "none": CharacterGender.NONE,
    "herm": CharacterGender.HERM,
    "transgender": CharacterGender.TRANSGENDER,
    "shemale": CharacterGender.SHEMALE,
    "cunt-boy": CharacterGender.CUNTBOY,
    "male-herm": CharacterGender.MALEHERM,
}

_GENDER_COLOR_KEYS = {
    "none": CharacterGender.NONE,
    "male": CharacterGender.MALE,
    "female": CharacterGender.FEMALE,
    "transgender": CharacterGender.TRANSGENDER,
    "shemale": CharacterGender.SHEMALE,
    "herm": CharacterGender.HERM,
    "maleherm": CharacterGender.MALEHERM,
    "cuntboy": CharacterGender.CUNTBOY,
    "offlineunknown": CharacterGender.OFFLINE_UNKNOWN,
}


def _to_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def load_gender_colors(path: str | PathLike[str]) -> dict[CharacterGender, Color]:
    """Override the gender palette from the ``[gender]`` section of an INI file.

    Each entry is a comma separated ``red, green, blue`` triple; entries with
    fewer parts are ignored. A missing or unreadable file leaves the palette
    as it was. Returns a copy of the palette in use afterwards.
    """
    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read(path, encoding="utf-8")
    except (configparser.Error, UnicodeDecodeError):
        return dict(GENDER_COLORS)
    if parser.has_section("gender"):
        for key, gender in _GENDER_COLOR_KEYS.items():
            raw = parser.get("gender", key, fallback=None)
            if raw is None:
                continue
            parts = raw.strip().strip('"').split(",")
            if len(parts) >= 3:
                GENDER_COLORS[gender] = Color(*(_to_int(part) for part in parts[:3]))
    return dict(GENDER_COLORS)


class Character:
    """A character seen on the chat server."""

    def __init__(self, name: str = "", friend: bool = False) -> None:
        self.name = name
        self.friend = friend
        self.status = CharacterStatus.ONLINE
        self.status_message = ""
        self.gender = CharacterGender.NONE
        self.chat_op = False
        self.last_activity = 0
        # Insertion order of these dicts is the order the server reported keys in.
        self.custom_kink_data: dict[str, str] = {}
        self.profile_data: dict[str, str] = {}
        self.update_activity_timer()

    def set_status(self, status: str) -> None:
        """Set the status from its protocol name; unknown names mean online."""
        self.status = _STATUS_NAMES.get(status.lower(), CharacterStatus.ONLINE)

    def status_string(self) -> str:
        return STATUS_STRINGS.get(self.status, STATUS_STRINGS[CharacterStatus.ONLINE])

    @property
    def status_icon(self) -> str:
        """Resource path of the icon for the current status."""
        return STATUS_ICONS[self.status]

    def set_gender(self, gender: str) -> None:
        """Set the gender from its protocol name; unknown names mean none."""
        self.gender = _GENDER_NAMES.get(gender.lower(), CharacterGender.NONE)

    def gender_string(self) -> str:
        return GENDER_STRINGS.get(self.gender, GENDER_STRINGS[CharacterGender.NONE])

    def gender_color(self) -> Color:
        return GENDER_COLORS.get(self.gender, GENDER_COLORS[CharacterGender.NONE])

    def pm_title(self) -> str:
        """Title of a private chat tab with this character."""
        title = f"Private chat with {self.name} ({self.status_string()}"
        if self.status_message:
            return f"{title}: {self.status_message})"
        return f"{title})"

    def url(self) -> str:
        return f"https://www.f-list.net/c/{self.name}/"

    def update_activity_timer(self) -> None:
        self.last_activity = int(time.time())

    def add_custom_kink_data(self, key: str, value: str) -> None:
        """Record a custom kink; a repeated key moves to the end."""
        self.custom_kink_data.pop(key, None)
        self.custom_kink_data[key] = value

    def clear_custom_kink_data(self) -> None:
        self.custom_kink_data.clear()

    def add_profile_data(self, key: str, value: str) -> None:
        """Record a profile field; a repeated key moves to the end."""
        self.profile_data.pop(key, None)
        self.profile_data[key] = value

    def clear_profile_data(self) -> None:
        self.profile_data.clear()