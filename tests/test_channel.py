from types import SimpleNamespace

import pytest

from fchat.channel import Channel, ChannelType, UserInterface
from fchat.enums import ChannelMode


def _recorder(name):
    def method(self, *args):
        self.calls.append((name, args))

    return method


def _init(self):
    self.calls = []


RecordingUI = type(
    "RecordingUI",
    (UserInterface,),
    {"__init__": _init, **{name: _recorder(name) for name in UserInterface.__abstractmethods__}},
)


@pytest.fixture
def ui():
    return RecordingUI()


@pytest.fixture
def session(ui):
    return SimpleNamespace(account=SimpleNamespace(ui=ui))


def test_user_interface_is_abstract():
    with pytest.raises(TypeError):
        UserInterface()


def test_adhoc_type_from_prefix(session):
    assert Channel(session, "ADH-abc", "Room").type == ChannelType.ADHOC
    assert Channel(session, "Frontpage", "Frontpage").type == ChannelType.NORMAL


def test_defaults(session):
    channel = Channel(session, "Frontpage", "Front")
    assert channel.joined is True
    assert channel.mode == ChannelMode.BOTH
    assert channel.title == "Front"
    assert channel.characters == []


def test_add_character_case_insensitive(session, ui):
    channel = Channel(session, "Frontpage", "Front")
    channel.add_character("Alice", True)
    channel.add_character("ALICE", False)
    assert channel.is_character_present("alice")
    assert channel.characters == ["Alice"]
    assert ui.calls == [
        ("add_channel_character", (session, "Frontpage", "Alice", True)),
        ("add_channel_character", (session, "Frontpage", "ALICE", False)),
    ]


def test_remove_character(session, ui):
    channel = Channel(session, "Frontpage", "Front")
    channel.add_character("Bob", False)
    channel.remove_character("bob")
    assert not channel.is_character_present("Bob")
    assert ui.calls[-1] == ("remove_channel_character", (session, "Frontpage", "bob"))


def test_operators(session, ui):
    channel = Channel(session, "Frontpage", "Front")
    channel.add_operator("Carol")
    assert channel.is_character_operator("CAROL")
    assert ui.calls[-1] == ("set_channel_operator", (session, "Frontpage", "Carol", True))
    channel.remove_operator("carol")
    assert not channel.is_character_operator("Carol")
    assert ui.calls[-1] == ("set_channel_operator", (session, "Frontpage", "carol", False))


def test_leave_clears_and_join(session, ui):
    channel = Channel(session, "Frontpage", "Front")
    channel.add_character("Alice", False)
    channel.add_operator("Alice")
    channel.leave()
    assert channel.joined is False
    assert channel.characters == []
    assert channel.operators == []
    assert ui.calls[-1] == ("leave_channel", (session, "Frontpage"))
    channel.join()
    assert channel.joined is True
    assert ui.calls[-1] == ("join_channel", (session, "Frontpage"))