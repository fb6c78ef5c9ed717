import json
from dataclasses import dataclass
from datetime import date

import pytest

from fchat.channel import ChannelType
from fchat.channelpanel import MAX_LINES, ButtonColors, ChannelPanel, load_button_colors
from fchat.character import Character, Color
from fchat.enums import ChannelMode, TypingStatus


@dataclass
class _Session:
    character: str


class _UI:
    def __init__(self, character="Alice Smith"):
        self.session = _Session(character)

    def get_session(self, session_id):
        return self.session if session_id == "s1" else None


def _panel(tmp_path, channel_type=ChannelType.NORMAL, name="Frontpage"):
    return ChannelPanel(_UI(), "s1", "panel", name, channel_type, tmp_path)


def test_defaults(tmp_path):
    panel = _panel(tmp_path)
    assert panel.title == "Frontpage"
    assert panel.typing == TypingStatus.CLEAR
    assert panel.mode == ChannelMode.BOTH
    assert panel.active is True
    assert panel.lines == []


def test_set_ops_owner_and_case(tmp_path):
    panel = _panel(tmp_path)
    panel.set_ops(["Owner", "Helper"])
    assert panel.owner == "Owner"
    assert panel.is_owner(Character("owner"))
    assert panel.is_op(Character("HELPER"))
    assert not panel.is_op(Character("Other"))
    panel.remove_op("helper")
    assert not panel.is_op(Character("Helper"))
    panel.add_op("New")
    assert panel.ops == {"owner": "Owner", "new": "New"}


def test_set_ops_empty_clears_owner(tmp_path):
    panel = _panel(tmp_path)
    panel.set_ops(["Owner"])
    panel.set_ops([])
    assert panel.owner == ""
    assert panel.ops == {}


def test_is_op_none(tmp_path):
    panel = _panel(tmp_path)
    assert panel.is_op(None) is False
    assert panel.is_owner(None) is False


@pytest.mark.parametrize("bad", [ChannelType.NORMAL, 4, -1])
def test_set_type_invalid(tmp_path, bad):
    panel = _panel(tmp_path, ChannelType.CONSOLE)
    with pytest.raises(ValueError):
        panel.set_type(bad)
    assert panel.channel_type == ChannelType.CONSOLE


def test_set_type_valid(tmp_path):
    panel = _panel(tmp_path)
    panel.set_type(ChannelType.PM)
    assert panel.channel_type == ChannelType.PM


def test_add_char_duplicate_and_remove(tmp_path):
    panel = _panel(tmp_path)
    bob = Character("Bob")
    assert panel.add_char(bob) is True
    assert panel.add_char(bob) is False
    assert panel.characters == [bob]
    assert panel.has_character(bob)
    panel.remove_char(bob)
    assert not panel.has_character(bob)


def test_add_char_none(tmp_path):
    with pytest.raises(ValueError):
        _panel(tmp_path).add_char(None)


def test_sort_by_rank_then_name(tmp_path):
    panel = _panel(tmp_path)
    panel.set_ops(["Owner", "Op"])
    zed = Character("zed")
    amy = Character("Amy")
    friend = Character("Friend", True)
    op = Character("Op")
    owner = Character("Owner")
    staff = Character("Staff")
    staff.chat_op = True
    for c in (zed, amy, friend, op, owner, staff):
        panel.add_char(c, sort_list=False)
    panel.sort_chars()
    assert panel.characters == [staff, owner, op, friend, amy, zed]


def test_empty_char_list(tmp_path):
    panel = _panel(tmp_path)
    panel.add_char(Character("A"))
    panel.empty_char_list()
    assert panel.characters == []


def test_line_limit(tmp_path):
    panel = _panel(tmp_path)
    for i in range(MAX_LINES + 44):
        panel.add_line(f"line {i}")
    assert len(panel.lines) == MAX_LINES
    assert panel.lines[0] == "line 44"
    assert panel.lines[-1] == f"line {MAX_LINES + 43}"
    panel.clear_lines()
    assert panel.lines == []


def test_render_html(tmp_path):
    panel = _panel(tmp_path)
    assert panel.render_html("<style/>") == "<style/>"
    panel.add_line("a")
    panel.add_line("b")
    assert panel.render_html("<style/>") == "<style/>a<br />b"


def test_to_json_round_trip(tmp_path):
    panel = _panel(tmp_path)
    panel.add_line("<b>hi</b>")
    nodes = json.loads(panel.to_json())
    assert nodes == [{"type": "chat", "by": "", "html": "<b>hi</b>"}]


def test_button_style_states(tmp_path):
    panel = _panel(tmp_path)
    colors = ButtonColors()
    panel.highlighted = True
    assert panel.button_style(False, colors) == f"background-color: {colors.highlighted.hex};"
    assert panel.button_style(True, colors) == f"background-color: {colors.inactive.hex};"
    assert panel.highlighted is False
    panel.has_new_messages = True
    assert panel.button_style(False, colors) == f"background-color: {colors.new_messages.hex};"
    panel.has_new_messages = False
    panel.typing = TypingStatus.TYPING
    assert panel.button_style(False, colors) == f"background-color: {colors.typing.hex};"
    panel.typing = TypingStatus.PAUSED
    assert panel.button_style(False, colors) == f"background-color: {colors.paused.hex};"


def test_default_inactive_is_white():
    assert ButtonColors().inactive.hex == "#ffffff"


def test_load_button_colors(tmp_path):
    ini = tmp_path / "colors.ini"
    ini.write_text("[buttons]\ninactive = 1, 2, 3\ntyping = 9, 9\n", encoding="utf-8")
    colors = load_button_colors(ini)
    assert colors.inactive == Color(1, 2, 3)
    assert colors.typing == ButtonColors().typing


def test_load_button_colors_missing(tmp_path):
    assert load_button_colors(tmp_path / "nope.ini") == ButtonColors()


def test_log_line_pm(tmp_path):
    panel = _panel(tmp_path, ChannelType.PM, "Bob")
    path = panel.log_line("hello")
    today = date.today().strftime("%Y-%m-%d")
    assert path == tmp_path / "pm" / f"Alice Smith~Bob~{today}.html"
    panel.add_line("again", log=True)
    assert path.read_bytes() == b"hello<br />\nagain<br />\n"


def test_log_line_adhoc_uses_title(tmp_path):
    panel = _panel(tmp_path, ChannelType.ADHOC, "ADH-1")
    panel.title = "My Room"
    path = panel.log_line("x")
    today = date.today().strftime("%Y-%m-%d")
    assert path == tmp_path / "private" / f"Alice Smith~ADH-1~My Room~{today}.html"
    assert path.exists()


def test_load_keywords(tmp_path):
    panel = _panel(tmp_path)
    assert panel.load_keywords(" a, ,b ,,") == ["a", "b"]
    assert panel.keywords == ["a", "b"]


def test_str_pm(tmp_path):
    panel = _panel(tmp_path, ChannelType.PM, "Bob")
    panel.recipient = "Bob"
    text = str(panel)
    assert "Type: PM to: Bob" in text
    assert text.endswith("Mode: Both")