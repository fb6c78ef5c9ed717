# fchat

`fchat` is the non-graphical core of a desktop chat client. It holds the state
a front end needs while chatting: characters and their status, channels and
their occupants, the lines shown in each tab and written to log files,
formatted messages, a websocket connection to the chat server, and caches for
images found in chat lines. Drawing windows is left to the user interface you
put on top of it.

## Modules

| Module | Purpose |
| --- | --- |
| `fchat.enums` | `EnumLookup` between setting keys and numbers; `MessageType`, `TypingStatus`, `ChannelMode`, `AttentionMode`, `BoolTristate`; ready-made lookups `CHANNEL_MODE_LOOKUP`, `ATTENTION_MODE_LOOKUP`, `BOOL_TRISTATE_LOOKUP` |
| `fchat.textutil` | `escape_file_name`, `html_to_plain_text`, `fix_broken_escaped_apos`, `is_broken_escaped_apos`, `debug_message` |
| `fchat.message` | `Message`, a chainable description of a chat line and where it goes |
| `fchat.jsonhelper` | `json_from_map` and `json_key_value`, compact JSON objects of strings |
| `fchat.character` | `Character` with status, gender, colour, PM title and profile data; `load_gender_colors` reads a colour palette from an INI file |
| `fchat.channel` | `Channel`, `ChannelType` and the abstract `UserInterface` a channel reports its changes to |
| `fchat.chatsocket` | `ChatSocket`, a text websocket with an optional keep-alive ping thread; `SocketClosedError` |
| `fchat.channelpanel` | `ChannelPanel`, the state of one tab: operators, ordered user list, last 256 lines, HTML log files, button style; `ButtonColors` and `load_button_colors` |
| `fchat.logresources` | `classify_link`, `find_resource_urls`, `cache_directory` and `ResourceCache`, which stores icon images from chat HTML on disk |
| `fchat.avatar` | `AvatarCache`, `avatar_url`, `name_from_avatar_url` |

## A short tour

Building a message and reading it back:

```python
from fchat.enums import MessageType
from fchat.message import Message

msg = (
    Message("Hello &amp; welcome", MessageType.CHAT)
    .to_channel("Frontpage")
    .from_character("Someone")
)
msg.formatted()   # "<small>[hh:mm:ss AM]</small> Hello &amp; welcome"
msg.plain_text()  # "[hh:mm:ss AM] Hello & welcome"
```

Making a name safe for a file name; every byte that is not a letter, digit,
`-`, `_`, space or `.` becomes `%` and its hex value:

```python
from fchat.textutil import escape_file_name

escape_file_name("Some/Name")  # "Some%2fName"
```

Looking up setting values by name:

```python
from fchat.enums import EnumLookup

modes = EnumLookup("default, never, ifnotfocused, always")
modes.key_to_value("never")     # 1
modes.key_to_value("missing")   # 0, the table default
modes.value_to_key(3)           # "always"
```

Characters parse the server's status and gender names:

```python
from fchat.character import Character

c = Character("Someone")
c.set_status("dnd")
c.status_message = "writing"
c.pm_title()   # "Private chat with Someone (Do Not Disturb: writing)"
```

A `ChannelPanel` orders its user list with chat operators first, then the
channel owner, channel operators and friends, each group by lower-case name:

```python
from fchat.channel import ChannelType
from fchat.channelpanel import ChannelPanel

panel = ChannelPanel(None, "session", "panel", "Frontpage", ChannelType.NORMAL, log_root="logs")
panel.set_ops(["Owner", "Helper"])
panel.add_line("<b>hi</b>", log=True)   # also appended to logs/public/Frontpage~<date>.html
```

`ChatSocket` takes an optional `connection_factory`; by default it opens a
connection with `websocket.create_connection`. It can be used as a context
manager, and any failure closes it and raises `SocketClosedError`.

`ResourceCache` and `AvatarCache` take a `fetcher`, a callable that returns
the bytes at a URL and may raise `OSError`; the package performs no HTTP
requests of its own.

## What the package does not do

It has no graphical interface and no command to run. It does not log in to
the web service, fetch login tickets or store remembered credentials, and it
does not implement a chat session that reads server commands: `Channel`
expects a session object with an `account.ui` attribute, and `ChannelPanel`
a `ui` with `get_session`, both supplied by the application.

## Tests

```
pip install -e .[test]
pytest
```