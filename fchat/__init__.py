"""Core state of a chat client: messages, characters, channels, tabs, socket and caches."""

__version__ = "0.9.5"