"""Chat Naming Rules — when a chat gets a derived title and when it keeps its name.

Invariants:
    - An explicit name always wins over a derived one
    - A chat is auto-renamed at most once: only while it still carries DEFAULT_CHAT_NAME
    - Blank prompts/inputs never produce a title (the default name is kept)

Design Decisions:
    - Rules return the new name (or None) instead of mutating records:
      registries in services/ own the state, core only decides
"""

from session_titles.core.derive_title import derive_short_title

DEFAULT_CHAT_NAME = "New Chat"


def initial_chat_name(prompt: str | None, explicit_name: str | None = None) -> str:
    """Name for a freshly created chat."""
    if explicit_name and explicit_name.strip():
        return explicit_name.strip()
    if prompt and prompt.strip():
        return derive_short_title(prompt)
    return DEFAULT_CHAT_NAME


def name_after_first_input(current_name: str, first_input: str) -> str | None:
    """Derived title for a chat's first terminal input, or None to keep the current name.

    Chats created with a prompt or renamed by the user already have a
    meaningful name, so only chats still called DEFAULT_CHAT_NAME qualify.
    """
    if current_name != DEFAULT_CHAT_NAME:
        return None
    if not first_input.strip():
        return None
    return derive_short_title(first_input)
