from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Literal, Optional

from .errors import InvalidKey

log = logging.getLogger(__name__)

KeyKind = Literal["int", "text", "none"]


@dataclass(frozen=True)
class _PluginEntry:
    name: str
    factory: Callable[..., Any]
    key_kind: KeyKind
    menu_label: str
    aliases: tuple[str, ...] = ()


_PLUGINS: dict[str, _PluginEntry] = {}
_ALIASES: dict[str, str] = {}


def register_plugin(
    name: str,
    factory: Callable[..., Any],
    *,
    key_kind: KeyKind,
    menu_label: str,
    aliases: tuple[str, ...] = (),
) -> None:
    key = name.lower().strip()
    if not key:
        raise ValueError("Plugin must have a non-empty name.")
    if key_kind not in ("int", "text", "none"):
        raise ValueError(f"Unsupported key kind '{key_kind}' for plugin '{key}'.")
    _PLUGINS[key] = _PluginEntry(
        name=key,
        factory=factory,
        key_kind=key_kind,
        menu_label=menu_label,
        aliases=tuple(a.lower().strip() for a in aliases),
    )
    for alias in _PLUGINS[key].aliases:
        _ALIASES[alias] = key
    log.debug("Registered cipher plugin %s (key=%s)", key, key_kind)


def list_plugins() -> list[str]:
    return sorted(_PLUGINS.keys())


def get_plugin(name: str) -> _PluginEntry:
    key = (name or "").lower().strip()
    key = _ALIASES.get(key, key)
    if key not in _PLUGINS:
        raise ValueError(f"Unknown cipher '{name}'. Available: {', '.join(list_plugins())}")
    return _PLUGINS[key]


def parse_int_key(raw: str) -> int:
    """
    Accept an optionally signed decimal integer, e.g. "3", "-3", "+29".
    Anything else is an InvalidKey.
    """
    text = raw.strip()
    digits = text[1:] if text[:1] in ("-", "+") else text
    if not digits or not digits.isascii() or not digits.isdigit():
        raise InvalidKey(f"Shift key must be an integer, got '{raw[:20]}'.")
    try:
        return int(text)
    except ValueError as e:
        # past the interpreter's digit limit for str -> int
        raise InvalidKey(f"Shift key is too long ({len(digits)} digits).") from e


def build_cipher(name: str, key: Optional[str] = None) -> Any:
    """Turn a plugin name plus raw key text into a configured cipher value."""
    entry = get_plugin(name)

    if entry.key_kind == "none":
        return entry.factory()

    if key is None:
        raise InvalidKey(f"Cipher '{entry.name}' requires --key.")

    if entry.key_kind == "int":
        return entry.factory(parse_int_key(key))
    return entry.factory(key)
