from .config import Settings, load_settings
from .errors import CipherError, InvalidKey, MalformedInput
from .registry import build_cipher, get_plugin, list_plugins, register_plugin
from .results import Direction, TransformResult

__all__ = [
    "Settings",
    "load_settings",
    "CipherError",
    "InvalidKey",
    "MalformedInput",
    "build_cipher",
    "get_plugin",
    "list_plugins",
    "register_plugin",
    "Direction",
    "TransformResult",
]
