from __future__ import annotations

import logging
from dataclasses import dataclass

from ciphersuite.classical.common import shift_text
from ciphersuite.core.errors import InvalidKey
from ciphersuite.core.registry import register_plugin

log = logging.getLogger(__name__)


def normalize_shift(key: int) -> int:
    """Reduce any integer key into 0..25 (floor modulo, so -3 -> 23)."""
    if isinstance(key, bool) or not isinstance(key, int):
        raise InvalidKey(f"Shift key must be an integer, got {key!r}.")
    return ((key % 26) + 26) % 26


@dataclass(frozen=True)
class ShiftCipher:
    key: int

    name = "caesar"

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", normalize_shift(self.key))

    def encrypt(self, message: str) -> str:
        log.debug("caesar encrypt: %d chars, key=%d", len(message), self.key)
        return shift_text(message, self.key)

    def decrypt(self, message: str) -> str:
        log.debug("caesar decrypt: %d chars, key=%d", len(message), self.key)
        # Backward shift is the forward shift by the complement.
        return shift_text(message, 26 - self.key)


register_plugin(
    ShiftCipher.name,
    ShiftCipher,
    key_kind="int",
    menu_label="Caesar",
    aliases=("shift",),
)
