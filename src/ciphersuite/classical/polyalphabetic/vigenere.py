from __future__ import annotations

import logging
from dataclasses import dataclass

from ciphersuite.classical.common import letter_position, shift_char
from ciphersuite.core.errors import InvalidKey
from ciphersuite.core.registry import register_plugin

log = logging.getLogger(__name__)


def keyword_shifts(keyword: str) -> list[int]:
    """1-based shift per keyword character (A -> 1 ... Z -> 26); 0 for non-letters."""
    if not isinstance(keyword, str) or not keyword:
        raise InvalidKey("Keyword must be a non-empty string.")
    return [letter_position(ch) for ch in keyword]


def _vigenere(text: str, shifts: list[int], sign: int) -> str:
    # Every message character consumes a keyword slot, letter or not.
    period = len(shifts)
    return "".join(shift_char(ch, sign * shifts[i % period]) for i, ch in enumerate(text))


@dataclass(frozen=True)
class KeywordCipher:
    keyword: str

    name = "vigenere"

    def __post_init__(self) -> None:
        keyword_shifts(self.keyword)

    @property
    def shifts(self) -> list[int]:
        return keyword_shifts(self.keyword)

    def encrypt(self, message: str) -> str:
        log.debug("vigenere encrypt: %d chars, period=%d", len(message), len(self.keyword))
        return _vigenere(message, self.shifts, 1)

    def decrypt(self, message: str) -> str:
        log.debug("vigenere decrypt: %d chars, period=%d", len(message), len(self.keyword))
        return _vigenere(message, self.shifts, -1)


register_plugin(
    KeywordCipher.name,
    KeywordCipher,
    key_kind="text",
    menu_label="Vigenere",
    aliases=("keyword",),
)
