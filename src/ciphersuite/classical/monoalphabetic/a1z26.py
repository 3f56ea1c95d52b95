from __future__ import annotations

import logging
from dataclasses import dataclass

from ciphersuite.classical.common import is_az, is_digit, letter_position
from ciphersuite.core.errors import MalformedInput
from ciphersuite.core.registry import register_plugin

log = logging.getLogger(__name__)


def _encode(text: str) -> str:
    """
    Each letter becomes its two-digit, zero-padded position: H -> "08", L -> "12".
    Digits and everything else are copied through unchanged.
    """
    out = []
    for ch in text:
        if is_az(ch):
            out.append(f"{letter_position(ch):02d}")
        else:
            out.append(ch)
    return "".join(out)


def _decode(text: str) -> str:
    """
    Digits are read in fixed pairs ("08" -> "h"). A letter found in the input is
    turned into its unpadded position; anything else is copied through.

    Raises MalformedInput when a pair is cut short or falls outside 1..26.
    """
    out = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if is_digit(ch):
            pair = text[i : i + 2]
            if len(pair) < 2 or not is_digit(pair[1]):
                raise MalformedInput(f"Incomplete two-digit group '{pair}'", position=i)
            value = int(pair)
            if not 1 <= value <= 26:
                raise MalformedInput(f"Group '{pair}' is not a letter position 01..26", position=i)
            out.append(chr(ord("a") + value - 1))
            i += 2
            continue
        if is_az(ch):
            out.append(str(letter_position(ch)))
        else:
            out.append(ch)
        i += 1
    return "".join(out)


@dataclass(frozen=True)
class PositionCodec:
    name = "a1z26"

    def encrypt(self, message: str) -> str:
        log.debug("a1z26 encode: %d chars", len(message))
        return _encode(message)

    def decrypt(self, message: str) -> str:
        log.debug("a1z26 decode: %d chars", len(message))
        return _decode(message)


register_plugin(
    PositionCodec.name,
    PositionCodec,
    key_kind="none",
    menu_label="A1Z26",
    aliases=("position",),
)
