from __future__ import annotations

import logging
from typing import Optional, Union

from ciphersuite.classical import register_all
from ciphersuite.classical.monoalphabetic.a1z26 import PositionCodec
from ciphersuite.classical.monoalphabetic.atbash import MirrorCipher
from ciphersuite.classical.monoalphabetic.caesar import ShiftCipher
from ciphersuite.classical.polyalphabetic.vigenere import KeywordCipher
from ciphersuite.core.registry import build_cipher
from ciphersuite.core.results import Direction, TransformResult

log = logging.getLogger(__name__)

Cipher = Union[ShiftCipher, KeywordCipher, PositionCodec, MirrorCipher]


def describe_key(cipher: Cipher) -> Optional[str]:
    match cipher:
        case ShiftCipher(key=key):
            return str(key)
        case KeywordCipher(keyword=keyword):
            return keyword
        case PositionCodec() | MirrorCipher():
            return None
    raise TypeError(f"Not a cipher: {cipher!r}")


def transform(cipher: Cipher, message: str, direction: Direction | str) -> TransformResult:
    """Run one full pass of 'cipher' over 'message' in the given direction."""
    direction = Direction.parse(direction)
    forward = direction is Direction.ENCRYPT

    match cipher:
        case ShiftCipher() | KeywordCipher() | PositionCodec():
            text = cipher.encrypt(message) if forward else cipher.decrypt(message)
        case MirrorCipher():
            text = cipher.encrypt(message)
        case _:
            raise TypeError(f"Not a cipher: {cipher!r}")

    log.debug("%s %s: %d -> %d chars", cipher.name, direction.value, len(message), len(text))
    return TransformResult(
        cipher_name=cipher.name,
        direction=direction,
        text=text,
        key=describe_key(cipher),
    )


def run(name: str, message: str, key: Optional[str], direction: Direction | str) -> TransformResult:
    """Build the named cipher from raw key text and transform 'message'."""
    register_all()
    return transform(build_cipher(name, key), message, direction)
