from __future__ import annotations

from dataclasses import dataclass

from ciphersuite.classical.common import ALPHABET, is_az
from ciphersuite.core.registry import register_plugin

_ATBASH = {ALPHABET[i]: ALPHABET[25 - i] for i in range(26)}


def _apply(text: str) -> str:
    out = []
    for ch in text:
        if is_az(ch):
            mapped = _ATBASH[ch.upper()]
            out.append(mapped if ch.isupper() else mapped.lower())
        else:
            out.append(ch)
    return "".join(out)


@dataclass(frozen=True)
class MirrorCipher:
    name = "atbash"

    def encrypt(self, message: str) -> str:
        return _apply(message)

    def decrypt(self, message: str) -> str:
        # Atbash is its own inverse
        return _apply(message)


register_plugin(
    MirrorCipher.name,
    MirrorCipher,
    key_kind="none",
    menu_label="Atbash",
    aliases=("mirror",),
)
