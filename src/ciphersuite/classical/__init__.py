from __future__ import annotations

def register_all() -> None:
    from .monoalphabetic import caesar, a1z26, atbash  # noqa: F401
    from .polyalphabetic import vigenere  # noqa: F401
