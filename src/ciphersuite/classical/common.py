from __future__ import annotations

import string

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
A_ORD = ord("A")
LOWER_A_ORD = ord("a")

DIGITS = set(string.digits)


def is_az(ch: str) -> bool:
    """True for ASCII letters only (either case)."""
    return ch in string.ascii_letters


def is_digit(ch: str) -> bool:
    return ch in DIGITS


def letter_index(ch: str) -> int:
    """0-based alphabet index of an ASCII letter, case-insensitive."""
    return ord(ch.upper()) - A_ORD


def letter_position(ch: str) -> int:
    """1-based alphabet position ('A'/'a' -> 1 ... 'Z'/'z' -> 26); 0 for anything else."""
    if not is_az(ch):
        return 0
    return letter_index(ch) + 1


def shift_char(ch: str, shift: int) -> str:
    """Shift one letter by 'shift' (can be negative), wrapping mod 26 and keeping case."""
    if not is_az(ch):
        return ch
    base = A_ORD if ch.isupper() else LOWER_A_ORD
    return chr(base + (ord(ch) - base + shift) % 26)


def shift_text(text: str, shift: int) -> str:
    """Caesar shift; preserves non-letters; preserves case."""
    return "".join(shift_char(ch, shift) for ch in text)
