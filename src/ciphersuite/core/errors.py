from __future__ import annotations

from typing import Optional


class CipherError(ValueError):
    """Base class for every error a cipher raises."""


class InvalidKey(CipherError):
    """Key material is missing or cannot be used by the selected cipher."""


class MalformedInput(CipherError):
    def __init__(self, message: str, *, position: Optional[int] = None) -> None:
        if position is not None:
            message = f"{message} (at index {position})"
        super().__init__(message)
        self.position = position
