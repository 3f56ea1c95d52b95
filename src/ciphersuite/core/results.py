from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Direction(str, Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"

    @classmethod
    def parse(cls, raw: str) -> "Direction":
        """Accept 'encrypt'/'decrypt' or the menu shorthand 'E'/'D', any case."""
        if isinstance(raw, cls):
            return raw
        value = (raw or "").strip().lower()
        if value in ("e", "encrypt"):
            return cls.ENCRYPT
        if value in ("d", "decrypt"):
            return cls.DECRYPT
        raise ValueError(f"Unknown direction '{raw}'. Use 'encrypt' or 'decrypt'.")


@dataclass(frozen=True)
class TransformResult:
    cipher_name: str
    direction: Direction
    text: str
    key: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "cipher_name": self.cipher_name,
            "direction": self.direction.value,
            "text": self.text,
            "key": self.key,
        }
