"""Base58 encoding and the 32-byte public key type used for on-chain addresses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(_ALPHABET)}


def b58encode(data: bytes) -> str:
    """Encode bytes as a Base58 string (Bitcoin alphabet)."""
    data = bytes(data)
    stripped = data.lstrip(b"\0")
    leading_zeros = len(data) - len(stripped)
    number = int.from_bytes(stripped, "big")
    chars = []
    while number:
        number, remainder = divmod(number, 58)
        chars.append(_ALPHABET[remainder])
    return "1" * leading_zeros + "".join(reversed(chars))


def b58decode(text: str) -> bytes:
    """Decode a Base58 string; raise ValueError on characters outside the alphabet."""
    stripped = text.lstrip("1")
    leading_zeros = len(text) - len(stripped)
    number = 0
    for char in stripped:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base58 character {char!r}") from None
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\0" * leading_zeros + body


@dataclass(frozen=True, order=True)
class Pubkey:
    """A 32-byte public key, shown as Base58."""

    raw: bytes
    LENGTH: ClassVar[int] = 32

    def __post_init__(self) -> None:
        raw = bytes(self.raw)
        if len(raw) != self.LENGTH:
            raise ValueError(
                f"public key must be {self.LENGTH} bytes, got {len(raw)}"
            )
        object.__setattr__(self, "raw", raw)

    @classmethod
    def from_string(cls, value: str) -> Pubkey:
        """Parse a Base58 public key."""
        return cls(b58decode(value))

    @classmethod
    def default(cls) -> Pubkey:
        """The all-zero key."""
        return cls(bytes(cls.LENGTH))

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        return b58encode(self.raw)

    def __repr__(self) -> str:
        return f"Pubkey({str(self)!r})"