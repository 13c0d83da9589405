"""Proof-of-work difficulty: the number of trailing zero trits required."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import DEVNET_DIFFICULTY, HASH_TRIT_LEN, MAINNET_DIFFICULTY, SPAMNET_DIFFICULTY


@dataclass(frozen=True)
class Difficulty:
    """A difficulty, capped at the hash length."""

    value: int

    def __post_init__(self) -> None:
        value = int(self.value)
        if value < 0:
            raise ValueError(f"difficulty must not be negative: {value}")
        object.__setattr__(self, "value", min(value, HASH_TRIT_LEN))

    @classmethod
    def mainnet(cls) -> Difficulty:
        return cls(MAINNET_DIFFICULTY)

    @classmethod
    def devnet(cls) -> Difficulty:
        return cls(DEVNET_DIFFICULTY)

    @classmethod
    def spamnet(cls) -> Difficulty:
        return cls(SPAMNET_DIFFICULTY)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value