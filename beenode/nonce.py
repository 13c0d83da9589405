"""Fixed-length trit sequences used by the proof-of-work search."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .constants import NONCE_TRIT_LEN, TRANSACTION_TRIT_LEN

_VALID_TRITS = frozenset((-1, 0, 1))


def _checked(trits, length: int, what: str) -> tuple[int, ...]:
    trits = tuple(trits)
    if len(trits) != length:
        raise ValueError(f"{what} needs {length} trits, got {len(trits)}")
    invalid = set(trits) - _VALID_TRITS
    if invalid:
        raise ValueError(f"invalid trit: {min(invalid)}")
    return trits


@dataclass(frozen=True)
class NonceTrits:
    """The trits of a nonce."""

    trits: tuple[int, ...] = (0,) * NONCE_TRIT_LEN

    def __post_init__(self) -> None:
        object.__setattr__(self, "trits", _checked(self.trits, NONCE_TRIT_LEN, "a nonce"))

    def to_list(self) -> list[int]:
        return list(self.trits)


@dataclass(frozen=True)
class InputTrits:
    """The trits of a whole transaction given to the proof-of-work search."""

    trits: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "trits", _checked(self.trits, TRANSACTION_TRIT_LEN, "a transaction")
        )

    def __getitem__(self, index):
        return self.trits[index]

    def __len__(self) -> int:
        return len(self.trits)

    def __iter__(self) -> Iterator[int]:
        return iter(self.trits)