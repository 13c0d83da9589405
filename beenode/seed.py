"""Seeds from which signing keys are derived."""

from __future__ import annotations

import secrets
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .constants import HASH_TRIT_LEN
from .sponge import Sponge
from .trinary import TRYTE_ALPHABET, trytes_to_trits

MIN_TRIT_VALUE = -1
MAX_TRIT_VALUE = 1

SEED_TRYTE_LEN = HASH_TRIT_LEN // 3

SpongeFactory = Callable[[], Sponge]


class IotaSeedError(ValueError):
    """A seed could not be created from the given trits."""


class InvalidLengthError(IotaSeedError):
    """The seed does not have the required number of trits."""

    def __init__(self, length: int) -> None:
        super().__init__(f"a seed needs {HASH_TRIT_LEN} trits, got {length}")
        self.length = length


class InvalidTritError(IotaSeedError):
    """The seed holds a value that is not a trit."""

    def __init__(self, trit: int) -> None:
        super().__init__(f"invalid trit: {trit}")
        self.trit = trit


def _increment(trits: list[int]) -> None:
    """Add one to a little-endian balanced-ternary number in place."""
    for position, trit in enumerate(trits):
        if trit < MAX_TRIT_VALUE:
            trits[position] = trit + 1
            return
        trits[position] = MIN_TRIT_VALUE


@dataclass(frozen=True)
class IotaSeed:
    """A seed of 243 trits, bound to the sponge used to derive subseeds."""

    trits: tuple[int, ...]
    sponge: SpongeFactory

    def __post_init__(self) -> None:
        trits = tuple(self.trits)
        if len(trits) != HASH_TRIT_LEN:
            raise InvalidLengthError(len(trits))
        for trit in trits:
            if trit not in (-1, 0, 1):
                raise InvalidTritError(trit)
        object.__setattr__(self, "trits", trits)

    @classmethod
    def generate(cls, sponge: SpongeFactory) -> IotaSeed:
        """A new random seed."""
        trytes = "".join(secrets.choice(TRYTE_ALPHABET) for _ in range(SEED_TRYTE_LEN))
        return cls(tuple(trytes_to_trits(trytes)), sponge)

    @classmethod
    def from_bytes(cls, trits: Iterable[int], sponge: SpongeFactory) -> IotaSeed:
        """A seed from 243 trits; raises an IotaSeedError if they do not form one."""
        return cls(tuple(trits), sponge)

    def to_bytes(self) -> list[int]:
        """The trits of the seed."""
        return list(self.trits)

    def subseed(self, index: int) -> IotaSeed:
        """The seed hashed after being incremented `index` times."""
        if index < 0:
            raise ValueError(f"subseed index must not be negative: {index}")
        trits = list(self.trits)
        for _ in range(index):
            _increment(trits)
        digest = self.sponge().digest(trits)
        return IotaSeed(tuple(digest), self.sponge)