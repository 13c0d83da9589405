"""Common interface of sponge-construction hash functions over trits."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import MutableSequence, Sequence


class Sponge(ABC):
    """A hash function that absorbs and squeezes balanced-ternary trits."""

    IN_LEN: int
    OUT_LEN: int

    @abstractmethod
    def absorb(self, trits: Sequence[int]) -> None:
        """Absorb `trits` into the sponge."""

    @abstractmethod
    def reset(self) -> None:
        """Reset the inner state of the sponge."""

    @abstractmethod
    def squeeze_into(self, buf: MutableSequence[int]) -> None:
        """Fill `buf` with trits squeezed from the sponge."""

    def squeeze(self) -> list[int]:
        """Squeeze `OUT_LEN` trits into a new list."""
        output = [0] * self.OUT_LEN
        self.squeeze_into(output)
        return output

    def digest_into(self, trits: Sequence[int], buf: MutableSequence[int]) -> None:
        """Absorb `trits`, squeeze into `buf` and reset the sponge."""
        self.absorb(trits)
        self.squeeze_into(buf)
        self.reset()

    def digest(self, trits: Sequence[int]) -> list[int]:
        """Absorb `trits`, squeeze a hash and reset the sponge."""
        self.absorb(trits)
        output = self.squeeze()
        self.reset()
        return output