"""The CurlP sponge hash function over balanced trits."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

from .sponge import Sponge

HASH_LEN = 243
STATE_LEN = HASH_LEN * 3
HALF_STATE_LEN = STATE_LEN // 2

_TRUTH_TABLE = (1, 0, -1, 2, 1, -1, 0, 2, -1, 1, 0)
_VALID_TRITS = frozenset((-1, 0, 1))


def _substitution_pairs() -> tuple[tuple[int, int], ...]:
    order = [0]
    for step in range(HALF_STATE_LEN):
        order.append(HALF_STATE_LEN - step)
        order.append(STATE_LEN - 1 - step)
    order.append(0)
    return tuple(zip(order, order[1:]))


_PAIRS = _substitution_pairs()


class CurlP(Sponge):
    """CurlP sponge applying a configurable number of rounds per transform."""

    IN_LEN = HASH_LEN
    OUT_LEN = HASH_LEN

    def __init__(self, rounds: int) -> None:
        self._rounds = rounds
        self._state = [0] * STATE_LEN

    def rounds(self) -> int:
        """Number of rounds used by this instance."""
        return self._rounds

    def _transform(self) -> None:
        state = self._state
        table = _TRUTH_TABLE
        for _ in range(self._rounds):
            state = [table[state[p] + 4 * state[q] + 5] for p, q in _PAIRS]
        self._state = state

    def absorb(self, trits: Sequence[int]) -> None:
        """Absorb `trits` in chunks of `HASH_LEN`, transforming after each chunk.

        A final short chunk overwrites only the leading part of the state.
        """
        trits = list(trits)
        invalid = set(trits) - _VALID_TRITS
        if invalid:
            raise ValueError(f"invalid trit: {min(invalid)}")
        for start in range(0, len(trits), self.IN_LEN):
            chunk = trits[start:start + self.IN_LEN]
            self._state[:len(chunk)] = chunk
            self._transform()

    def reset(self) -> None:
        """Overwrite the state with zeros."""
        self._state = [0] * STATE_LEN

    def squeeze_into(self, buf: MutableSequence[int]) -> None:
        """Fill `buf` in chunks of `HASH_LEN`, transforming after each chunk."""
        size = len(buf)
        for start in range(0, size, self.OUT_LEN):
            end = min(start + self.OUT_LEN, size)
            buf[start:end] = self._state[:end - start]
            self._transform()


class CurlP27(CurlP):
    """CurlP with 27 rounds."""

    def __init__(self) -> None:
        super().__init__(27)


class CurlP81(CurlP):
    """CurlP with 81 rounds."""

    def __init__(self) -> None:
        super().__init__(81)