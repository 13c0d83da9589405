"""Bit-sliced Curl state: 64 trit states processed side by side."""

from __future__ import annotations

from .powconstants import BITS_1, STATE_LEN


class PowCurlState:
    """Curl state in which each trit is a pair of 64-bit words (hi, lo).

    Bit `k` of the two words encodes the trit of slot `k`: (1, 0) is 1,
    (0, 1) is -1 and (1, 1) is 0.
    """

    def __init__(self, init_value: int) -> None:
        value = init_value & BITS_1
        self.hi = [value] * STATE_LEN
        self.lo = [value] * STATE_LEN

    def set(self, index: int, hi: int, lo: int) -> None:
        self.hi[index] = hi & BITS_1
        self.lo[index] = lo & BITS_1

    def get(self, index: int) -> tuple[int, int]:
        return self.hi[index], self.lo[index]

    def bit_add(self, index: int) -> bool:
        """Increment the trit at `index` in every slot; report whether any slot carried."""
        hi = self.hi[index]
        lo = self.lo[index]
        self.hi[index] = lo
        self.lo[index] = hi ^ lo
        return (hi & ~lo & BITS_1) != 0

    def bit_equal(self, index: int) -> int:
        """Mask of the slots whose hi and lo bits agree at `index`."""
        return ~(self.hi[index] ^ self.lo[index]) & BITS_1

    def copy(self) -> PowCurlState:
        clone = PowCurlState.__new__(PowCurlState)
        clone.hi = self.hi.copy()
        clone.lo = self.lo.copy()
        return clone