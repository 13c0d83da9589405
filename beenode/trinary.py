"""Balanced-ternary helpers: trits and trytes."""

from collections.abc import Iterable

Trit = int  # one of -1, 0, 1
Tryte = str  # one of 9ABC...Z

TRYTE_ALPHABET = "9ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_VALID_TRITS = frozenset((-1, 0, 1))


def _balanced_trits(value: int) -> tuple[int, int, int]:
    trits = []
    for _ in range(3):
        remainder = value % 3
        if remainder == 2:
            remainder = -1
        trits.append(remainder)
        value = (value - remainder) // 3
    return tuple(trits)


def _tryte_value(position: int) -> int:
    return position - 27 if position > 13 else position


_TRYTE_TO_TRITS = {
    tryte: _balanced_trits(_tryte_value(position))
    for position, tryte in enumerate(TRYTE_ALPHABET)
}


def trytes_to_trits(trytes: str) -> list[int]:
    """Convert a tryte string into a list of trits, three per tryte."""
    trits: list[int] = []
    for tryte in trytes:
        try:
            trits.extend(_TRYTE_TO_TRITS[tryte])
        except KeyError:
            raise ValueError(f"invalid tryte: {tryte!r}") from None
    return trits


def trits_to_trytes(trits: Iterable[int]) -> str:
    """Convert a sequence of trits, whose length is a multiple of three, into trytes."""
    trits = list(trits)
    if len(trits) % 3:
        raise ValueError(f"trit count {len(trits)} is not a multiple of 3")
    invalid = set(trits) - _VALID_TRITS
    if invalid:
        raise ValueError(f"invalid trit: {min(invalid)}")
    groups = zip(*[iter(trits)] * 3)
    return "".join(TRYTE_ALPHABET[(a + 3 * b + 9 * c) % 27] for a, b, c in groups)