"""Positions of the fields inside a serialized transaction."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    ADDRESS_TRIT_LEN,
    HASH_TRIT_LEN,
    INDEX_TRIT_LEN,
    NONCE_TRIT_LEN,
    PAYLOAD_TRIT_LEN,
    TAG_TRIT_LEN,
    TIMESTAMP_TRIT_LEN,
    VALUE_TRIT_LEN,
)


@dataclass(frozen=True)
class Offset:
    """A start position and a length."""

    start: int
    length: int


@dataclass(frozen=True)
class Field:
    """Location of a field, in trits and in trytes."""

    trit_offset: Offset
    tryte_offset: Offset

    def byte_start(self) -> int:
        """First byte of the field when five trits are packed per byte."""
        return self.trit_offset.start // 5

    def byte_length(self) -> int:
        """Number of bytes the field occupies when five trits are packed per byte."""
        return -(-self.trit_offset.length // 5)

    @classmethod
    def following(cls, previous: Field, length: int) -> Field:
        """The field of `length` trits that starts right after `previous`."""
        return _from_trits(previous.trit_offset.start + previous.trit_offset.length, length)


def _from_trits(start: int, length: int) -> Field:
    return Field(Offset(start, length), Offset(start // 3, length // 3))


PAYLOAD = _from_trits(0, PAYLOAD_TRIT_LEN)
ADDRESS = Field.following(PAYLOAD, ADDRESS_TRIT_LEN)
VALUE = Field.following(ADDRESS, VALUE_TRIT_LEN)
OBSOLETE_TAG = Field.following(VALUE, TAG_TRIT_LEN)
TIMESTAMP = Field.following(OBSOLETE_TAG, TIMESTAMP_TRIT_LEN)
INDEX = Field.following(TIMESTAMP, INDEX_TRIT_LEN)
LAST_INDEX = Field.following(INDEX, INDEX_TRIT_LEN)
BUNDLE_HASH = Field.following(LAST_INDEX, HASH_TRIT_LEN)
TRUNK_HASH = Field.following(BUNDLE_HASH, HASH_TRIT_LEN)
BRANCH_HASH = Field.following(TRUNK_HASH, HASH_TRIT_LEN)
TAG = Field.following(BRANCH_HASH, TAG_TRIT_LEN)
ATTACHMENT_TS = Field.following(TAG, TIMESTAMP_TRIT_LEN)
ATTACHMENT_LBTS = Field.following(ATTACHMENT_TS, TIMESTAMP_TRIT_LEN)
ATTACHMENT_UBTS = Field.following(ATTACHMENT_LBTS, TIMESTAMP_TRIT_LEN)
NONCE = Field.following(ATTACHMENT_UBTS, NONCE_TRIT_LEN)

ALL_FIELDS = (
    PAYLOAD,
    ADDRESS,
    VALUE,
    OBSOLETE_TAG,
    TIMESTAMP,
    INDEX,
    LAST_INDEX,
    BUNDLE_HASH,
    TRUNK_HASH,
    BRANCH_HASH,
    TAG,
    ATTACHMENT_TS,
    ATTACHMENT_LBTS,
    ATTACHMENT_UBTS,
    NONCE,
)