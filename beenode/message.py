"""Messages exchanged with peers over the wire."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

Address = tuple[str, int]

TEST_MESSAGE_TYPE = 1


@dataclass(frozen=True)
class TestMessage:
    """A message carrying a UTF-8 string."""

    __test__ = False

    data: str

    @classmethod
    def from_bytes(cls, buf: bytes) -> TestMessage:
        """Decode a message payload; raises ValueError if it is not valid UTF-8."""
        try:
            return cls(bytes(buf).decode("utf-8"))
        except UnicodeDecodeError:
            raise ValueError("Invalid data") from None

    def to_bytes(self) -> bytes:
        return self.data.encode("utf-8")

    def __str__(self) -> str:
        return self.data


@dataclass(frozen=True)
class MessageToSend:
    """A message for the given peers; an empty `to` sends it to every peer."""

    to: frozenset[Address]
    msg: TestMessage

    def __post_init__(self) -> None:
        to: Iterable[Address] = self.to
        object.__setattr__(self, "to", frozenset(tuple(address) for address in to))


@dataclass(frozen=True)
class ReceivedMessage:
    """A message that arrived from a peer."""

    sender: Address
    msg: TestMessage