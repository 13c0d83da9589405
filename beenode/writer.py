"""Writing framed messages to peers."""

from __future__ import annotations

import asyncio

from .message import TEST_MESSAGE_TYPE, Address, MessageToSend, TestMessage
from .peers import Connection, _log, _receive, _spawn_logged

_MAX_PAYLOAD = 0xFFFF


def encode_message(message: TestMessage) -> bytes:
    """Frame a message: a type byte, a big-endian 16-bit length and the payload."""
    if not isinstance(message, TestMessage):
        raise TypeError(f"unsupported message: {type(message).__name__}")
    payload = message.to_bytes()
    if len(payload) > _MAX_PAYLOAD:
        raise ValueError("Message is too big")
    return bytes((TEST_MESSAGE_TYPE,)) + len(payload).to_bytes(2, "big") + payload


async def write_task(
    shutdown: asyncio.Queue,
    connection: Connection,
    messages: asyncio.Queue,
) -> None:
    """Write every message meant for this peer until shutdown or the queue closes."""
    while (message := await _receive(messages, shutdown)) is not None:
        if message.to and connection.peer_address() not in message.to:
            continue
        connection.writer.write(encode_message(message.msg))
        await connection.writer.drain()


async def write_task_broker(
    connections: asyncio.Queue,
    write_senders: dict[Address, asyncio.Queue[MessageToSend | None]],
    shutdown_handles: dict[Address, asyncio.Queue],
    connected_peers: asyncio.Queue,
) -> None:
    """Start a write task for each connection and announce the connected peer."""
    while (connection := await connections.get()) is not None:
        try:
            address = connection.peer_address()
        except OSError as error:
            _log(str(error))
            continue
        shutdown: asyncio.Queue = asyncio.Queue()
        shutdown_handles[address] = shutdown
        messages: asyncio.Queue = asyncio.Queue()
        write_senders[address] = messages
        await connected_peers.put(address)
        _spawn_logged(write_task(shutdown, connection, messages))