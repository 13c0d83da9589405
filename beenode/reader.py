"""Reading framed messages from peers."""

from __future__ import annotations

import asyncio

from .message import TEST_MESSAGE_TYPE, Address, ReceivedMessage, TestMessage
from .peers import Connection, _log, _spawn_logged, _until_shutdown


async def read_message(reader: asyncio.StreamReader) -> TestMessage:
    """Read one frame: a type byte, a big-endian 16-bit length and the payload."""
    message_type = (await reader.readexactly(1))[0]
    length = int.from_bytes(await reader.readexactly(2), "big")
    if message_type != TEST_MESSAGE_TYPE:
        raise ValueError("Invalid message type")
    return TestMessage.from_bytes(await reader.readexactly(length))


async def read_task(
    shutdown: asyncio.Queue,
    connection: Connection,
    received_messages: asyncio.Queue,
) -> None:
    """Pass every message from `connection` on until shutdown; read errors are raised."""
    while True:
        finished, message = await _until_shutdown(read_message(connection.reader), shutdown)
        if not finished:
            break
        await received_messages.put(ReceivedMessage(connection.peer_address(), message))


async def read_task_broker(
    connections: asyncio.Queue,
    received_messages: asyncio.Queue,
    shutdown_handles: dict[Address, asyncio.Queue],
) -> None:
    """Start a read task for each incoming connection and register its shutdown queue."""
    while (connection := await connections.get()) is not None:
        try:
            address = connection.peer_address()
        except OSError as error:
            _log(str(error))
            continue
        shutdown: asyncio.Queue = asyncio.Queue()
        shutdown_handles[address] = shutdown
        _spawn_logged(read_task(shutdown, connection, received_messages))