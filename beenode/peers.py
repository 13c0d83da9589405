"""Connecting to peers, handing out their streams and removing them again."""

from __future__ import annotations

import asyncio
import errno
import sys
from collections.abc import Awaitable, Coroutine
from dataclasses import dataclass
from typing import Any

from .message import Address, MessageToSend

_background: set[asyncio.Task] = set()


def _log(text: str) -> None:
    print(text, file=sys.stderr)


def _format_address(address: Address) -> str:
    host, port = address[0], address[1]
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def _split_host_port(address: str) -> Address:
    if address.startswith("["):
        host, sep, rest = address[1:].partition("]")
        if not sep or not rest.startswith(":"):
            raise ValueError(f"invalid socket address: {address!r}")
        port_text = rest[1:]
    else:
        host, sep, port_text = address.rpartition(":")
        if not sep or not host:
            raise ValueError(f"invalid socket address: {address!r}")
    try:
        port = int(port_text)
    except ValueError:
        raise ValueError(f"invalid port: {port_text!r}") from None
    if not 0 <= port <= 0xFFFF:
        raise ValueError(f"invalid port: {port}")
    return host, port


async def _until_shutdown(awaitable: Awaitable[Any], shutdown: asyncio.Queue) -> tuple[bool, Any]:
    """Await `awaitable` unless a signal arrives on `shutdown` first.

    Returns (True, result) when the awaitable finished, (False, None) on shutdown.
    """
    if not shutdown.empty():
        shutdown.get_nowait()
        if asyncio.iscoroutine(awaitable):
            awaitable.close()
        return False, None

    work = asyncio.ensure_future(awaitable)
    stop = asyncio.ensure_future(shutdown.get())
    try:
        await asyncio.wait({work, stop}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        pending = [task for task in (work, stop) if not task.done()]
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)

    stopped = stop.done() and not stop.cancelled()
    finished = work.done() and not work.cancelled()
    if stopped:
        if finished and work.exception() is None:
            # Both are ready: keep the result and let the next wait see the signal.
            shutdown.put_nowait(stop.result())
            return True, work.result()
        return False, None
    return True, work.result()


async def _receive(queue: asyncio.Queue, shutdown: asyncio.Queue) -> Any:
    """The next item of `queue`, or None once it is closed or shutdown is signalled."""
    received, item = await _until_shutdown(queue.get(), shutdown)
    return item if received else None


def _spawn_logged(coro: Coroutine[Any, Any, Any]) -> asyncio.Task:
    """Run `coro` in the background, printing any error it raises."""

    async def run() -> None:
        try:
            await coro
        except Exception as error:  # noqa: BLE001 - every failure of a peer task is reported
            _log(str(error) or type(error).__name__)

    task = asyncio.create_task(run())
    _background.add(task)
    task.add_done_callback(_background.discard)
    return task


@dataclass(frozen=True)
class TcpClientConfig:
    """The "host:port" address of a peer to connect to."""

    address: str


@dataclass(eq=False)
class Connection:
    """An open stream to a peer, shared by its read and write tasks."""

    reader: asyncio.StreamReader
    writer: asyncio.StreamWriter

    def peer_address(self) -> Address:
        """The address of the remote end; raises OSError if it is not connected."""
        peer = self.writer.get_extra_info("peername")
        if not peer:
            raise OSError(errno.ENOTCONN, "transport endpoint is not connected")
        return peer[0], peer[1]


async def add_peer(
    shutdown: asyncio.Queue,
    client_configs: asyncio.Queue,
    connections: asyncio.Queue,
) -> None:
    """Connect to every configured peer until shutdown or the configs are closed."""
    while (config := await _receive(client_configs, shutdown)) is not None:
        try:
            host, port = _split_host_port(config.address)
            reader, writer = await asyncio.open_connection(host, port)
        except (OSError, ValueError):
            _log(f"can not accept client {config.address}")
            continue
        await connections.put(Connection(reader, writer))


async def process_stream(
    connections: asyncio.Queue,
    read_tasks: asyncio.Queue,
    write_tasks: asyncio.Queue,
) -> None:
    """Hand every connection to both the read and the write side."""
    while (connection := await connections.get()) is not None:
        await read_tasks.put(connection)
        await write_tasks.put(connection)
    await read_tasks.put(None)
    await write_tasks.put(None)


async def remove_peer(
    shutdown: asyncio.Queue,
    peers_to_remove: asyncio.Queue,
    read_shutdown_handles: dict[Address, asyncio.Queue],
    write_shutdown_handles: dict[Address, asyncio.Queue],
    write_senders: dict[Address, asyncio.Queue[MessageToSend | None]],
) -> None:
    """Stop the read and write tasks of every peer that is to be removed."""
    while (address := await _receive(peers_to_remove, shutdown)) is not None:
        address = tuple(address)
        read_handle = read_shutdown_handles.pop(address, None)
        if read_handle is not None:
            await read_handle.put(())
        else:
            _log(f"can not shutdown read_task of {_format_address(address)}")

        write_handle = write_shutdown_handles.pop(address, None)
        if write_handle is not None:
            await write_handle.put(())
        else:
            _log(f"can not shutdown write_task of {_format_address(address)}")

        write_senders.pop(address, None)


async def graceful_shutdown(shutdown_requests: asyncio.Queue, *args: asyncio.Queue) -> None:
    """Forward every shutdown request to each of the given task queues."""
    while (await shutdown_requests.get()) is not None:
        for sender in args:
            await sender.put(())