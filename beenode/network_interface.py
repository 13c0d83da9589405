"""The listening side of the node that ties all peer tasks together."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from .assign import assign_message
from .peers import (
    Connection,
    _spawn_logged,
    _split_host_port,
    add_peer,
    graceful_shutdown,
    process_stream,
    remove_peer,
)
from .reader import read_task_broker
from .writer import write_task_broker


@dataclass(frozen=True)
class TcpServerConfig:
    """The "host:port" address to listen on."""

    address: str


async def bind(
    server_config: TcpServerConfig,
    peers_to_add: asyncio.Queue,
    received_messages: asyncio.Queue,
    messages_to_send: asyncio.Queue,
    peers_to_remove: asyncio.Queue,
    shutdown_requests: asyncio.Queue,
    connected_peers: asyncio.Queue,
) -> None:
    """Listen for peers and run the peer tasks until a shutdown is requested.

    Raises OSError or ValueError if the server address cannot be bound.
    """
    host, port = _split_host_port(server_config.address)
    connections: asyncio.Queue = asyncio.Queue()

    def accept(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        connections.put_nowait(Connection(reader, writer))

    server = await asyncio.start_server(accept, host, port)

    bind_shutdown: asyncio.Queue = asyncio.Queue()
    add_peer_shutdown: asyncio.Queue = asyncio.Queue()
    assign_shutdown: asyncio.Queue = asyncio.Queue()
    remove_peer_shutdown: asyncio.Queue = asyncio.Queue()
    read_tasks: asyncio.Queue = asyncio.Queue()
    write_tasks: asyncio.Queue = asyncio.Queue()
    read_shutdown_handles: dict = {}
    write_shutdown_handles: dict = {}
    write_senders: dict = {}

    add_peer_task = asyncio.create_task(add_peer(add_peer_shutdown, peers_to_add, connections))
    workers = [
        asyncio.create_task(process_stream(connections, read_tasks, write_tasks)),
        asyncio.create_task(
            read_task_broker(read_tasks, received_messages, read_shutdown_handles)
        ),
        asyncio.create_task(assign_message(assign_shutdown, messages_to_send, write_senders)),
        asyncio.create_task(
            write_task_broker(write_tasks, write_senders, write_shutdown_handles, connected_peers)
        ),
        asyncio.create_task(
            remove_peer(
                remove_peer_shutdown,
                peers_to_remove,
                read_shutdown_handles,
                write_shutdown_handles,
                write_senders,
            )
        ),
    ]
    _spawn_logged(
        graceful_shutdown(
            shutdown_requests,
            bind_shutdown,
            add_peer_shutdown,
            assign_shutdown,
            remove_peer_shutdown,
        )
    )

    try:
        await bind_shutdown.get()
    finally:
        server.close()

    await add_peer_task
    await connections.put(None)
    for worker in workers:
        await worker