"""Routing outgoing messages to the write tasks of their peers."""

from __future__ import annotations

import asyncio

from .message import Address, MessageToSend
from .peers import _format_address, _log, _receive


async def assign_message(
    shutdown: asyncio.Queue,
    messages_to_send: asyncio.Queue,
    write_senders: dict[Address, asyncio.Queue[MessageToSend | None]],
) -> None:
    """Send each message to its peers, or to every peer when it names none."""
    while (message := await _receive(messages_to_send, shutdown)) is not None:
        if not message.to:
            for sender in list(write_senders.values()):
                await sender.put(message)
            continue
        for peer in message.to:
            sender = write_senders.get(peer)
            if sender is None:
                _log(f"peer with address {_format_address(peer)} not found")
            else:
                await sender.put(message)