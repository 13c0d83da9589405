import asyncio

import pytest

from beenode.message import ReceivedMessage, TestMessage
from beenode.peers import Connection
from beenode.reader import read_message, read_task, read_task_broker
from beenode.writer import encode_message


class FakeWriter:
    def __init__(self, peer=("127.0.0.1", 4000)):
        self.peer = peer

    def get_extra_info(self, name, default=None):
        return self.peer if name == "peername" else default


def fed_reader(data, eof=True):
    reader = asyncio.StreamReader()
    reader.feed_data(data)
    if eof:
        reader.feed_eof()
    return reader


@pytest.mark.asyncio
async def test_read_message_parses_frame():
    message = await read_message(fed_reader(b"\x01\x00\x05hello"))
    assert message == TestMessage("hello")


@pytest.mark.asyncio
async def test_read_message_round_trips_encoding():
    original = TestMessage("round trip")
    assert await read_message(fed_reader(encode_message(original))) == original


@pytest.mark.asyncio
async def test_read_message_rejects_unknown_type():
    with pytest.raises(ValueError, match="Invalid message type"):
        await read_message(fed_reader(b"\x02\x00\x00"))


@pytest.mark.asyncio
async def test_read_message_truncated_payload():
    with pytest.raises(asyncio.IncompleteReadError):
        await read_message(fed_reader(b"\x01\x00\x05he"))


@pytest.mark.asyncio
async def test_read_message_invalid_utf8():
    with pytest.raises(ValueError, match="Invalid data"):
        await read_message(fed_reader(b"\x01\x00\x01\xff"))


@pytest.mark.asyncio
async def test_read_task_delivers_until_end_of_stream():
    data = encode_message(TestMessage("one")) + encode_message(TestMessage("two"))
    connection = Connection(fed_reader(data), FakeWriter())
    received = asyncio.Queue()
    with pytest.raises(asyncio.IncompleteReadError):
        await asyncio.wait_for(read_task(asyncio.Queue(), connection, received), 1)
    assert [received.get_nowait() for _ in range(2)] == [
        ReceivedMessage(("127.0.0.1", 4000), TestMessage("one")),
        ReceivedMessage(("127.0.0.1", 4000), TestMessage("two")),
    ]


@pytest.mark.asyncio
async def test_read_task_stops_on_shutdown():
    shutdown = asyncio.Queue()
    connection = Connection(fed_reader(b"", eof=False), FakeWriter())
    received = asyncio.Queue()
    task = asyncio.create_task(read_task(shutdown, connection, received))
    await asyncio.sleep(0)
    shutdown.put_nowait(())
    assert await asyncio.wait_for(task, 1) is None
    assert received.empty()


@pytest.mark.asyncio
async def test_read_task_broker_registers_and_reads():
    connection = Connection(fed_reader(encode_message(TestMessage("hi"))), FakeWriter())
    connections, received = asyncio.Queue(), asyncio.Queue()
    connections.put_nowait(connection)
    connections.put_nowait(None)
    handles = {}
    await asyncio.wait_for(read_task_broker(connections, received, handles), 1)
    assert list(handles) == [("127.0.0.1", 4000)]
    message = await asyncio.wait_for(received.get(), 1)
    assert message.msg == TestMessage("hi")


@pytest.mark.asyncio
async def test_read_task_broker_skips_unconnected(capsys):
    connections, received = asyncio.Queue(), asyncio.Queue()
    connections.put_nowait(Connection(fed_reader(b""), FakeWriter(None)))
    connections.put_nowait(None)
    handles = {}
    await asyncio.wait_for(read_task_broker(connections, received, handles), 1)
    assert handles == {}
    assert "not connected" in capsys.readouterr().err