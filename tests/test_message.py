import pytest

from beenode.message import MessageToSend, ReceivedMessage, TestMessage


def test_from_bytes_round_trip():
    message = TestMessage.from_bytes(b"hello")
    assert message.data == "hello"
    assert message.to_bytes() == b"hello"


def test_str_is_the_data():
    assert str(TestMessage("hello world")) == "hello world"


def test_unicode_round_trip():
    message = TestMessage("grüße")
    assert TestMessage.from_bytes(message.to_bytes()) == message


def test_invalid_utf8_is_rejected():
    with pytest.raises(ValueError, match="Invalid data"):
        TestMessage.from_bytes(b"\xff\xfe")


def test_message_to_send_collects_addresses():
    message = MessageToSend([("127.0.0.1", 1338), ("127.0.0.1", 1338)], TestMessage("a"))
    assert message.to == frozenset({("127.0.0.1", 1338)})


def test_message_to_send_empty_means_everyone():
    message = MessageToSend(frozenset(), TestMessage("a"))
    assert not message.to


def test_received_message_keeps_sender():
    received = ReceivedMessage(("127.0.0.1", 1337), TestMessage("x"))
    assert received.sender == ("127.0.0.1", 1337)
    assert received.msg == TestMessage("x")