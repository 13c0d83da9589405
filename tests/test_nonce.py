import pytest

from beenode.constants import NONCE_TRIT_LEN, TRANSACTION_TRIT_LEN
from beenode.nonce import InputTrits, NonceTrits


def test_default_nonce_is_all_zero():
    assert NonceTrits().to_list() == [0] * NONCE_TRIT_LEN


def test_nonce_round_trip():
    trits = [(-1, 0, 1)[i % 3] for i in range(NONCE_TRIT_LEN)]
    assert NonceTrits(trits).to_list() == trits


def test_nonce_equality_by_value():
    trits = [1] * NONCE_TRIT_LEN
    assert NonceTrits(trits) == NonceTrits(tuple(trits))
    assert NonceTrits(trits) != NonceTrits()


def test_nonce_to_list_is_a_copy():
    nonce = NonceTrits()
    listed = nonce.to_list()
    listed[0] = 1
    assert nonce.to_list()[0] == 0


def test_nonce_wrong_length():
    with pytest.raises(ValueError):
        NonceTrits([0] * (NONCE_TRIT_LEN - 1))


def test_nonce_invalid_trit():
    with pytest.raises(ValueError):
        NonceTrits([2] + [0] * (NONCE_TRIT_LEN - 1))


def test_input_indexing_and_length():
    trits = [0] * TRANSACTION_TRIT_LEN
    trits[-1] = -1
    trits[0] = 1
    data = InputTrits(trits)
    assert len(data) == TRANSACTION_TRIT_LEN
    assert data[0] == 1
    assert data[-1] == -1
    assert list(data) == trits


def test_input_wrong_length():
    with pytest.raises(ValueError):
        InputTrits([0] * 10)


def test_input_invalid_trit():
    with pytest.raises(ValueError):
        InputTrits([5] * TRANSACTION_TRIT_LEN)