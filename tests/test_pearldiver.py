import random
import threading
import time

import pytest

from beenode.constants import TRANSACTION_TRIT_LEN
from beenode.cores import Cores
from beenode.curlp import CurlP81
from beenode.difficulty import Difficulty
from beenode.nonce import InputTrits, NonceTrits
from beenode.pearldiver import PearlDiver, PearlDiverState
from beenode.powconstants import TRANS_NONCE_START


def _random_input(seed):
    rng = random.Random(seed)
    return InputTrits([rng.choice((-1, 0, 1)) for _ in range(TRANSACTION_TRIT_LEN)])


def _hash_with_nonce(input_trits, nonce):
    return CurlP81().digest(list(input_trits)[:TRANS_NONCE_START] + nonce.to_list())


def test_new_diver_is_created():
    diver = PearlDiver(Cores(1), Difficulty(1))
    assert diver.state() is PearlDiverState.CREATED
    assert diver.nonce() is None


def test_cancel_before_search_keeps_state():
    diver = PearlDiver(Cores(1), Difficulty(1))
    diver.cancel()
    assert diver.state() is PearlDiverState.CREATED


def test_set_state_stores_nonce():
    diver = PearlDiver()
    nonce = NonceTrits()
    diver.set_state(PearlDiverState.COMPLETED, nonce)
    assert diver.state() is PearlDiverState.COMPLETED
    assert diver.nonce() == nonce


def test_no_cores_completes_without_nonce():
    diver = PearlDiver(Cores(0), Difficulty(1))
    diver.search_sync(_random_input(7))
    assert diver.state() is PearlDiverState.COMPLETED
    assert diver.nonce() is None


def test_search_only_once():
    diver = PearlDiver(Cores(0), Difficulty(1))
    diver.search_sync(_random_input(8))
    with pytest.raises(RuntimeError):
        diver.search_sync(_random_input(8))


def test_invalid_input_is_rejected():
    diver = PearlDiver(Cores(1), Difficulty(1))
    with pytest.raises(ValueError):
        diver.search_sync([0] * 5)


def test_cancel_stops_running_search():
    diver = PearlDiver(Cores(1), Difficulty(243))
    runner = threading.Thread(target=diver.search_sync, args=(_random_input(9),))
    runner.start()
    deadline = time.monotonic() + 60
    while diver.state() is not PearlDiverState.SEARCHING and time.monotonic() < deadline:
        time.sleep(0.01)
    diver.cancel()
    runner.join(timeout=60)
    assert not runner.is_alive()
    assert diver.state() is PearlDiverState.CANCELLED
    assert diver.nonce() is None