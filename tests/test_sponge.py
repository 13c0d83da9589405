from itertools import cycle, islice

import pytest

from beenode.sponge import Sponge


class CountingSponge(Sponge):
    IN_LEN = 3
    OUT_LEN = 3

    def __init__(self):
        self.state = [0, 0, 0]
        self.resets = 0

    def absorb(self, trits):
        for position, trit in enumerate(trits):
            slot = position % 3
            self.state[slot] = (self.state[slot] + trit + 1) % 3 - 1

    def reset(self):
        self.state = [0, 0, 0]
        self.resets += 1

    def squeeze_into(self, buf):
        buf[:] = list(islice(cycle(self.state), len(buf)))
        self.state = [(t + 2) % 3 - 1 for t in self.state]


INPUT = [1, -1, 0, 1, 1, 0, -1]


def test_sponge_is_abstract():
    with pytest.raises(TypeError):
        Sponge()


def test_squeeze_has_out_len():
    sponge = CountingSponge()
    sponge.absorb(INPUT)
    assert len(Sponge.squeeze(sponge)) == CountingSponge.OUT_LEN


def test_digest_matches_absorb_then_squeeze():
    manual = CountingSponge()
    manual.absorb(INPUT)
    expected = Sponge.squeeze(manual)
    assert Sponge.digest(CountingSponge(), INPUT) == expected


def test_digest_resets_state():
    sponge = CountingSponge()
    first = Sponge.digest(sponge, INPUT)
    assert sponge.resets == 1
    assert sponge.state == [0, 0, 0]
    assert Sponge.digest(sponge, INPUT) == first


def test_digest_into_matches_digest():
    buf = [0, 0, 0]
    sponge = CountingSponge()
    Sponge.digest_into(sponge, INPUT, buf)
    assert buf == Sponge.digest(CountingSponge(), INPUT)
    assert sponge.resets == 1


def test_digest_into_fills_longer_buffer():
    buf = [9] * 5
    Sponge.digest_into(CountingSponge(), INPUT, buf)
    assert len(buf) == 5
    assert set(buf) <= {-1, 0, 1}