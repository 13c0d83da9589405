from beenode.powconstants import BITS_0, BITS_1, H0, L0, STATE_LEN
from beenode.powcurlstate import PowCurlState

ONE = (BITS_1, BITS_0)
MINUS_ONE = (BITS_0, BITS_1)
ZERO = (BITS_1, BITS_1)


def test_new_fills_every_position():
    state = PowCurlState(BITS_1)
    assert all(state.get(i) == ZERO for i in range(STATE_LEN))


def test_set_get_round_trip():
    state = PowCurlState(BITS_1)
    state.set(10, H0, L0)
    assert state.get(10) == (H0, L0)
    assert state.get(11) == ZERO


def test_bit_add_cycles_through_trits():
    state = PowCurlState(BITS_1)
    state.set(0, *ONE)
    assert state.bit_add(0) is True
    assert state.get(0) == MINUS_ONE
    assert state.bit_add(0) is False
    assert state.get(0) == ZERO
    assert state.bit_add(0) is False
    assert state.get(0) == ONE


def test_three_additions_restore_mixed_slots():
    state = PowCurlState(BITS_1)
    state.set(5, H0, L0)
    carries = [state.bit_add(5) for _ in range(3)]
    assert state.get(5) == (H0, L0)
    assert any(carries)


def test_bit_equal_marks_zero_trits():
    state = PowCurlState(BITS_1)
    assert state.bit_equal(0) == BITS_1
    state.set(0, *ONE)
    assert state.bit_equal(0) == BITS_0


def test_copy_is_independent():
    state = PowCurlState(BITS_1)
    clone = state.copy()
    clone.set(3, *MINUS_ONE)
    assert state.get(3) == ZERO
    assert clone.get(3) == MINUS_ONE