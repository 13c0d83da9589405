"""Multi-threaded search for a proof-of-work nonce."""

from __future__ import annotations

import threading
from enum import Enum

from .cores import Cores
from .difficulty import Difficulty
from .nonce import InputTrits, NonceTrits
from .powconstants import (
    BITS_0,
    BITS_1,
    CHUNK_NONCE_START,
    H0,
    H1,
    H2,
    H3,
    HASH_LEN,
    INDICES,
    INNER_INCR_START,
    L0,
    L1,
    L2,
    L3,
    NUM_FULL_CHUNKS_FOR_PRESTATE,
    NUM_ROUNDS,
    OUTER_INCR_START,
)
from .powcurlstate import PowCurlState

_PAIRS = tuple(zip(INDICES, INDICES[1:]))
_HEAD_PAIRS = _PAIRS[:HASH_LEN]
_TRIT_WORDS = {1: (BITS_1, BITS_0), -1: (BITS_0, BITS_1), 0: (BITS_1, BITS_1)}


class PearlDiverState(Enum):
    CREATED = "created"
    SEARCHING = "searching"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


def _round(hi: list[int], lo: list[int], pairs) -> tuple[list[int], list[int]]:
    new_hi: list[int] = []
    new_lo: list[int] = []
    for first, second in pairs:
        alpha = lo[first]
        gamma = hi[second]
        delta = (alpha | ~gamma) & (lo[second] ^ hi[first])
        new_lo.append(BITS_1 ^ delta)
        new_hi.append((alpha ^ gamma) | delta)
    return new_hi, new_lo


def _transform(state: PowCurlState) -> None:
    hi, lo = state.hi, state.lo
    for _ in range(NUM_ROUNDS - 1):
        hi, lo = _round(hi, lo, _PAIRS)
    # The last round only needs the hash part of the state.
    head_hi, head_lo = _round(hi, lo, _HEAD_PAIRS)
    hi[:HASH_LEN] = head_hi
    lo[:HASH_LEN] = head_lo
    state.hi, state.lo = hi, lo


def _load(state: PowCurlState, trits) -> None:
    for index, trit in enumerate(trits):
        state.set(index, *_TRIT_WORDS[trit])


def _make_prestate(input_trits: InputTrits) -> PowCurlState:
    prestate = PowCurlState(BITS_1)
    for chunk in range(NUM_FULL_CHUNKS_FOR_PRESTATE):
        start = chunk * HASH_LEN
        _load(prestate, input_trits[start:start + HASH_LEN])
        _transform(prestate)

    start = NUM_FULL_CHUNKS_FOR_PRESTATE * HASH_LEN
    _load(prestate, input_trits[start:start + CHUNK_NONCE_START])

    prestate.set(CHUNK_NONCE_START + 0, H0, L0)
    prestate.set(CHUNK_NONCE_START + 1, H1, L1)
    prestate.set(CHUNK_NONCE_START + 2, H2, L2)
    prestate.set(CHUNK_NONCE_START + 3, H3, L3)
    return prestate


def _outer_increment(prestate: PowCurlState) -> None:
    for index in range(OUTER_INCR_START, INNER_INCR_START):
        if not prestate.bit_add(index):
            break


def _inner_increment(prestate: PowCurlState) -> bool:
    """Advance to the next batch of candidates; True once the space is exhausted."""
    return all(prestate.bit_add(index) for index in range(INNER_INCR_START, HASH_LEN))


def _find_nonce(state: PowCurlState, difficulty: int) -> NonceTrits | None:
    nonce_test = BITS_1
    for index in range(HASH_LEN - difficulty, HASH_LEN):
        nonce_test &= state.bit_equal(index)
        if nonce_test == 0:
            return None
    slot = (nonce_test & -nonce_test).bit_length() - 1
    return _extract_nonce(state, slot)


def _extract_nonce(state: PowCurlState, slot: int) -> NonceTrits:
    trits = []
    for index in range(CHUNK_NONCE_START, HASH_LEN):
        hi, lo = state.get(index)
        bits = ((hi >> slot) & 1, (lo >> slot) & 1)
        trits.append(1 if bits == (1, 0) else -1 if bits == (0, 1) else 0)
    return NonceTrits(trits)


class PearlDiver:
    """Searches for a nonce whose transaction hash ends in enough zero trits."""

    def __init__(self, cores: Cores | None = None, difficulty: Difficulty | None = None) -> None:
        self._cores = cores if cores is not None else Cores.max()
        self._difficulty = difficulty if difficulty is not None else Difficulty.mainnet()
        self._lock = threading.Lock()
        self._state = PearlDiverState.CREATED
        self._nonce: NonceTrits | None = None

    def search_sync(self, input_trits) -> None:
        """Search for a nonce, blocking until found, exhausted or cancelled."""
        if self.state() is not PearlDiverState.CREATED:
            raise RuntimeError("a search can only be started once")
        if not isinstance(input_trits, InputTrits):
            input_trits = InputTrits(input_trits)

        prestate = _make_prestate(input_trits)
        self.set_state(PearlDiverState.SEARCHING)

        workers = []
        for _ in range(int(self._cores)):
            worker = threading.Thread(target=self._search, args=(prestate.copy(),), daemon=True)
            workers.append(worker)
            worker.start()
            _outer_increment(prestate)
        for worker in workers:
            worker.join()

        with self._lock:
            if self._state is PearlDiverState.SEARCHING:
                self._state = PearlDiverState.COMPLETED
                self._nonce = None

    def _search(self, state: PowCurlState) -> None:
        difficulty = int(self._difficulty)
        while self.state() is PearlDiverState.SEARCHING:
            candidate = state.copy()
            _transform(candidate)
            nonce = _find_nonce(candidate, difficulty)
            if nonce is not None:
                with self._lock:
                    if self._state is PearlDiverState.SEARCHING:
                        self._state = PearlDiverState.COMPLETED
                        self._nonce = nonce
                return
            if _inner_increment(state):
                return

    def cancel(self) -> None:
        """Stop a running search."""
        with self._lock:
            if self._state is PearlDiverState.SEARCHING:
                self._state = PearlDiverState.CANCELLED

    def state(self) -> PearlDiverState:
        with self._lock:
            return self._state

    def set_state(self, state: PearlDiverState, nonce: NonceTrits | None = None) -> None:
        with self._lock:
            self._state = state
            self._nonce = nonce

    def nonce(self) -> NonceTrits | None:
        """The nonce found by a completed search, if any."""
        with self._lock:
            return self._nonce