"""Constants used by the proof-of-work search."""

from .constants import HASH_TRIT_LEN, NONCE_TRIT_LEN, TRANSACTION_TRIT_LEN

NUM_FULL_CHUNKS_FOR_PRESTATE = (TRANSACTION_TRIT_LEN - HASH_TRIT_LEN) // HASH_TRIT_LEN  # 32

TRANS_NONCE_START = TRANSACTION_TRIT_LEN - NONCE_TRIT_LEN  # 7938
CHUNK_NONCE_START = HASH_TRIT_LEN - NONCE_TRIT_LEN  # 162

BATCH_SIZE = 64

BITS_1 = 0xFFFFFFFFFFFFFFFF
BITS_0 = 0x0000000000000000

L0 = 0xDB6DB6DB6DB6DB6D
H0 = 0xB6DB6DB6DB6DB6DB
L1 = 0xF1F8FC7E3F1F8FC7
H1 = 0x8FC7E3F1F8FC7E3F
L2 = 0x7FFFE00FFFFC01FF
H2 = 0xFFC01FFFF803FFFF
L3 = 0xFFC0000007FFFFFF
H3 = 0x003FFFFFFFFFFFFF

OUTER_INCR_START = HASH_TRIT_LEN - NONCE_TRIT_LEN + 4
INNER_INCR_START = OUTER_INCR_START + 27

HASH_LEN = HASH_TRIT_LEN
STATE_LEN = 3 * HASH_LEN
NUM_ROUNDS = 81


def _curl_indices() -> tuple[int, ...]:
    half = STATE_LEN // 2
    indices = [0]
    for _ in range(STATE_LEN):
        previous = indices[-1]
        indices.append(previous + (half if previous <= half else -(half + 1)))
    return tuple(indices)


INDICES = _curl_indices()