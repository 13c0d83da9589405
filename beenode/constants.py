"""Protocol-wide constants shared by the node components."""

ENV_VAR = "BEE"
DEBUG = "debug"
CONFIG = "./config"

TRYTE_ZERO = "9"

TRANSACTION_TRIT_LEN = 8019
TRANSACTION_TRYT_LEN = TRANSACTION_TRIT_LEN // 3  # 2673
TRANSACTION_BYTE_LEN = TRANSACTION_TRIT_LEN // 5 + 1  # 1604

PAYLOAD_TRIT_LEN = 6561
ADDRESS_TRIT_LEN = 243
VALUE_TRIT_LEN = 81
TAG_TRIT_LEN = 81
TIMESTAMP_TRIT_LEN = 27
INDEX_TRIT_LEN = 27
HASH_TRIT_LEN = 243
NONCE_TRIT_LEN = 81

MAINNET_DIFFICULTY = 14
DEVNET_DIFFICULTY = 9
SPAMNET_DIFFICULTY = 6