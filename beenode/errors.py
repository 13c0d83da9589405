"""Exception hierarchy used throughout the node."""


class BeeError(Exception):
    """Base class of all node errors."""


class ConfigError(BeeError):
    """A configuration value is missing or invalid."""

    def __init__(self, key: str, msg: str) -> None:
        super().__init__(f"{key}: {msg}")
        self.key = key
        self.msg = msg


class NetworkError(BeeError):
    """A failure in the networking layer."""


class TransactionError(BeeError):
    """A transaction could not be processed."""