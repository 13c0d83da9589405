"""The node itself and the command that starts it."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence

from .config import Config, Host, Peer
from .constants import DEBUG, ENV_VAR


class Bee:
    """A node created from its configuration."""

    def __init__(self, config: Config) -> None:
        self.config = config

    @classmethod
    def from_config(cls, config: Config) -> Bee:
        return cls(config)

    def run(self) -> None:
        """Run the node."""


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="beenode", description="Run a node.")
    parser.parse_args(argv)

    os.environ[ENV_VAR] = DEBUG
    try:
        config = (
            Config.build()
            .with_host(Host.from_address("127.0.0.1:1337"))
            .with_peer(Peer.from_address("127.0.0.1:1338"))
            .with_peer(Peer.from_address("127.0.0.1:1339"))
            .try_build()
        )
        Bee.from_config(config).run()
    finally:
        os.environ.pop(ENV_VAR, None)
    return 0