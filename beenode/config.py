"""Node configuration and its builder."""

from __future__ import annotations

import json
import socket
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from .cores import Cores
from .difficulty import Difficulty
from .errors import ConfigError


def _split_address(address: str) -> tuple[str, str]:
    if address.startswith("["):
        host, sep, rest = address[1:].partition("]")
        if not sep or not rest.startswith(":"):
            raise ValueError(f"invalid socket address: {address!r}")
        return host, rest[1:]
    host, sep, port = address.rpartition(":")
    if not sep or not host:
        raise ValueError(f"invalid socket address: {address!r}")
    return host, port


def _resolve(address: str | tuple[str, int]) -> tuple[str, int]:
    if isinstance(address, tuple):
        host, port_text = address[0], str(address[1])
    else:
        host, port_text = _split_address(address)
    try:
        port = int(port_text)
    except ValueError:
        raise ValueError(f"invalid port: {port_text!r}") from None
    if not 0 <= port <= 0xFFFF:
        raise ValueError(f"invalid port: {port}")
    try:
        infos = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)
    except socket.gaierror as error:
        raise ValueError(f"error resolving address {host!r}: {error}") from None
    if not infos:
        raise ValueError(f"error resolving address {host!r}")
    sockaddr = infos[0][4]
    return sockaddr[0], sockaddr[1]


def _format(ip: str, port: int) -> str:
    if ":" in ip:
        return f"[{ip}]:{port}"
    return f"{ip}:{port}"


@dataclass(frozen=True)
class Peer:
    """The address of a neighbour node."""

    ip: str
    port: int

    @classmethod
    def from_address(cls, address) -> Peer:
        """Resolve `address` ("host:port" or (host, port)) to its first socket address."""
        return cls(*_resolve(address))

    def __str__(self) -> str:
        return _format(self.ip, self.port)


@dataclass(frozen=True)
class Host:
    """The address this node listens on."""

    ip: str
    port: int

    @classmethod
    def from_address(cls, address) -> Host:
        """Resolve `address` ("host:port" or (host, port)) to its first socket address."""
        return cls(*_resolve(address))

    def __str__(self) -> str:
        return _format(self.ip, self.port)


@dataclass
class Peers:
    """An ordered collection of peers."""

    items: list[Peer] = field(default_factory=list)

    def add(self, peer: Peer) -> None:
        self.items.append(peer)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Peer]:
        return iter(self.items)


@dataclass
class ConfigBuilder:
    """Collects configuration values; `try_build` checks them."""

    host: Host | None = None
    peers: Peers = field(default_factory=Peers)
    pow_difficulty: Difficulty | None = field(default_factory=Difficulty.mainnet)
    pow_cores: Cores | None = field(default_factory=Cores.max)

    def with_host(self, host: Host) -> ConfigBuilder:
        self.host = host
        return self

    def with_peer(self, peer: Peer) -> ConfigBuilder:
        self.peers.add(peer)
        return self

    def with_pow_difficulty(self, difficulty: Difficulty) -> ConfigBuilder:
        self.pow_difficulty = difficulty
        return self

    def with_pow_cores(self, cores: Cores) -> ConfigBuilder:
        self.pow_cores = cores
        return self

    def try_build(self) -> Config:
        """The finished configuration; raises ConfigError if peers or host are missing."""
        if not self.peers:
            raise ConfigError("peers", "error: you haven't configured any peers")
        if self.host is None:
            raise ConfigError("host", "error: you haven't configured the host address")
        return Config(
            host=self.host,
            peers=self.peers,
            pow_difficulty=self.pow_difficulty if self.pow_difficulty is not None else Difficulty.mainnet(),
            pow_cores=self.pow_cores if self.pow_cores is not None else Cores.max(),
        )


@dataclass
class Config:
    """The complete configuration of a node."""

    host: Host
    peers: Peers
    pow_difficulty: Difficulty
    pow_cores: Cores

    @classmethod
    def build(cls) -> ConfigBuilder:
        return ConfigBuilder()

    def to_dict(self) -> dict[str, Any]:
        return {
            "host": str(self.host),
            "peers": [str(peer) for peer in self.peers],
            "pow_difficulty": int(self.pow_difficulty),
            "pow_cores": int(self.pow_cores),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)