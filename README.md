# beenode

A small toolkit for a node that works with balanced-ternary data. It has no
dependencies beyond the standard library.

- `beenode.trinary`: `trytes_to_trits` and `trits_to_trytes` convert between
  trytes (`9ABC…Z`) and trits (`-1`, `0`, `1`), three trits per tryte.
- `beenode.constants`: transaction and field lengths in trits, and the
  mainnet, devnet and spamnet difficulties.
- `beenode.fields`: `Field` and `Offset` give the trit and tryte position of
  every transaction field (`PAYLOAD`, `ADDRESS`, …, `NONCE`, all listed in
  `ALL_FIELDS`). `Field.byte_start` and `Field.byte_length` give the position
  with five trits packed per byte.
- `beenode.sponge`: the `Sponge` base class with `absorb`, `reset`,
  `squeeze_into`, `squeeze`, `digest_into` and `digest`.
- `beenode.curlp`: the `CurlP` sponge with a chosen number of rounds, and the
  `CurlP27` and `CurlP81` variants.
- `beenode.pearldiver`: `PearlDiver` searches, over several threads, for a
  nonce that makes a transaction hash end in enough zero trits. It uses
  `beenode.cores.Cores` and `beenode.difficulty.Difficulty`.
- `beenode.seed`: `IotaSeed`, a 243-trit seed that derives subseeds with a
  sponge.
- `beenode.config` and `beenode.node`: build a node configuration and create
  a `Bee` from it.
- `beenode.message`, `beenode.peers`, `beenode.reader`, `beenode.writer`,
  `beenode.assign` and `beenode.network_interface`: the asyncio TCP peer
  network.
- `beenode.errors`: `BeeError` and its subclasses `ConfigError`,
  `NetworkError` and `TransactionError`.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Hashing

```python
from beenode.curlp import CurlP27
from beenode.trinary import trytes_to_trits, trits_to_trytes

sponge = CurlP27()
digest = sponge.digest(trytes_to_trits("HELLO9WORLD"))
print(trits_to_trytes(digest))  # 81 trytes
```

`digest` absorbs the input in chunks of 243 trits, squeezes 243 trits and
resets the sponge. Values other than `-1`, `0` and `1` raise `ValueError`.

## Proof of work

```python
from beenode.cores import Cores
from beenode.difficulty import Difficulty
from beenode.pearldiver import PearlDiver, PearlDiverState

diver = PearlDiver(Cores(2), Difficulty.spamnet())
diver.search_sync(transaction_trits)  # 8019 trits
if diver.state() is PearlDiverState.COMPLETED and diver.nonce() is not None:
    print(diver.nonce().to_list())
```

`Cores` is capped at the number of CPUs and `Difficulty` at 243. A search
can be started only once per `PearlDiver`; `cancel` stops one that is
running from another thread.

## Seeds

```python
from beenode.curlp import CurlP81
from beenode.seed import IotaSeed

seed = IotaSeed.generate(CurlP81)
first = seed.subseed(0)
print(first.to_bytes()[:10])
```

`subseed(index)` adds `index` to the seed as a balanced-ternary number and
hashes the result. `IotaSeed.from_bytes` accepts exactly 243 trits. It raises
`InvalidLengthError` when the length is wrong and `InvalidTritError` when a
value lies outside `-1..1`; both are `IotaSeedError`, a `ValueError`.

## Configuration

```python
from beenode.config import Config, Host, Peer
from beenode.node import Bee

config = (
    Config.build()
    .with_host(Host.from_address("127.0.0.1:1337"))
    .with_peer(Peer.from_address("127.0.0.1:1338"))
    .try_build()
)
print(config.to_json())
Bee.from_config(config).run()
```

`Host.from_address` and `Peer.from_address` take `"host:port"` or
`(host, port)` and resolve it to its first socket address. `try_build`
raises `ConfigError` if no peers are configured or if the host is missing.
The proof-of-work difficulty defaults to mainnet and the core count to all
CPUs.

## Peer network

`network_interface.bind` listens on a `TcpServerConfig` address and runs the
peer tasks, all driven by `asyncio.Queue` objects:

- put `TcpClientConfig("host:port")` on `peers_to_add` to connect to a peer;
  every connected peer's address appears on `connected_peers`;
- put `MessageToSend(to, TestMessage(text))` on `messages_to_send`; an empty
  `to` sends the message to every peer;
- each incoming message arrives on `received_messages` as a
  `ReceivedMessage(sender, msg)`;
- put a peer's `(host, port)` on `peers_to_remove` to stop its tasks;
- put any value on `shutdown_requests` to stop listening and end `bind`.

Messages are framed as a type byte (`1`), a big-endian 16-bit length and a
UTF-8 payload; `writer.encode_message` builds a frame and
`reader.read_message` reads one. A payload longer than 65535 bytes raises
`ValueError`.

## Command line

```
beenode
```

This builds a local configuration (host `127.0.0.1:1337`, peers
`127.0.0.1:1338` and `127.0.0.1:1339`), creates a `Bee` from it and runs it.

## What it does not do

`Bee.run` does nothing yet: the command does not start the peer network or
any other service, and it takes no options. There are no transaction or
bundle types, no signing or key generation beyond seeds and subseeds, and no
storage of any kind.