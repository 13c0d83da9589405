[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "beenode"
version = "0.1.0"
description = "Ternary node toolkit: CurlP hashing, proof-of-work nonce search, seeds, node configuration and an asyncio TCP peer network"
requires-python = ">=3.10"
dependencies = []
keywords = ["ternary", "trits", "trytes", "curl", "proof-of-work", "tangle", "p2p", "asyncio"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: System :: Distributed Computing",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[project.scripts]
beenode = "beenode.node:main"

[tool.hatch.build.targets.wheel]
packages = ["beenode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
