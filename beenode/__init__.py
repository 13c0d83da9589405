"""Ternary node toolkit: CurlP hashing, proof-of-work search, seeds, configuration and an asyncio peer network."""

__version__ = "0.1.0"