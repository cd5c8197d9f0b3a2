"""Cryptographic building blocks: SHA-256, SHA-512, HMAC, integer helpers and random bytes."""

__version__ = "0.1.0"