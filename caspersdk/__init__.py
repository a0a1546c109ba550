"""Casper network public keys, global state keys, secp256k1 signing and deploy record types."""

__version__ = "1.0.0"