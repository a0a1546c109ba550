"""Signature algorithms that a public key can belong to."""

from __future__ import annotations

import enum


class KeyAlgo(enum.IntEnum):
    """Key algorithm identifier, as used in the first byte of a public key."""

    ED25519 = 1
    SECP256K1 = 2

    def key_size_in_bytes(self) -> int:
        """Size of a public key including its one-byte algorithm tag."""
        return _KEY_SIZES[self]

    def display_name(self) -> str:
        """Lower-case name of the algorithm."""
        return _NAMES[self]


_KEY_SIZES = {KeyAlgo.ED25519: 33, KeyAlgo.SECP256K1: 34}
_NAMES = {KeyAlgo.ED25519: "ed25519", KeyAlgo.SECP256K1: "secp256k1"}