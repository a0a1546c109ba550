"""Public keys with algorithm tag, account hash and checksummed hex form."""

from __future__ import annotations

import functools
import hashlib
import itertools
from dataclasses import dataclass

from caspersdk.key_algo import KeyAlgo

_SMALL_BYTES_COUNT = 75


def _blake2b256(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=32).digest()


def _checksum_encode(data: bytes) -> str:
    """Hex-encode ``data``, marking a checksum through the case of letters."""
    digits = data.hex()
    if len(data) > _SMALL_BYTES_COUNT:
        return digits
    digest = _blake2b256(data)
    bits = itertools.cycle([(byte >> shift) & 1 for byte in digest for shift in range(8)])
    return "".join(
        char.upper() if bit and char.isalpha() else char
        for char, bit in zip(digits, bits)
    )


def _checksum_decode(text: str) -> bytes:
    """Decode checksummed hex; a mixed-case input must carry a valid checksum."""
    try:
        data = bytes.fromhex(text)
    except ValueError as exc:
        raise ValueError(f"invalid hex string: {text!r}") from exc
    same_case = text == text.lower() or text == text.upper()
    if len(data) > _SMALL_BYTES_COUNT or same_case:
        return data
    if _checksum_encode(data) != text:
        raise ValueError(f"invalid checksum in {text!r}")
    return data


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class PublicKey:
    """A public key: raw key bytes without tag, plus the key algorithm."""

    raw_bytes: bytes
    key_algorithm: KeyAlgo

    @classmethod
    def from_hex_string(cls, hex_key: str) -> PublicKey:
        """Parse a hex string that starts with the algorithm tag ("01" or "02")."""
        raw = _checksum_decode(hex_key[2:])
        tag = hex_key[:2]
        if tag == "01":
            return cls.from_raw_bytes(raw, KeyAlgo.ED25519)
        if tag == "02":
            return cls.from_raw_bytes(raw, KeyAlgo.SECP256K1)
        raise ValueError("Wrong public algorithm identifier.")

    @classmethod
    def from_bytes(cls, data: bytes) -> PublicKey:
        """Parse bytes whose first byte is the algorithm tag."""
        if not data:
            raise ValueError("Public key bytes cannot be empty.")
        try:
            algo = KeyAlgo(data[0])
        except ValueError as exc:
            raise ValueError("Invalid key algorithm identifier.") from exc
        expected = algo.key_size_in_bytes()
        if len(data) < expected:
            raise ValueError(f"Wrong public key format. Expected length is {expected}")
        return cls(bytes(data[1:expected]), algo)

    @classmethod
    def from_raw_bytes(cls, raw_bytes: bytes, key_algorithm: KeyAlgo) -> PublicKey:
        """Build a key from untagged bytes and an algorithm."""
        algo = KeyAlgo(key_algorithm)
        expected = algo.key_size_in_bytes() - 1
        if len(raw_bytes) != expected:
            raise ValueError(
                f"Wrong public key format. Expected length is {expected} "
                f"for {algo.display_name()}, got {len(raw_bytes)}"
            )
        return cls(bytes(raw_bytes), algo)

    def account_hash(self) -> str:
        """The account hash, formatted as ``account-hash-<hex>``."""
        preimage = self.key_algorithm.display_name().encode("ascii") + b"\x00" + self.raw_bytes
        return "account-hash-" + _checksum_encode(_blake2b256(preimage))

    def to_account_hex(self) -> str:
        """Tagged checksummed hex form of the key."""
        return f"{int(self.key_algorithm):02x}" + _checksum_encode(self.raw_bytes)

    def to_bytes(self) -> bytes:
        """Key bytes with the algorithm tag as the first byte."""
        return bytes([int(self.key_algorithm)]) + self.raw_bytes

    def to_json(self) -> str:
        return self.to_account_hex()

    @classmethod
    def from_json(cls, value: str) -> PublicKey:
        if not isinstance(value, str):
            raise TypeError("public key must be given as a string")
        return cls.from_hex_string(value)

    def __str__(self) -> str:
        return self.to_account_hex()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self.to_account_hex() == other.to_account_hex()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self.to_account_hex() < other.to_account_hex()

    def __hash__(self) -> int:
        return hash(self.to_account_hex())