"""Keys that address values in the global state."""

from __future__ import annotations

import enum
import functools
from typing import ClassVar

from caspersdk.public_key import PublicKey, _checksum_decode, _checksum_encode


class KeyIdentifier(enum.IntEnum):
    """Tag byte of a serialized global state key."""

    ACCOUNT = 0
    HASH = 1
    UREF = 2
    TRANSFER = 3
    DEPLOY_INFO = 4
    ERA_INFO = 5
    BALANCE = 6
    BID = 7
    WITHDRAW = 8
    DICTIONARY = 9


def _raw_bytes_from_key(key: str) -> bytes:
    try:
        return bytes.fromhex(key[key.rfind("-") + 1:])
    except ValueError as exc:
        raise ValueError(f"Key not valid: {key!r}") from exc


@functools.total_ordering
class GlobalStateKey:
    """A formatted key string together with its raw bytes and tag."""

    PREFIX: ClassVar[str] = ""
    IDENTIFIER: ClassVar[KeyIdentifier | None] = None

    def __init__(self, key: str, key_prefix: str | None = None) -> None:
        if key_prefix is None:
            self.key = key
        else:
            if not key.startswith(key_prefix):
                raise ValueError(f"Key not valid. It should start with '{key_prefix}'.")
            decoded = _checksum_decode(key[key.rfind("-") + 1:])
            self.key = key_prefix + _checksum_encode(decoded)
        self.raw_bytes = _raw_bytes_from_key(self.key)
        self.key_identifier = self.IDENTIFIER

    @classmethod
    def from_string(cls, value: str) -> GlobalStateKey:
        """Parse a formatted key, choosing the key type by its prefix."""
        if value.startswith("account-hash-"):
            return AccountHashKey(value)
        if value.startswith("hash-"):
            return HashKey(value)
        for alias in ("contract-package-wasm", "contract-wasm-", "contract-"):
            if value.startswith(alias):
                return HashKey(value.replace(alias, "hash-", 1))
        for prefix, key_type in _PREFIX_TYPES:
            if value.startswith(prefix):
                return key_type(value)
        raise ValueError("Key not valid. Unknown key prefix.")

    @classmethod
    def from_bytes(cls, data: bytes) -> GlobalStateKey:
        """Parse a serialized key: a tag byte followed by the key bytes."""
        if not data:
            raise ValueError("Key not valid. No bytes given.")
        tag, body = data[0], bytes(data[1:])
        if tag == KeyIdentifier.ACCOUNT:
            return AccountHashKey("account-hash-" + body.hex())
        if tag == KeyIdentifier.HASH:
            return HashKey("hash-" + body.hex())
        if tag == KeyIdentifier.ERA_INFO:
            return EraInfoKey(f"era-{int.from_bytes(body[:8], 'little')}")
        key_type = _BYTES_TYPES.get(tag)
        if key_type is None:
            raise ValueError("Key not valid. Unknown key prefix.")
        return key_type.from_raw_bytes(body)

    def to_hex_string(self) -> str:
        """Checksummed hex of the raw key bytes."""
        return _checksum_encode(self.raw_bytes)

    def to_bytes(self) -> bytes:
        """Tag byte followed by the raw key bytes."""
        return bytes([int(self.key_identifier or 0)]) + self.raw_bytes

    def __str__(self) -> str:
        return self.key

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GlobalStateKey):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GlobalStateKey):
            return NotImplemented
        return self.key < other.key

    def __hash__(self) -> int:
        return hash(self.key)


class _PrefixedKey(GlobalStateKey):
    def __init__(self, key: str) -> None:
        super().__init__(key, self.PREFIX)

    @classmethod
    def _from_raw(cls, raw: bytes) -> GlobalStateKey:
        return cls(cls.PREFIX + _checksum_encode(bytes(raw)))


class AccountHashKey(_PrefixedKey):
    PREFIX = "account-hash-"
    IDENTIFIER = KeyIdentifier.ACCOUNT

    @classmethod
    def from_public_key(cls, public_key: PublicKey) -> AccountHashKey:
        """The account hash key belonging to ``public_key``."""
        return cls(public_key.account_hash())


class HashKey(_PrefixedKey):
    PREFIX = "hash-"
    IDENTIFIER = KeyIdentifier.HASH

    @classmethod
    def from_raw_bytes(cls, raw: bytes) -> GlobalStateKey:
        """Build the key from its raw bytes."""
        return cls._from_raw(raw)


class TransferKey(_PrefixedKey):
    PREFIX = "transfer-"
    IDENTIFIER = KeyIdentifier.TRANSFER

    @classmethod
    def from_raw_bytes(cls, raw: bytes) -> GlobalStateKey:
        """Build the key from its raw bytes."""
        return cls._from_raw(raw)


class DeployInfoKey(_PrefixedKey):
    PREFIX = "deploy-"
    IDENTIFIER = KeyIdentifier.DEPLOY_INFO

    @classmethod
    def from_raw_bytes(cls, raw: bytes) -> GlobalStateKey:
        """Build the key from its raw bytes."""
        return cls._from_raw(raw)


class EraInfoKey(GlobalStateKey):
    """Key of an era, formatted as ``era-<number>``."""

    PREFIX = "era-"
    IDENTIFIER = KeyIdentifier.ERA_INFO

    def __init__(self, key: str) -> None:
        if not key.startswith(self.PREFIX):
            raise ValueError("EraInfoKey must start with 'era-'")
        try:
            era = int(key[len(self.PREFIX):])
        except ValueError as exc:
            raise ValueError("Key not valid. Cannot parse era number.") from exc
        if not 0 <= era < 1 << 64:
            raise ValueError("Key not valid. Era number out of range.")
        self.key = key
        self.raw_bytes = era.to_bytes(8, "little")
        self.key_identifier = self.IDENTIFIER


class BalanceKey(_PrefixedKey):
    PREFIX = "balance-"
    IDENTIFIER = KeyIdentifier.BALANCE

    @classmethod
    def from_raw_bytes(cls, raw: bytes) -> GlobalStateKey:
        """Build the key from its raw bytes."""
        return cls._from_raw(raw)


class BidKey(_PrefixedKey):
    PREFIX = "bid-"
    IDENTIFIER = KeyIdentifier.BID

    @classmethod
    def from_raw_bytes(cls, raw: bytes) -> GlobalStateKey:
        """Build the key from its raw bytes."""
        return cls._from_raw(raw)


class WithdrawKey(_PrefixedKey):
    PREFIX = "withdraw-"
    IDENTIFIER = KeyIdentifier.WITHDRAW

    @classmethod
    def from_raw_bytes(cls, raw: bytes) -> GlobalStateKey:
        """Build the key from its raw bytes."""
        return cls._from_raw(raw)


class DictionaryKey(_PrefixedKey):
    PREFIX = "dictionary-"
    IDENTIFIER = KeyIdentifier.DICTIONARY

    @classmethod
    def from_raw_bytes(cls, raw: bytes) -> GlobalStateKey:
        """Build the key from its raw bytes."""
        return cls._from_raw(raw)


_PREFIX_TYPES: tuple[tuple[str, type[GlobalStateKey]], ...] = (
    ("transfer-", TransferKey),
    ("deploy-", DeployInfoKey),
    ("era-", EraInfoKey),
    ("balance-", BalanceKey),
    ("bid", BidKey),
    ("withdraw", WithdrawKey),
    ("dictionary", DictionaryKey),
)

_BYTES_TYPES: dict[int, type[_PrefixedKey]] = {
    KeyIdentifier.TRANSFER: TransferKey,
    KeyIdentifier.DEPLOY_INFO: DeployInfoKey,
    KeyIdentifier.BALANCE: BalanceKey,
    KeyIdentifier.BID: BidKey,
    KeyIdentifier.WITHDRAW: WithdrawKey,
    KeyIdentifier.DICTIONARY: DictionaryKey,
}