# caspersdk

Types for working with Casper network keys and deploy records.

## Modules

- `caspersdk.key_algo`
  - `KeyAlgo`: an `IntEnum` with `ED25519` (1) and `SECP256K1` (2).
    `key_size_in_bytes()` gives the tagged key size (33 and 34 bytes);
    `display_name()` gives `"ed25519"` or `"secp256k1"`.

- `caspersdk.public_key`
  - `PublicKey`: untagged `raw_bytes` plus a `key_algorithm`.
    - `PublicKey.from_hex_string(hex_key)`: parses account hex whose first two
      characters are the tag `01` or `02`. The rest is CEP-57 checksummed hex: all
      lower-case or all upper-case is accepted as is; mixed case must carry a
      valid checksum, otherwise `ValueError` is raised.
    - `PublicKey.from_bytes(data)`: parses bytes whose first byte is the tag;
      extra trailing bytes are ignored, too few raise `ValueError`.
    - `PublicKey.from_raw_bytes(raw_bytes, key_algorithm)`: the raw length must
      match the algorithm exactly (32 bytes for Ed25519, 33 for secp256k1).
    - `to_account_hex()` (also `str(key)` and `to_json()`), `to_bytes()`,
      `account_hash()` (`account-hash-<checksummed hex>` of the BLAKE2b-256 of
      the algorithm name, a zero byte and the raw key), `from_json(value)`.
    - Keys compare, order and hash by their account hex.

- `caspersdk.global_state_key`
  - `KeyIdentifier`: the tag byte of a serialized key (`ACCOUNT` = 0 through
    `DICTIONARY` = 9).
  - `GlobalStateKey` and its kinds `AccountHashKey`, `HashKey`, `TransferKey`,
    `DeployInfoKey`, `EraInfoKey`, `BalanceKey`, `BidKey`, `WithdrawKey`,
    `DictionaryKey`. Each holds `key` (the formatted string, with checksummed
    hex), `raw_bytes` and `key_identifier`.
    - `GlobalStateKey.from_string(value)` picks the kind by prefix. The prefixes
      `contract-package-wasm`, `contract-wasm-` and `contract-` are read as
      `hash-`. An unknown prefix raises `ValueError`.
    - `GlobalStateKey.from_bytes(data)` reads a tag byte followed by the key
      bytes; era keys take the era number from 8 little-endian bytes.
    - `to_hex_string()` gives the checksummed hex of the raw bytes, `to_bytes()`
      the tag byte followed by the raw bytes.
    - `AccountHashKey.from_public_key(public_key)` and `from_raw_bytes(raw)` on
      the other hex-based kinds build keys directly.
    - `EraInfoKey("era-<n>")` accepts an unsigned 64-bit era number.
    - Keys compare, order and hash by their `key` string.

- `caspersdk.secp256k1_key`
  - `Secp256k1Key(pem_file_path)`: loads an EC private key from an unencrypted
    PEM file and uses its private exponent on the secp256k1 curve. It exposes
    `public_key_str` (compressed point in hex), `private_key_str` (64 hex digits)
    and `public_key` (a secp256k1 `PublicKey`).
    - `sign(message)`: ECDSA over SHA-256, returning the 64-byte `r || s`. For a
      bytes message, signing repeats until the top bit of the first byte of `s`
      is clear; a `str` message is signed once as UTF-8.
    - `verify(message, signature)`: returns `True` or `False`.
    - `Secp256k1Key.signature_to_string(signature)`: lower-case hex.

- `caspersdk.records`
  - `DeployHeader`, `NextUpgrade`, `VestingSchedule`: dataclasses with
    `to_json()` and `from_json(data)`, converting to and from plain dicts.
    `from_json` checks types and unsigned ranges (64-bit for gas price,
    activation point and timestamp; 512-bit for locked amounts, which are
    written as decimal strings).
  - Configuration types: `LogConfig`, `Severity`, `Sink`, `Endpoint`,
    `NetworkType`.

## Installation

```
pip install caspersdk
```

## Example

```python
from caspersdk.public_key import PublicKey
from caspersdk.global_state_key import AccountHashKey, GlobalStateKey

pk = PublicKey.from_hex_string(
    "01027c04a0210afdf4a83328d57e8c2a12247a86d872fb53367f22a84b1b53d2a9"
)
print(pk.to_account_hex())
print(pk.account_hash())

account = AccountHashKey.from_public_key(pk)
print(account.to_bytes().hex())

key = GlobalStateKey.from_string(
    "hash-0102030401020304010203040102030401020304010203040102030401020304"
)
print(type(key).__name__, key.to_hex_string())
```

Signing with a secp256k1 key stored in a PEM file:

```python
from caspersdk.secp256k1_key import Secp256k1Key

signer = Secp256k1Key("secret_key.pem")
signature = signer.sign(b"message")
assert signer.verify(b"message", signature)
print(Secp256k1Key.signature_to_string(signature))
```

## What this package does not do

- It does not talk to a node: there is no JSON-RPC client for querying blocks,
  balances or state, and no way to send deploys.
- It does not build, byte-serialize, hash or sign whole deploys, nor encode
  CL values or deploy items; only the deploy header record is provided.
- It has no Ed25519 signing, does not verify signatures through `PublicKey`,
  and does not read or write public keys as PEM files.

## Running the tests

```
pip install -e ".[test]"
pytest
```