import pytest

from caspersdk.key_algo import KeyAlgo
from caspersdk.public_key import PublicKey

ED_HEX = "01027c04a0210afdf4a83328d57e8c2a12247a86d872fb53367f22a84b1b53d2a9"
ED_ACCOUNT_HASH = "7cfcb2fbdd0e747cabd0f8fe4d743179a764a8d7174ea6f0dfdb0c41fe1348b4"


def test_from_hex_string_ed25519():
    pk = PublicKey.from_hex_string(ED_HEX)
    assert pk.key_algorithm is KeyAlgo.ED25519
    assert pk.raw_bytes == bytes.fromhex(ED_HEX[2:])


def test_account_hash():
    pk = PublicKey.from_hex_string(ED_HEX)
    assert pk.account_hash().lower() == "account-hash-" + ED_ACCOUNT_HASH


def test_account_hex_round_trip():
    pk = PublicKey.from_hex_string(ED_HEX)
    hex_form = pk.to_account_hex()
    assert hex_form.lower() == ED_HEX
    assert PublicKey.from_hex_string(hex_form) == pk
    assert str(pk) == hex_form


def test_bytes_round_trip():
    pk = PublicKey.from_hex_string(ED_HEX)
    data = pk.to_bytes()
    assert data[0] == 1
    assert len(data) == KeyAlgo.ED25519.key_size_in_bytes()
    assert PublicKey.from_bytes(data) == pk


def test_from_bytes_ignores_trailing_data():
    pk = PublicKey.from_hex_string(ED_HEX)
    assert PublicKey.from_bytes(pk.to_bytes() + b"\xff\xff") == pk


def test_secp256k1_bytes_round_trip():
    raw = bytes([0x02]) + bytes(range(32))
    pk = PublicKey.from_raw_bytes(raw, KeyAlgo.SECP256K1)
    data = pk.to_bytes()
    assert data[0] == 2
    assert PublicKey.from_bytes(data) == pk
    assert pk.to_account_hex().startswith("02")
    assert PublicKey.from_hex_string(pk.to_account_hex()) == pk


def test_json_round_trip():
    pk = PublicKey.from_hex_string(ED_HEX)
    assert PublicKey.from_json(pk.to_json()) == pk


def test_from_json_rejects_non_string():
    with pytest.raises(TypeError):
        PublicKey.from_json(5)


def test_empty_bytes_rejected():
    with pytest.raises(ValueError):
        PublicKey.from_bytes(b"")


def test_unknown_algorithm_byte_rejected():
    with pytest.raises(ValueError):
        PublicKey.from_bytes(bytes([0x05]) + bytes(32))


def test_short_bytes_rejected():
    with pytest.raises(ValueError):
        PublicKey.from_bytes(bytes([0x01]) + bytes(10))


def test_wrong_raw_size_rejected():
    with pytest.raises(ValueError):
        PublicKey.from_raw_bytes(bytes(33), KeyAlgo.ED25519)


def test_unknown_hex_tag_rejected():
    with pytest.raises(ValueError):
        PublicKey.from_hex_string("03" + ED_HEX[2:])


def test_bad_checksum_rejected():
    pk = PublicKey.from_hex_string(ED_HEX)
    body = pk.to_account_hex()[2:]
    flipped = body.swapcase()
    with pytest.raises(ValueError):
        PublicKey.from_hex_string("01" + flipped)


def test_ordering_and_hash_follow_hex_form():
    a = PublicKey.from_raw_bytes(bytes(32), KeyAlgo.ED25519)
    b = PublicKey.from_hex_string(ED_HEX)
    assert sorted([b, a]) == [a, b]
    assert len({a, b, PublicKey.from_hex_string(ED_HEX)}) == 2