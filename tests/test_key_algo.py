import pytest

from caspersdk.key_algo import KeyAlgo


def test_identifier_values():
    assert KeyAlgo(1) is KeyAlgo.ED25519
    assert KeyAlgo(2) is KeyAlgo.SECP256K1


@pytest.mark.parametrize(
    "algo, size",
    [(KeyAlgo.ED25519, 33), (KeyAlgo.SECP256K1, 34)],
)
def test_key_size_in_bytes(algo, size):
    assert algo.key_size_in_bytes() == size


@pytest.mark.parametrize(
    "algo, name",
    [(KeyAlgo.ED25519, "ed25519"), (KeyAlgo.SECP256K1, "secp256k1")],
)
def test_display_name(algo, name):
    assert algo.display_name() == name


def test_unknown_identifier_rejected():
    with pytest.raises(ValueError):
        KeyAlgo(3)