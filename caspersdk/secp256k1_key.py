"""SECP256K1 private keys loaded from PEM files, with ECDSA/SHA-256 signing."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import (
    decode_dss_signature,
    encode_dss_signature,
)

from caspersdk.key_algo import KeyAlgo
from caspersdk.public_key import PublicKey

_log = logging.getLogger(__name__)

_COORDINATE_SIZE = 32
_CURVE_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


def _as_bytes(value: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def _exponent_hex(value: int) -> str:
    return f"{value:064x}"


class Secp256k1Key:
    """A SECP256K1 key pair read from a PEM file holding the private key.

    ``public_key_str`` is the compressed public point in hex (prefix byte
    ``02``/``03`` followed by the X coordinate); ``private_key_str`` is the
    private exponent as 64 hex digits.
    """

    def __init__(self, pem_file_path: str | os.PathLike[str]) -> None:
        pem = Path(pem_file_path).read_bytes()
        try:
            loaded = serialization.load_pem_private_key(pem, password=None)
        except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
            raise ValueError("Unable to load an EC private key from the PEM file") from exc
        if not isinstance(loaded, ec.EllipticCurvePrivateKey):
            raise ValueError("The PEM file does not hold an EC private key")

        exponent = loaded.private_numbers().private_value
        if not 0 < exponent < _CURVE_ORDER:
            raise ValueError("Unable to verify the SECP256K1 Private Key")
        try:
            self._private_key = ec.derive_private_key(exponent, ec.SECP256K1())
        except ValueError as exc:
            raise ValueError("Unable to verify the SECP256K1 Private Key") from exc
        self._public_key = self._private_key.public_key()

        point = self._public_key.public_bytes(
            serialization.Encoding.X962, serialization.PublicFormat.CompressedPoint
        )
        self.public_key_str: str = point.hex()
        self.private_key_str: str = _exponent_hex(exponent)
        _log.debug("Public key: %s", self.public_key_str)

    @property
    def public_key(self) -> PublicKey:
        """The public key as a tagged SECP256K1 ``PublicKey``."""
        return PublicKey.from_raw_bytes(bytes.fromhex(self.public_key_str), KeyAlgo.SECP256K1)

    def _sign_once(self, data: bytes) -> bytes:
        der = self._private_key.sign(data, ec.ECDSA(hashes.SHA256()))
        r, s = decode_dss_signature(der)
        return r.to_bytes(_COORDINATE_SIZE, "big") + s.to_bytes(_COORDINATE_SIZE, "big")

    def sign(self, message: bytes | bytearray | memoryview | str) -> bytes:
        """Sign ``message`` with ECDSA over SHA-256; returns ``r || s`` (64 bytes).

        For a binary message, signing is repeated until the top bit of the
        first byte of ``s`` is clear.
        """
        if isinstance(message, str):
            return self._sign_once(message.encode("utf-8"))
        data = bytes(message)
        while True:
            signature = self._sign_once(data)
            if not signature[_COORDINATE_SIZE] & 0x80:
                _log.debug("Signature size: %d", len(signature))
                return signature

    def verify(
        self,
        message: bytes | bytearray | memoryview | str,
        signature: bytes | bytearray | memoryview,
    ) -> bool:
        """Check an ``r || s`` signature of ``message``."""
        data = _as_bytes(message)
        sig = bytes(signature)
        if len(sig) != 2 * _COORDINATE_SIZE:
            _log.error("Failed to verify SECP256K1 Signature")
            return False
        r = int.from_bytes(sig[:_COORDINATE_SIZE], "big")
        s = int.from_bytes(sig[_COORDINATE_SIZE:], "big")
        try:
            self._public_key.verify(encode_dss_signature(r, s), data, ec.ECDSA(hashes.SHA256()))
        except (InvalidSignature, ValueError):
            _log.error("Failed to verify SECP256K1 Signature")
            return False
        _log.debug("SECP256K1 signature is successfully verified")
        return True

    @staticmethod
    def signature_to_string(signature: bytes | bytearray | memoryview | str) -> str:
        """Lower-case hex form of a signature."""
        if isinstance(signature, str):
            return signature.encode("latin-1").hex()
        return bytes(signature).hex()