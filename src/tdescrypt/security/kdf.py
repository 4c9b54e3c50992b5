from typing import Optional, Tuple

from cryptography.hazmat.primitives import hashes

from ..core.exceptions import InvalidInputError, InvalidKeyMaterialError
from ..core.models import KEY_LENGTH, IV_LENGTH


def _password_bytes(password) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8")
    if isinstance(password, (bytes, bytearray, memoryview)):
        return bytes(password)
    raise InvalidInputError(f"password must be str or bytes, not {type(password).__name__}")


def derive_material(
    password: bytes | str,
    key_len: int,
    iv_len: int,
    algorithm: Optional[hashes.HashAlgorithm] = None,
) -> Tuple[bytes, bytes]:
    """
    Derive a key and IV from a password by iterated hashing, without salt.

    Each round hashes the previous digest followed by the password, and the
    digests are concatenated until key_len + iv_len bytes are available.
    Surplus bytes from the last round are dropped. Matches OpenSSL's
    EVP_BytesToKey with a NULL salt and an iteration count of 1.
    """
    if key_len < 0 or iv_len < 0:
        raise InvalidKeyMaterialError("key and iv lengths must not be negative")

    secret = _password_bytes(password)
    algorithm = algorithm or hashes.SHA256()
    needed = key_len + iv_len

    material = bytearray()
    digest = b""
    while len(material) < needed:
        h = hashes.Hash(algorithm)
        h.update(digest)
        h.update(secret)
        digest = h.finalize()
        material += digest

    return bytes(material[:key_len]), bytes(material[key_len:needed])


def derive_key_iv(password: bytes | str) -> Tuple[bytes, bytes]:
    """Return the 24-byte 3DES key and 8-byte IV for password (SHA-256, one round)."""
    return derive_material(password, KEY_LENGTH, IV_LENGTH, hashes.SHA256())
