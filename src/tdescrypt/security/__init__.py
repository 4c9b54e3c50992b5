"""Security helpers: password KDF and streaming 3DES-CBC encryption for tdescrypt.

This package provides:
- salt-less iterated-hash derivation of a 3DES key and IV from a password
- an explicit CipherSession that encrypts/decrypts data fed in arbitrary chunks
- stream and file helpers that drive a session over a reader and a writer

There is no authentication tag and no salt. A wrong password only shows up as a
padding failure at the end of decryption.
"""

from .kdf import derive_material, derive_key_iv
from .session import CipherSession, open_session, feed, finalize
from .crypto import (
    transform_stream,
    encrypt_stream,
    decrypt_stream,
    encrypt_file_stream,
    decrypt_file_stream,
)

__all__ = [
    "derive_material",
    "derive_key_iv",
    "CipherSession",
    "open_session",
    "feed",
    "finalize",
    "transform_stream",
    "encrypt_stream",
    "decrypt_stream",
    "encrypt_file_stream",
    "decrypt_file_stream",
]
