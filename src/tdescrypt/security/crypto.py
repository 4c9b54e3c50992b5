"""Password-based file encryption with 3DES-CBC.

File layout: raw ciphertext blocks, nothing else. No magic, no header, no salt,
no length prefix. Ciphertext length is always a positive multiple of 8 bytes.
The key and IV come from the password alone (see kdf.derive_key_iv), so a file
opens with `openssl enc -d -des-ede3-cbc -md sha256 -nosalt` and the same password.
"""
import logging
from typing import BinaryIO

from ..core.exceptions import IOFailureError
from ..core.models import CHUNK_SIZE, Direction
from .kdf import derive_key_iv
from .session import open_session


logger = logging.getLogger(__name__)


def transform_stream(
    reader: BinaryIO,
    writer: BinaryIO,
    password: bytes | str,
    direction: Direction | str,
    chunk_size: int = CHUNK_SIZE,
) -> int:
    """Run reader through a fresh cipher session into writer; returns bytes written."""
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    key, iv = derive_key_iv(password)
    session = open_session(key, iv, direction)

    written = 0
    chunks = 0
    try:
        while True:
            try:
                chunk = reader.read(chunk_size)
            except OSError as e:
                raise IOFailureError(f"read failed: {e}") from e
            if not chunk:
                break
            chunks += 1
            written += _write(writer, session.feed(chunk))

        written += _write(writer, session.finalize())
    finally:
        # no-op after finalize, drops the buffer when aborted mid-stream
        session.close()

    logger.debug("%s: %d chunk(s) in, %d byte(s) out", session.direction.value, chunks, written)
    return written


def _write(writer: BinaryIO, data: bytes) -> int:
    if not data:
        return 0
    try:
        writer.write(data)
    except OSError as e:
        raise IOFailureError(f"write failed: {e}") from e
    return len(data)


def encrypt_stream(reader: BinaryIO, writer: BinaryIO, password: bytes | str, chunk_size: int = CHUNK_SIZE) -> int:
    return transform_stream(reader, writer, password, Direction.SEAL, chunk_size=chunk_size)


def decrypt_stream(reader: BinaryIO, writer: BinaryIO, password: bytes | str, chunk_size: int = CHUNK_SIZE) -> int:
    return transform_stream(reader, writer, password, Direction.OPEN, chunk_size=chunk_size)


def _transform_file(in_path: str, out_path: str, password: bytes | str, direction: Direction, chunk_size: int) -> int:
    try:
        inf = open(in_path, "rb")
    except OSError as e:
        raise IOFailureError(f"unable to open input file {in_path}: {e}") from e
    with inf:
        try:
            outf = open(out_path, "wb")
        except OSError as e:
            raise IOFailureError(f"unable to open output file {out_path}: {e}") from e
        with outf:
            written = transform_stream(inf, outf, password, direction, chunk_size=chunk_size)

    logger.info("%s %s -> %s (%d bytes)", direction.value, in_path, out_path, written)
    return written


def encrypt_file_stream(in_path: str, out_path: str, password: bytes | str, chunk_size: int = CHUNK_SIZE) -> int:
    return _transform_file(in_path, out_path, password, Direction.SEAL, chunk_size)


def decrypt_file_stream(in_path: str, out_path: str, password: bytes | str, chunk_size: int = CHUNK_SIZE) -> int:
    """
    Decrypt in_path into out_path.

    Blocks decrypted before a failure are already in out_path and are left there;
    a wrong password or corrupted file raises InvalidPaddingError at the end.
    """
    return _transform_file(in_path, out_path, password, Direction.OPEN, chunk_size)
