"""Streaming 3DES-CBC cipher session with a carry buffer and final-block padding.

A CipherSession is created per file operation and owned by the caller. Data is
pushed in with feed() in chunks of any size; complete blocks are transformed
right away and the remainder waits in the carry buffer. finalize() pads (seal)
or unpads (open) the last block and closes the session. There is no module-level
session: the functions at the bottom take the session explicitly.
"""
from __future__ import annotations

from typing import Optional

from cryptography.hazmat.decrepit.ciphers.algorithms import TripleDES
from cryptography.hazmat.primitives.ciphers import Cipher, modes

from ..core.exceptions import InvalidKeyMaterialError, InvalidPaddingError, SessionClosedError
from ..core.models import BLOCK_SIZE, KEY_LENGTH, Direction, SessionState
from .padding import pad_block, unpad_block


def _xor(a: bytes, b: bytes) -> bytes:
    return (int.from_bytes(a, "big") ^ int.from_bytes(b, "big")).to_bytes(BLOCK_SIZE, "big")


class CipherSession:
    def __init__(self, key: bytes, iv: bytes, direction: Direction | str):
        if len(key) != KEY_LENGTH:
            raise InvalidKeyMaterialError(f"key must be {KEY_LENGTH} bytes, got {len(key)}")
        if len(iv) != BLOCK_SIZE:
            raise InvalidKeyMaterialError(f"iv must be {BLOCK_SIZE} bytes, got {len(iv)}")

        self.direction = Direction(direction)
        self.state = SessionState.INITIALIZED
        self._chain: Optional[bytes] = bytes(iv)
        self._carry = bytearray()

        # ECB over a single block is the raw block transform; chaining is done here
        cipher = Cipher(TripleDES(bytes(key)), modes.ECB())
        if self.direction is Direction.SEAL:
            self._block = cipher.encryptor()
        else:
            self._block = cipher.decryptor()

    @property
    def buffered(self) -> int:
        """Number of input bytes waiting in the carry buffer."""
        return len(self._carry)

    def _require_open(self) -> None:
        if self.state is SessionState.FINALIZED:
            raise SessionClosedError("cipher session already finalized")

    def _seal_block(self, plain: bytes) -> bytes:
        c = self._block.update(_xor(plain, self._chain))
        self._chain = c
        return c

    def _open_block(self, cipher_block: bytes) -> bytes:
        p = _xor(self._block.update(cipher_block), self._chain)
        self._chain = cipher_block
        return p

    def feed(self, data: bytes) -> bytes:
        """
        Add data to the session and return the output for every block completed so far.

        When opening, the last full ciphertext block is kept back since it may
        carry the padding that finalize() has to check.
        """
        self._require_open()
        self.state = SessionState.FEEDING
        self._carry += data

        if self.direction is Direction.SEAL:
            n_blocks = len(self._carry) // BLOCK_SIZE
            step = self._seal_block
        else:
            n_blocks = (len(self._carry) - 1) // BLOCK_SIZE if self._carry else 0
            step = self._open_block

        if n_blocks == 0:
            return b""

        end = n_blocks * BLOCK_SIZE
        view = bytes(self._carry[:end])
        del self._carry[:end]
        return b"".join(step(view[i:i + BLOCK_SIZE]) for i in range(0, end, BLOCK_SIZE))

    def finalize(self) -> bytes:
        """Flush the carry buffer, padding or unpadding the last block, and close the session."""
        self._require_open()
        tail = bytes(self._carry)
        try:
            if self.direction is Direction.SEAL:
                return self._seal_block(pad_block(tail, BLOCK_SIZE))
            if len(tail) != BLOCK_SIZE:
                raise InvalidPaddingError()
            return unpad_block(self._open_block(tail), BLOCK_SIZE)
        finally:
            self.close()

    def close(self) -> None:
        """Drop buffered state and mark the session finalized without emitting anything."""
        self._carry.clear()
        self._chain = None
        self.state = SessionState.FINALIZED


def open_session(key: bytes, iv: bytes, direction: Direction | str) -> CipherSession:
    return CipherSession(key, iv, direction)


def feed(session: CipherSession, data: bytes) -> bytes:
    return session.feed(data)


def finalize(session: CipherSession) -> bytes:
    return session.finalize()
