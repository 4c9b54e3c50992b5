"""PKCS#7-style padding for the final block of a CBC stream."""

from ..core.exceptions import InvalidPaddingError


def pad_block(tail: bytes, block_size: int) -> bytes:
    """
    Pad a partial block (0 <= len(tail) < block_size) up to a full block.

    An empty tail becomes a whole block of padding, so sealed output is never empty.
    """
    if not 0 <= len(tail) < block_size:
        raise ValueError(f"tail must be shorter than {block_size} bytes, got {len(tail)}")
    n = block_size - len(tail)
    return bytes(tail) + bytes([n]) * n


def unpad_block(block: bytes, block_size: int) -> bytes:
    """Strip padding from the last decrypted block, raising InvalidPaddingError if it is malformed."""
    if len(block) != block_size:
        raise InvalidPaddingError()

    p = block[-1]
    if p < 1 or p > block_size:
        raise InvalidPaddingError()

    # check every pad byte, don't stop at the first mismatch
    bad = 0
    for b in block[-p:]:
        bad |= b ^ p
    if bad:
        raise InvalidPaddingError()

    return bytes(block[:-p])
