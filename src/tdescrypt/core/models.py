"""
Base data models and constants for the 3DES-CBC file cipher
"""

from enum import Enum


# 3DES-EDE with three independent keys
BLOCK_SIZE = 8
KEY_LENGTH = 24
IV_LENGTH = BLOCK_SIZE

# read size for files, independent of the block size
CHUNK_SIZE = 1024 * 1024


class Direction(Enum):
    # which way the session transforms bytes
    SEAL = "seal"
    OPEN = "open"


class SessionState(Enum):
    # Lifecycle of a CipherSession, only ever moves forward
    INITIALIZED = "initialized"
    FEEDING = "feeding"
    FINALIZED = "finalized"
