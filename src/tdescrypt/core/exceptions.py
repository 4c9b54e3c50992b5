"""
Exceptions for tdescrypt
Everything raised by the core derives from TdesCryptError so callers have one thing to catch
"""


class TdesCryptError(Exception):
    # general container for errors
    pass


class InvalidInputError(TdesCryptError):
    # raised when a password value cannot be read as bytes
    pass


class InvalidKeyMaterialError(TdesCryptError):
    # raised when key / iv lengths do not match the cipher
    pass


class InvalidPaddingError(TdesCryptError):
    # raised when the final block fails to unpad (wrong password, corruption, truncation)
    # keep the message generic, no detail about which check failed

    def __init__(self, message: str = "decryption failed"):
        super().__init__(message)


class SessionClosedError(TdesCryptError):
    # raised on feed / finalize after the session was finalized
    pass


class IOFailureError(TdesCryptError):
    # raised when reading or writing a stream fails, never retried
    pass


class UsageError(TdesCryptError):
    # raised when the command line is missing something
    pass
