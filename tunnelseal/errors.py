"""
Error taxonomy for the tunnelseal engine.

Every error is terminal for the call that raised it. Validation errors
also subclass ValueError and library failures subclass RuntimeError, so
callers that only know the plain cipher contract still catch them.
"""


class EngineError(Exception):
    """Base exception for every tunnelseal failure."""
    pass


class InvalidKeyLengthError(EngineError, ValueError):
    """Key is not exactly 32 bytes."""
    pass


class EmptyMessageError(EngineError, ValueError):
    """Plaintext handed to encrypt() was empty."""
    pass


class EncryptionFailedError(EngineError, RuntimeError):
    """The AEAD seal failed inside the cipher library."""
    pass


class RandomSourceError(EngineError, RuntimeError):
    """The random source ran dry or returned the wrong number of bytes."""
    pass


class RecordTooShortError(EngineError, ValueError):
    """Sealed record is shorter than nonce + tag."""
    pass


class EmptyRecordError(RecordTooShortError):
    """Sealed record holds a nonce and a tag but no ciphertext."""
    pass


class AuthenticationFailedError(EngineError):
    """
    Tag verification failed.

    Wrong key, wrong nonce, wrong AAD and corrupted ciphertext all land
    here with the same message. Do not add detail.
    """

    MESSAGE = "authentication failed"

    def __init__(self):
        super().__init__(self.MESSAGE)


class MalformedPayloadError(EngineError, ValueError):
    """Record authenticated, but the payload broke the caller's format (e.g. not UTF-8)."""
    pass
