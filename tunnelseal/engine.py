"""
CRYPTO ENGINE
=============
XChaCha20-Poly1305 record sealing for point-to-point tunnels.

One engine = one 256-bit key. Each encrypt() draws a fresh 24-byte nonce
from the engine's random source and returns a self-contained record:

    nonce(24) || ciphertext || tag(16)

AAD is bound into the tag but never transmitted; both ends must derive
it from shared context (e.g. a tunnel header).

The engine keeps no mutable state after construction, so a single
instance can be shared across threads. Nonces are drawn per call and
never cached.
"""

import logging
from typing import Optional, Union

from nacl.exceptions import CryptoError

from .errors import (
    AuthenticationFailedError,
    EmptyMessageError,
    EncryptionFailedError,
    InvalidKeyLengthError,
    MalformedPayloadError,
    RandomSourceError,
)
from .random_source import RandomSource, SystemRandom
from .record import BytesLike, seal_layout, split_record
from .xchacha import XChaCha20Poly1305

logger = logging.getLogger(__name__)

AAD = Union[bytes, bytearray, memoryview, str, None]


def _as_bytes(data: BytesLike, what: str) -> bytes:
    # raw buffer bytes, so memoryviews over wider item types count every byte
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{what} must be bytes, bytearray or memoryview, not {type(data).__name__}.")
    return memoryview(data).tobytes()


def _aad_bytes(aad: AAD) -> bytes:
    if aad is None:
        return b""
    if isinstance(aad, str):
        return aad.encode("utf-8")
    return _as_bytes(aad, "AAD")


class CryptoEngine:
    """Authenticated record encryption bound to a single key."""

    KEY_SIZE   = XChaCha20Poly1305.KEY_SIZE    # 32
    NONCE_SIZE = XChaCha20Poly1305.NONCE_SIZE  # 24
    TAG_SIZE   = XChaCha20Poly1305.TAG_SIZE    # 16

    def __init__(self, key: bytes, random_source: Optional[RandomSource] = None):
        """
        key:           exactly 32 bytes. Never logged or exposed again.
        random_source: anything with read(n) -> bytes. Defaults to the
                       OS CSPRNG; inject a fixed source only in tests.
        """
        if not isinstance(key, (bytes, bytearray)):
            raise TypeError("Key must be bytes.")
        if len(key) != self.KEY_SIZE:
            raise InvalidKeyLengthError(
                f"Key must be {self.KEY_SIZE} bytes, got {len(key)}."
            )
        self._cipher = XChaCha20Poly1305(key)
        self._random = random_source if random_source is not None else SystemRandom()

    @classmethod
    def generate_key(cls, random_source: Optional[RandomSource] = None) -> bytes:
        source = random_source if random_source is not None else SystemRandom()
        key    = source.read(cls.KEY_SIZE)
        if len(key) != cls.KEY_SIZE:
            raise RandomSourceError(
                f"Random source returned {len(key)} bytes, expected {cls.KEY_SIZE}."
            )
        return bytes(key)

    def _fresh_nonce(self) -> bytes:
        nonce = self._random.read(self.NONCE_SIZE)
        if len(nonce) != self.NONCE_SIZE:
            raise RandomSourceError(
                f"Random source returned {len(nonce)} bytes, expected {self.NONCE_SIZE}."
            )
        return bytes(nonce)

    def encrypt(self, plaintext: BytesLike, aad: AAD = b"") -> bytes:
        """
        Seal plaintext under a fresh nonce.
        Returns: nonce(24) || ciphertext || tag(16)
        """
        if isinstance(plaintext, str):
            raise TypeError("Plaintext must be bytes; use encrypt_text() for str.")
        plaintext = _as_bytes(plaintext, "Plaintext")
        if len(plaintext) == 0:
            raise EmptyMessageError("empty message")
        aad   = _aad_bytes(aad)
        nonce = self._fresh_nonce()
        try:
            sealed_box = self._cipher.encrypt(nonce, plaintext, aad)
        except Exception as e:
            raise EncryptionFailedError("encryption failed") from e
        record = seal_layout(nonce, sealed_box)
        logger.debug(f"Sealed: pt={len(plaintext)}B aad={len(aad)}B record={len(record)}B")
        return record

    def decrypt(self, record: BytesLike, aad: AAD = b"") -> bytes:
        """
        Verify and open a sealed record.

        Raises RecordTooShortError (or EmptyRecordError) on a truncated
        record, AuthenticationFailedError on any tag mismatch. No
        plaintext is returned unless the tag verifies.
        """
        record = _as_bytes(record, "Record")
        parts  = split_record(record)
        aad    = _aad_bytes(aad)
        try:
            plaintext = self._cipher.decrypt(parts.nonce, parts.sealed_box, aad)
        except CryptoError:
            logger.debug(f"Open failed: record={len(record)}B")
            raise AuthenticationFailedError() from None
        logger.debug(f"Opened: record={len(record)}B pt={len(plaintext)}B")
        return plaintext

    def encrypt_text(self, message: str, aad: AAD = "") -> bytes:
        """UTF-8 encode message and seal it."""
        return self.encrypt(message.encode("utf-8"), aad)

    def decrypt_text(self, record: BytesLike, aad: AAD = "") -> str:
        """
        Open a record whose payload must be UTF-8 text.
        Raises MalformedPayloadError if the authenticated bytes do not decode.
        """
        plaintext = self.decrypt(record, aad)
        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError:
            raise MalformedPayloadError(
                "Record authenticated but payload is not valid UTF-8."
            ) from None

    def __repr__(self):
        return f"CryptoEngine(XChaCha20-Poly1305, random={self._random!r})"
