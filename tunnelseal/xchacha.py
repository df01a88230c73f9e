"""
XChaCha20-Poly1305
==================
Extended-nonce authenticated stream encryption (libsodium, via PyNaCl).

Key:   256-bit (32 bytes)
Nonce: 192-bit (24 bytes) -- large enough to draw at random per message
Tag:   128-bit (16 bytes) -- Poly1305

Backend: libsodium crypto_aead_xchacha20poly1305_ietf_*

Dependencies: pynacl >= 1.5
"""

from typing import Optional

from nacl import bindings

from .errors import InvalidKeyLengthError

KEY_SIZE   = bindings.crypto_aead_xchacha20poly1305_ietf_KEYBYTES    # 32
NONCE_SIZE = bindings.crypto_aead_xchacha20poly1305_ietf_NPUBBYTES   # 24
TAG_SIZE   = bindings.crypto_aead_xchacha20poly1305_ietf_ABYTES      # 16


class XChaCha20Poly1305:
    """XChaCha20-Poly1305 AEAD bound to one key."""

    KEY_SIZE   = KEY_SIZE
    NONCE_SIZE = NONCE_SIZE
    TAG_SIZE   = TAG_SIZE

    def __init__(self, key: bytes):
        if not isinstance(key, (bytes, bytearray)):
            raise TypeError("XChaCha20 key must be bytes.")
        if len(key) != self.KEY_SIZE:
            raise InvalidKeyLengthError(
                f"XChaCha20 key must be {self.KEY_SIZE} bytes, got {len(key)}."
            )
        self._key = bytes(key)

    def _check_nonce(self, nonce: bytes) -> bytes:
        if len(nonce) != self.NONCE_SIZE:
            raise ValueError(f"XChaCha20 nonce must be {self.NONCE_SIZE} bytes.")
        return bytes(nonce)

    def encrypt(self, nonce: bytes, data: bytes,
                aad: Optional[bytes] = None) -> bytes:
        """Returns: ciphertext || tag(16)"""
        nonce = self._check_nonce(nonce)
        return bindings.crypto_aead_xchacha20poly1305_ietf_encrypt(
            bytes(data), bytes(aad) if aad else None, nonce, self._key
        )

    def decrypt(self, nonce: bytes, data: bytes,
                aad: Optional[bytes] = None) -> bytes:
        """
        Verify the tag, then decrypt.
        Raises nacl.exceptions.CryptoError on any mismatch.
        """
        nonce = self._check_nonce(nonce)
        return bindings.crypto_aead_xchacha20poly1305_ietf_decrypt(
            bytes(data), bytes(aad) if aad else None, nonce, self._key
        )

    def __repr__(self):
        return "XChaCha20Poly1305(<key hidden>)"
