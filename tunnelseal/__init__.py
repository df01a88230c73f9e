"""
tunnelseal
==========
Authenticated record encryption for point-to-point secure channels.

    engine = CryptoEngine(key)                       # 32-byte key
    record = engine.encrypt(b"payload", aad=b"hdr")  # nonce || ct || tag
    engine.decrypt(record, aad=b"hdr")               # -> b"payload"

Cipher: XChaCha20-Poly1305 (24-byte random nonce, 16-byte tag).
Key exchange, key rotation and transport framing live elsewhere.
"""

__version__ = "1.0.0"

from .engine        import CryptoEngine
from .xchacha       import XChaCha20Poly1305
from .record        import SealedRecord, split_record, seal_layout, sealed_size, OVERHEAD, MIN_RECORD_SIZE
from .random_source import RandomSource, SystemRandom, FixedSequenceSource
from .errors        import (
    EngineError,
    InvalidKeyLengthError,
    EmptyMessageError,
    EncryptionFailedError,
    RandomSourceError,
    RecordTooShortError,
    EmptyRecordError,
    AuthenticationFailedError,
    MalformedPayloadError,
)

__all__ = [
    "CryptoEngine",
    "XChaCha20Poly1305",
    "SealedRecord",
    "split_record",
    "seal_layout",
    "sealed_size",
    "OVERHEAD",
    "MIN_RECORD_SIZE",
    "RandomSource",
    "SystemRandom",
    "FixedSequenceSource",
    "EngineError",
    "InvalidKeyLengthError",
    "EmptyMessageError",
    "EncryptionFailedError",
    "RandomSourceError",
    "RecordTooShortError",
    "EmptyRecordError",
    "AuthenticationFailedError",
    "MalformedPayloadError",
]
