"""
Sealed-record wire format.

    offset 0..24    nonce (random, not secret)
    offset 24..N-16 ciphertext (same length as the plaintext)
    offset N-16..N  Poly1305 tag

No magic, no version byte, no length prefix, no AAD echo. Record
boundaries come from whatever transport carries the record.
"""

from typing import NamedTuple, Union

from .errors import EmptyRecordError, RecordTooShortError
from .xchacha import NONCE_SIZE, TAG_SIZE

OVERHEAD        = NONCE_SIZE + TAG_SIZE   # 40
MIN_RECORD_SIZE = OVERHEAD + 1            # encrypt() never seals an empty message

BytesLike = Union[bytes, bytearray, memoryview]


class SealedRecord(NamedTuple):
    nonce:      bytes
    ciphertext: bytes
    tag:        bytes

    @property
    def plaintext_size(self) -> int:
        return len(self.ciphertext)

    @property
    def sealed_box(self) -> bytes:
        """ciphertext || tag, the form the AEAD open step consumes."""
        return self.ciphertext + self.tag

    def to_bytes(self) -> bytes:
        return self.nonce + self.ciphertext + self.tag


def sealed_size(plaintext_len: int) -> int:
    return plaintext_len + OVERHEAD


def seal_layout(nonce: BytesLike, sealed_box: BytesLike) -> bytes:
    """Join a nonce and the AEAD output (ciphertext || tag) into one record."""
    nonce, sealed_box = bytes(nonce), bytes(sealed_box)
    if len(nonce) != NONCE_SIZE:
        raise ValueError(f"Nonce must be {NONCE_SIZE} bytes.")
    if len(sealed_box) < TAG_SIZE:
        raise ValueError("Sealed box is shorter than the tag.")
    return nonce + sealed_box


def split_record(data: BytesLike) -> SealedRecord:
    """
    Split a record into its three fields.

    Shorter than nonce + tag raises RecordTooShortError. Exactly nonce +
    tag raises EmptyRecordError: encrypt() never produces one, so it is
    rejected before the cipher sees it.
    """
    data = bytes(data)
    if len(data) < OVERHEAD:
        raise RecordTooShortError(
            f"Record too short: {len(data)} bytes, need at least {MIN_RECORD_SIZE}."
        )
    if len(data) == OVERHEAD:
        raise EmptyRecordError("Record carries no ciphertext.")
    return SealedRecord(
        nonce=data[:NONCE_SIZE],
        ciphertext=data[NONCE_SIZE:-TAG_SIZE],
        tag=data[-TAG_SIZE:],
    )
