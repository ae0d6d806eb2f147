"""
Binary challenge payload codec.

Layout (49 bytes, standard base64 with padding on the wire):

    DIFFICULTY | TIMESTAMP | NONCE   | SIGNATURE
    1 byte     | 8 bytes   | 8 bytes | 32 bytes

The timestamp is big-endian microseconds since the Unix epoch. The signature
covers TIMESTAMP|NONCE, which is re-sliced as ``signed_data`` on decode.
"""

import base64
import binascii
import struct
from dataclasses import dataclass

from powgate.errors import InvalidEncodingError, InvalidLengthError

LEN_DIFFICULTY = 1
LEN_TIMESTAMP = 8
LEN_NONCE = 8
LEN_SIGNED_DATA = LEN_TIMESTAMP + LEN_NONCE
LEN_SIGNATURE = 32
LEN_DATA = LEN_DIFFICULTY + LEN_SIGNED_DATA + LEN_SIGNATURE  # 49 bytes

_LAYOUT = struct.Struct(f">Bq{LEN_NONCE}s{LEN_SIGNATURE}s")


@dataclass(frozen=True)
class DecodedPayload:
    difficulty: int
    criteria: str
    timestamp: int
    nonce: bytes
    signed_data: bytes
    signature: bytes


def difficulty_to_criteria(difficulty: int) -> str:
    """Hash prefix a solution must start with: ``difficulty`` zeros."""
    return "0" * difficulty


def encode_payload(difficulty: int, timestamp: int, nonce: bytes, signature: bytes) -> str:
    if not 0 <= difficulty <= 0xFF:
        raise ValueError(f"Difficulty does not fit in one byte: {difficulty}")
    if len(nonce) != LEN_NONCE:
        raise ValueError(f"Nonce must be {LEN_NONCE} bytes")
    if len(signature) != LEN_SIGNATURE:
        raise ValueError(f"Signature must be {LEN_SIGNATURE} bytes")
    try:
        data = _LAYOUT.pack(difficulty, timestamp, nonce, signature)
    except struct.error as e:
        raise ValueError(f"Timestamp out of range: {timestamp}") from e
    return base64.b64encode(data).decode("ascii")


def decode_payload(payload: str) -> DecodedPayload:
    """
    Decode a client-submitted payload.

    Difficulty is not validated here: a zero byte decodes fine, the issuer is
    the one that refuses to produce it.
    """
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncodingError() from e

    if len(data) != LEN_DATA:
        raise InvalidLengthError(f"Invalid data length: {len(data)}")

    difficulty, timestamp, nonce, signature = _LAYOUT.unpack(data)
    return DecodedPayload(
        difficulty=difficulty,
        criteria=difficulty_to_criteria(difficulty),
        timestamp=timestamp,
        nonce=nonce,
        signed_data=data[LEN_DIFFICULTY : LEN_DIFFICULTY + LEN_SIGNED_DATA],
        signature=signature,
    )
