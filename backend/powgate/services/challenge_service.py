import secrets
import time
from dataclasses import dataclass

from powgate.errors import MaxDifficultyError, MinDifficultyError, RandomnessError
from powgate.services.payload import LEN_NONCE, difficulty_to_criteria, encode_payload
from powgate.services.signature import Signer, default_signer

# A SHA-256 hex digest has 64 characters; anything longer can never be met.
MAX_DIFFICULTY = 64


@dataclass(frozen=True)
class Challenge:
    data: str
    criteria: str


def now_micro() -> int:
    """Current wall-clock time as integer microseconds since the epoch."""
    return time.time_ns() // 1000


def generate_nonce() -> bytes:
    try:
        return secrets.token_bytes(LEN_NONCE)
    except OSError as e:
        raise RandomnessError() from e


def generate_challenge(
    difficulty: int,
    signature_key: bytes,
    signer: Signer | None = None,
) -> Challenge:
    """
    Issue a new signed, time-stamped challenge.

    The criteria is returned as a solving hint only; verification derives it
    again from the difficulty byte inside the payload.
    """
    if difficulty < 1:
        raise MinDifficultyError()
    if difficulty > MAX_DIFFICULTY:
        raise MaxDifficultyError()

    signer = signer or default_signer
    nonce = generate_nonce()
    timestamp = now_micro()

    signed_data = timestamp.to_bytes(8, "big") + nonce
    signature = signer.sign(signed_data, signature_key, nonce)

    return Challenge(
        data=encode_payload(difficulty, timestamp, nonce, signature),
        criteria=difficulty_to_criteria(difficulty),
    )
