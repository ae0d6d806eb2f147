"""
Solution verifier.

Checks run cheapest first and stop at the first failure:

1. decode the payload
2. hash prefix meets the criteria derived from the payload's difficulty
3. hash matches sha256(payload + added value)
4. signature proves the payload was issued with our key
5. payload is younger than the time limit
"""

import hashlib
import time
from datetime import timedelta

from powgate.errors import (
    AddedValueTooLongError,
    InvalidDifficultyError,
    InvalidHashError,
    InvalidSignatureError,
    TimelimitExceededError,
)
from powgate.services.payload import DecodedPayload, decode_payload
from powgate.services.signature import Signer, default_signer

DEFAULT_MAX_ADDED_VALUE_LENGTH = 64


def hash_solution(payload: str, added_value: str) -> str:
    return hashlib.sha256(payload.encode() + added_value.encode()).hexdigest()


def check_criteria(decoded: DecodedPayload, solution_hash: str, min_difficulty: int) -> None:
    # The difficulty byte is not covered by the signature; min_difficulty
    # stops a client from relabelling a payload with a lower one.
    if decoded.difficulty < min_difficulty:
        raise InvalidDifficultyError()
    if solution_hash[: len(decoded.criteria)] != decoded.criteria:
        raise InvalidDifficultyError()


def check_hash(
    payload: str, added_value: str, solution_hash: str, max_added_value_length: int
) -> None:
    if len(added_value) > max_added_value_length:
        raise AddedValueTooLongError()
    try:
        expected = hash_solution(payload, added_value)
    except UnicodeEncodeError as e:
        # Lone surrogates have no UTF-8 form, so nothing can hash to them
        raise InvalidHashError() from e
    if expected != solution_hash:
        raise InvalidHashError()


def check_signature(decoded: DecodedPayload, signature_key: bytes, signer: Signer) -> None:
    if not signer.verify(decoded.signed_data, signature_key, decoded.nonce, decoded.signature):
        raise InvalidSignatureError()


def check_timelimit(decoded: DecodedPayload, timelimit: timedelta) -> None:
    # Compare in nanoseconds so a zero time limit always fails.
    elapsed_ns = time.time_ns() - decoded.timestamp * 1000
    timelimit_ns = (timelimit // timedelta(microseconds=1)) * 1000
    if elapsed_ns > timelimit_ns:
        raise TimelimitExceededError()


def verify_solution(
    payload: str,
    added_value: str,
    solution_hash: str,
    signature_key: bytes,
    timelimit: timedelta,
    signer: Signer | None = None,
    max_added_value_length: int = DEFAULT_MAX_ADDED_VALUE_LENGTH,
    min_difficulty: int = 1,
) -> bool:
    """
    Verify a proof-of-work solution.

    Returns True if valid, raises a DecodeError or ValidationError subclass
    naming the first failed check otherwise.
    """
    decoded = decode_payload(payload)
    check_criteria(decoded, solution_hash, min_difficulty)
    check_hash(payload, added_value, solution_hash, max_added_value_length)
    check_signature(decoded, signature_key, signer or default_signer)
    check_timelimit(decoded, timelimit)
    return True
