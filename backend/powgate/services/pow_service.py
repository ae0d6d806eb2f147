from datetime import timedelta

from powgate.config import settings
from powgate.services.challenge_service import Challenge, generate_challenge
from powgate.services.signature import Signer, default_signer
from powgate.services.verifier import DEFAULT_MAX_ADDED_VALUE_LENGTH, verify_solution


class PowGate:
    """
    Proof-of-work issuer and verifier bound to one signature key.

    Holds configuration only; no challenge is ever stored.
    """

    def __init__(
        self,
        signature_key: bytes,
        signer: Signer | None = None,
        max_added_value_length: int = DEFAULT_MAX_ADDED_VALUE_LENGTH,
        min_difficulty: int = 1,
    ):
        self._signature_key = signature_key
        self._signer = signer or default_signer
        self.max_added_value_length = max_added_value_length
        self.min_difficulty = min_difficulty

    def __repr__(self) -> str:
        return f"PowGate(signer={type(self._signer).__name__})"

    def generate_challenge(self, difficulty: int) -> Challenge:
        return generate_challenge(difficulty, self._signature_key, self._signer)

    def verify_solution(
        self, payload: str, added_value: str, solution_hash: str, timelimit: timedelta
    ) -> bool:
        return verify_solution(
            payload,
            added_value,
            solution_hash,
            self._signature_key,
            timelimit,
            signer=self._signer,
            max_added_value_length=self.max_added_value_length,
            min_difficulty=self.min_difficulty,
        )


def get_pow_gate() -> PowGate:
    """Dependency for FastAPI endpoints to get a gate built from settings."""
    return PowGate(
        signature_key=settings.pow_signature_key.encode(),
        max_added_value_length=settings.pow_max_added_value_length,
        min_difficulty=settings.pow_min_difficulty,
    )


def get_timelimit() -> timedelta:
    return timedelta(seconds=settings.pow_timelimit_seconds)
