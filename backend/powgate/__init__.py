from powgate.errors import PowError
from powgate.services.challenge_service import Challenge, generate_challenge
from powgate.services.signature import HMACSHA256Signer, Signer
from powgate.services.verifier import verify_solution

__all__ = [
    "Challenge",
    "HMACSHA256Signer",
    "PowError",
    "Signer",
    "generate_challenge",
    "verify_solution",
]
