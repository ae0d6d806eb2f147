"""
Exception taxonomy for challenge issuance and solution verification.

Every error carries a stable ``code`` that the HTTP layer reports back to
clients. Messages never include key material.
"""


class PowError(Exception):
    """Base class for all proof-of-work errors."""

    code = "pow_error"
    message = "Proof of work failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class ConfigError(PowError, ValueError):
    """Invalid parameters requested at issuance."""

    code = "config_error"


class MinDifficultyError(ConfigError):
    code = "min_difficulty"
    message = "Difficulty must be greater than 0"


class MaxDifficultyError(ConfigError):
    code = "max_difficulty"
    message = "Difficulty exceeds the length of a SHA-256 hex digest"


class RandomnessError(PowError, RuntimeError):
    code = "randomness_unavailable"
    message = "Secure random source unavailable"


class DecodeError(PowError, ValueError):
    """Malformed client-submitted payload."""

    code = "invalid_data"
    message = "Invalid data"


class InvalidEncodingError(DecodeError):
    code = "invalid_encoding"
    message = "Invalid data encoding"


class InvalidLengthError(DecodeError):
    code = "invalid_length"
    message = "Invalid data length"


class ValidationError(PowError, ValueError):
    """Structurally valid payload that fails a verification step."""

    code = "invalid_solution"
    message = "Solution is invalid"


class InvalidDifficultyError(ValidationError):
    code = "invalid_difficulty"
    message = "Solution difficulty is invalid"


class AddedValueTooLongError(ValidationError):
    code = "added_value_too_long"
    message = "Solution added value is too long"


class InvalidHashError(ValidationError):
    code = "invalid_hash"
    message = "Solution hash is invalid"


class InvalidSignatureError(ValidationError):
    code = "invalid_signature"
    message = "Solution signature is invalid"


class TimelimitExceededError(ValidationError):
    code = "timelimit_exceeded"
    message = "Solution timelimit exceeded"
