from pydantic import ConfigDict, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Proof of Work
    pow_signature_key: str = "change-me-to-a-random-32-byte-secret"
    pow_min_difficulty: int = 1
    pow_default_difficulty: int = 4  # ~65k hashes on average
    pow_max_difficulty: int = 8
    pow_timelimit_seconds: float = 2.0
    pow_max_added_value_length: int = 64

    # Rate Limiting
    rate_limit_challenges: str = "30/minute"

    # CORS
    cors_origins: list[str] | str = ["http://localhost:5173", "http://127.0.0.1:5173"]

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # "json" in production

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("pow_min_difficulty", "pow_default_difficulty", "pow_max_difficulty")
    @classmethod
    def check_difficulty(cls, v: int) -> int:
        if not 1 <= v <= 64:
            raise ValueError("difficulty must be between 1 and 64")
        return v


settings = Settings()
