from pydantic import BaseModel, Field


class ChallengeResponse(BaseModel):
    data: str = Field(..., description="Base64 challenge payload")
    criteria: str = Field(..., description="Prefix the solution hash must start with")
    timelimit_ms: int = Field(..., description="Time the client has to solve the challenge")


class SolutionRequest(BaseModel):
    data: str = Field(..., min_length=1, max_length=128, description="Challenge payload as issued")
    value: str = Field(
        ..., max_length=1024, description="Value appended to the payload before hashing"
    )
    hash: str = Field(
        ...,
        min_length=1,
        max_length=64,
        pattern=r"^[a-f0-9]+$",
        description="SHA256 hex of data + value",
    )


class SolutionResponse(BaseModel):
    success: bool
    error: str | None = None
    reason: str | None = None
