from powgate.schemas.challenge import ChallengeResponse, SolutionRequest, SolutionResponse

__all__ = [
    "ChallengeResponse",
    "SolutionRequest",
    "SolutionResponse",
]
