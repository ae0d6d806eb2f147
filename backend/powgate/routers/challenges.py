import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from powgate.config import settings
from powgate.errors import ConfigError, PowError
from powgate.middleware.rate_limit import limiter
from powgate.schemas.challenge import ChallengeResponse, SolutionRequest, SolutionResponse
from powgate.services.pow_service import PowGate, get_pow_gate, get_timelimit

router = APIRouter()
logger = structlog.get_logger()


@router.get("/challenge", response_model=ChallengeResponse)
@limiter.limit(settings.rate_limit_challenges)
async def create_challenge(
    request: Request,
    difficulty: int | None = Query(None, description="Defaults to the configured difficulty"),
    gate: PowGate = Depends(get_pow_gate),
):
    """
    Issue a proof-of-work challenge.

    The client must find a value such that sha256(data + value) starts with
    criteria, and submit it before the time limit runs out.
    """
    if difficulty is None:
        difficulty = settings.pow_default_difficulty
    elif not settings.pow_min_difficulty <= difficulty <= settings.pow_max_difficulty:
        logger.info("challenge_rejected", difficulty=difficulty, reason="out_of_range")
        raise HTTPException(status_code=400, detail="Invalid difficulty")

    try:
        challenge = gate.generate_challenge(difficulty)
    except ConfigError as e:
        logger.info("challenge_rejected", difficulty=difficulty, reason=e.code)
        raise HTTPException(status_code=400, detail="Invalid difficulty")

    timelimit = get_timelimit()
    logger.info("challenge_created", difficulty=difficulty)

    return ChallengeResponse(
        data=challenge.data,
        criteria=challenge.criteria,
        timelimit_ms=int(timelimit.total_seconds() * 1000),
    )


@router.post("/solution", response_model=SolutionResponse)
async def submit_solution(
    solution: SolutionRequest,
    gate: PowGate = Depends(get_pow_gate),
):
    """
    Verify a solved challenge.

    Verification failures are reported in the body; the caller decides
    whether to fetch a fresh challenge.
    """
    try:
        gate.verify_solution(solution.data, solution.value, solution.hash, get_timelimit())
    except PowError as e:
        logger.info("solution_rejected", reason=e.code)
        return SolutionResponse(success=False, error=str(e), reason=e.code)

    logger.info("solution_accepted")
    return SolutionResponse(success=True)
