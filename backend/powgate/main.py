from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from powgate.config import settings
from powgate.logging_config import setup_logging
from powgate.middleware.logging import CORRELATION_ID_HEADER, LoggingMiddleware
from powgate.middleware.rate_limit import limiter
from powgate.routers import challenges

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging once the app starts serving."""
    setup_logging()
    logger.info("startup", default_difficulty=settings.pow_default_difficulty)
    yield


app = FastAPI(
    title="powgate",
    description="Stateless proof-of-work challenges for anti-abuse gating",
    version="0.1.0",
    lifespan=lifespan,
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Keep the correlation ID on 500 responses."""
    response = JSONResponse(status_code=500, content={"detail": "Internal Server Error"})
    correlation_id = getattr(request.state, "correlation_id", None)
    if correlation_id:
        response.headers[CORRELATION_ID_HEADER] = correlation_id
    return response


# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)

# Routers
app.include_router(challenges.router, prefix="/api/v1", tags=["challenges"])


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
