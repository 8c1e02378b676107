"""
Interview Question Service

Serves rule-based interview question sets and the lookup data the
interview setup screen needs.

Endpoints:
    POST /questions                  - Generate five questions for a role + persona
    POST /classify                   - Classify a role description
    GET  /personas                   - List interviewer personas
    GET  /personas/{persona}         - Persona display info
    GET  /personas/{persona}/signals - Hiring signals for a persona
    GET  /question-types/{type}      - Question type display info
    GET  /roles                      - Role title suggestions
    GET  /health                     - Health check

Internal binding: configured by QUESTION_SERVICE_HOST/QUESTION_SERVICE_PORT
(default 0.0.0.0:8770)
"""

from __future__ import annotations

import logging
import os
import random
from contextlib import asynccontextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Annotated, Any, AsyncIterator, TypedDict

import uvicorn
from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Query, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from interview_questions import (
    MAX_ROLE_DESCRIPTION_LENGTH,
    MIN_ROLE_DESCRIPTION_LENGTH,
    FocusCategory,
    GeneratedQuestion,
    HiringSignal,
    Persona,
    PersonaDisplay,
    QuestionGenerator,
    QuestionTypeDisplay,
    RoleCategory,
    __version__,
    get_persona_display,
    get_question_type_display,
    get_signals_for_persona,
    list_persona_displays,
    suggest_roles,
)


# Load environment variables from .env file
_env_path = Path(__file__).parent / ".env"
load_dotenv(_env_path)


# =============================================================================
# Configuration
# =============================================================================

SERVICE_NAME = "Interview Question Service"


@dataclass(frozen=True)
class RuntimeConfig:
    """Runtime config for the question service."""

    host: str
    port: int
    seed: int | None
    log_level: str


def load_runtime_config() -> RuntimeConfig:
    """Load runtime config from environment with strict validation."""
    host = (os.environ.get("QUESTION_SERVICE_HOST", "0.0.0.0") or "").strip()
    if not host:
        raise RuntimeError("QUESTION_SERVICE_HOST resolved to empty value.")

    port_raw = (os.environ.get("QUESTION_SERVICE_PORT", "8770") or "").strip()
    if not port_raw:
        raise RuntimeError("QUESTION_SERVICE_PORT resolved to empty value.")

    try:
        port = int(port_raw)
    except ValueError as exc:
        raise RuntimeError(
            f"QUESTION_SERVICE_PORT must be an integer. Got: {port_raw}"
        ) from exc

    if port < 1 or port > 65535:
        raise RuntimeError(f"QUESTION_SERVICE_PORT must be in range 1-65535. Got: {port}.")

    seed_raw = (os.environ.get("QUESTION_SEED") or "").strip()
    seed: int | None = None
    if seed_raw:
        try:
            seed = int(seed_raw)
        except ValueError as exc:
            raise RuntimeError(f"QUESTION_SEED must be an integer. Got: {seed_raw}") from exc

    log_level = (os.environ.get("LOG_LEVEL", "INFO") or "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(f"LOG_LEVEL must be a logging level name. Got: {log_level}")

    return RuntimeConfig(host=host, port=port, seed=seed, log_level=log_level)


RUNTIME_CONFIG = load_runtime_config()

# CORS configuration - modify for production
CORS_ORIGINS: list[str] = [
    "http://localhost:3000",  # Common React dev port
    "http://localhost:5173",  # Vite dev server
]


# =============================================================================
# Logging Configuration
# =============================================================================

logging.basicConfig(
    level=RUNTIME_CONFIG.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Request Models
# =============================================================================


class QuestionRequest(BaseModel):
    """Request to generate an interview question set."""

    role_description: str = Field(
        ...,
        alias="roleDescription",
        min_length=MIN_ROLE_DESCRIPTION_LENGTH,
        max_length=MAX_ROLE_DESCRIPTION_LENGTH,
        description="Free-text role, e.g. 'Senior React Engineer at Series B Startup'",
    )
    persona: Persona = Field(..., description="Interviewer persona")
    focus_category: FocusCategory | None = Field(
        default=None,
        alias="focusCategory",
        description="Optional override of the persona question mix",
    )

    model_config = {"populate_by_name": True, "str_strip_whitespace": True}


class ClassifyRequest(BaseModel):
    """Request to classify a role description."""

    role_description: str = Field(
        ...,
        alias="roleDescription",
        min_length=MIN_ROLE_DESCRIPTION_LENGTH,
        max_length=MAX_ROLE_DESCRIPTION_LENGTH,
    )

    model_config = {"populate_by_name": True, "str_strip_whitespace": True}


# =============================================================================
# Response Models
# =============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    ok: bool = Field(default=False)
    error: str = Field(..., description="Error description")
    error_code: str | None = Field(default=None, description="Machine-readable error code")


class ClassifyResponse(BaseModel):
    """Role classification result."""

    role_description: str = Field(..., alias="roleDescription")
    role_category: RoleCategory = Field(..., alias="roleCategory")

    model_config = {"populate_by_name": True}


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service health status")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    timestamp: str = Field(..., description="Current server timestamp")
    seeded: bool = Field(..., description="Whether question selection is seeded")
    question_sets_generated: int = Field(..., description="Question sets served since start")
    classifications: int = Field(..., description="Classification requests served since start")


# =============================================================================
# Application State
# =============================================================================


class AppStats(TypedDict):
    """Counters exposed through /health."""

    question_sets_generated: int
    classifications: int
    started_at: str


class AppState(TypedDict):
    """Type-safe application state managed by lifespan."""

    generator: QuestionGenerator
    stats: AppStats


def _now_utc() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def get_initial_stats() -> AppStats:
    """Create initial statistics dictionary."""
    return AppStats(
        question_sets_generated=0,
        classifications=0,
        started_at=_now_utc(),
    )


def build_generator(seed: int | None) -> QuestionGenerator:
    """Create the shared generator, seeded when a seed is configured."""
    rng = random.Random(seed) if seed is not None else random.Random()
    return QuestionGenerator(rng=rng)


# =============================================================================
# Custom Exceptions
# =============================================================================


class QuestionServiceError(Exception):
    """Base exception for question service errors."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: str | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(message)


class StateNotInitializedError(QuestionServiceError):
    """Raised when a request arrives before the lifespan has run."""

    def __init__(self, message: str = "Application state not initialized.") -> None:
        super().__init__(
            message=message,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            error_code="STATE_NOT_INITIALIZED",
        )


# =============================================================================
# Dependencies
# =============================================================================


def get_app_state(request: Request) -> AppState:
    """
    Dependency to retrieve application state from request.

    Raises:
        StateNotInitializedError: If the lifespan has not populated state.
    """
    state = getattr(request, "state", None)
    generator = getattr(state, "generator", None)
    if generator is None:
        raise StateNotInitializedError()
    return AppState(generator=generator, stats=state.stats)


# Type alias for dependency injection
AppStateDep = Annotated[AppState, Depends(get_app_state)]


# =============================================================================
# Exception Handlers
# =============================================================================


async def question_service_error_handler(
    request: Request, exc: QuestionServiceError
) -> JSONResponse:
    """Render QuestionServiceError as an ErrorResponse."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            ok=False,
            error=exc.message,
            error_code=exc.error_code,
        ).model_dump(),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected exceptions and hide their details from clients."""
    logger.error("Unhandled exception: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            ok=False,
            error="Internal server error",
            error_code="INTERNAL_ERROR",
        ).model_dump(),
    )


# =============================================================================
# FastAPI App Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[dict[str, Any]]:
    """Build the shared generator and counters for the app's lifetime."""
    logger.info(f"Starting {SERVICE_NAME} v{__version__}")
    logger.info(
        "Runtime: host=%s port=%d seeded=%s",
        RUNTIME_CONFIG.host,
        RUNTIME_CONFIG.port,
        RUNTIME_CONFIG.seed is not None,
    )

    state = {
        "generator": build_generator(RUNTIME_CONFIG.seed),
        "stats": get_initial_stats(),
    }

    yield state

    logger.info("Shutting down...")


# =============================================================================
# FastAPI Application
# =============================================================================


app = FastAPI(
    title=SERVICE_NAME,
    version=__version__,
    description="Rule-based interview question generation for mock interviews",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
    max_age=3600,
)

app.add_exception_handler(QuestionServiceError, question_service_error_handler)
app.add_exception_handler(Exception, generic_exception_handler)


# =============================================================================
# Endpoints
# =============================================================================


@app.post("/questions", response_model=list[GeneratedQuestion])
async def generate_questions(
    request: QuestionRequest,
    state: AppStateDep,
) -> list[GeneratedQuestion]:
    """
    Generate a five-question interview.

    Request body:
        {
            "roleDescription": "Senior React Engineer",
            "persona": "technical" | "skeptic" | "friendly" | "rushed",
            "focusCategory": "leadership"          (optional)
        }

    Returns the questions as a JSON array of
    {questionNumber, questionType, questionText}.
    """
    questions = state["generator"].generate(
        request.role_description,
        request.persona,
        request.focus_category,
    )
    state["stats"]["question_sets_generated"] += 1
    logger.info(
        "Generated %d questions for persona=%s focus=%s",
        len(questions),
        request.persona.value,
        request.focus_category.value if request.focus_category else "default",
    )
    return questions


@app.post("/classify", response_model=ClassifyResponse)
async def classify(request: ClassifyRequest, state: AppStateDep) -> ClassifyResponse:
    """Return the role category a description maps to."""
    category = state["generator"].classifier.classify(request.role_description)
    state["stats"]["classifications"] += 1
    return ClassifyResponse(
        role_description=request.role_description,
        role_category=category,
    )


@app.get("/personas", response_model=list[PersonaDisplay])
async def list_personas() -> list[PersonaDisplay]:
    """List every persona with its display info."""
    return list_persona_displays()


@app.get("/personas/{persona}", response_model=PersonaDisplay)
async def persona_display(persona: str) -> PersonaDisplay:
    """Display info for one persona (technical for unknown ids)."""
    return get_persona_display(persona)


@app.get("/personas/{persona}/signals", response_model=list[HiringSignal])
async def persona_signals(persona: str) -> list[HiringSignal]:
    """Hiring signals for one persona (technical for unknown ids)."""
    return list(get_signals_for_persona(persona))


@app.get("/question-types/{question_type}", response_model=QuestionTypeDisplay)
async def question_type_display(question_type: str) -> QuestionTypeDisplay:
    """Display info for a question type (generic entry for unknown types)."""
    return get_question_type_display(question_type)


@app.get("/roles", response_model=list[str])
async def roles(
    query: str = Query(default="", max_length=MAX_ROLE_DESCRIPTION_LENGTH),
    limit: int = Query(default=8, ge=1, le=50),
) -> list[str]:
    """Autocomplete suggestions from the role catalog."""
    return suggest_roles(query, limit=limit)


@app.get("/health", response_model=HealthResponse)
async def health(state: AppStateDep) -> HealthResponse:
    """Health check endpoint."""
    stats = state["stats"]
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        version=__version__,
        timestamp=_now_utc(),
        seeded=RUNTIME_CONFIG.seed is not None,
        question_sets_generated=stats["question_sets_generated"],
        classifications=stats["classifications"],
    )


# =============================================================================
# Main Entry Point
# =============================================================================

if __name__ == "__main__":
    logger.info("=" * 60)
    logger.info(SERVICE_NAME)
    logger.info("=" * 60)
    logger.info("Binding to: http://%s:%d", RUNTIME_CONFIG.host, RUNTIME_CONFIG.port)
    logger.info("")
    logger.info("Endpoints:")
    logger.info("  POST /questions                  - Generate questions")
    logger.info("  POST /classify                   - Classify a role")
    logger.info("  GET  /personas                   - List personas")
    logger.info("  GET  /personas/{persona}/signals - Persona hiring signals")
    logger.info("  GET  /question-types/{type}      - Question type display")
    logger.info("  GET  /roles                      - Role suggestions")
    logger.info("  GET  /health                     - Health check")
    logger.info("=" * 60)

    uvicorn.run(
        app,
        host=RUNTIME_CONFIG.host,
        port=RUNTIME_CONFIG.port,
        log_level=RUNTIME_CONFIG.log_level.lower(),
    )
