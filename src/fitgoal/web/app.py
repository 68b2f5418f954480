"""FastAPI application for the fitgoal API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from .. import __version__
from ..agents import WorkoutGenerator
from ..clients import GeminiPlanClient, PlanGenerationClient
from ..config import Settings, get_settings
from ..db.engine import get_db_path, init_db
from ..db.repositories import WorkoutRepository
from ..errors import FitGoalError
from .routers import workouts

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    plan_client: PlanGenerationClient | None = None,
    repository: WorkoutRepository | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Runtime settings (read from the environment if omitted)
        plan_client: AI client to use instead of Gemini
        repository: Workout store to use instead of the configured database
    """
    if settings is None:
        settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler - runs on startup and shutdown."""
        # Startup: data directory and schema, then the shared clients
        db_path = get_db_path(settings.data_dir)
        await init_db(db_path)

        store = repository or WorkoutRepository(db_path)
        client = plan_client or GeminiPlanClient(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            timeout=settings.gemini_timeout,
        )
        if not settings.gemini_api_key and plan_client is None:
            logger.warning("GEMINI_API_KEY is not set; plan generation will fail")

        app.state.repository = store
        app.state.generator = WorkoutGenerator(client, store)
        logger.info("fitgoal %s started", __version__)
        yield
        # Shutdown: connections are per request, nothing left open
        logger.info("fitgoal shutting down")

    app = FastAPI(
        title="fitgoal",
        description="AI workout plans from a current-body and a goal-body photo",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    @app.exception_handler(FitGoalError)
    async def fitgoal_error_handler(request: Request, exc: FitGoalError):
        """Return a caller-safe message, keep the detail in the log."""
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
        else:
            logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("%s %s crashed", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": FitGoalError.public_message})

    app.include_router(workouts.router)

    @app.get("/health", response_class=PlainTextResponse)
    async def health():
        """Health check endpoint."""
        return "OK"

    # Front-end last so the API routes take precedence
    if settings.static_dir.exists():
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")

    return app
