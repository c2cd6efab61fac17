import logging
from contextlib import asynccontextmanager

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pruefer.config import settings
from pruefer.exceptions import BackendUnavailableError, PrueferError
from pruefer.routers import evaluation, health, task
from pruefer.services.evaluator import EvaluatorService
from pruefer.services.llm import create_backends
from pruefer.services.task_catalog import TaskCatalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the task catalog and backend clients on startup, close them on shutdown."""
    logger.info("Starting Pruefer service ...")

    backends = create_backends(settings)
    try:
        app.state.backends = backends
        app.state.task_catalog = TaskCatalog.default()
        app.state.evaluator = EvaluatorService(
            app.state.task_catalog, backends, settings
        )

        logger.info("Pruefer service ready.")
        yield
    finally:
        logger.info("Shutting down Pruefer service ...")
        await backends.close()


app = FastAPI(
    title="Pruefer",
    description="ÖSD B2 Stellungnahme grading via LLM",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(task.router)
app.include_router(evaluation.router)
app.include_router(health.router)


@app.exception_handler(PrueferError)
async def pruefer_error_handler(request: Request, exc: PrueferError):
    content: dict[str, str] = {"detail": str(exc)}
    if isinstance(exc, BackendUnavailableError) and exc.fallback:
        content["fallback"] = exc.fallback
    return JSONResponse(status_code=exc.status_code, content=content)
