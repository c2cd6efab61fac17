from fastapi import Request

from pruefer.services.evaluator import EvaluatorService
from pruefer.services.llm import BackendRegistry
from pruefer.services.task_catalog import TaskCatalog


def get_evaluator(request: Request) -> EvaluatorService:
    """Retrieve the EvaluatorService singleton from app state."""
    return request.app.state.evaluator


def get_task_catalog(request: Request) -> TaskCatalog:
    """Retrieve the TaskCatalog singleton from app state."""
    return request.app.state.task_catalog


def get_backends(request: Request) -> BackendRegistry:
    """Retrieve the BackendRegistry singleton from app state."""
    return request.app.state.backends
