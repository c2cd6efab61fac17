"""Pruefer schemas."""

from pruefer.schemas.evaluation import (
    Bewertung,
    EvaluationMeta,
    EvaluationRequest,
    EvaluationResponse,
    EvaluationResult,
    Feedback,
    Korrektur,
)
from pruefer.schemas.task import TaskVariant

__all__ = [
    "Bewertung",
    "EvaluationMeta",
    "EvaluationRequest",
    "EvaluationResponse",
    "EvaluationResult",
    "Feedback",
    "Korrektur",
    "TaskVariant",
]
