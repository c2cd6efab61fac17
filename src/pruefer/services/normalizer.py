"""Turn a free-form model reply into a well-shaped EvaluationResult.

Model replies are untrusted input. Extraction and validation failures are
absorbed here and replaced by a fixed fallback; nothing raises past
``normalize_evaluation``.
"""

import json
import logging

from pydantic import ValidationError

from pruefer.schemas.evaluation import Bewertung, EvaluationResult, Feedback
from pruefer.utils.llm_parse import extract_json_object

logger = logging.getLogger(__name__)


def fallback_evaluation() -> EvaluationResult:
    """Evaluation returned when a reply cannot be normalized."""
    return EvaluationResult(
        bewertung=Bewertung(K=1, T=2, L=2, F=2, gesamt=7),
        feedback=Feedback(
            positiv=["Text wurde eingereicht"],
            verbesserungen=["Bewertung konnte nicht vollständig verarbeitet werden"],
        ),
        korrekturen=[],
        tipps=["Versuchen Sie es erneut"],
    )


def too_short_evaluation(word_count: int, minimum: int, target: int = 120) -> EvaluationResult:
    """Zero-score evaluation for submissions below the minimum word count."""
    return EvaluationResult(
        bewertung=Bewertung(K=0, T=0, L=0, F=0, gesamt=0),
        feedback=Feedback(
            positiv=[],
            verbesserungen=[
                f"Text ist zu kurz ({word_count} Wörter). "
                f"Mindestens {minimum} Wörter erforderlich."
            ],
        ),
        korrekturen=[],
        tipps=[f"Schreiben Sie etwa {target} Wörter", "Gehen Sie auf alle vier Punkte ein"],
    )


def normalize_evaluation(raw: str | None) -> EvaluationResult:
    """Parse a model reply, falling back to ``fallback_evaluation()`` on any failure."""
    content = extract_json_object(raw)
    if content is None:
        logger.warning("No JSON object in model reply: %s", (raw or "")[:150])
        return fallback_evaluation()

    try:
        data = json.loads(content)
        result = EvaluationResult.model_validate(data)
    except (ValueError, ValidationError, RecursionError) as e:
        logger.warning("Unusable model reply: %s | extracted: %s", e, content[:150])
        return fallback_evaluation()

    logger.info("Evaluation parsed: gesamt=%s", result.bewertung.gesamt)
    return result
