"""ÖSD B2 Stellungnahme grading.

Flow per request:
- validate variant and text (400 on failure, no model call)
- fewer than ``min_word_count`` words: zero score, no model call, whatever
  backend was requested
- otherwise validate the backend selector and make one call to it; the reply
  is normalized into an EvaluationResult, and a failing backend is reported
  with an alternative to try, never retried here
"""

import logging
from datetime import datetime, timezone

from pruefer.config import Settings
from pruefer.exceptions import BackendUnavailableError, InvalidSubmissionError
from pruefer.schemas.evaluation import EvaluationMeta, EvaluationResponse, EvaluationResult
from pruefer.services.llm import BackendRegistry
from pruefer.services.normalizer import normalize_evaluation, too_short_evaluation
from pruefer.services.prompts import SYSTEM_PROMPT, build_user_prompt
from pruefer.services.task_catalog import TaskCatalog
from pruefer.utils.text import count_words

logger = logging.getLogger(__name__)


class EvaluatorService:
    def __init__(
        self,
        catalog: TaskCatalog,
        backends: BackendRegistry,
        settings: Settings,
    ) -> None:
        self._catalog = catalog
        self._backends = backends
        self._default_backend = settings.default_backend
        self._min_words = settings.min_word_count
        self._target_words = settings.target_word_count
        self._max_text_chars = settings.max_text_chars

    async def evaluate(
        self,
        variante: str | None,
        text: str | None,
        ai_service: str | None = None,
    ) -> EvaluationResponse:
        """Grade one submission against the given task variant."""
        variant = self._catalog.get(variante)
        if variant is None or not text or not text.strip():
            raise InvalidSubmissionError(
                "Ungültige Eingabe. Variante "
                f"{' oder '.join(self._catalog.ids())} und Text erforderlich."
            )
        if len(text) > self._max_text_chars:
            raise InvalidSubmissionError(
                f"Text ist zu lang (maximal {self._max_text_chars} Zeichen)."
            )

        word_count = count_words(text)
        if word_count < self._min_words:
            logger.info(
                "Variant %s: %d words < %d, returning zero score",
                variant.id,
                word_count,
                self._min_words,
            )
            result = too_short_evaluation(word_count, self._min_words, self._target_words)
            return self._respond(result, word_count, variant.id, ai_service=None)

        backend_name = ai_service or self._default_backend
        backend = self._backends.get(backend_name)
        if backend is None:
            raise InvalidSubmissionError(
                f"Unbekannter AI-Service: {backend_name}. "
                f"Verfügbar: {', '.join(self._backends.names())}."
            )

        user_prompt = build_user_prompt(
            variant, text, word_count, target_words=self._target_words
        )
        logger.info(
            "Evaluating variant %s (%d words) via %s", variant.id, word_count, backend_name
        )
        try:
            raw = await backend.generate(SYSTEM_PROMPT, user_prompt)
        except Exception as e:
            logger.exception("Backend %s failed", backend_name)
            raise BackendUnavailableError(
                backend_name, self._backends.alternative_to(backend_name)
            ) from e

        result = normalize_evaluation(raw)
        return self._respond(result, word_count, variant.id, ai_service=backend_name)

    @staticmethod
    def _respond(
        result: EvaluationResult,
        word_count: int,
        variante: str,
        *,
        ai_service: str | None,
    ) -> EvaluationResponse:
        return EvaluationResponse(
            **result.model_dump(),
            meta=EvaluationMeta(
                wortanzahl=word_count,
                variante=variante,
                ai_service=ai_service,
                timestamp=datetime.now(timezone.utc).isoformat(),
            ),
        )
