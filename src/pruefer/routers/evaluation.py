import logging

from fastapi import APIRouter, Depends

from pruefer.dependencies import get_evaluator
from pruefer.exceptions import InternalServiceError, PrueferError
from pruefer.schemas.evaluation import ErrorResponse, EvaluationRequest, EvaluationResponse
from pruefer.services.evaluator import EvaluatorService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["evaluation"])


@router.post(
    "/bewerten",
    response_model=EvaluationResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def evaluate_submission(
    body: EvaluationRequest,
    evaluator: EvaluatorService = Depends(get_evaluator),
) -> EvaluationResponse:
    """Grade a Stellungnahme against task variant A or B."""
    try:
        return await evaluator.evaluate(body.variante, body.text, body.ai_service)
    except PrueferError:
        raise
    except Exception as e:
        logger.exception("Unexpected error while evaluating submission")
        raise InternalServiceError() from e
