from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from pruefer.dependencies import get_backends
from pruefer.schemas.evaluation import HealthResponse
from pruefer.services.llm import BackendRegistry

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    backends: BackendRegistry = Depends(get_backends),
) -> HealthResponse:
    """Report which backends have credentials configured."""
    return HealthResponse(
        status="OK",
        timestamp=datetime.now(timezone.utc).isoformat(),
        services={name: backend.is_configured for name, backend in backends.items()},
    )
