from fastapi import APIRouter, Depends

from pruefer.dependencies import get_task_catalog
from pruefer.schemas.task import TaskVariant
from pruefer.services.task_catalog import TaskCatalog

router = APIRouter(prefix="/api", tags=["tasks"])


@router.get("/aufgaben", response_model=list[TaskVariant])
async def list_tasks(
    catalog: TaskCatalog = Depends(get_task_catalog),
) -> list[TaskVariant]:
    """List every task variant a submission can be graded against."""
    return catalog.variants()
