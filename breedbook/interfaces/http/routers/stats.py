from __future__ import annotations

from fastapi import APIRouter, Depends

from breedbook.application.use_cases.breeds import get_stats
from breedbook.infrastructure.db.session import SQLAlchemyUnitOfWork
from breedbook.interfaces.http.deps import get_uow
from breedbook.interfaces.http.schemas.breeds import StatsResponse

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=StatsResponse)
async def read_stats(*, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    stats = await get_stats.execute(uow)
    return StatsResponse(total_breeds=stats.total_breeds, total_sub_breeds=stats.total_sub_breeds)
