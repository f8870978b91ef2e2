from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from breedbook.application.use_cases.sub_breeds import delete_sub_breed
from breedbook.infrastructure.db.session import SQLAlchemyUnitOfWork
from breedbook.interfaces.http.deps import get_uow

router = APIRouter(prefix="/sub-breeds", tags=["sub-breeds"])


@router.delete("/{sub_breed_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete(sub_breed_id: UUID, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    await delete_sub_breed.execute(uow, sub_breed_id)
    return None
