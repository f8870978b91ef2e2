from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from breedbook.application.use_cases.breeds import (
    create_breed,
    delete_breed,
    get_breed,
    list_breeds,
    update_breed,
)
from breedbook.application.use_cases.sub_breeds import create_sub_breed
from breedbook.domain.models.breed import Breed, SubBreed
from breedbook.infrastructure.db.session import SQLAlchemyUnitOfWork
from breedbook.interfaces.http.deps import get_uow
from breedbook.interfaces.http.schemas.breeds import (
    BreedCreate,
    BreedListResponse,
    BreedResponse,
    BreedUpdate,
    SubBreedCreate,
    SubBreedResponse,
)

router = APIRouter(prefix="/breeds", tags=["breeds"])


def to_sub_breed_response(sub_breed: SubBreed) -> SubBreedResponse:
    return SubBreedResponse(
        id=str(sub_breed.id),
        name=sub_breed.name,
        breed_id=str(sub_breed.breed_id),
        created_at=sub_breed.created_at,
        updated_at=sub_breed.updated_at,
    )


def to_breed_response(breed: Breed) -> BreedResponse:
    return BreedResponse(
        id=str(breed.id),
        name=breed.name,
        description=breed.description,
        created_at=breed.created_at,
        updated_at=breed.updated_at,
        sub_breeds=[to_sub_breed_response(sb) for sb in breed.sub_breeds],
    )


@router.get("", response_model=BreedListResponse)
async def list_all(
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    search: str | None = Query(None),
    limit: int = Query(list_breeds.DEFAULT_LIMIT, ge=1, le=list_breeds.MAX_LIMIT),
    offset: int = Query(0, ge=0),
):
    result = await list_breeds.execute(uow, search=search, limit=limit, offset=offset)
    return BreedListResponse(
        breeds=[to_breed_response(b) for b in result.items], total=result.total
    )


@router.get("/{breed_id}", response_model=BreedResponse)
async def get_one(breed_id: UUID, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    breed = await get_breed.execute(uow, breed_id)
    return to_breed_response(breed)


@router.post("", response_model=BreedResponse, status_code=status.HTTP_201_CREATED)
async def create(payload: BreedCreate, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    created = await create_breed.execute(
        uow,
        create_breed.CreateBreedInput(
            name=payload.name,
            description=payload.description,
            sub_breeds=payload.sub_breeds,
        ),
    )
    return to_breed_response(created)


@router.put("/{breed_id}", response_model=BreedResponse)
async def update(
    breed_id: UUID,
    payload: BreedUpdate,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
):
    updated = await update_breed.execute(
        uow,
        breed_id,
        update_breed.UpdateBreedInput(
            name=payload.name,
            description=payload.description,
            sub_breeds=payload.sub_breeds,
            provided=set(payload.model_fields_set),
        ),
    )
    return to_breed_response(updated)


@router.delete("/{breed_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete(breed_id: UUID, *, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    await delete_breed.execute(uow, breed_id)
    return None


@router.post(
    "/{breed_id}/sub-breeds",
    response_model=SubBreedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_sub_breed(
    breed_id: UUID,
    payload: SubBreedCreate,
    *,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
):
    created = await create_sub_breed.execute(
        uow, breed_id, create_sub_breed.CreateSubBreedInput(name=payload.name)
    )
    return to_sub_breed_response(created)
