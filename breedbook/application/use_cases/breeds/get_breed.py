from __future__ import annotations

from uuid import UUID

from breedbook.application.errors import NotFound
from breedbook.application.interfaces.unit_of_work import UnitOfWork
from breedbook.domain.models.breed import Breed


async def execute(uow: UnitOfWork, breed_id: UUID) -> Breed:
    breed = await uow.breeds.get(breed_id)
    if not breed:
        raise NotFound("Breed not found")
    return breed
