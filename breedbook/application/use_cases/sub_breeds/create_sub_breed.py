from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from breedbook.application.errors import NotFound, ValidationError
from breedbook.application.interfaces.unit_of_work import UnitOfWork
from breedbook.domain.models.breed import SubBreed

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateSubBreedInput:
    name: str


async def execute(uow: UnitOfWork, breed_id: UUID, payload: CreateSubBreedInput) -> SubBreed:
    name = payload.name.strip()
    if not name:
        raise ValidationError("Sub-breed name is required")
    breed = await uow.breeds.get(breed_id)
    if not breed:
        raise NotFound("Breed not found")
    created = await uow.breeds.add_sub_breed(SubBreed.create(breed_id=breed_id, name=name))
    await uow.commit()
    logger.info("Added sub-breed %s (%s) to breed %s", created.id, created.name, breed_id)
    return created
