from __future__ import annotations

import logging
from dataclasses import dataclass

from breedbook.application.errors import DuplicateNameError
from breedbook.application.interfaces.unit_of_work import UnitOfWork
from breedbook.application.use_cases.breeds.sub_breed_names import clean_sub_breed_names
from breedbook.domain.models.breed import Breed

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateBreedInput:
    name: str
    description: str | None = None
    sub_breeds: list[str] | None = None


async def execute(uow: UnitOfWork, payload: CreateBreedInput) -> Breed:
    name = payload.name.strip()
    # Friendly early error; the unique constraint still catches concurrent creates
    if await uow.breeds.get_by_name(name):
        raise DuplicateNameError("A breed with this name already exists")
    breed = Breed.create(name=name, description=payload.description)
    created = await uow.breeds.add(breed, clean_sub_breed_names(payload.sub_breeds))
    await uow.commit()
    logger.info(
        "Created breed %s (%s) with %d sub-breeds",
        created.id,
        created.name,
        len(created.sub_breeds),
    )
    return created
