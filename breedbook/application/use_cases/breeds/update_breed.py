from __future__ import annotations

import logging
from dataclasses import dataclass, field
from uuid import UUID

from breedbook.application.errors import DuplicateNameError, NotFound
from breedbook.application.interfaces.unit_of_work import UnitOfWork
from breedbook.application.use_cases.breeds.sub_breed_names import clean_sub_breed_names
from breedbook.domain.models.breed import Breed

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateBreedInput:
    name: str | None = None
    description: str | None = None
    sub_breeds: list[str] | None = None
    # Names of the fields the caller actually sent; lets an explicit null clear description
    provided: set[str] = field(default_factory=set)


async def execute(uow: UnitOfWork, breed_id: UUID, payload: UpdateBreedInput) -> Breed:
    existing = await uow.breeds.get(breed_id)
    if not existing:
        raise NotFound("Breed not found")

    data: dict = {}
    if payload.name is not None:
        name = payload.name.strip()
        if name != existing.name:
            clash = await uow.breeds.get_by_name(name)
            if clash and clash.id != breed_id:
                raise DuplicateNameError("A breed with this name already exists")
        data["name"] = name
    if "description" in payload.provided or payload.description is not None:
        data["description"] = payload.description

    updated = await uow.breeds.update(
        breed_id, data, sub_breed_names=clean_sub_breed_names(payload.sub_breeds)
    )
    if not updated:
        raise NotFound("Breed not found")
    await uow.commit()
    logger.info("Updated breed %s (fields: %s)", breed_id, ", ".join(sorted(data)) or "-")
    return updated
