from __future__ import annotations

from breedbook.application.interfaces.unit_of_work import UnitOfWork
from breedbook.domain.models.breed import BreedStats


async def execute(uow: UnitOfWork) -> BreedStats:
    return await uow.breeds.stats()
