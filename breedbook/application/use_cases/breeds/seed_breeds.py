from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from breedbook.application.interfaces.unit_of_work import UnitOfWork
from breedbook.application.use_cases.breeds.sub_breed_names import clean_sub_breed_names
from breedbook.domain.models.breed import Breed, SubBreed

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SeedResult:
    breeds_created: int = 0
    sub_breeds_created: int = 0


async def execute(uow: UnitOfWork, catalog: Mapping[str, Sequence[str]]) -> SeedResult:
    """Insert every breed and sub-breed of `catalog` that is not stored yet.

    Existing breeds are matched by exact name and only gain the sub-breeds
    they are missing, so running the seed twice changes nothing.
    """
    result = SeedResult()
    for raw_name, raw_sub_breeds in catalog.items():
        name = raw_name.strip()
        if not name:
            continue
        wanted = list(dict.fromkeys(clean_sub_breed_names(raw_sub_breeds) or []))
        existing = await uow.breeds.get_by_name(name)
        if existing is None:
            await uow.breeds.add(Breed.create(name=name), wanted)
            result.breeds_created += 1
            result.sub_breeds_created += len(wanted)
            continue
        known = {sb.name for sb in existing.sub_breeds}
        for sub_name in wanted:
            if sub_name in known:
                continue
            await uow.breeds.add_sub_breed(SubBreed.create(breed_id=existing.id, name=sub_name))
            result.sub_breeds_created += 1
    await uow.commit()
    logger.info(
        "Seed finished: %d breeds and %d sub-breeds created",
        result.breeds_created,
        result.sub_breeds_created,
    )
    return result
