from __future__ import annotations

import logging
from uuid import UUID

from breedbook.application.errors import NotFound
from breedbook.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, breed_id: UUID) -> None:
    deleted = await uow.breeds.delete(breed_id)
    if not deleted:
        raise NotFound("Breed not found")
    await uow.commit()
    logger.info("Deleted breed %s", breed_id)
