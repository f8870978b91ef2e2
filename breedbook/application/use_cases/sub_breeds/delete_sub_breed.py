from __future__ import annotations

import logging
from uuid import UUID

from breedbook.application.errors import NotFound
from breedbook.application.interfaces.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, sub_breed_id: UUID) -> None:
    deleted = await uow.breeds.delete_sub_breed(sub_breed_id)
    if not deleted:
        raise NotFound("Sub-breed not found")
    await uow.commit()
    logger.info("Deleted sub-breed %s", sub_breed_id)
