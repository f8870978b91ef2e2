from __future__ import annotations

from dataclasses import dataclass

from breedbook.application.errors import ValidationError
from breedbook.application.interfaces.unit_of_work import UnitOfWork
from breedbook.domain.models.breed import Breed

DEFAULT_LIMIT = 50
MAX_LIMIT = 100


@dataclass(slots=True)
class ListBreedsResult:
    items: list[Breed]
    total: int


async def execute(
    uow: UnitOfWork,
    *,
    search: str | None = None,
    limit: int = DEFAULT_LIMIT,
    offset: int = 0,
) -> ListBreedsResult:
    if limit <= 0 or limit > MAX_LIMIT:
        raise ValidationError(f"limit must be between 1 and {MAX_LIMIT}")
    if offset < 0:
        raise ValidationError("offset must be zero or greater")
    search = search.strip() if search else None
    items, total = await uow.breeds.list(search=search or None, limit=limit, offset=offset)
    return ListBreedsResult(items=items, total=total)
