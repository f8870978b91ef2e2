from __future__ import annotations

import json

from sqlalchemy import func, select

from breedbook.application.use_cases.breeds import seed_breeds
from breedbook.infrastructure.db.orm.breed import BreedORM
from breedbook.infrastructure.db.orm.sub_breed import SubBreedORM
from breedbook.infrastructure.db.session import SQLAlchemyUnitOfWork
from scripts.seed_breeds import DEFAULT_DATA_FILE, load_catalog

CATALOG = {
    "bulldog": ["boston", "english", "french"],
    "pug": [],
    "hound": ["afghan", "afghan", " "],
}


async def _counts(session_factory) -> tuple[int, int]:
    async with session_factory() as session:
        breeds = (await session.execute(select(func.count(BreedORM.id)))).scalar_one()
        subs = (await session.execute(select(func.count(SubBreedORM.id)))).scalar_one()
    return breeds, subs


async def test_seed_creates_breeds_and_is_idempotent(session_factory):
    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        first = await seed_breeds.execute(uow, CATALOG)
    assert (first.breeds_created, first.sub_breeds_created) == (3, 4)
    assert await _counts(session_factory) == (3, 4)

    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        second = await seed_breeds.execute(uow, CATALOG)
    assert (second.breeds_created, second.sub_breeds_created) == (0, 0)
    assert await _counts(session_factory) == (3, 4)


async def test_seed_adds_missing_sub_breeds_to_existing_breed(session_factory):
    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        await seed_breeds.execute(uow, {"bulldog": ["boston"]})

    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        result = await seed_breeds.execute(uow, {"bulldog": ["boston", "french"]})
        bulldog = await uow.breeds.get_by_name("bulldog")

    assert (result.breeds_created, result.sub_breeds_created) == (0, 1)
    assert [sb.name for sb in bulldog.sub_breeds] == ["boston", "french"]


def test_bundled_catalog_loads(tmp_path):
    catalog = load_catalog(DEFAULT_DATA_FILE)
    assert "labrador" in catalog
    assert "french" in catalog["bulldog"]

    custom = tmp_path / "dogs.json"
    custom.write_text(json.dumps({"pug": None}), encoding="utf-8")
    assert load_catalog(custom) == {"pug": []}
