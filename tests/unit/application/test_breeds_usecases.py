from __future__ import annotations

from types import SimpleNamespace
from uuid import uuid4

import pytest

from breedbook.application.errors import DuplicateNameError, NotFound, ValidationError
from breedbook.application.use_cases.breeds import (
    create_breed,
    delete_breed,
    get_breed,
    list_breeds,
    update_breed,
)
from breedbook.application.use_cases.breeds.sub_breed_names import clean_sub_breed_names
from breedbook.application.use_cases.sub_breeds import create_sub_breed, delete_sub_breed
from breedbook.domain.models.breed import Breed, SubBreed


class StubRepo:
    def __init__(self, *breeds: Breed) -> None:
        self.breeds = {b.id: b for b in breeds}
        self.add_input = None
        self.update_input = None
        self.list_input = None
        self.sub_breed_added = None

    async def list(self, *, search=None, limit=50, offset=0):
        self.list_input = {"search": search, "limit": limit, "offset": offset}
        return list(self.breeds.values()), len(self.breeds)

    async def get(self, breed_id):
        return self.breeds.get(breed_id)

    async def get_by_name(self, name):
        return next((b for b in self.breeds.values() if b.name == name), None)

    async def add(self, breed, sub_breed_names=None):
        self.add_input = (breed, sub_breed_names)
        breed.sub_breeds = [SubBreed.create(breed.id, n) for n in sub_breed_names or []]
        self.breeds[breed.id] = breed
        return breed

    async def update(self, breed_id, data, sub_breed_names=None):
        self.update_input = (breed_id, data, sub_breed_names)
        return self.breeds.get(breed_id)

    async def delete(self, breed_id):
        return self.breeds.pop(breed_id, None) is not None

    async def add_sub_breed(self, sub_breed):
        self.sub_breed_added = sub_breed
        return sub_breed

    async def delete_sub_breed(self, sub_breed_id):
        return False


def make_uow(repo: StubRepo):
    state = {"commits": 0}

    async def commit():
        state["commits"] += 1

    async def rollback():
        return None

    return SimpleNamespace(breeds=repo, commit=commit, rollback=rollback, state=state)


def test_clean_sub_breed_names_drops_blanks_and_keeps_duplicates():
    assert clean_sub_breed_names(["Yellow", " Chocolate ", "", "   ", "Yellow"]) == [
        "Yellow",
        "Chocolate",
        "Yellow",
    ]
    assert clean_sub_breed_names([]) == []
    assert clean_sub_breed_names(None) is None


async def test_create_breed_strips_name_and_cleans_sub_breeds():
    repo = StubRepo()
    uow = make_uow(repo)
    created = await create_breed.execute(
        uow,
        create_breed.CreateBreedInput(
            name="  Labrador ", description="Friendly", sub_breeds=["Yellow", "Chocolate", ""]
        ),
    )
    breed, names = repo.add_input
    assert breed.name == "Labrador"
    assert names == ["Yellow", "Chocolate"]
    assert [sb.name for sb in created.sub_breeds] == ["Yellow", "Chocolate"]
    assert uow.state["commits"] == 1


async def test_create_breed_rejects_duplicate_name():
    repo = StubRepo(Breed.create("Labrador"))
    uow = make_uow(repo)
    with pytest.raises(DuplicateNameError):
        await create_breed.execute(uow, create_breed.CreateBreedInput(name="Labrador"))
    assert repo.add_input is None
    assert uow.state["commits"] == 0


async def test_create_breed_duplicate_check_is_case_sensitive():
    repo = StubRepo(Breed.create("Labrador"))
    uow = make_uow(repo)
    created = await create_breed.execute(uow, create_breed.CreateBreedInput(name="labrador"))
    assert created.name == "labrador"


async def test_list_breeds_validates_limit_and_offset():
    uow = make_uow(StubRepo())
    with pytest.raises(ValidationError):
        await list_breeds.execute(uow, limit=0)
    with pytest.raises(ValidationError):
        await list_breeds.execute(uow, limit=101)
    with pytest.raises(ValidationError):
        await list_breeds.execute(uow, offset=-1)


async def test_list_breeds_treats_blank_search_as_no_filter():
    repo = StubRepo(Breed.create("Pug"))
    uow = make_uow(repo)
    result = await list_breeds.execute(uow, search="   ")
    assert repo.list_input == {"search": None, "limit": 50, "offset": 0}
    assert result.total == 1


async def test_get_breed_missing_raises_not_found():
    with pytest.raises(NotFound):
        await get_breed.execute(make_uow(StubRepo()), uuid4())


async def test_update_breed_missing_raises_not_found():
    repo = StubRepo()
    with pytest.raises(NotFound):
        await update_breed.execute(make_uow(repo), uuid4(), update_breed.UpdateBreedInput())
    assert repo.update_input is None


async def test_update_breed_rejects_name_of_another_breed():
    target = Breed.create("Poodle")
    repo = StubRepo(target, Breed.create("Pug"))
    uow = make_uow(repo)
    with pytest.raises(DuplicateNameError):
        await update_breed.execute(uow, target.id, update_breed.UpdateBreedInput(name="Pug"))
    assert uow.state["commits"] == 0


async def test_update_breed_keeping_own_name_is_allowed():
    target = Breed.create("Poodle")
    repo = StubRepo(target)
    await update_breed.execute(
        make_uow(repo), target.id, update_breed.UpdateBreedInput(name="Poodle")
    )
    assert repo.update_input == (target.id, {"name": "Poodle"}, None)


async def test_update_breed_passes_sub_breed_replacement_only_when_provided():
    target = Breed.create("Poodle")
    repo = StubRepo(target)
    uow = make_uow(repo)

    await update_breed.execute(uow, target.id, update_breed.UpdateBreedInput())
    assert repo.update_input == (target.id, {}, None)

    await update_breed.execute(uow, target.id, update_breed.UpdateBreedInput(sub_breeds=[]))
    assert repo.update_input == (target.id, {}, [])

    await update_breed.execute(
        uow, target.id, update_breed.UpdateBreedInput(sub_breeds=[" Toy ", ""])
    )
    assert repo.update_input == (target.id, {}, ["Toy"])
    assert uow.state["commits"] == 3


async def test_update_breed_explicit_null_description_clears_it():
    target = Breed.create("Poodle", description="Curly")
    repo = StubRepo(target)
    await update_breed.execute(
        make_uow(repo),
        target.id,
        update_breed.UpdateBreedInput(description=None, provided={"description"}),
    )
    assert repo.update_input == (target.id, {"description": None}, None)


async def test_delete_breed_missing_raises_not_found():
    uow = make_uow(StubRepo())
    with pytest.raises(NotFound):
        await delete_breed.execute(uow, uuid4())
    assert uow.state["commits"] == 0


async def test_create_sub_breed_requires_existing_breed():
    repo = StubRepo()
    with pytest.raises(NotFound):
        await create_sub_breed.execute(
            make_uow(repo), uuid4(), create_sub_breed.CreateSubBreedInput(name="Toy")
        )
    assert repo.sub_breed_added is None


async def test_create_sub_breed_strips_name():
    target = Breed.create("Poodle")
    repo = StubRepo(target)
    created = await create_sub_breed.execute(
        make_uow(repo), target.id, create_sub_breed.CreateSubBreedInput(name="  Toy ")
    )
    assert created.name == "Toy"
    assert created.breed_id == target.id


async def test_delete_sub_breed_missing_raises_not_found():
    with pytest.raises(NotFound):
        await delete_sub_breed.execute(make_uow(StubRepo()), uuid4())
