from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from breedbook.domain.models.breed import Breed, BreedStats, SubBreed


class BreedsRepo(ABC):
    @abstractmethod
    async def list(
        self, *, search: str | None = None, limit: int = 50, offset: int = 0
    ) -> tuple[list[Breed], int]: ...

    @abstractmethod
    async def get(self, breed_id: UUID) -> Breed | None: ...

    @abstractmethod
    async def get_by_name(self, name: str) -> Breed | None: ...

    @abstractmethod
    async def add(self, breed: Breed, sub_breed_names: list[str] | None = None) -> Breed: ...

    @abstractmethod
    async def update(
        self, breed_id: UUID, data: dict, sub_breed_names: list[str] | None = None
    ) -> Breed | None: ...

    @abstractmethod
    async def delete(self, breed_id: UUID) -> bool: ...

    @abstractmethod
    async def add_sub_breed(self, sub_breed: SubBreed) -> SubBreed: ...

    @abstractmethod
    async def delete_sub_breed(self, sub_breed_id: UUID) -> bool: ...

    @abstractmethod
    async def stats(self) -> BreedStats: ...
