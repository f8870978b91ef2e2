from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class SubBreed:
    id: UUID
    breed_id: UUID
    name: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, breed_id: UUID, name: str) -> SubBreed:
        now = datetime.now(timezone.utc)
        return cls(id=uuid4(), breed_id=breed_id, name=name, created_at=now, updated_at=now)


@dataclass(slots=True)
class Breed:
    id: UUID
    name: str
    description: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    # Not stored on the breed row; attached by the repository at read time
    sub_breeds: list[SubBreed] = field(default_factory=list)

    @classmethod
    def create(cls, name: str, *, description: str | None = None) -> Breed:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            name=name,
            description=description,
            created_at=now,
            updated_at=now,
        )


@dataclass(slots=True)
class BreedStats:
    total_breeds: int
    total_sub_breeds: int
