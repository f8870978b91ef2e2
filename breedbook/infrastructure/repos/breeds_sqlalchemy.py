from __future__ import annotations

from uuid import UUID

from sqlalchemy import Select, delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from breedbook.application.errors import DuplicateNameError, InfrastructureError
from breedbook.domain.models.breed import Breed, BreedStats, SubBreed
from breedbook.domain.ports.breeds_repo import BreedsRepo
from breedbook.infrastructure.db.orm.breed import BreedORM
from breedbook.infrastructure.db.orm.sub_breed import SubBreedORM
from breedbook.utils.datetime_tz import ensure_utc, utcnow

DUPLICATE_NAME_MESSAGE = "A breed with this name already exists"


class BreedsSQLAlchemyRepository(BreedsRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _sub_breed_to_domain(self, orm: SubBreedORM) -> SubBreed:
        return SubBreed(
            id=orm.id,
            breed_id=orm.breed_id,
            name=orm.name,
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
        )

    def _to_domain(self, orm: BreedORM, sub_breeds: list[SubBreed] | None = None) -> Breed:
        return Breed(
            id=orm.id,
            name=orm.name,
            description=orm.description,
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
            sub_breeds=sub_breeds or [],
        )

    async def _sub_breeds_by_breed(self, breed_ids: list[UUID]) -> dict[UUID, list[SubBreed]]:
        grouped: dict[UUID, list[SubBreed]] = {breed_id: [] for breed_id in breed_ids}
        if not breed_ids:
            return grouped
        stmt = (
            select(SubBreedORM)
            .where(SubBreedORM.breed_id.in_(breed_ids))
            .order_by(SubBreedORM.name, SubBreedORM.id)
        )
        res = await self.session.execute(stmt)
        for orm in res.scalars().all():
            grouped[orm.breed_id].append(self._sub_breed_to_domain(orm))
        return grouped

    async def _one_with_sub_breeds(self, stmt: Select) -> Breed | None:
        res = await self.session.execute(stmt)
        orm = res.scalar_one_or_none()
        if orm is None:
            return None
        sub_breeds = await self._sub_breeds_by_breed([orm.id])
        return self._to_domain(orm, sub_breeds[orm.id])

    @staticmethod
    def _apply_search(stmt: Select, search: str | None) -> Select:
        if search:
            stmt = stmt.where(BreedORM.name.icontains(search, autoescape=True))
        return stmt

    def _new_sub_breed_rows(self, breed_id: UUID, names: list[str]) -> list[SubBreedORM]:
        rows = []
        for name in names:
            sub_breed = SubBreed.create(breed_id=breed_id, name=name)
            rows.append(
                SubBreedORM(
                    id=sub_breed.id,
                    breed_id=sub_breed.breed_id,
                    name=sub_breed.name,
                    created_at=sub_breed.created_at,
                    updated_at=sub_breed.updated_at,
                )
            )
        return rows

    async def list(
        self, *, search: str | None = None, limit: int = 50, offset: int = 0
    ) -> tuple[list[Breed], int]:
        stmt = self._apply_search(select(BreedORM), search)
        stmt = stmt.order_by(BreedORM.created_at.desc(), BreedORM.id).limit(limit).offset(offset)
        count_stmt = self._apply_search(select(func.count(BreedORM.id)), search)

        res = await self.session.execute(stmt)
        rows = res.scalars().all()
        total = (await self.session.execute(count_stmt)).scalar_one()

        sub_breeds = await self._sub_breeds_by_breed([row.id for row in rows])
        return [self._to_domain(row, sub_breeds[row.id]) for row in rows], int(total)

    async def get(self, breed_id: UUID) -> Breed | None:
        return await self._one_with_sub_breeds(select(BreedORM).where(BreedORM.id == breed_id))

    async def get_by_name(self, name: str) -> Breed | None:
        return await self._one_with_sub_breeds(select(BreedORM).where(BreedORM.name == name))

    async def add(self, breed: Breed, sub_breed_names: list[str] | None = None) -> Breed:
        orm = BreedORM(
            id=breed.id,
            name=breed.name,
            description=breed.description,
            created_at=breed.created_at,
            updated_at=breed.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateNameError(DUPLICATE_NAME_MESSAGE) from exc

        if not sub_breed_names:
            return self._to_domain(orm)
        self.session.add_all(self._new_sub_breed_rows(orm.id, sub_breed_names))
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise InfrastructureError("Failed to create sub-breeds") from exc
        # Read back so the order follows the store's collation, as on every other read
        sub_breeds = await self._sub_breeds_by_breed([orm.id])
        return self._to_domain(orm, sub_breeds[orm.id])

    async def update(
        self, breed_id: UUID, data: dict, sub_breed_names: list[str] | None = None
    ) -> Breed | None:
        stmt = (
            update(BreedORM)
            .where(BreedORM.id == breed_id)
            .values(**data, updated_at=utcnow())
            .returning(BreedORM.id)
        )
        try:
            res = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise DuplicateNameError(DUPLICATE_NAME_MESSAGE) from exc
        if res.scalar_one_or_none() is None:
            return None

        # None leaves the current sub-breeds alone; a list (even empty) replaces them all
        if sub_breed_names is not None:
            await self.session.execute(
                delete(SubBreedORM).where(SubBreedORM.breed_id == breed_id)
            )
            if sub_breed_names:
                self.session.add_all(self._new_sub_breed_rows(breed_id, sub_breed_names))
                try:
                    await self.session.flush()
                except IntegrityError as exc:
                    raise InfrastructureError("Failed to replace sub-breeds") from exc

        stmt = (
            select(BreedORM)
            .where(BreedORM.id == breed_id)
            .execution_options(populate_existing=True)
        )
        return await self._one_with_sub_breeds(stmt)

    async def delete(self, breed_id: UUID) -> bool:
        stmt = delete(BreedORM).where(BreedORM.id == breed_id).returning(BreedORM.id)
        try:
            res = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise InfrastructureError("Failed to delete breed") from exc
        return res.scalar_one_or_none() is not None

    async def add_sub_breed(self, sub_breed: SubBreed) -> SubBreed:
        orm = SubBreedORM(
            id=sub_breed.id,
            breed_id=sub_breed.breed_id,
            name=sub_breed.name,
            created_at=sub_breed.created_at,
            updated_at=sub_breed.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise InfrastructureError("Failed to create sub-breed") from exc
        return self._sub_breed_to_domain(orm)

    async def delete_sub_breed(self, sub_breed_id: UUID) -> bool:
        stmt = delete(SubBreedORM).where(SubBreedORM.id == sub_breed_id).returning(SubBreedORM.id)
        res = await self.session.execute(stmt)
        return res.scalar_one_or_none() is not None

    async def stats(self) -> BreedStats:
        total_breeds = (await self.session.execute(select(func.count(BreedORM.id)))).scalar_one()
        total_sub_breeds = (
            await self.session.execute(select(func.count(SubBreedORM.id)))
        ).scalar_one()
        return BreedStats(total_breeds=int(total_breeds), total_sub_breeds=int(total_sub_breeds))
