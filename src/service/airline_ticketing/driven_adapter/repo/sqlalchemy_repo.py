from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import Base
from src.platform.exception.exceptions import ConflictError
from src.service.airline_ticketing.app.interface.i_repository import IRepository


ModelT = TypeVar('ModelT', bound=Base)
EntityT = TypeVar('EntityT')


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite hands back naive datetimes; everything in the domain is UTC-aware"""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class SqlAlchemyRepo(IRepository[EntityT], Generic[ModelT, EntityT]):
    """
    IRepository over one ORM model, bound to the unit of work session.

    Subclasses set `model` and provide the entity <-> column mapping.
    """

    model: type[ModelT]

    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    def _to_entity(self, db_row: ModelT) -> EntityT:
        raise NotImplementedError

    def _to_values(self, entity: EntityT) -> dict[str, Any]:
        raise NotImplementedError

    def _where(self, criteria: dict[str, Any]) -> list[Any]:
        return [getattr(self.model, column) == value for column, value in criteria.items()]

    async def get_by_id(self, entity_id: int, *, for_update: bool = False) -> Optional[EntityT]:
        stmt = (
            select(self.model)
            .where(self.model.id == entity_id)  # type: ignore[attr-defined]
            .execution_options(populate_existing=True)
        )
        if for_update:
            stmt = stmt.with_for_update()
        db_row = (await self.session.execute(stmt)).scalar_one_or_none()
        return self._to_entity(db_row) if db_row else None

    async def find(self, **criteria: Any) -> list[EntityT]:
        stmt = (
            select(self.model)
            .where(*self._where(criteria))
            .order_by(self.model.id)  # type: ignore[attr-defined]
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return [self._to_entity(db_row) for db_row in result.scalars().all()]

    async def add(self, entity: EntityT) -> EntityT:
        db_row = self.model(**self._to_values(entity))
        self.session.add(db_row)
        await self._flush()
        return self._to_entity(db_row)

    async def update(self, entity: EntityT) -> EntityT:
        entity_id = getattr(entity, 'id')
        try:
            await self.session.execute(
                update(self.model)
                .where(self.model.id == entity_id)  # type: ignore[attr-defined]
                .values(**self._to_values(entity))
                .execution_options(synchronize_session=False)
            )
        except IntegrityError as e:
            raise ConflictError(f'Constraint violated: {e.orig}') from e
        return entity

    async def delete(self, entity_id: int) -> None:
        await self.session.execute(
            delete(self.model)
            .where(self.model.id == entity_id)  # type: ignore[attr-defined]
            .execution_options(synchronize_session=False)
        )

    async def count(self, **criteria: Any) -> int:
        stmt = select(func.count()).select_from(self.model).where(*self._where(criteria))
        return int((await self.session.execute(stmt)).scalar_one())

    async def exists(self, **criteria: Any) -> bool:
        return await self.count(**criteria) > 0

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise ConflictError(f'Constraint violated: {e.orig}') from e
