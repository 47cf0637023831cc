from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar


T = TypeVar('T')


class IRepository(ABC, Generic[T]):
    """
    Generic persistence port

    Criteria are column=value equality filters, e.g. find(trip_id=1, is_cancelled=False).
    Writes are flushed to the unit of work session; nothing is committed here.
    """

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[T]:
        pass

    @abstractmethod
    async def find(self, **criteria: Any) -> list[T]:
        pass

    @abstractmethod
    async def add(self, entity: T) -> T:
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        pass

    @abstractmethod
    async def delete(self, entity_id: int) -> None:
        pass

    @abstractmethod
    async def count(self, **criteria: Any) -> int:
        pass

    @abstractmethod
    async def exists(self, **criteria: Any) -> bool:
        pass
