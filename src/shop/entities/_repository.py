"""Generic data-access layer shared by the entity repositories."""

from typing import Generic, TypeVar

from sqlmodel import Session, select

from src.shop.entities._base import Entity, EntityTable

E = TypeVar("E", bound=Entity)
T = TypeVar("T", bound=EntityTable)


class EntityRepository(Generic[E, T]):
    """CRUD over one table, converting rows to immutable entities.

    Repositories only flush; committing is left to the caller's unit of work.
    """

    entity_cls: type[E]
    table_cls: type[T]

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, row: T) -> E:
        return self.entity_cls.model_validate(row, from_attributes=True)

    def get(self, entity_id: str) -> E | None:
        row = self._session.get(self.table_cls, entity_id)
        if row is None:
            return None
        return self._to_entity(row)

    def exists(self, entity_id: str) -> bool:
        return self._session.get(self.table_cls, entity_id) is not None

    def create(self, entity: E) -> E:
        row = self.table_cls.model_validate(entity.model_dump())
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def update(self, entity: E) -> E:
        row = self._session.get(self.table_cls, entity.id)
        if row is None:
            raise ValueError(f"{self.entity_cls.__name__} {entity.id} not found")
        data = entity.model_dump(exclude={"id", "created_at", "updated_at"})
        for key, value in data.items():
            setattr(row, key, value)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def delete(self, entity_id: str) -> bool:
        row = self._session.get(self.table_cls, entity_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def list_all(self) -> list[E]:
        rows = self._session.exec(select(self.table_cls)).all()
        return [self._to_entity(row) for row in rows]
