from typing import Any, Generic, Optional, TypeVar

from pydantic.alias_generators import to_camel
from sqlalchemy import select
from sqlalchemy.orm import Session

from supply_api.core.errors import NotFoundError, ValidationError

ModelT = TypeVar("ModelT")


class CrudService(Generic[ModelT]):
    """Plain list/get/create/update/delete over one mapped table."""

    def __init__(self, model: type[ModelT], label: str):
        self.model = model
        self.label = label
        self.primary_key = model.__mapper__.primary_key[0]

    def list_all(self, db: Session) -> list[ModelT]:
        stmt = select(self.model).order_by(self.primary_key)
        return list(db.execute(stmt).scalars().all())

    def find(self, db: Session, entity_id: int) -> Optional[ModelT]:
        return db.get(self.model, entity_id)

    def get(self, db: Session, entity_id: int) -> ModelT:
        entity = self.find(db, entity_id)
        if entity is None:
            raise NotFoundError(self.label, entity_id)
        return entity

    def create(self, db: Session, data: dict[str, Any]) -> ModelT:
        entity = self.model(**data)
        db.add(entity)
        db.commit()
        db.refresh(entity)
        return entity

    def update(self, db: Session, entity_id: int, data: dict[str, Any]) -> ModelT:
        entity = self.get(db, entity_id)
        self._reject_nulls(data)
        for field, value in data.items():
            setattr(entity, field, value)
        db.commit()
        db.refresh(entity)
        return entity

    def _reject_nulls(self, data: dict[str, Any]) -> None:
        columns = self.model.__mapper__.columns
        for field, value in data.items():
            if value is None and field in columns and not columns[field].nullable:
                raise ValidationError("{} cannot be null".format(to_camel(field)))

    def delete(self, db: Session, entity_id: int) -> None:
        entity = self.get(db, entity_id)
        db.delete(entity)
        db.commit()


__all__ = ["CrudService"]
