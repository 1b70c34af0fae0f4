"""Shared CRUD operations for entity repositories."""

from typing import Any, Generic, TypeVar

import structlog
from sqlalchemy import inspect, select
from sqlalchemy.orm import MANYTOONE, InstrumentedAttribute, Session

from studyhub.database import Base

ModelT = TypeVar("ModelT", bound=Base)

logger = structlog.get_logger(__name__)


class Repository(Generic[ModelT]):
    """Repository for one ORM model, bound to a session."""

    model: type[ModelT]

    def __init__(self, db: Session) -> None:
        """Initialize repository with database session."""
        self.db = db

    def get_by_id(self, entity_id: int) -> ModelT | None:
        """Get an entity by its ID."""
        return self.db.get(self.model, entity_id)

    def list_by(self, column: InstrumentedAttribute[Any], value: object) -> list[ModelT]:
        """Get all entities whose ``column`` equals ``value``, in insertion order."""
        stmt = select(self.model).where(column == value).order_by(self.model.id)  # type: ignore[attr-defined]
        return list(self.db.execute(stmt).scalars().all())

    def find_missing_parent(self, fields: dict[str, Any]) -> tuple[str, int] | None:
        """
        Find a foreign key in ``fields`` whose parent row does not exist.

        Returns the parent model name and the dangling id, or None when every
        referenced parent exists.
        """
        for relationship in inspect(self.model).relationships:
            if relationship.direction is not MANYTOONE:
                continue
            parent = relationship.mapper.class_
            for column in relationship.local_columns:
                parent_id = fields.get(column.key)
                if parent_id is not None and self.db.get(parent, parent_id) is None:
                    return parent.__name__, parent_id
        return None

    def create(self, **fields: Any) -> ModelT:  # noqa: ANN401
        """Insert a new entity and load its server-assigned values."""
        entity = self.model(**fields)
        self.db.add(entity)
        self.db.flush()
        self.db.refresh(entity)
        logger.info("entity_created", entity=self.model.__name__, id=entity.id)  # type: ignore[attr-defined]
        return entity

    def update(self, entity_id: int, **fields: Any) -> ModelT | None:  # noqa: ANN401
        """
        Apply field changes to an entity.

        Returns the updated entity if found, None otherwise.
        """
        entity = self.get_by_id(entity_id)
        if entity is None:
            return None

        for name, value in fields.items():
            setattr(entity, name, value)

        self.db.flush()
        self.db.refresh(entity)
        logger.info(
            "entity_updated", entity=self.model.__name__, id=entity_id, fields=sorted(fields)
        )
        return entity

    def delete(self, entity_id: int) -> bool:
        """
        Delete an entity together with its dependent rows.

        Returns True if deleted, False if there was nothing to delete.
        """
        entity = self.get_by_id(entity_id)
        if entity is None:
            return False
        self.db.delete(entity)
        self.db.flush()
        logger.info("entity_deleted", entity=self.model.__name__, id=entity_id)
        return True
