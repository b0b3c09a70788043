"""
Base repository interface for data access layer.
Repositories keep SQLAlchemy queries out of the service layer.
"""

from typing import Generic, TypeVar, Optional, List, Type
from uuid import UUID
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from abc import ABC

from app.exceptions import ServiceValidationError

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations.
    Subclasses implement ``get_by_id`` for their primary key column.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: UUID) -> Optional[ModelType]:
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement get_by_id() with specific ID field"
        )

    def get_all(self, skip: int = 0, limit: int = 100) -> List[ModelType]:
        """Get all entities with pagination"""
        return self.db.query(self.model).offset(skip).limit(limit).all()

    def create(self, entity: ModelType) -> ModelType:
        """Persist a new entity and reload it from the database"""
        self.db.add(entity)
        self.commit()
        self.db.refresh(entity)
        return entity

    def update(self, entity: ModelType) -> ModelType:
        """Commit pending changes of an entity"""
        self.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity_id: UUID) -> bool:
        """Delete entity by ID"""
        entity = self.get_by_id(entity_id)
        if entity:
            self.db.delete(entity)
            self.commit()
            return True
        return False

    def exists(self, entity_id: UUID) -> bool:
        return self.get_by_id(entity_id) is not None

    def commit(self, error_message: str = None):
        """Commit, rolling back and raising ServiceValidationError on constraint violations"""
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise ServiceValidationError(
                error_message
                or f"Invalid {self.model.__name__} data: constraint violated",
                details={"reason": str(exc.orig)},
            ) from exc
