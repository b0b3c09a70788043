"""
API dependencies for dependency injection
"""

from typing import Generator
from uuid import UUID

from fastapi import Depends, Path
from sqlalchemy.orm import Session

from domain.models import AppUser, get_db_session
from repositories import UserRepository
from app.exceptions import NotFoundError


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_existing_user(
    user_id: UUID = Path(..., description="Owner of the requested data"),
    db: Session = Depends(get_db),
) -> AppUser:
    """Resolve the ``user_id`` path parameter, 404 when there is no such user"""
    user = UserRepository(db).get_by_id(user_id)
    if not user:
        raise NotFoundError(f"User {user_id} not found")
    return user
