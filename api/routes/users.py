"""User management routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import List

from api.dependencies import get_db
from api.responses import DeletedResponse
from domain.schemas.profile_schemas import UserProfileResponse, UserCreate
from services.profile_service import ProfileService
from app.exceptions import NotFoundError
from domain.mappers import UserMapper

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger("fitguide.api.users")


@router.post(
    "", response_model=UserProfileResponse, status_code=status.HTTP_201_CREATED
)
def create_user(user: UserCreate, db: Session = Depends(get_db)):
    """Create a new user from JSON body"""
    new_user = ProfileService.create_user(db, user.email, user.full_name)
    return UserMapper.to_response(new_user)


@router.get("", response_model=List[UserProfileResponse])
def get_all_users(db: Session = Depends(get_db)):
    """Return all users (no pagination)."""
    users = ProfileService.get_all_users(db)
    return [UserMapper.to_response(u) for u in users]


@router.get("/{user_id}", response_model=UserProfileResponse)
def get_user(user_id: UUID, db: Session = Depends(get_db)):
    """Get the user together with the onboarding profile."""
    user = ProfileService.get_user_profile(db, user_id)
    if not user:
        raise NotFoundError(f"User {user_id} not found")
    return UserMapper.to_response(user)


@router.delete("/{user_id}", response_model=DeletedResponse)
def delete_user(user_id: UUID, db: Session = Depends(get_db)):
    """Delete a user with their logs, plans and chat history."""
    success = ProfileService.delete_user(db, user_id)
    if not success:
        raise NotFoundError(f"User {user_id} not found")
    return DeletedResponse(deleted=str(user_id))
