"""
User Repository - Data access layer for user accounts and onboarding profiles
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import AppUser
from app.exceptions import ServiceValidationError


class UserRepository(BaseRepository[AppUser]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, AppUser)

    def get_by_id(self, user_id: UUID) -> Optional[AppUser]:
        return self.db.query(AppUser).filter(AppUser.user_id == user_id).first()

    def get_all_users(self) -> List[AppUser]:
        """Every user, oldest account first"""
        return self.db.query(AppUser).order_by(AppUser.created_at, AppUser.email).all()

    def get_by_email(self, email: str) -> Optional[AppUser]:
        """Get user by email"""
        return self.db.query(AppUser).filter(AppUser.email == email).first()

    def create_user(
        self, email: str, full_name: str = None, daily_calorie_goal: int = 2500
    ) -> AppUser:
        """Create a new user"""
        user = AppUser(
            email=email, full_name=full_name, daily_calorie_goal=daily_calorie_goal
        )
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            raise ServiceValidationError(f"User with email {email} already exists")

    def update_fields(self, user: AppUser, **fields) -> AppUser:
        """Assign the given profile columns and commit"""
        for key, value in fields.items():
            if not hasattr(user, key):
                raise ValueError(f"Unknown profile field: {key}")
            setattr(user, key, value)
        return self.update(user)

    def delete_user(self, user_id: UUID) -> bool:
        """Delete user and all related rows (cascade)"""
        return self.delete(user_id)
