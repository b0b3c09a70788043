"""AI coach chat routes"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import List

from api.dependencies import get_db
from api.responses import ERROR_RESPONSES
from domain.schemas.coach_schemas import (
    CoachDataContext,
    CoachExchangeResponse,
    CoachImageMessageCreate,
    CoachMessageCreate,
    CoachMessageResponse,
    ProactiveMessageResponse,
    ShareActivityRequest,
    ShareMealRequest,
)
from services.coach_service import CoachService

router = APIRouter(prefix="/coach", tags=["Coach"])
logger = logging.getLogger("fitguide.api.coach")


@router.get("/{user_id}/messages", response_model=List[CoachMessageResponse])
def chat_history(user_id: UUID, db: Session = Depends(get_db)):
    """Conversation oldest first, starting with the coach's welcome"""
    return CoachService.get_chat_history(db, user_id)


@router.post(
    "/{user_id}/messages", response_model=CoachExchangeResponse, responses=ERROR_RESPONSES
)
def send_message(user_id: UUID, body: CoachMessageCreate, db: Session = Depends(get_db)):
    return CoachService.send_message(db, user_id, body.content)


@router.post(
    "/{user_id}/images", response_model=CoachExchangeResponse, responses=ERROR_RESPONSES
)
def send_image(user_id: UUID, body: CoachImageMessageCreate, db: Session = Depends(get_db)):
    """Ask the coach about a meal or workout-form photo"""
    return CoachService.analyze_image_message(db, user_id, body.image_url, body.content)


@router.post("/{user_id}/share-meal", response_model=CoachExchangeResponse)
def share_meal(user_id: UUID, body: ShareMealRequest, db: Session = Depends(get_db)):
    return CoachService.share_meal(db, user_id, body.meal_id)


@router.post("/{user_id}/share-activity", response_model=CoachExchangeResponse)
def share_activity(user_id: UUID, body: ShareActivityRequest, db: Session = Depends(get_db)):
    return CoachService.share_activity(db, user_id, body.activity_id)


@router.get("/{user_id}/context", response_model=CoachDataContext)
def data_context(user_id: UUID, db: Session = Depends(get_db)):
    """Meals and workouts the coach sees for the last 48 hours"""
    return CoachService.get_coach_data_context(db, user_id)


@router.get("/{user_id}/proactive", response_model=ProactiveMessageResponse)
def proactive_message(user_id: UUID, db: Session = Depends(get_db)):
    return ProactiveMessageResponse(
        message=CoachService.generate_proactive_message(db, user_id)
    )
