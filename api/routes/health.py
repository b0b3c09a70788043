"""Health check routes"""

from fastapi import APIRouter
import logging

from adapters import ai_gateway, mongo_adapter
from api.responses import HealthResponse
from app.config import settings

router = APIRouter(tags=["Health"])
logger = logging.getLogger("fitguide.api.health")


@router.get("/health-check", response_model=HealthResponse)
def health_check():
    """Basic health check endpoint with the state of the optional backends"""
    return HealthResponse(
        status="ok",
        service=settings.app_name,
        version=settings.app_version,
        document_store=mongo_adapter.is_connected(),
        ai_gateway=ai_gateway.is_configured(),
    )
