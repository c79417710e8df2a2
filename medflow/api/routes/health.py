"""
MedFlow — Health Routes

Health check та інформація про систему.
"""

from fastapi import APIRouter, Depends

from medflow import __version__
from medflow.knowledge import known_symptoms, list_specialists

from ..dependencies import get_sessions, SessionManager
from ..models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    sessions: SessionManager = Depends(get_sessions)
) -> HealthResponse:
    """
    Перевірка стану сервера.

    Повертає:
    - Статус сервера
    - Кількість симптомів у базі знань та спеціалістів
    - Кількість активних сесій
    """
    return HealthResponse(
        status="ok",
        version=__version__,
        known_symptoms=len(known_symptoms()),
        specialists=len(list_specialists()),
        active_sessions=sessions.get_active_count()
    )


@router.get("/")
async def root():
    """Головна сторінка API"""
    return {
        "name": "MedFlow API",
        "version": __version__,
        "description": "Демонстраційний воркфлоу медичної діагностики",
        "docs": "/docs",
        "health": "/health",
    }
