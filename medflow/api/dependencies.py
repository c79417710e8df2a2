"""
MedFlow — API Dependencies

Dependency Injection для FastAPI.
Сервіс "AI" та сховище сесій воркфлоу в пам'яті.
"""

import logging
from typing import Dict, List, Optional
from datetime import datetime, timedelta
import threading

from medflow.config import MedFlowConfig
from medflow.knowledge import MedicalAIService
from medflow.workflow import MedicalWorkflow

from .config import config

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Менеджер сесій воркфлоу.
    Зберігає активні сесії в пам'яті. Singleton pattern.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.sessions: Dict[str, MedicalWorkflow] = {}
        self.lock = threading.Lock()

    def create_session(self) -> MedicalWorkflow:
        """Створити нову сесію"""
        workflow = MedicalWorkflow()

        with self.lock:
            # Очистка старих сесій
            self._cleanup_old_sessions()
            self._evict_over_limit()

            self.sessions[workflow.session_id] = workflow

        logger.info("🆕 Session created: %s", workflow.session_id)
        return workflow

    def get_session(self, session_id: str) -> Optional[MedicalWorkflow]:
        """Отримати сесію"""
        return self.sessions.get(session_id)

    def delete_session(self, session_id: str) -> bool:
        """Видалити сесію"""
        with self.lock:
            if session_id in self.sessions:
                del self.sessions[session_id]
                logger.info("🗑️ Session deleted: %s", session_id)
                return True
        return False

    def list_session_ids(self) -> List[str]:
        return list(self.sessions.keys())

    def get_active_count(self) -> int:
        """Кількість активних сесій"""
        return len(self.sessions)

    def clear(self) -> None:
        with self.lock:
            self.sessions.clear()

    def _cleanup_old_sessions(self):
        """Видалити застарілі сесії"""
        timeout = timedelta(minutes=config.session_timeout_minutes)
        now = datetime.now()

        expired = [
            sid for sid, workflow in self.sessions.items()
            if now - workflow.updated_at > timeout
        ]

        for sid in expired:
            del self.sessions[sid]

        if expired:
            logger.info("🧹 Expired sessions removed: %d", len(expired))

    def _evict_over_limit(self):
        """Звільнити місце під нову сесію (найстаріші першими)"""
        overflow = len(self.sessions) - config.max_sessions + 1
        if overflow <= 0:
            return

        oldest = sorted(self.sessions.values(), key=lambda w: w.updated_at)[:overflow]
        for workflow in oldest:
            del self.sessions[workflow.session_id]


# Глобальні менеджери
session_manager = SessionManager()
ai_service = MedicalAIService(
    MedFlowConfig(delays=MedFlowConfig().delays.scaled(config.delay_scale))
)


# Dependency functions для FastAPI
def get_sessions() -> SessionManager:
    """Dependency: отримати менеджер сесій"""
    return session_manager


def get_service() -> MedicalAIService:
    """Dependency: отримати AI-сервіс"""
    return ai_service
