"""
MedFlow — API Configuration

Налаштування FastAPI сервера.
"""

from dataclasses import dataclass, field
import os


@dataclass
class APIConfig:
    """Конфігурація API сервера"""

    # Сервер
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = True
    reload: bool = False

    # CORS
    cors_origins: list = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list = field(default_factory=lambda: ["*"])
    cors_allow_headers: list = field(default_factory=lambda: ["*"])

    # Логування
    log_level: str = "INFO"

    # Сесії
    max_sessions: int = 1000
    session_timeout_minutes: int = 60

    # Множник штучних затримок (0 = миттєво)
    delay_scale: float = 1.0

    # API
    api_prefix: str = "/api"
    api_title: str = "MedFlow API"
    api_description: str = "Демонстраційний воркфлоу медичної діагностики"

    @classmethod
    def from_env(cls) -> 'APIConfig':
        """Створити конфігурацію з environment variables"""
        return cls(
            host=os.getenv("MEDFLOW_HOST", "0.0.0.0"),
            port=int(os.getenv("MEDFLOW_PORT", "8000")),
            debug=os.getenv("MEDFLOW_DEBUG", "true").lower() == "true",
            log_level=os.getenv("MEDFLOW_LOG_LEVEL", "INFO").upper(),
            max_sessions=int(os.getenv("MEDFLOW_MAX_SESSIONS", "1000")),
            session_timeout_minutes=int(os.getenv("MEDFLOW_SESSION_TIMEOUT", "60")),
            delay_scale=float(os.getenv("MEDFLOW_DELAY_SCALE", "1.0")),
        )


# Глобальна конфігурація
config = APIConfig.from_env()
