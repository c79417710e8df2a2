"""
MedFlow — Демонстраційний воркфлоу медичної діагностики

Пацієнт проходить п'ять етапів майстра: дані пацієнта → аналіз симптомів →
пошук знань → маршрутизація до спеціаліста → діагноз.
"AI" імітується статичною базою знань і фіксованими затримками.

Модулі:
- config: Конфігурація системи
- schemas: Pydantic моделі даних
- knowledge: База знань, матчер, імітація AI-сервісу
- workflow: Стан майстра та контролери етапів
- api: Backend API (FastAPI)
- web_ui: Веб-інтерфейс (Streamlit)
"""

__version__ = "1.0.0"

from .config import MedFlowConfig, get_default_config
