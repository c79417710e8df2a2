"""
MedFlow — Модуль бази знань (knowledge)

Статичні таблиці та rule-based матчер, що імітують RAG + LLM.

Компоненти:
- knowledge_base.py: таблиці симптомів, умов, обстежень, спеціалістів
- matcher.py: KnowledgeMatcher та чисті функції
- service.py: MedicalAIService з імітацією затримок

Приклад використання:
    from medflow.knowledge import query_medical_knowledge

    result = query_medical_knowledge(["headache", "fever"])

    for c in result.possible_conditions:
        print(f"{c.name}: {c.percent}%")
"""

from .knowledge_base import (
    KnowledgeEntry,
    MEDICAL_KNOWLEDGE_BASE,
    CONDITION_DESCRIPTIONS,
    CONDITION_TESTS,
    SPECIALIST_DATABASE,
    COMMON_SYMPTOMS,
    known_symptoms,
    get_specialist_info,
    list_specialists,
)
from .matcher import (
    KnowledgeMatcher,
    analyze_patient_symptoms,
    query_medical_knowledge,
    get_recommended_tests,
    get_specialist_diagnosis,
)
from .service import MedicalAIService


__all__ = [
    # Tables
    "KnowledgeEntry",
    "MEDICAL_KNOWLEDGE_BASE",
    "CONDITION_DESCRIPTIONS",
    "CONDITION_TESTS",
    "SPECIALIST_DATABASE",
    "COMMON_SYMPTOMS",
    "known_symptoms",
    "get_specialist_info",
    "list_specialists",

    # Matcher
    "KnowledgeMatcher",
    "analyze_patient_symptoms",
    "query_medical_knowledge",
    "get_recommended_tests",
    "get_specialist_diagnosis",

    # Service
    "MedicalAIService",
]
