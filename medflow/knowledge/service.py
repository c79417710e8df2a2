"""
MedFlow — Імітація AI-сервісу

Асинхронні обгортки над матчером: кожен "виклик API" чекає
фіксовану затримку з конфігурації, потім повертає статичний результат.
"""

import asyncio
import logging
from typing import List, Optional

from medflow.config import MedFlowConfig, get_default_config
from medflow.schemas import DiagnosisResult, PatientInfo, SpecialistType

from .matcher import (
    KnowledgeMatcher,
    analyze_patient_symptoms,
    get_specialist_diagnosis,
)

logger = logging.getLogger(__name__)


class MedicalAIService:
    """
    Сервіс "AI-діагностики" з імітацією затримок.

    Приклад:
        service = MedicalAIService(MedFlowConfig.instant())

        names = await service.analyze_patient_symptoms(patient)
        result = await service.query_medical_knowledge(names)
        text = await service.get_specialist_diagnosis(
            result.recommended_specialist, patient, result
        )
    """

    def __init__(self, config: Optional[MedFlowConfig] = None):
        self.config = config or get_default_config()
        self.matcher = KnowledgeMatcher(self.config.matcher)

    async def pause(self, seconds: float) -> None:
        if seconds > 0:
            await asyncio.sleep(seconds)

    async def analyze_patient_symptoms(self, patient_info: PatientInfo) -> List[str]:
        """Імітація LLM-аналізу симптомів"""
        await self.pause(self.config.delays.analysis)
        names = analyze_patient_symptoms(patient_info)
        logger.debug("Analyzed %d symptoms: %s", len(names), names)
        return names

    async def query_medical_knowledge(self, symptom_names: List[str]) -> DiagnosisResult:
        """Імітація RAG-запиту до медичної бази знань"""
        await self.pause(self.config.delays.knowledge)
        result = self.matcher.match(symptom_names)
        logger.info(
            "🔍 Knowledge query: %d symptoms → %d conditions, specialist=%s, urgency=%s",
            len(symptom_names),
            len(result.possible_conditions),
            result.recommended_specialist.value,
            result.urgency_level.value,
        )
        return result

    async def get_specialist_diagnosis(
        self,
        specialist: SpecialistType,
        patient_info: PatientInfo,
        preliminary: DiagnosisResult,
    ) -> str:
        """Імітація консультації агента-спеціаліста"""
        await self.pause(self.config.delays.specialist)
        return get_specialist_diagnosis(specialist, patient_info, preliminary)
