"""
MedFlow — Схеми результатів діагностики

Pydantic моделі для:
- SpecialistType / SpecialistInfo: довідник спеціалістів
- UrgencyLevel: впорядкована терміновість
- PossibleCondition: одна ймовірна умова
- DiagnosisResult: результат запиту до бази знань
"""

import math
from typing import Dict, List, Optional
from enum import Enum
from pydantic import BaseModel, Field


class SpecialistType(str, Enum):
    """
    Категорія спеціаліста.

    Порядок оголошення важливий: при рівній кількості голосів
    перемагає той, хто оголошений раніше.
    """
    GENERAL_PRACTITIONER = "general_practitioner"
    CARDIOLOGIST = "cardiologist"
    NEUROLOGIST = "neurologist"
    GASTROENTEROLOGIST = "gastroenterologist"
    DERMATOLOGIST = "dermatologist"
    ORTHOPEDIST = "orthopedist"
    PSYCHIATRIST = "psychiatrist"
    PULMONOLOGIST = "pulmonologist"
    ENDOCRINOLOGIST = "endocrinologist"
    EMERGENCY = "emergency"

    @property
    def display_name(self) -> str:
        """general_practitioner → General Practitioner"""
        return " ".join(word.capitalize() for word in self.value.split("_"))


class UrgencyLevel(str, Enum):
    """Рівень терміновості: low < medium < high < emergency"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    EMERGENCY = "emergency"

    @property
    def rank(self) -> int:
        return _URGENCY_ORDER.index(self)

    @classmethod
    def from_rank(cls, rank: int) -> "UrgencyLevel":
        return _URGENCY_ORDER[rank]

    @property
    def label(self) -> str:
        """'high' → 'High Urgency'"""
        return f"{self.value.capitalize()} Urgency"


_URGENCY_ORDER = [
    UrgencyLevel.LOW,
    UrgencyLevel.MEDIUM,
    UrgencyLevel.HIGH,
    UrgencyLevel.EMERGENCY,
]


def to_percent(value: float) -> int:
    """0.425 → 43 (половина округлюється вгору)"""
    return int(math.floor(value * 100 + 0.5))


class SpecialistInfo(BaseModel):
    """Запис довідника спеціалістів"""
    type: SpecialistType
    name: str
    description: str
    icon: str = Field(..., description="Ідентифікатор іконки")
    conditions: List[str] = Field(
        default_factory=list,
        description="Типові стани, з якими працює спеціаліст"
    )


class PossibleCondition(BaseModel):
    """
    Одна ймовірна умова (діагноз-кандидат).

    Приклад:
        condition = PossibleCondition(
            name="Migraine",
            probability=0.5,
            description="A neurological condition..."
        )
    """
    name: str = Field(..., description="Назва умови")
    probability: float = Field(..., ge=0.0, le=1.0, description="Ймовірність [0, 1]")
    description: str = Field(default="")

    @property
    def percent(self) -> int:
        """Ймовірність у відсотках (округлено)"""
        return to_percent(self.probability)

    class Config:
        frozen = True


class DiagnosisResult(BaseModel):
    """
    Результат запиту до бази знань.

    Створюється один раз за прохід воркфлоу та не змінюється до скидання.
    """
    possible_conditions: List[PossibleCondition] = Field(
        default_factory=list,
        description="Умови, відсортовані за ймовірністю (не більше 5)"
    )
    confidence: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="Середня ймовірність усіх знайдених умов"
    )
    recommended_specialist: SpecialistType = Field(
        default=SpecialistType.GENERAL_PRACTITIONER
    )
    additional_tests: Optional[List[str]] = Field(
        default=None,
        description="Рекомендовані обстеження"
    )
    urgency_level: UrgencyLevel = Field(default=UrgencyLevel.LOW)

    @property
    def top_condition(self) -> Optional[PossibleCondition]:
        return self.possible_conditions[0] if self.possible_conditions else None

    @property
    def confidence_percent(self) -> int:
        return to_percent(self.confidence)

    @property
    def has_matches(self) -> bool:
        return bool(self.possible_conditions)

    def to_summary(self) -> Dict:
        """Короткий підсумок для UI"""
        return {
            "top_condition": self.top_condition.name if self.top_condition else None,
            "confidence": self.confidence,
            "specialist": self.recommended_specialist.value,
            "urgency": self.urgency_level.value,
            "conditions_count": len(self.possible_conditions),
        }

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "possible_conditions": [
                    {"name": "Tension Headache", "probability": 0.7},
                    {"name": "Viral Infection", "probability": 0.7},
                ],
                "confidence": 0.52,
                "recommended_specialist": "general_practitioner",
                "additional_tests": ["Physical examination"],
                "urgency_level": "high"
            }
        }
