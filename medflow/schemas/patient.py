"""
MedFlow — Схеми даних пацієнта

Pydantic моделі для:
- Symptom: окремий симптом зі severity 1–10
- PatientInfo: дані, які пацієнт заповнює у формі
"""

import uuid
from typing import List
from enum import Enum
from pydantic import BaseModel, Field, field_validator


class Gender(str, Enum):
    """Стать пацієнта ("" — ще не обрано)"""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    UNSPECIFIED = ""


class SeverityBand(str, Enum):
    """Група інтенсивності для відображення"""
    MILD = "mild"           # 1-3
    MODERATE = "moderate"   # 4-6
    HIGH = "high"           # 7-10


def new_symptom_id() -> str:
    return str(uuid.uuid4())


class Symptom(BaseModel):
    """
    Симптом пацієнта.

    Назва зберігається як ввів користувач (лише обрізаються пробіли),
    у нижній регістр її переводить аналіз симптомів.

    Приклад:
        symptom = Symptom(
            name="Headache",
            severity=7,
            duration="3 days",
        )
    """
    id: str = Field(default_factory=new_symptom_id, description="Ідентифікатор (uuid4)")
    name: str = Field(..., description="Назва симптому")
    severity: int = Field(
        default=5,
        ge=1,
        le=10,
        description="Інтенсивність симптому [1, 10]"
    )
    duration: str = Field(default="", description="Тривалість, напр. '3 days'")
    description: str = Field(default="", description="Опис у вільній формі")

    @field_validator('name')
    @classmethod
    def strip_name(cls, v: str) -> str:
        """Назва не може бути порожньою"""
        v = v.strip()
        if not v:
            raise ValueError("Symptom name must not be empty")
        return v

    @field_validator('duration', 'description')
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()

    @property
    def severity_band(self) -> SeverityBand:
        if self.severity >= 7:
            return SeverityBand.HIGH
        elif self.severity >= 4:
            return SeverityBand.MODERATE
        return SeverityBand.MILD

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Headache",
                "severity": 7,
                "duration": "3 days",
                "description": "Pressure around the temples"
            }
        }


class PatientInfo(BaseModel):
    """
    Дані пацієнта з форми.

    age == 0 означає "вік не введено".
    """
    age: int = Field(default=0, ge=0, le=120, description="Вік")
    gender: Gender = Field(default=Gender.UNSPECIFIED, description="Стать")
    medical_history: List[str] = Field(
        default_factory=list,
        description="Попередні захворювання"
    )
    current_symptoms: List[Symptom] = Field(
        default_factory=list,
        description="Поточні симптоми"
    )

    @property
    def symptom_names(self) -> List[str]:
        """Назви симптомів у порядку введення"""
        return [s.name for s in self.current_symptoms]

    def find_symptom(self, symptom_id: str):
        for s in self.current_symptoms:
            if s.id == symptom_id:
                return s
        return None

    class Config:
        validate_assignment = True
        json_schema_extra = {
            "example": {
                "age": 35,
                "gender": "female",
                "medical_history": ["Asthma"],
                "current_symptoms": [
                    {"name": "Fever", "severity": 6, "duration": "2 days"},
                    {"name": "Headache", "severity": 4, "duration": "1 day"}
                ]
            }
        }
