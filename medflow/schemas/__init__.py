"""
MedFlow — Модуль схем даних (schemas)

Pydantic моделі для валідації та серіалізації даних.

Компоненти:
- patient.py: Gender, Symptom, PatientInfo
- diagnosis.py: SpecialistType, UrgencyLevel, PossibleCondition, DiagnosisResult
- workflow.py: WorkflowStage, STAGE_SEQUENCE

Приклад використання:
    from medflow.schemas import PatientInfo, Symptom, Gender

    patient = PatientInfo(
        age=35,
        gender=Gender.FEMALE,
        current_symptoms=[
            Symptom(name="Fever", severity=6, duration="2 days"),
        ]
    )

    # Серіалізація в JSON
    json_data = patient.model_dump_json()

    # Десеріалізація з JSON
    patient_loaded = PatientInfo.model_validate_json(json_data)
"""

# Patient schemas
from .patient import (
    Gender,
    SeverityBand,
    Symptom,
    PatientInfo,
)

# Diagnosis schemas
from .diagnosis import (
    SpecialistType,
    SpecialistInfo,
    UrgencyLevel,
    PossibleCondition,
    DiagnosisResult,
)

# Workflow schemas
from .workflow import (
    WorkflowStage,
    STAGE_SEQUENCE,
    STAGE_LABELS,
)


__all__ = [
    # Patient
    "Gender",
    "SeverityBand",
    "Symptom",
    "PatientInfo",

    # Diagnosis
    "SpecialistType",
    "SpecialistInfo",
    "UrgencyLevel",
    "PossibleCondition",
    "DiagnosisResult",

    # Workflow
    "WorkflowStage",
    "STAGE_SEQUENCE",
    "STAGE_LABELS",
]
