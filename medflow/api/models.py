"""
MedFlow — API Models

Pydantic моделі для запитів та відповідей API.
"""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from medflow.schemas import (
    DiagnosisResult,
    Gender,
    PatientInfo,
    SpecialistInfo,
    SpecialistType,
    UrgencyLevel,
    WorkflowStage,
)


# ============================================================
# Session Models
# ============================================================

class SessionState(BaseModel):
    """Поточний стан сесії воркфлоу"""
    session_id: str
    current_stage: WorkflowStage
    stage_label: str

    patient_info: PatientInfo
    diagnosis_result: Optional[DiagnosisResult] = None

    is_processing: bool = False
    error: Optional[str] = None

    # Результати етапів
    analyzed_symptoms: Optional[List[str]] = None
    selected_specialist: Optional[SpecialistType] = None
    specialist_consultation: Optional[str] = None

    # Метадані
    created_at: datetime
    updated_at: datetime


class UpdatePatientRequest(BaseModel):
    """Часткове оновлення даних пацієнта"""
    age: Optional[int] = Field(default=None, ge=0, le=120)
    gender: Optional[Gender] = None
    medical_history: Optional[List[str]] = None


class AddSymptomRequest(BaseModel):
    """Новий симптом з форми"""
    name: str = ""
    duration: str = ""
    severity: int = 5
    description: str = ""

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Headache",
                "duration": "3 days",
                "severity": 6,
                "description": "Worse in the evening"
            }
        }


class SubmitPatientRequest(BaseModel):
    """Завершення форми; історія хвороб через кому"""
    medical_history: str = ""


class ProgressStepModel(BaseModel):
    progress: int
    status: str = ""


class AnalysisResponse(BaseModel):
    """Результат етапу аналізу симптомів"""
    analyzed_symptoms: List[str]
    medical_history: List[str]
    steps: List[ProgressStepModel]
    session_state: SessionState


class RetrievalResponse(BaseModel):
    """Результат етапу пошуку знань"""
    diagnosis_result: DiagnosisResult
    steps: List[ProgressStepModel]
    session_state: SessionState


class SelectSpecialistRequest(BaseModel):
    specialist: SpecialistType


class ConsultationResponse(BaseModel):
    """Висновок спеціаліста"""
    specialist: SpecialistType
    specialist_name: str
    consultation: str
    session_state: SessionState


class ConditionSummary(BaseModel):
    name: str
    description: str
    percent: int


class DiagnosisSummaryResponse(BaseModel):
    """Фінальний екран"""
    urgency_level: UrgencyLevel
    urgency_label: str
    urgency_color: str
    conditions: List[ConditionSummary]
    confidence_percent: int
    specialist_name: str
    additional_tests: List[str]


# ============================================================
# Knowledge Models
# ============================================================

class DiagnoseRequest(BaseModel):
    """Пряма діагностика за списком симптомів"""
    symptoms: List[str] = Field(default_factory=list)


class DiagnoseResponse(BaseModel):
    symptoms: List[str]
    result: DiagnosisResult
    processing_time_ms: float


class SpecialistListResponse(BaseModel):
    specialists: List[SpecialistInfo]
    total: int


# ============================================================
# Health & Info Models
# ============================================================

class HealthResponse(BaseModel):
    """Відповідь health check"""
    status: str = "ok"
    version: str
    known_symptoms: int
    specialists: int
    active_sessions: int


class ErrorResponse(BaseModel):
    """Відповідь з помилкою"""
    error: str
    detail: Optional[str] = None
