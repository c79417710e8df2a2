"""
MedFlow — Стан воркфлоу

MedicalWorkflow зберігає спільний стан майстра:
- Поточний етап
- Дані, які вводить пацієнт
- Останній результат діагностики
- Прапорець обробки та повідомлення про помилку
"""

from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field
from datetime import datetime
import uuid

from medflow.schemas import (
    DiagnosisResult,
    PatientInfo,
    SpecialistType,
    Symptom,
    WorkflowStage,
)


@dataclass
class MedicalWorkflow:
    """
    Стан одного проходу майстра.

    Приклад:
        workflow = MedicalWorkflow()

        workflow.update_patient_info(age=35, gender="female")
        workflow.add_symptom(Symptom(name="Fever", duration="2 days"))

        workflow.proceed_to_next_stage()
        print(workflow.current_stage)  # WorkflowStage.SYMPTOM_ANALYSIS

        workflow.reset()
    """

    session_id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])

    current_stage: WorkflowStage = WorkflowStage.PATIENT_INPUT
    patient_info: PatientInfo = field(default_factory=PatientInfo)
    diagnosis_result: Optional[DiagnosisResult] = None

    is_processing: bool = False
    error: Optional[str] = None

    # Результати окремих етапів (None: етап ще не виконано)
    analyzed_symptoms: Optional[List[str]] = None
    selected_specialist: Optional[SpecialistType] = None
    specialist_consultation: Optional[str] = None

    # Timestamps
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def _touch(self) -> None:
        self.updated_at = datetime.now()

    def update_patient_info(self, **info: Any) -> None:
        """
        Часткове оновлення даних пацієнта (shallow merge).

        Невідомі поля — ValueError. Значення валідуються схемою.
        """
        unknown = set(info) - set(PatientInfo.model_fields)
        if unknown:
            raise ValueError(f"Unknown patient fields: {', '.join(sorted(unknown))}")

        merged = self.patient_info.model_dump()
        merged.update(info)
        self.patient_info = PatientInfo.model_validate(merged)
        self._touch()

    def add_symptom(self, symptom: Symptom) -> None:
        """Додати симптом в кінець списку"""
        self.patient_info = self.patient_info.model_copy(
            update={"current_symptoms": [*self.patient_info.current_symptoms, symptom]}
        )
        self._touch()

    def remove_symptom(self, symptom_id: str) -> bool:
        """Видалити симптом за id. Невідомий id — нічого не робить."""
        symptoms = self.patient_info.current_symptoms
        remaining = [s for s in symptoms if s.id != symptom_id]
        if len(remaining) == len(symptoms):
            return False

        self.patient_info = self.patient_info.model_copy(
            update={"current_symptoms": remaining}
        )
        self._touch()
        return True

    def proceed_to_next_stage(self) -> WorkflowStage:
        """Перейти на наступний етап. На останньому етапі — без змін."""
        next_stage = self.current_stage.next()
        if next_stage is not None:
            self.current_stage = next_stage
            self._touch()
        return self.current_stage

    def set_stage(self, stage: WorkflowStage) -> None:
        self.current_stage = WorkflowStage(stage)
        self._touch()

    def set_diagnosis_result(self, result: DiagnosisResult) -> None:
        self.diagnosis_result = result
        self._touch()

    def set_specialist(
        self,
        specialist: SpecialistType,
        consultation: Optional[str] = None,
    ) -> None:
        """Обраний спеціаліст і його висновок (None — ще не консультувались)"""
        self.selected_specialist = SpecialistType(specialist)
        self.specialist_consultation = consultation
        self._touch()

    def set_processing(self, is_processing: bool) -> None:
        self.is_processing = is_processing
        self._touch()

    def set_error(self, error: Optional[str]) -> None:
        self.error = error
        self._touch()

    def reset(self) -> None:
        """Повне скидання: етап, дані пацієнта, діагноз, помилка"""
        self.current_stage = WorkflowStage.PATIENT_INPUT
        self.patient_info = PatientInfo()
        self.diagnosis_result = None
        self.error = None
        self.analyzed_symptoms = None
        self.selected_specialist = None
        self.specialist_consultation = None
        self._touch()

    def require_stage(self, stage: WorkflowStage) -> None:
        """Перевірити, що воркфлоу на потрібному етапі"""
        if self.current_stage != stage:
            raise WrongStageError(
                f"Workflow is at stage '{self.current_stage.value}', "
                f"expected '{stage.value}'"
            )

    @property
    def is_complete(self) -> bool:
        return self.current_stage.is_last

    def to_dict(self) -> Dict[str, Any]:
        """Конвертувати в словник для API"""
        return {
            "session_id": self.session_id,
            "current_stage": self.current_stage.value,
            "stage_label": self.current_stage.label,
            "patient_info": self.patient_info.model_dump(mode="json"),
            "diagnosis_result": (
                self.diagnosis_result.model_dump(mode="json")
                if self.diagnosis_result else None
            ),
            "is_processing": self.is_processing,
            "error": self.error,
            "analyzed_symptoms": self.analyzed_symptoms,
            "selected_specialist": (
                self.selected_specialist.value if self.selected_specialist else None
            ),
            "specialist_consultation": self.specialist_consultation,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    def __repr__(self) -> str:
        return (
            f"MedicalWorkflow("
            f"id={self.session_id}, "
            f"stage={self.current_stage.value}, "
            f"symptoms={len(self.patient_info.current_symptoms)}, "
            f"diagnosis={'yes' if self.diagnosis_result else 'no'}"
            f")"
        )


class WrongStageError(ValueError):
    """Операцію викликано не на своєму етапі"""
