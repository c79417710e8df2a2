"""
MedFlow — Контролери етапів

Кожен етап майстра має свою логіку:
1. patient-input: валідація форми, розбір історії хвороб
2. symptom-analysis: імітація аналізу з кроками прогресу
3. knowledge-retrieval: імітація RAG-пошуку, зберігає DiagnosisResult
4. specialist-routing: вибір спеціаліста та "консультація"
5. final-diagnosis: підготовка результату до відображення

Помилки під час обробки не пробрасуються: етап записує повідомлення
в workflow.error, скидає is_processing і логує виняток.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from medflow.config import PatientFormConfig
from medflow.knowledge import MedicalAIService, get_specialist_info
from medflow.schemas import (
    DiagnosisResult,
    PatientInfo,
    SpecialistType,
    Symptom,
    UrgencyLevel,
    WorkflowStage,
)

from .state import MedicalWorkflow

logger = logging.getLogger(__name__)


# =============================================================================
# MESSAGES
# =============================================================================

MSG_SYMPTOM_NAME_REQUIRED = "Please enter a symptom name"
MSG_DURATION_REQUIRED = "Please specify how long you've had this symptom"
MSG_AGE_REQUIRED = "Please enter your age"
MSG_GENDER_REQUIRED = "Please select your gender"
MSG_SYMPTOMS_REQUIRED = "Please add at least one symptom"

MSG_ANALYSIS_FAILED = "Failed to analyze symptoms. Please try again."
MSG_RETRIEVAL_FAILED = "Failed to retrieve medical knowledge. Please try again."
MSG_CONSULTATION_FAILED = "Failed to get specialist consultation. Please try again."

MSG_NO_DIAGNOSIS = "No diagnosis results available. Please go back and try again."


@dataclass
class ProgressStep:
    """Крок прогрес-бару"""
    progress: int
    status: str = ""


ProgressCallback = Callable[[ProgressStep], None]


def _report(steps: List[ProgressStep], step: ProgressStep,
            on_progress: Optional[ProgressCallback]) -> None:
    steps.append(step)
    if on_progress:
        on_progress(step)


# =============================================================================
# 1. PATIENT INPUT
# =============================================================================

def build_symptom(
    name: str,
    duration: str,
    severity: Optional[int] = None,
    description: str = "",
    form: Optional[PatientFormConfig] = None,
) -> Symptom:
    """
    Створити симптом з полів форми.

    Raises:
        ValueError: порожня назва або тривалість, severity поза [1, 10]
    """
    form = form or PatientFormConfig()

    if not name or not name.strip():
        raise ValueError(MSG_SYMPTOM_NAME_REQUIRED)
    if not duration or not duration.strip():
        raise ValueError(MSG_DURATION_REQUIRED)

    if severity is None:
        severity = form.default_severity
    if not form.min_severity <= severity <= form.max_severity:
        raise ValueError(
            f"Severity must be between {form.min_severity} and {form.max_severity}"
        )

    return Symptom(
        name=name,
        severity=severity,
        duration=duration,
        description=description or "",
    )


def parse_medical_history(text: str) -> List[str]:
    """'Diabetes, , High blood pressure' → ['Diabetes', 'High blood pressure']"""
    if not text:
        return []
    return [item.strip() for item in text.split(",") if item.strip()]


def validate_patient_info(patient_info: PatientInfo) -> None:
    """
    Перевірка перед переходом до аналізу.

    Raises:
        ValueError: перше порушення з повідомленням для користувача
    """
    if patient_info.age == 0:
        raise ValueError(MSG_AGE_REQUIRED)
    if not patient_info.gender:
        raise ValueError(MSG_GENDER_REQUIRED)
    if not patient_info.current_symptoms:
        raise ValueError(MSG_SYMPTOMS_REQUIRED)


def submit_patient_input(workflow: MedicalWorkflow, medical_history: str = "") -> WorkflowStage:
    """
    Завершити форму: валідація, історія хвороб, перехід далі.

    Історія перезаписується лише якщо текст не порожній.
    """
    workflow.require_stage(WorkflowStage.PATIENT_INPUT)
    validate_patient_info(workflow.patient_info)

    if medical_history:
        workflow.update_patient_info(medical_history=parse_medical_history(medical_history))

    logger.info(
        "📋 Patient input submitted [%s]: %d symptoms",
        workflow.session_id, len(workflow.patient_info.current_symptoms),
    )
    return workflow.proceed_to_next_stage()


# =============================================================================
# 2. SYMPTOM ANALYSIS
# =============================================================================

@dataclass
class AnalysisReport:
    """Що показує екран аналізу після завершення"""
    analyzed_symptoms: List[str]
    medical_history: List[str]
    steps: List[ProgressStep] = field(default_factory=list)


async def run_symptom_analysis(
    workflow: MedicalWorkflow,
    service: MedicalAIService,
    on_progress: Optional[ProgressCallback] = None,
) -> Optional[AnalysisReport]:
    """
    Імітація аналізу: 20% → (пауза) 40% → аналіз → 70% → 100%.

    Returns:
        AnalysisReport або None, якщо сталася помилка (див. workflow.error)
    """
    workflow.require_stage(WorkflowStage.SYMPTOM_ANALYSIS)

    steps: List[ProgressStep] = []
    pauses = service.config.delays.analysis_steps

    try:
        workflow.set_processing(True)
        workflow.set_error(None)
        _report(steps, ProgressStep(20, "Extracting Symptoms"), on_progress)

        await service.pause(pauses[0])
        _report(steps, ProgressStep(40, "Running LLM Analysis"), on_progress)

        analyzed = await service.analyze_patient_symptoms(workflow.patient_info)
        workflow.analyzed_symptoms = analyzed

        await service.pause(pauses[1])
        _report(steps, ProgressStep(70, "Preparing Results"), on_progress)

        await service.pause(pauses[2])
        _report(steps, ProgressStep(100, "Analysis complete"), on_progress)

        workflow.set_processing(False)

    except Exception:
        logger.exception("Error analyzing symptoms [%s]", workflow.session_id)
        workflow.set_error(MSG_ANALYSIS_FAILED)
        workflow.set_processing(False)
        return None

    return AnalysisReport(
        analyzed_symptoms=list(analyzed),
        medical_history=list(workflow.patient_info.medical_history),
        steps=steps,
    )


# =============================================================================
# 3. KNOWLEDGE RETRIEVAL
# =============================================================================

RETRIEVAL_STEPS = [
    ProgressStep(10, "Connecting to medical knowledge bases..."),
    ProgressStep(30, "Searching relevant medical literature..."),
    ProgressStep(50, "Retrieving clinical guidelines..."),
    ProgressStep(70, "Analyzing potential diagnoses..."),
]
RETRIEVAL_DONE = ProgressStep(100, "Analysis complete!")


@dataclass
class RetrievalReport:
    diagnosis_result: DiagnosisResult
    steps: List[ProgressStep] = field(default_factory=list)


async def run_knowledge_retrieval(
    workflow: MedicalWorkflow,
    service: MedicalAIService,
    on_progress: Optional[ProgressCallback] = None,
) -> Optional[RetrievalReport]:
    """
    Імітація пошуку по базах знань і запит до матчера.

    Після успіху рекомендований спеціаліст стає обраним за замовчуванням.
    Повторний виклик повертає збережений результат без нового запиту.
    """
    workflow.require_stage(WorkflowStage.KNOWLEDGE_RETRIEVAL)

    if workflow.diagnosis_result is not None:
        if on_progress:
            on_progress(RETRIEVAL_DONE)
        return RetrievalReport(
            diagnosis_result=workflow.diagnosis_result,
            steps=[RETRIEVAL_DONE],
        )

    steps: List[ProgressStep] = []

    try:
        workflow.set_processing(True)
        workflow.set_error(None)

        for i, step in enumerate(RETRIEVAL_STEPS):
            _report(steps, step, on_progress)
            if i < len(RETRIEVAL_STEPS) - 1:
                await service.pause(service.config.delays.knowledge_step)

        symptom_names = [s.name.lower() for s in workflow.patient_info.current_symptoms]
        result = await service.query_medical_knowledge(symptom_names)

        _report(steps, RETRIEVAL_DONE, on_progress)

        workflow.set_diagnosis_result(result)
        workflow.set_specialist(result.recommended_specialist)
        workflow.set_processing(False)

    except Exception:
        logger.exception("Error during knowledge retrieval [%s]", workflow.session_id)
        workflow.set_error(MSG_RETRIEVAL_FAILED)
        workflow.set_processing(False)
        return None

    return RetrievalReport(diagnosis_result=result, steps=steps)


# =============================================================================
# 4. SPECIALIST ROUTING
# =============================================================================

def select_specialist(workflow: MedicalWorkflow, specialist: SpecialistType) -> SpecialistType:
    """Обрати спеціаліста; попередня консультація скидається"""
    workflow.require_stage(WorkflowStage.SPECIALIST_ROUTING)

    specialist = SpecialistType(specialist)
    workflow.set_specialist(specialist)
    return specialist


async def consult_specialist(
    workflow: MedicalWorkflow,
    service: MedicalAIService,
) -> Optional[str]:
    """
    Отримати "висновок" обраного спеціаліста.

    Raises:
        ValueError: немає результату діагностики
    """
    workflow.require_stage(WorkflowStage.SPECIALIST_ROUTING)

    if workflow.diagnosis_result is None:
        raise ValueError(MSG_NO_DIAGNOSIS)

    specialist = workflow.selected_specialist or workflow.diagnosis_result.recommended_specialist

    try:
        workflow.set_processing(True)
        text = await service.get_specialist_diagnosis(
            specialist,
            workflow.patient_info,
            workflow.diagnosis_result,
        )
        workflow.set_specialist(specialist, consultation=text)
    except Exception:
        logger.exception("Error getting specialist diagnosis [%s]", workflow.session_id)
        workflow.set_error(MSG_CONSULTATION_FAILED)
        return None
    finally:
        workflow.set_processing(False)

    return text


# =============================================================================
# CONTINUE
# =============================================================================

def continue_to_next_stage(workflow: MedicalWorkflow) -> WorkflowStage:
    """
    Кнопка "Continue" на етапах 2–4.

    Перехід дозволено лише коли результат етапу вже є.
    Етап patient-input завершується через submit_patient_input.
    """
    stage = workflow.current_stage

    if workflow.is_processing:
        raise ValueError("Processing is still in progress")

    if stage == WorkflowStage.PATIENT_INPUT:
        raise ValueError("Submit the patient form to continue")
    if stage == WorkflowStage.SYMPTOM_ANALYSIS and workflow.analyzed_symptoms is None:
        raise ValueError("Symptom analysis has not been run yet")
    if stage == WorkflowStage.KNOWLEDGE_RETRIEVAL and workflow.diagnosis_result is None:
        raise ValueError("Knowledge retrieval has not been run yet")
    if stage == WorkflowStage.SPECIALIST_ROUTING and not workflow.specialist_consultation:
        raise ValueError("Consult a specialist before continuing")

    return workflow.proceed_to_next_stage()


# =============================================================================
# 5. FINAL DIAGNOSIS
# =============================================================================

URGENCY_COLORS = {
    UrgencyLevel.EMERGENCY: "red",
    UrgencyLevel.HIGH: "orange",
    UrgencyLevel.MEDIUM: "yellow",
    UrgencyLevel.LOW: "green",
}


@dataclass
class ConditionView:
    name: str
    description: str
    percent: int


@dataclass
class DiagnosisSummary:
    """Готові до відображення дані фінального екрану"""
    urgency_level: UrgencyLevel
    urgency_label: str
    urgency_color: str
    conditions: List[ConditionView]
    confidence_percent: int
    specialist_name: str
    additional_tests: List[str]


def summarize_diagnosis(result: DiagnosisResult) -> DiagnosisSummary:
    return DiagnosisSummary(
        urgency_level=result.urgency_level,
        urgency_label=result.urgency_level.label,
        urgency_color=URGENCY_COLORS[result.urgency_level],
        conditions=[
            ConditionView(name=c.name, description=c.description, percent=c.percent)
            for c in result.possible_conditions
        ],
        confidence_percent=result.confidence_percent,
        specialist_name=result.recommended_specialist.display_name,
        additional_tests=list(result.additional_tests or []),
    )


def specialist_display(specialist: SpecialistType) -> str:
    """Назва з довідника, напр. 'Emergency Medicine'"""
    return get_specialist_info(specialist).name
