"""
MedFlow — Sessions Routes

Endpoints для проходу майстра:
- Створення / отримання / видалення сесії
- Форма пацієнта (дані, симптоми, підтвердження)
- Запуск етапів аналізу та пошуку знань
- Вибір спеціаліста та консультація
- Перехід далі та скидання
"""

from fastapi import APIRouter, Depends, HTTPException

from medflow.knowledge import MedicalAIService
from medflow.workflow import MedicalWorkflow, WrongStageError, stages

from ..dependencies import get_service, get_sessions, SessionManager
from ..models import (
    AddSymptomRequest,
    AnalysisResponse,
    ConsultationResponse,
    DiagnosisSummaryResponse,
    ProgressStepModel,
    RetrievalResponse,
    SelectSpecialistRequest,
    SessionState,
    SubmitPatientRequest,
    UpdatePatientRequest,
)

router = APIRouter(prefix="/sessions", tags=["Sessions"])


def session_to_response(workflow: MedicalWorkflow) -> SessionState:
    """Конвертувати воркфлоу в Pydantic модель"""
    return SessionState.model_validate(workflow.to_dict())


def _steps(steps) -> list:
    return [ProgressStepModel(progress=s.progress, status=s.status) for s in steps]


def _get_workflow(session_id: str, sessions: SessionManager) -> MedicalWorkflow:
    workflow = sessions.get_session(session_id)

    if not workflow:
        raise HTTPException(
            status_code=404,
            detail=f"Session {session_id} not found"
        )

    return workflow


def _domain_error(exc: ValueError) -> HTTPException:
    """WrongStageError → 409, решта ValueError → 400"""
    if isinstance(exc, WrongStageError):
        return HTTPException(status_code=409, detail=str(exc))
    return HTTPException(status_code=400, detail=str(exc))


@router.post("", response_model=SessionState)
async def create_session(
    sessions: SessionManager = Depends(get_sessions)
) -> SessionState:
    """Почати новий прохід майстра (етап patient-input)"""
    return session_to_response(sessions.create_session())


@router.get("")
async def list_sessions(
    sessions: SessionManager = Depends(get_sessions)
) -> dict:
    """
    Отримати список активних сесій (для адміністрування).
    """
    return {
        "active_sessions": sessions.get_active_count(),
        "session_ids": sessions.list_session_ids()
    }


@router.get("/{session_id}", response_model=SessionState)
async def get_session(
    session_id: str,
    sessions: SessionManager = Depends(get_sessions)
) -> SessionState:
    """Отримати поточний стан сесії"""
    return session_to_response(_get_workflow(session_id, sessions))


@router.delete("/{session_id}")
async def delete_session(
    session_id: str,
    sessions: SessionManager = Depends(get_sessions)
) -> dict:
    """
    Закрити та видалити сесію.
    """
    success = sessions.delete_session(session_id)

    if not success:
        raise HTTPException(
            status_code=404,
            detail=f"Session {session_id} not found"
        )

    return {"deleted": True, "session_id": session_id}


# ============================================================
# 1. Patient input
# ============================================================

@router.patch("/{session_id}/patient", response_model=SessionState)
async def update_patient(
    session_id: str,
    request: UpdatePatientRequest,
    sessions: SessionManager = Depends(get_sessions)
) -> SessionState:
    """
    Часткове оновлення даних пацієнта.

    Приклад:
    ```json
    {"age": 35, "gender": "female"}
    ```
    """
    workflow = _get_workflow(session_id, sessions)

    try:
        workflow.require_stage(stages.WorkflowStage.PATIENT_INPUT)
        workflow.update_patient_info(**request.model_dump(exclude_none=True))
    except ValueError as e:
        raise _domain_error(e)

    return session_to_response(workflow)


@router.post("/{session_id}/symptoms", response_model=SessionState)
async def add_symptom(
    session_id: str,
    request: AddSymptomRequest,
    sessions: SessionManager = Depends(get_sessions)
) -> SessionState:
    """
    Додати симптом.

    - **name**: назва (обов'язково)
    - **duration**: тривалість, напр. "3 days" (обов'язково)
    - **severity**: 1–10
    """
    workflow = _get_workflow(session_id, sessions)

    try:
        workflow.require_stage(stages.WorkflowStage.PATIENT_INPUT)
        symptom = stages.build_symptom(
            name=request.name,
            duration=request.duration,
            severity=request.severity,
            description=request.description,
        )
    except ValueError as e:
        raise _domain_error(e)

    workflow.add_symptom(symptom)
    return session_to_response(workflow)


@router.delete("/{session_id}/symptoms/{symptom_id}", response_model=SessionState)
async def remove_symptom(
    session_id: str,
    symptom_id: str,
    sessions: SessionManager = Depends(get_sessions)
) -> SessionState:
    """Видалити симптом (невідомий id ігнорується)"""
    workflow = _get_workflow(session_id, sessions)

    try:
        workflow.require_stage(stages.WorkflowStage.PATIENT_INPUT)
    except ValueError as e:
        raise _domain_error(e)

    workflow.remove_symptom(symptom_id)
    return session_to_response(workflow)


@router.post("/{session_id}/patient/submit", response_model=SessionState)
async def submit_patient(
    session_id: str,
    request: SubmitPatientRequest,
    sessions: SessionManager = Depends(get_sessions)
) -> SessionState:
    """Перевірити форму та перейти до аналізу симптомів"""
    workflow = _get_workflow(session_id, sessions)

    try:
        stages.submit_patient_input(workflow, request.medical_history)
    except ValueError as e:
        raise _domain_error(e)

    return session_to_response(workflow)


# ============================================================
# 2–3. Analysis & knowledge retrieval
# ============================================================

@router.post("/{session_id}/analysis", response_model=AnalysisResponse)
async def run_analysis(
    session_id: str,
    sessions: SessionManager = Depends(get_sessions),
    service: MedicalAIService = Depends(get_service)
) -> AnalysisResponse:
    """Запустити імітацію аналізу симптомів"""
    workflow = _get_workflow(session_id, sessions)

    try:
        report = await stages.run_symptom_analysis(workflow, service)
    except ValueError as e:
        raise _domain_error(e)

    if report is None:
        raise HTTPException(status_code=500, detail=workflow.error)

    return AnalysisResponse(
        analyzed_symptoms=report.analyzed_symptoms,
        medical_history=report.medical_history,
        steps=_steps(report.steps),
        session_state=session_to_response(workflow),
    )


@router.post("/{session_id}/knowledge", response_model=RetrievalResponse)
async def run_knowledge(
    session_id: str,
    sessions: SessionManager = Depends(get_sessions),
    service: MedicalAIService = Depends(get_service)
) -> RetrievalResponse:
    """Запустити імітацію пошуку по медичних базах знань"""
    workflow = _get_workflow(session_id, sessions)

    try:
        report = await stages.run_knowledge_retrieval(workflow, service)
    except ValueError as e:
        raise _domain_error(e)

    if report is None:
        raise HTTPException(status_code=500, detail=workflow.error)

    return RetrievalResponse(
        diagnosis_result=report.diagnosis_result,
        steps=_steps(report.steps),
        session_state=session_to_response(workflow),
    )


# ============================================================
# 4. Specialist routing
# ============================================================

@router.post("/{session_id}/specialist/select", response_model=SessionState)
async def select_specialist(
    session_id: str,
    request: SelectSpecialistRequest,
    sessions: SessionManager = Depends(get_sessions)
) -> SessionState:
    """Обрати іншого спеціаліста (скидає попередню консультацію)"""
    workflow = _get_workflow(session_id, sessions)

    try:
        stages.select_specialist(workflow, request.specialist)
    except ValueError as e:
        raise _domain_error(e)

    return session_to_response(workflow)


@router.post("/{session_id}/specialist/consult", response_model=ConsultationResponse)
async def consult_specialist(
    session_id: str,
    sessions: SessionManager = Depends(get_sessions),
    service: MedicalAIService = Depends(get_service)
) -> ConsultationResponse:
    """Отримати висновок обраного спеціаліста"""
    workflow = _get_workflow(session_id, sessions)

    try:
        text = await stages.consult_specialist(workflow, service)
    except ValueError as e:
        raise _domain_error(e)

    if text is None:
        raise HTTPException(status_code=500, detail=workflow.error)

    return ConsultationResponse(
        specialist=workflow.selected_specialist,
        specialist_name=stages.specialist_display(workflow.selected_specialist),
        consultation=text,
        session_state=session_to_response(workflow),
    )


# ============================================================
# Navigation & final diagnosis
# ============================================================

@router.post("/{session_id}/advance", response_model=SessionState)
async def advance(
    session_id: str,
    sessions: SessionManager = Depends(get_sessions)
) -> SessionState:
    """Кнопка "Continue": перейти на наступний етап"""
    workflow = _get_workflow(session_id, sessions)

    try:
        stages.continue_to_next_stage(workflow)
    except ValueError as e:
        raise _domain_error(e)

    return session_to_response(workflow)


@router.get("/{session_id}/summary", response_model=DiagnosisSummaryResponse)
async def get_summary(
    session_id: str,
    sessions: SessionManager = Depends(get_sessions)
) -> DiagnosisSummaryResponse:
    """Дані фінального екрану діагнозу"""
    workflow = _get_workflow(session_id, sessions)

    if workflow.diagnosis_result is None:
        raise HTTPException(status_code=404, detail=stages.MSG_NO_DIAGNOSIS)

    summary = stages.summarize_diagnosis(workflow.diagnosis_result)
    return DiagnosisSummaryResponse.model_validate(summary, from_attributes=True)


@router.post("/{session_id}/reset", response_model=SessionState)
async def reset_session(
    session_id: str,
    sessions: SessionManager = Depends(get_sessions)
) -> SessionState:
    """Почати заново (єдиний шлях назад)"""
    workflow = _get_workflow(session_id, sessions)
    workflow.reset()
    return session_to_response(workflow)
