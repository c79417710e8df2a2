"""
MedFlow — Воркфлоу майстра (workflow)

Компоненти:
- MedicalWorkflow: спільний стан (етап, дані пацієнта, діагноз)
- stages: контролери п'яти етапів

Приклад використання:
    import asyncio
    from medflow.config import MedFlowConfig
    from medflow.knowledge import MedicalAIService
    from medflow.workflow import MedicalWorkflow, stages

    service = MedicalAIService(MedFlowConfig.instant())
    workflow = MedicalWorkflow()

    workflow.update_patient_info(age=42, gender="male")
    workflow.add_symptom(stages.build_symptom("Chest pain", duration="2 days", severity=8))
    workflow.add_symptom(stages.build_symptom("Shortness of breath", duration="1 day"))
    stages.submit_patient_input(workflow, "Hypertension")

    asyncio.run(stages.run_symptom_analysis(workflow, service))
    stages.continue_to_next_stage(workflow)

    asyncio.run(stages.run_knowledge_retrieval(workflow, service))
    print(workflow.diagnosis_result.recommended_specialist)  # cardiologist
"""

from .state import MedicalWorkflow, WrongStageError
from . import stages
from .stages import (
    ProgressStep,
    AnalysisReport,
    RetrievalReport,
    DiagnosisSummary,
    build_symptom,
    parse_medical_history,
    validate_patient_info,
    submit_patient_input,
    run_symptom_analysis,
    run_knowledge_retrieval,
    select_specialist,
    consult_specialist,
    continue_to_next_stage,
    summarize_diagnosis,
)


__all__ = [
    "MedicalWorkflow",
    "WrongStageError",
    "stages",
    "ProgressStep",
    "AnalysisReport",
    "RetrievalReport",
    "DiagnosisSummary",
    "build_symptom",
    "parse_medical_history",
    "validate_patient_info",
    "submit_patient_input",
    "run_symptom_analysis",
    "run_knowledge_retrieval",
    "select_specialist",
    "consult_specialist",
    "continue_to_next_stage",
    "summarize_diagnosis",
]
