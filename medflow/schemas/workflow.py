"""
MedFlow — Етапи воркфлоу

П'ять фіксованих етапів, строго послідовних:
    patient-input → symptom-analysis → knowledge-retrieval
    → specialist-routing → final-diagnosis

Повернутися назад можна лише повним скиданням.
"""

from typing import List, Optional
from enum import Enum


class WorkflowStage(str, Enum):
    """Етап майстра"""
    PATIENT_INPUT = "patient-input"
    SYMPTOM_ANALYSIS = "symptom-analysis"
    KNOWLEDGE_RETRIEVAL = "knowledge-retrieval"
    SPECIALIST_ROUTING = "specialist-routing"
    FINAL_DIAGNOSIS = "final-diagnosis"

    @property
    def label(self) -> str:
        return STAGE_LABELS[self]

    @property
    def position(self) -> int:
        return STAGE_SEQUENCE.index(self)

    @property
    def is_last(self) -> bool:
        return self.position == len(STAGE_SEQUENCE) - 1

    def next(self) -> Optional["WorkflowStage"]:
        """Наступний етап або None для останнього"""
        if self.is_last:
            return None
        return STAGE_SEQUENCE[self.position + 1]


STAGE_SEQUENCE: List[WorkflowStage] = [
    WorkflowStage.PATIENT_INPUT,
    WorkflowStage.SYMPTOM_ANALYSIS,
    WorkflowStage.KNOWLEDGE_RETRIEVAL,
    WorkflowStage.SPECIALIST_ROUTING,
    WorkflowStage.FINAL_DIAGNOSIS,
]

STAGE_LABELS = {
    WorkflowStage.PATIENT_INPUT: "Patient Info",
    WorkflowStage.SYMPTOM_ANALYSIS: "Symptom Analysis",
    WorkflowStage.KNOWLEDGE_RETRIEVAL: "Knowledge Retrieval",
    WorkflowStage.SPECIALIST_ROUTING: "Specialist Routing",
    WorkflowStage.FINAL_DIAGNOSIS: "Diagnosis",
}
