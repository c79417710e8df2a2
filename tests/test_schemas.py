"""
Тести для модуля schemas

Запуск: pytest tests/test_schemas.py -v
Або демо: python tests/test_schemas.py
"""

import pytest
from pydantic import ValidationError


def test_symptom():
    """Тест моделі Symptom"""
    from medflow.schemas import Symptom, SeverityBand

    symptom = Symptom(name="  Headache ", severity=7, duration="3 days")

    assert symptom.name == "Headache"  # регістр зберігається, пробіли обрізано
    assert symptom.severity == 7
    assert symptom.severity_band == SeverityBand.HIGH
    assert len(symptom.id) == 36

    print(f"✓ Symptom: {symptom.name}, severity={symptom.severity}, id={symptom.id[:8]}")

    # Значення за замовчуванням
    default = Symptom(name="Cough")
    assert default.severity == 5
    assert default.severity_band == SeverityBand.MODERATE
    assert default.description == ""
    assert default.id != symptom.id

    assert Symptom(name="Rash", severity=2).severity_band == SeverityBand.MILD


def test_symptom_validation():
    """Порожня назва та severity поза [1, 10]"""
    from medflow.schemas import Symptom

    with pytest.raises(ValidationError, match="Symptom name must not be empty"):
        Symptom(name="   ")

    with pytest.raises(ValidationError):
        Symptom(name="Fever", severity=0)

    with pytest.raises(ValidationError):
        Symptom(name="Fever", severity=11)

    print("✓ Symptom validation")


def test_patient_info():
    """Тест моделі PatientInfo"""
    from medflow.schemas import PatientInfo, Symptom, Gender

    patient = PatientInfo()
    assert patient.age == 0
    assert patient.gender == Gender.UNSPECIFIED
    assert patient.medical_history == []
    assert patient.current_symptoms == []

    fever = Symptom(name="Fever", duration="2 days")
    patient = PatientInfo(
        age=35,
        gender=Gender.FEMALE,
        medical_history=["Asthma"],
        current_symptoms=[fever, Symptom(name="Headache", duration="1 day")],
    )

    assert patient.symptom_names == ["Fever", "Headache"]
    assert patient.find_symptom(fever.id) is fever
    assert patient.find_symptom("missing") is None

    with pytest.raises(ValidationError):
        PatientInfo(age=121)

    # JSON round-trip
    restored = PatientInfo.model_validate_json(patient.model_dump_json())
    assert restored == patient

    print(f"✓ PatientInfo: age={patient.age}, symptoms={patient.symptom_names}")


def test_specialist_type_order():
    """Порядок спеціалістів визначає tie-break"""
    from medflow.schemas import SpecialistType

    values = [s.value for s in SpecialistType]
    assert values == [
        "general_practitioner",
        "cardiologist",
        "neurologist",
        "gastroenterologist",
        "dermatologist",
        "orthopedist",
        "psychiatrist",
        "pulmonologist",
        "endocrinologist",
        "emergency",
    ]
    assert SpecialistType.GENERAL_PRACTITIONER.display_name == "General Practitioner"

    print(f"✓ SpecialistType: {len(values)} types")


def test_urgency_level():
    """Тест впорядкованості UrgencyLevel"""
    from medflow.schemas import UrgencyLevel

    ranks = [level.rank for level in UrgencyLevel]
    assert ranks == [0, 1, 2, 3]
    assert UrgencyLevel.from_rank(3) == UrgencyLevel.EMERGENCY
    assert UrgencyLevel.HIGH.label == "High Urgency"
    assert UrgencyLevel.LOW.label == "Low Urgency"

    print("✓ UrgencyLevel: low < medium < high < emergency")


def test_diagnosis_result():
    """Тест моделі DiagnosisResult"""
    from medflow.schemas import (
        DiagnosisResult,
        PossibleCondition,
        SpecialistType,
        UrgencyLevel,
    )

    empty = DiagnosisResult()
    assert empty.top_condition is None
    assert not empty.has_matches
    assert empty.recommended_specialist == SpecialistType.GENERAL_PRACTITIONER
    assert empty.urgency_level == UrgencyLevel.LOW

    result = DiagnosisResult(
        possible_conditions=[
            PossibleCondition(name="Migraine", probability=0.5),
            PossibleCondition(name="Sinusitis", probability=0.3),
        ],
        confidence=0.4,
        recommended_specialist=SpecialistType.NEUROLOGIST,
        additional_tests=["MRI scan"],
        urgency_level=UrgencyLevel.MEDIUM,
    )

    assert result.top_condition.name == "Migraine"
    assert result.top_condition.percent == 50
    assert result.confidence_percent == 40
    assert result.to_summary() == {
        "top_condition": "Migraine",
        "confidence": 0.4,
        "specialist": "neurologist",
        "urgency": "medium",
        "conditions_count": 2,
    }

    # Результат незмінний
    with pytest.raises(ValidationError):
        result.confidence = 0.9

    with pytest.raises(ValidationError):
        PossibleCondition(name="X", probability=1.5)

    # Половина відсотка округлюється вгору
    assert PossibleCondition(name="X", probability=0.125).percent == 13
    assert DiagnosisResult(confidence=0.125).confidence_percent == 13

    print(f"✓ DiagnosisResult: {result.to_summary()}")


def test_workflow_stage():
    """Тест послідовності етапів"""
    from medflow.schemas import WorkflowStage, STAGE_SEQUENCE

    assert STAGE_SEQUENCE[0] == WorkflowStage.PATIENT_INPUT
    assert WorkflowStage.PATIENT_INPUT.next() == WorkflowStage.SYMPTOM_ANALYSIS
    assert WorkflowStage.SPECIALIST_ROUTING.next() == WorkflowStage.FINAL_DIAGNOSIS
    assert WorkflowStage.FINAL_DIAGNOSIS.next() is None
    assert WorkflowStage.FINAL_DIAGNOSIS.is_last

    labels = [stage.label for stage in STAGE_SEQUENCE]
    assert labels == [
        "Patient Info",
        "Symptom Analysis",
        "Knowledge Retrieval",
        "Specialist Routing",
        "Diagnosis",
    ]
    assert WorkflowStage("knowledge-retrieval").position == 2

    print(f"✓ WorkflowStage: {' → '.join(labels)}")


def demo():
    """Демонстрація"""
    print("=" * 60)
    print("MedFlow — Тест схем даних")
    print("=" * 60)

    test_symptom()
    test_symptom_validation()
    test_patient_info()
    test_specialist_type_order()
    test_urgency_level()
    test_diagnosis_result()
    test_workflow_stage()

    print("\n" + "=" * 60)
    print("✅ Всі тести пройдено успішно!")
    print("=" * 60)


if __name__ == "__main__":
    demo()
