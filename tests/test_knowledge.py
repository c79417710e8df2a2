"""
Тести для модуля knowledge

Запуск: pytest tests/test_knowledge.py -v
Або демо: python tests/test_knowledge.py
"""

import asyncio

import pytest

from medflow.config import MatcherConfig, MedFlowConfig
from medflow.knowledge import (
    COMMON_SYMPTOMS,
    KnowledgeEntry,
    KnowledgeMatcher,
    MedicalAIService,
    SPECIALIST_DATABASE,
    analyze_patient_symptoms,
    get_recommended_tests,
    get_specialist_diagnosis,
    get_specialist_info,
    known_symptoms,
    list_specialists,
    query_medical_knowledge,
)
from medflow.schemas import (
    DiagnosisResult,
    PatientInfo,
    PossibleCondition,
    SpecialistType,
    Symptom,
    UrgencyLevel,
)


def _names(result: DiagnosisResult):
    return [c.name for c in result.possible_conditions]


# ============================================================
# Таблиці
# ============================================================

def test_tables():
    """Тест статичних таблиць"""
    assert len(known_symptoms()) == 9
    assert "shortness of breath" in known_symptoms()
    assert len(COMMON_SYMPTOMS) == 12

    specialists = list_specialists()
    assert [s.type for s in specialists] == list(SpecialistType)
    assert SPECIALIST_DATABASE[SpecialistType.EMERGENCY].name == "Emergency Medicine"

    print(f"✓ Knowledge base: {len(known_symptoms())} symptoms, {len(specialists)} specialists")


def test_get_specialist_info():
    info = get_specialist_info("cardiologist")
    assert info.name == "Cardiologist"
    assert "Hypertension" in info.conditions

    with pytest.raises(ValueError):
        get_specialist_info("surgeon")


def test_analyze_patient_symptoms():
    patient = PatientInfo(current_symptoms=[
        Symptom(name="Chest Pain", duration="1 day"),
        Symptom(name="Fever", duration="2 days"),
    ])

    assert analyze_patient_symptoms(patient) == ["chest pain", "fever"]


def test_recommended_tests_dedup():
    tests = get_recommended_tests(["Migraine", "Vertigo", "Migraine", "Gastritis"])

    assert tests == [
        "Neurological examination",
        "MRI scan",
        "Vestibular testing",
        "Head MRI",
    ]
    assert get_recommended_tests([]) == []


# ============================================================
# Матчер
# ============================================================

def test_headache_and_fever():
    """Класичний приклад: GP, висока терміновість"""
    result = query_medical_knowledge(["headache", "fever"])

    assert _names(result) == [
        "Tension Headache",
        "Viral Infection",
        "Migraine",
        "Bacterial Infection",
        "COVID-19",
    ]
    assert result.recommended_specialist == SpecialistType.GENERAL_PRACTITIONER
    assert result.urgency_level == UrgencyLevel.HIGH
    assert result.confidence == pytest.approx(3.1 / 6)
    assert result.additional_tests == [
        "Physical examination",
        "Neurological examination",
        "MRI scan",
    ]

    print(f"✓ headache + fever → {result.to_summary()}")


def test_abdominal_pain_is_emergency():
    result = query_medical_knowledge(["abdominal pain"])

    assert _names(result) == ["Gastritis", "Irritable Bowel Syndrome", "Appendicitis"]
    assert result.recommended_specialist == SpecialistType.GASTROENTEROLOGIST
    assert result.urgency_level == UrgencyLevel.EMERGENCY
    assert result.confidence == pytest.approx(1.4 / 3)
    assert result.additional_tests == ["Abdominal ultrasound", "CT scan", "Blood tests"]


def test_chest_pain_and_breathing():
    result = query_medical_knowledge(["Chest pain", "Shortness of breath"])

    assert result.recommended_specialist == SpecialistType.CARDIOLOGIST
    assert result.urgency_level == UrgencyLevel.HIGH
    assert len(result.possible_conditions) == 5
    assert "Heart Failure" not in _names(result)
    assert result.confidence == pytest.approx(2.6 / 6)
    assert result.additional_tests == [
        "ECG",
        "Stress test",
        "Coronary angiography",
        "Upper endoscopy",
        "Esophageal pH monitoring",
    ]


def test_vote_tie_goes_to_first_specialist():
    """chest pain: по одному голосу у cardiologist, gastroenterologist, GP"""
    matcher = KnowledgeMatcher()

    votes = matcher.vote_counts(["chest pain"])
    assert votes[SpecialistType.CARDIOLOGIST] == 1
    assert votes[SpecialistType.GASTROENTEROLOGIST] == 1
    assert votes[SpecialistType.GENERAL_PRACTITIONER] == 1

    result = matcher.match(["chest pain"])
    assert result.recommended_specialist == SpecialistType.GENERAL_PRACTITIONER


def test_shared_condition_keeps_max_probability():
    """Anemia: 0.5 (fatigue) та 0.3 (dizziness)"""
    result = query_medical_knowledge(["fatigue", "dizziness"])

    anemia = next(c for c in result.possible_conditions if c.name == "Anemia")
    assert anemia.probability == 0.5
    assert _names(result).count("Anemia") == 1

    # Впевненість рахується по 5 різних умовах
    assert result.confidence == pytest.approx(2.2 / 5)
    # Anemia двічі голосує за GP
    assert result.recommended_specialist == SpecialistType.GENERAL_PRACTITIONER
    assert result.urgency_level == UrgencyLevel.HIGH


def test_medium_urgency():
    result = query_medical_knowledge(["fatigue"])

    assert result.urgency_level == UrgencyLevel.MEDIUM
    assert result.recommended_specialist == SpecialistType.GENERAL_PRACTITIONER


def test_normalization_and_unknown_symptoms():
    result = query_medical_knowledge(["  RASH ", "sneezing"])

    assert _names(result) == ["Contact Dermatitis", "Eczema", "Allergic Reaction"]
    assert result.recommended_specialist == SpecialistType.DERMATOLOGIST


def test_no_matches():
    for symptoms in ([], ["sneezing", "hiccups"]):
        result = query_medical_knowledge(symptoms)

        assert result.possible_conditions == []
        assert result.confidence == 0.0
        assert result.recommended_specialist == SpecialistType.GENERAL_PRACTITIONER
        assert result.urgency_level == UrgencyLevel.LOW
        assert result.additional_tests == []


def test_confidence_percent_rounds_half_up():
    """12 умов із сумою 5.1: впевненість 0.425 показується як 43%"""
    result = query_medical_knowledge(
        ["chest pain", "joint pain", "fatigue", "shortness of breath"]
    )

    assert result.confidence == pytest.approx(0.425)
    assert result.confidence_percent == 43
    assert len(result.possible_conditions) == 5


def test_duplicate_symptoms_vote_twice():
    matcher = KnowledgeMatcher()

    votes = matcher.vote_counts(["headache", "headache"])
    assert votes[SpecialistType.GENERAL_PRACTITIONER] == 4
    assert votes[SpecialistType.NEUROLOGIST] == 2

    result = matcher.match(["headache", "headache"])
    assert len(result.possible_conditions) == 3
    assert result.confidence == pytest.approx(0.5)


def test_custom_knowledge_base():
    """Матчер працює з довільною таблицею та конфігурацією"""
    table = {
        "itch": [
            KnowledgeEntry("Hives", 0.2, SpecialistType.DERMATOLOGIST),
            KnowledgeEntry("Scabies", 0.2, SpecialistType.DERMATOLOGIST),
        ],
    }
    matcher = KnowledgeMatcher(MatcherConfig(top_conditions=1), knowledge_base=table)

    result = matcher.match(["itch"])

    assert _names(result) == ["Hives"]
    assert result.possible_conditions[0].description == "No description available"
    assert result.urgency_level == UrgencyLevel.LOW
    assert result.confidence == pytest.approx(0.2)


# ============================================================
# Консультація спеціаліста
# ============================================================

def _patient(*names):
    return PatientInfo(
        age=40,
        gender="male",
        current_symptoms=[Symptom(name=n, duration="1 day") for n in names],
    )


def test_consultation_without_conditions():
    text = get_specialist_diagnosis(
        SpecialistType.NEUROLOGIST, _patient("Sneezing"), DiagnosisResult()
    )

    assert text == (
        "Based on the information provided, I don't have enough data to make a confident diagnosis. "
        "I recommend a comprehensive examination with a Neurologist to properly evaluate your condition."
    )


def test_consultation_emergency():
    patient = _patient("Abdominal pain")
    preliminary = query_medical_knowledge(["abdominal pain"])

    text = get_specialist_diagnosis(
        SpecialistType.GASTROENTEROLOGIST, patient, preliminary
    )

    assert text.startswith("Based on your symptoms, particularly Abdominal pain, ")
    assert "immediate emergency care" in text
    assert "The possible condition of Gastritis requires prompt medical attention." in text


def test_consultation_emergency_specialist():
    """Emergency-спеціаліст завжди дає текст невідкладної допомоги"""
    patient = _patient("Headache")
    preliminary = query_medical_knowledge(["headache"])

    text = get_specialist_diagnosis(SpecialistType.EMERGENCY, patient, preliminary)

    assert "nearest emergency room" in text


def test_consultation_regular():
    patient = _patient("Headache", "Fever")
    preliminary = query_medical_knowledge(["headache", "fever"])

    text = get_specialist_diagnosis(
        SpecialistType.GENERAL_PRACTITIONER, patient, preliminary
    )

    assert text.startswith("After reviewing your symptoms (Headache, Fever), ")
    assert "I believe you may be experiencing Tension Headache." in text
    assert "Physical examination, Neurological examination, MRI scan" in text
    assert text.endswith(
        "Follow-up with a General Practitioner is advised within 24-48 hours."
    )


def test_consultation_low_urgency_without_tests():
    preliminary = DiagnosisResult(
        possible_conditions=[PossibleCondition(name="Gout", probability=0.3)],
        confidence=0.3,
        recommended_specialist=SpecialistType.ORTHOPEDIST,
    )

    text = get_specialist_diagnosis(
        SpecialistType.ORTHOPEDIST, _patient("Joint pain"), preliminary
    )

    assert "I recommend the following tests: None at this time." in text
    assert text.endswith("advised within 1-2 weeks.")


# ============================================================
# Сервіс
# ============================================================

def test_service_pipeline():
    service = MedicalAIService(MedFlowConfig.instant())
    patient = _patient("Chest pain", "Shortness of breath")

    async def run():
        names = await service.analyze_patient_symptoms(patient)
        result = await service.query_medical_knowledge(names)
        text = await service.get_specialist_diagnosis(
            result.recommended_specialist, patient, result
        )
        return names, result, text

    names, result, text = asyncio.run(run())

    assert names == ["chest pain", "shortness of breath"]
    assert result.recommended_specialist == SpecialistType.CARDIOLOGIST
    assert "Follow-up with a Cardiologist" in text


def demo():
    print("=" * 60)
    print("MedFlow — Тест бази знань")
    print("=" * 60)

    test_tables()

    for symptoms in (["headache", "fever"], ["abdominal pain"], ["chest pain", "shortness of breath"]):
        result = query_medical_knowledge(symptoms)
        print(f"\n🔍 {symptoms}")
        for c in result.possible_conditions:
            print(f"   {c.name}: {c.percent}%")
        print(f"   → {result.recommended_specialist.display_name}, "
              f"{result.urgency_level.label}, confidence {result.confidence_percent}%")

    print("\n" + "=" * 60)
    print("✅ Успішно!")
    print("=" * 60)


if __name__ == "__main__":
    demo()
