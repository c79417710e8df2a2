"""
MedFlow — Rule-based матчер бази знань

Перетворює список назв симптомів на DiagnosisResult:
1. Для кожного симптому беремо записи бази знань
   (нова умова додається, відома — отримує максимум ймовірності)
2. Кожен запис дає голос своєму спеціалісту
3. Терміновість — максимум по записах:
   emergency-спеціаліст → emergency, p > 0.5 → high, p > 0.3 → medium
4. Умови сортуються за ймовірністю (стабільно), беремо топ-5
5. Впевненість — середня ймовірність усіх знайдених умов
"""

from typing import Dict, List, Optional, Sequence

import numpy as np

from medflow.config import MatcherConfig
from medflow.schemas import (
    DiagnosisResult,
    PatientInfo,
    PossibleCondition,
    SpecialistType,
    UrgencyLevel,
)

from .knowledge_base import (
    CONDITION_DESCRIPTIONS,
    CONDITION_TESTS,
    MEDICAL_KNOWLEDGE_BASE,
    KnowledgeEntry,
    get_specialist_info,
)


SPECIALIST_ORDER: List[SpecialistType] = list(SpecialistType)
SPECIALIST_INDEX: Dict[SpecialistType, int] = {s: i for i, s in enumerate(SPECIALIST_ORDER)}


def normalize_symptom_name(name: str) -> str:
    return name.strip().lower()


def analyze_patient_symptoms(patient_info: PatientInfo) -> List[str]:
    """Назви симптомів у нижньому регістрі, в порядку введення"""
    return [s.name.lower() for s in patient_info.current_symptoms]


def get_recommended_tests(condition_names: Sequence[str]) -> List[str]:
    """
    Об'єднання рекомендованих обстежень для умов.

    Порядок — за першою появою, без дублікатів.
    """
    tests: List[str] = []
    for condition in condition_names:
        for test in CONDITION_TESTS.get(condition, []):
            if test not in tests:
                tests.append(test)
    return tests


class KnowledgeMatcher:
    """
    Матчер симптомів по статичній базі знань.

    Приклад:
        matcher = KnowledgeMatcher()
        result = matcher.match(["headache", "fever"])

        print(result.recommended_specialist)   # general_practitioner
        print(result.urgency_level)            # high
    """

    def __init__(
        self,
        config: Optional[MatcherConfig] = None,
        knowledge_base: Optional[Dict[str, List[KnowledgeEntry]]] = None,
        descriptions: Optional[Dict[str, str]] = None,
    ):
        self.config = config or MatcherConfig()
        self.knowledge_base = knowledge_base if knowledge_base is not None else MEDICAL_KNOWLEDGE_BASE
        self.descriptions = descriptions if descriptions is not None else CONDITION_DESCRIPTIONS

    def entry_urgency(self, entry: KnowledgeEntry) -> UrgencyLevel:
        """Терміновість, яку задає один запис"""
        if entry.specialist == SpecialistType.EMERGENCY:
            return UrgencyLevel.EMERGENCY
        if entry.probability > self.config.high_urgency_probability:
            return UrgencyLevel.HIGH
        if entry.probability > self.config.medium_urgency_probability:
            return UrgencyLevel.MEDIUM
        return UrgencyLevel.LOW

    def match(self, symptom_names: Sequence[str]) -> DiagnosisResult:
        """
        Знайти ймовірні умови для симптомів.

        Невідомі симптоми ігноруються. Якщо нічого не знайдено —
        порожній результат: GP, впевненість 0, терміновість low.
        """
        probabilities: Dict[str, float] = {}
        votes = np.zeros(len(SPECIALIST_ORDER), dtype=int)
        urgency_rank = 0

        for symptom in symptom_names:
            entries = self.knowledge_base.get(normalize_symptom_name(symptom))
            if not entries:
                continue

            for entry in entries:
                current = probabilities.get(entry.condition)
                if current is None or entry.probability > current:
                    probabilities[entry.condition] = entry.probability

                votes[SPECIALIST_INDEX[entry.specialist]] += 1
                urgency_rank = max(urgency_rank, self.entry_urgency(entry).rank)

        names = list(probabilities.keys())
        probs = np.array([probabilities[n] for n in names], dtype=float)

        # Стабільне сортування за спаданням: рівні зберігають порядок появи
        order = np.argsort(-probs, kind="stable")
        ranked = [
            PossibleCondition(
                name=names[i],
                probability=float(probs[i]),
                description=self.descriptions.get(names[i], self.config.default_description),
            )
            for i in order
        ]

        if votes.max() > 0:
            specialist = SPECIALIST_ORDER[int(np.argmax(votes))]
        else:
            specialist = SpecialistType.GENERAL_PRACTITIONER

        # Послідовна сума у порядку ранжування
        confidence = float(np.cumsum(probs[order])[-1] / probs.size) if probs.size else 0.0

        top_for_tests = [c.name for c in ranked[:self.config.tests_from_top]]

        return DiagnosisResult(
            possible_conditions=ranked[:self.config.top_conditions],
            confidence=confidence,
            recommended_specialist=specialist,
            additional_tests=get_recommended_tests(top_for_tests),
            urgency_level=UrgencyLevel.from_rank(urgency_rank),
        )

    def vote_counts(self, symptom_names: Sequence[str]) -> Dict[SpecialistType, int]:
        """Голоси спеціалістів (для пояснення рекомендації)"""
        counts = {s: 0 for s in SPECIALIST_ORDER}
        for symptom in symptom_names:
            for entry in self.knowledge_base.get(normalize_symptom_name(symptom), []):
                counts[entry.specialist] += 1
        return counts


_default_matcher = KnowledgeMatcher()


def query_medical_knowledge(symptom_names: Sequence[str]) -> DiagnosisResult:
    """Матчинг з конфігурацією за замовчуванням"""
    return _default_matcher.match(symptom_names)


def get_specialist_diagnosis(
    specialist: SpecialistType,
    patient_info: PatientInfo,
    preliminary: DiagnosisResult,
) -> str:
    """
    Текст "консультації" обраного спеціаліста.

    Три варіанти:
    - умов не знайдено → недостатньо даних, потрібен огляд
    - emergency-спеціаліст або терміновість emergency → негайна допомога
    - інакше → ймовірна умова, обстеження, термін повторного візиту
    """
    info = get_specialist_info(specialist)
    top = preliminary.top_condition
    symptom_list = ", ".join(patient_info.symptom_names)

    if top is None:
        return (
            "Based on the information provided, I don't have enough data to make a confident diagnosis. "
            f"I recommend a comprehensive examination with a {info.name} to properly evaluate your condition."
        )

    if info.type == SpecialistType.EMERGENCY or preliminary.urgency_level == UrgencyLevel.EMERGENCY:
        return (
            f"Based on your symptoms, particularly {symptom_list}, "
            "I recommend immediate emergency care. "
            f"The possible condition of {top.name} requires prompt medical attention. "
            "Please proceed to the nearest emergency room or call emergency services."
        )

    tests = ", ".join(preliminary.additional_tests or []) or "None at this time"
    follow_up = "24-48 hours" if preliminary.urgency_level == UrgencyLevel.HIGH else "1-2 weeks"

    return (
        f"After reviewing your symptoms ({symptom_list}), "
        f"I believe you may be experiencing {top.name}. {top.description} "
        f"I recommend the following tests: {tests}. "
        f"Follow-up with a {info.name} is advised within {follow_up}."
    )
