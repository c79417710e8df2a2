"""
MedFlow — Налаштування системи

Всі параметри системи зібрані в dataclass-и для:
- Типізації та валідації
- Легкого доступу через config.delays.analysis
- Серіалізації в YAML/JSON
"""

from dataclasses import dataclass, field


# =============================================================================
# DELAYS
# =============================================================================

@dataclass
class WorkflowDelays:
    """
    Штучні затримки (секунди), що імітують асинхронні виклики AI.

    Сервісні затримки імітують "виклики API", паузи етапів задають кроки прогрес-бару.
    """

    # Сервіс
    analysis: float = 1.5       # analyze_patient_symptoms
    knowledge: float = 2.0      # query_medical_knowledge
    specialist: float = 1.5     # get_specialist_diagnosis

    # Етап аналізу симптомів: 20% → 40% → 70% → 100%
    analysis_steps: list = field(default_factory=lambda: [1.0, 0.5, 0.5])

    # Етап пошуку знань: 10% → 30% → 50% → 70%
    knowledge_step: float = 0.8

    def scaled(self, factor: float) -> "WorkflowDelays":
        """Копія з затримками помноженими на factor (0 = миттєво)"""
        return WorkflowDelays(
            analysis=self.analysis * factor,
            knowledge=self.knowledge * factor,
            specialist=self.specialist * factor,
            analysis_steps=[s * factor for s in self.analysis_steps],
            knowledge_step=self.knowledge_step * factor,
        )


# =============================================================================
# MATCHER
# =============================================================================

@dataclass
class MatcherConfig:
    """Параметри rule-based матчера умов"""

    top_conditions: int = 5         # скільки умов повертати
    tests_from_top: int = 3         # аналізи беремо з топ-N умов

    # Пороги терміновості (строге порівняння)
    high_urgency_probability: float = 0.5
    medium_urgency_probability: float = 0.3

    default_description: str = "No description available"


# =============================================================================
# PATIENT FORM
# =============================================================================

@dataclass
class PatientFormConfig:
    """Обмеження форми пацієнта"""

    min_severity: int = 1
    max_severity: int = 10
    default_severity: int = 5


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class MedFlowConfig:
    """
    Головна конфігурація MedFlow

    Приклад використання:
        config = MedFlowConfig()
        print(config.delays.knowledge)          # 2.0
        print(config.matcher.top_conditions)    # 5
    """

    # Метадані
    version: str = "1.0.0"
    project_name: str = "MedFlow"

    # Компоненти
    delays: WorkflowDelays = field(default_factory=WorkflowDelays)
    matcher: MatcherConfig = field(default_factory=MatcherConfig)
    patient_form: PatientFormConfig = field(default_factory=PatientFormConfig)

    @classmethod
    def instant(cls) -> "MedFlowConfig":
        """Конфігурація без затримок (тести, CLI)"""
        config = cls()
        config.delays = config.delays.scaled(0.0)
        return config

    @classmethod
    def from_dict(cls, data: dict) -> "MedFlowConfig":
        """Відновити з dict (наприклад, з YAML)"""
        return cls(
            version=data.get("version", "1.0.0"),
            project_name=data.get("project_name", "MedFlow"),
            delays=WorkflowDelays(**data.get("delays", {})),
            matcher=MatcherConfig(**data.get("matcher", {})),
            patient_form=PatientFormConfig(**data.get("patient_form", {})),
        )


# =============================================================================
# DEFAULT CONFIG INSTANCE
# =============================================================================

def get_default_config() -> MedFlowConfig:
    """Отримати конфігурацію за замовчуванням (затримки як у демо)"""
    return MedFlowConfig()
