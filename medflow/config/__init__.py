"""MedFlow — Модуль конфігурації"""
from .settings import (
    MedFlowConfig,
    get_default_config,
    WorkflowDelays,
    MatcherConfig,
    PatientFormConfig,
)
from .loader import save_config, load_config, save_yaml, load_yaml

__all__ = [
    "MedFlowConfig",
    "get_default_config",
    "WorkflowDelays",
    "MatcherConfig",
    "PatientFormConfig",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
]
