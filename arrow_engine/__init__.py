"""
Arrow Engine
Arrow component model, balance and ballistic metrics, tuning advisories.
"""

from arrow_engine.components import (
    ShaftMaterial,
    TipType,
    VaneType,
    Shaft,
    Tip,
    Insert,
    Vanes,
    Nock,
    BowSettings,
    ArrowConfiguration,
    ArrowMetrics,
    DEFAULT_ARROW,
)
from arrow_engine.metrics import (
    InvalidArrowConfiguration,
    compute_arrow_metrics,
    compute_validated_metrics,
    validate_arrow_configuration,
    format_metrics,
)
from arrow_engine.advisories import (
    ArrowAssessment,
    FocRating,
    WeightClass,
    GameClass,
    assess_arrow,
)

__all__ = [
    "ShaftMaterial",
    "TipType",
    "VaneType",
    "Shaft",
    "Tip",
    "Insert",
    "Vanes",
    "Nock",
    "BowSettings",
    "ArrowConfiguration",
    "ArrowMetrics",
    "DEFAULT_ARROW",
    "InvalidArrowConfiguration",
    "compute_arrow_metrics",
    "compute_validated_metrics",
    "validate_arrow_configuration",
    "format_metrics",
    "ArrowAssessment",
    "FocRating",
    "WeightClass",
    "GameClass",
    "assess_arrow",
]
