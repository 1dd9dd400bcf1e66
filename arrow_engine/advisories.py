"""
Arrow Engine — Tuning Advisories

Classifies computed metrics against common bowhunting guidelines:
  - FOC:            10-15% ideal for hunting, warn below 8% or above 19%
  - Total weight:   target 300-400 gr, hunting 400-500 gr
  - Kinetic energy: small game 25+, deer 40+, elk 60+ ft-lbs

Thresholds compare the unrounded metric values.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from arrow_engine.components import ArrowMetrics

# ---------- Thresholds ----------
FOC_IDEAL_RANGE = (10.0, 15.0)     # percent
FOC_LOW_WARNING = 8.0
FOC_HIGH_WARNING = 19.0

TARGET_WEIGHT_RANGE = (300.0, 400.0)    # grains
HUNTING_WEIGHT_RANGE = (400.0, 500.0)

SMALL_GAME_KE = 25.0    # ft-lbs
DEER_KE = 40.0
ELK_KE = 60.0

LOW_FOC_MESSAGE = "Consider adding tip weight for better FOC"
HIGH_FOC_MESSAGE = "FOC is very high - may impact accuracy"


class FocRating(str, Enum):
    LOW = "low"                    # below the 8% warning line
    BELOW_IDEAL = "below_ideal"
    IDEAL = "ideal"
    ABOVE_IDEAL = "above_ideal"
    VERY_HIGH = "very_high"        # above the 19% warning line
    UNDEFINED = "undefined"        # NaN / inf


class WeightClass(str, Enum):
    LIGHT = "light"
    TARGET = "target"
    HUNTING = "hunting"
    HEAVY = "heavy"
    UNDEFINED = "undefined"


class GameClass(str, Enum):
    """Largest game the arrow carries enough kinetic energy for."""
    INSUFFICIENT = "insufficient"
    SMALL_GAME = "small_game"
    DEER = "deer"
    ELK = "elk"
    UNDEFINED = "undefined"


@dataclass(frozen=True)
class ArrowAssessment:
    """Ratings for one set of metrics plus any warning messages."""
    foc: FocRating
    weight: WeightClass
    game: GameClass
    messages: List[str] = field(default_factory=list)


# ---------- Classification ----------
def classify_foc(foc: float) -> FocRating:
    """Rate an FOC percentage.

    Ideal band is inclusive on both ends; the warning lines are strict
    (exactly 8% is BELOW_IDEAL, exactly 19% is ABOVE_IDEAL).
    """
    if not math.isfinite(foc):
        return FocRating.UNDEFINED
    if foc < FOC_LOW_WARNING:
        return FocRating.LOW
    if foc > FOC_HIGH_WARNING:
        return FocRating.VERY_HIGH
    low, high = FOC_IDEAL_RANGE
    if foc < low:
        return FocRating.BELOW_IDEAL
    if foc > high:
        return FocRating.ABOVE_IDEAL
    return FocRating.IDEAL


def classify_weight(total_weight: float) -> WeightClass:
    """Bucket total arrow weight. 400 gr counts as hunting weight."""
    if not math.isfinite(total_weight):
        return WeightClass.UNDEFINED
    if total_weight < TARGET_WEIGHT_RANGE[0]:
        return WeightClass.LIGHT
    if total_weight < HUNTING_WEIGHT_RANGE[0]:
        return WeightClass.TARGET
    if total_weight <= HUNTING_WEIGHT_RANGE[1]:
        return WeightClass.HUNTING
    return WeightClass.HEAVY


def classify_kinetic_energy(kinetic_energy: float) -> GameClass:
    if not math.isfinite(kinetic_energy):
        return GameClass.UNDEFINED
    if kinetic_energy >= ELK_KE:
        return GameClass.ELK
    if kinetic_energy >= DEER_KE:
        return GameClass.DEER
    if kinetic_energy >= SMALL_GAME_KE:
        return GameClass.SMALL_GAME
    return GameClass.INSUFFICIENT


def assess_arrow(metrics: ArrowMetrics) -> ArrowAssessment:
    """Rate all metrics and collect the FOC warnings shown to the archer."""
    foc_rating = classify_foc(metrics.foc)

    messages = []
    if foc_rating == FocRating.LOW:
        messages.append(LOW_FOC_MESSAGE)
    elif foc_rating == FocRating.VERY_HIGH:
        messages.append(HIGH_FOC_MESSAGE)

    return ArrowAssessment(
        foc=foc_rating,
        weight=classify_weight(metrics.total_weight),
        game=classify_kinetic_energy(metrics.kinetic_energy),
        messages=messages,
    )
