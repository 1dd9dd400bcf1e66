"""
Arrow Engine — Metrics Calculation

Pure, stateless mapping from an ArrowConfiguration to ArrowMetrics:
total weight, front-of-center (FOC), balance point, kinetic energy and
momentum.

Balance point model: static first moment along the shaft axis with the
tip at position 0 and the nock at position L (shaft length).
  - tip + insert       concentrated at 0 (zero moment)
  - shaft              uniform rod, centered at L/2
  - nock + vanes       concentrated at L

Arithmetic runs in numpy float64 so a zero total weight yields NaN/inf
instead of raising. Values are returned unrounded; rounding happens in
``format_metrics`` / ``ArrowMetrics.rounded``.
"""

from typing import Dict

import numpy as np

from arrow_engine.components import ArrowConfiguration, ArrowMetrics
from arrow_engine.display import DISPLAY_PRECISION, format_fixed

# ---------- Constants ----------
GRAINS_TO_KG = 0.0000648      # 1 grain ≈ 0.0000648 kg
FPS_TO_MS = 0.3048            # 1 ft/s = 0.3048 m/s
JOULES_TO_FT_LBS = 0.737562   # 1 J ≈ 0.737562 ft·lbf


class InvalidArrowConfiguration(ValueError):
    """Raised by ``validate_arrow_configuration`` for builds with no defined balance."""


# ---------- Sub-steps ----------
def _component_weights(config: ArrowConfiguration) -> Dict[str, np.float64]:
    """Weights in grains of shaft, vanes, and the whole arrow."""
    shaft_weight = np.float64(config.shaft.length) * np.float64(config.shaft.linear_weight)
    vanes_weight = np.float64(config.vanes.weight_per_vane) * np.float64(config.vanes.count)
    total_weight = (
        shaft_weight
        + np.float64(config.tip.weight)
        + vanes_weight
        + np.float64(config.nock.weight)
        + np.float64(config.insert.weight)
    )
    return {"shaft": shaft_weight, "vanes": vanes_weight, "total": total_weight}


def _balance_point(
    length: np.float64,
    shaft_weight: np.float64,
    rear_weight: np.float64,
    total_weight: np.float64,
) -> np.float64:
    """Distance of the center of mass from the tip, in inches."""
    shaft_moment = shaft_weight * (length / 2)
    rear_moment = rear_weight * length
    total_moment = shaft_moment + rear_moment
    return total_moment / total_weight


# ---------- Public API ----------
def compute_arrow_metrics(config: ArrowConfiguration) -> ArrowMetrics:
    """Compute metrics for an arrow build.

    Never raises on numeric input and does not check ranges. A zero total
    weight gives a NaN or infinite balance point and FOC; a zero shaft
    length gives a non-finite FOC.

    Args:
        config: Arrow and bow snapshot. Not modified.

    Returns:
        ArrowMetrics with unrounded values. ``momentum`` is
        ``mass_kg * velocity_ms * 0.3048 / 0.0000648``, i.e. grains × fps
        scaled by 0.3048².
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        weights = _component_weights(config)
        total_weight = weights["total"]
        length = np.float64(config.shaft.length)

        rear_weight = np.float64(config.nock.weight) + weights["vanes"]
        balance_point = _balance_point(length, weights["shaft"], rear_weight, total_weight)

        shaft_midpoint = length / 2
        foc = ((shaft_midpoint - balance_point) / length) * 100

        # Kinetic energy: KE = 0.5 * m * v², SI then ft-lbs
        mass_kg = total_weight * GRAINS_TO_KG
        velocity_ms = np.float64(config.bow.arrow_speed) * FPS_TO_MS
        kinetic_energy = 0.5 * mass_kg * velocity_ms * velocity_ms * JOULES_TO_FT_LBS

        # Momentum: p = m * v
        momentum_kg_ms = mass_kg * velocity_ms
        momentum = momentum_kg_ms * FPS_TO_MS / GRAINS_TO_KG

    return ArrowMetrics(
        total_weight=float(total_weight),
        foc=float(foc),
        balance_point=float(balance_point),
        kinetic_energy=float(kinetic_energy),
        momentum=float(momentum),
    )


def validate_arrow_configuration(config: ArrowConfiguration) -> None:
    """Reject builds whose balance point is undefined.

    Separate from ``compute_arrow_metrics``, which always computes.

    Raises:
        InvalidArrowConfiguration: shaft length or total weight is not a
            positive finite number.
    """
    length = config.shaft.length
    if not np.isfinite(length) or length <= 0:
        raise InvalidArrowConfiguration(
            f"Shaft length must be a positive number of inches, got {length}"
        )

    with np.errstate(over="ignore", invalid="ignore"):
        total_weight = _component_weights(config)["total"]
    if not np.isfinite(total_weight) or total_weight <= 0:
        raise InvalidArrowConfiguration(
            f"Total arrow weight must be positive, got {float(total_weight)} grains"
        )


def compute_validated_metrics(config: ArrowConfiguration) -> ArrowMetrics:
    """Validate, then compute. Raises InvalidArrowConfiguration."""
    validate_arrow_configuration(config)
    return compute_arrow_metrics(config)


def format_metrics(metrics: ArrowMetrics) -> Dict[str, str]:
    """Fixed-point display strings keyed by field name.

    total_weight and kinetic_energy get 1 decimal; foc, balance_point and
    momentum get 2.
    """
    return {
        name: format_fixed(value, DISPLAY_PRECISION[name])
        for name, value in metrics.to_dict().items()
    }
