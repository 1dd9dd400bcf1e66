"""
Tuning App — Arrow Setup Form

Configuration source for the engine. Holds the current arrow build as an
immutable ArrowConfiguration snapshot; every edit builds a new snapshot
and recomputes metrics from scratch.

Field paths are ``"component.field"``. Shaft diameter is edited in
millimetres (``"shaft.diameter_mm"``) and stored in inches.
"""

import math
import re
from dataclasses import dataclass
from typing import Dict, List, Tuple

from arrow_engine.components import (
    ArrowConfiguration,
    ArrowMetrics,
    COMPONENT_NAMES,
    DEFAULT_ARROW,
    settable_fields,
)
from arrow_engine.metrics import compute_arrow_metrics
from tuning_app.option_registry import OPTIONS

MM_PER_INCH = 25.4
DEFAULT_VANE_COUNT = 3


@dataclass(frozen=True)
class InputRange:
    """Bounds offered by the form. Advisory only: never blocks computation."""
    minimum: float
    maximum: float
    step: float

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum


INPUT_RANGES: Dict[str, InputRange] = {
    "shaft.length": InputRange(20, 35, 0.5),
    "shaft.diameter_mm": InputRange(4, 12, 0.1),
    "shaft.linear_weight": InputRange(5, 15, 0.1),
    "tip.weight": InputRange(75, 200, 5),
    "insert.weight": InputRange(0, 100, 1),
    "vanes.count": InputRange(2, 4, 1),
    "vanes.length": InputRange(1, 5, 0.1),
    "vanes.height": InputRange(0.1, 2, 0.1),
    "vanes.weight_per_vane": InputRange(1, 20, 0.5),
    "nock.weight": InputRange(5, 20, 1),
    "bow.draw_weight": InputRange(30, 90, 5),
    "bow.draw_length": InputRange(24, 32, 0.5),
    "bow.arrow_speed": InputRange(200, 350, 5),
}


# Leading numeric prefix of a text entry: "12abc" -> "12", " 2.5e1in" -> "2.5e1"
_NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")
_INTEGER_PREFIX = re.compile(r"\s*([+-]?\d+)")


def parse_number(value) -> float:
    """Parse a numeric form entry.

    Text is read up to the first character that cannot continue a number,
    so "12abc" gives 12. Blank or non-numeric text becomes 0.
    """
    if isinstance(value, str):
        match = _NUMBER_PREFIX.match(value)
        if not match:
            return 0.0
        value = match.group(1)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(number) else number


def parse_count(value) -> int:
    """Parse a vane count from its leading digits; unusable entries (including 0) become 3."""
    if isinstance(value, str):
        match = _INTEGER_PREFIX.match(value)
        if not match:
            return DEFAULT_VANE_COUNT
        value = match.group(1)
    try:
        count = int(value)
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_VANE_COUNT
    return count or DEFAULT_VANE_COUNT


def field_value(config: ArrowConfiguration, field: str):
    """Read a form field from a configuration, in display units."""
    if field == "shaft.diameter_mm":
        return config.shaft.diameter * MM_PER_INCH
    component, attr = _split(field)
    return getattr(getattr(config, component), attr)


def _split(field: str) -> Tuple[str, str]:
    component, _, attr = field.partition(".")
    if not attr:
        raise KeyError(f"Field path must look like 'component.field', got {field!r}")
    return component, attr


class ArrowSetupForm:
    """Live arrow setup.

    ``config`` and ``metrics`` are replaced wholesale on every edit; neither
    object is ever mutated.
    """

    def __init__(self, config: ArrowConfiguration = DEFAULT_ARROW):
        self.config = config
        self.metrics: ArrowMetrics = compute_arrow_metrics(config)

    def edit(self, field: str, value) -> ArrowMetrics:
        """Apply one user edit and return the recomputed metrics.

        Args:
            field: Field path, e.g. ``"tip.weight"`` or ``"shaft.diameter_mm"``.
            value: Raw entry (text or number) or an option label.

        Raises:
            KeyError: unknown field.
            ValueError: unknown option label for a categorical field.
        """
        if field in OPTIONS.fields():
            parsed = OPTIONS.parse(field, value)
        elif field == "vanes.count":
            parsed = parse_count(value)
        elif field == "shaft.diameter_mm":
            field, parsed = "shaft.diameter", parse_number(value) / MM_PER_INCH
        else:
            parsed = parse_number(value)

        component, attr = _split(field)
        if component not in COMPONENT_NAMES or attr not in settable_fields(getattr(self.config, component)):
            raise KeyError(f"Unknown field {field!r}")

        self.config = self.config.with_component(component, **{attr: parsed})
        self.metrics = compute_arrow_metrics(self.config)
        return self.metrics

    def out_of_range(self) -> List[Tuple[str, float, InputRange]]:
        """Fields whose current value falls outside the form bounds."""
        return [
            (field, field_value(self.config, field), bounds)
            for field, bounds in INPUT_RANGES.items()
            if not bounds.contains(field_value(self.config, field))
        ]
