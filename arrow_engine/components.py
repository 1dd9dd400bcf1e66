"""
Arrow Engine — Component Data Model

Physical properties of the five arrow components plus bow settings.
Every type is a frozen dataclass: a configuration is a value snapshot,
and an edit produces a new snapshot via ``replace``.

Units: grains, inches, pounds, feet-per-second.
"""

import dataclasses
from dataclasses import dataclass
from enum import Enum

from arrow_engine.display import DISPLAY_PRECISION, round_half_up


# ---------- Categorical Labels ----------
class ShaftMaterial(str, Enum):
    """Shaft material. Display metadata only, never used in arithmetic."""
    CARBON = "Carbon"
    ALUMINUM = "Aluminum"
    CARBON_ALUMINUM_HYBRID = "Carbon/Aluminum Hybrid"
    WOOD = "Wood"


class TipType(str, Enum):
    """Point or broadhead style."""
    FIELD_POINT = "Field Point"
    BULLET_POINT = "Bullet Point"
    FIXED_BROADHEAD = "Broadhead - Fixed"
    MECHANICAL_BROADHEAD = "Broadhead - Mechanical"
    HYBRID_BROADHEAD = "Broadhead - Hybrid"
    JUDO_POINT = "Judo Point"
    FISHING_POINT = "Fishing Point"


class VaneType(str, Enum):
    """Fletching style."""
    PLASTIC = "Plastic"
    FEATHER = "Feather"
    HYBRID = "Hybrid"
    RUBBER = "Rubber"


class _Snapshot:
    """Mixin giving frozen dataclasses a copy-with-changes helper."""

    def replace(self, **changes):
        return dataclasses.replace(self, **changes)


# ---------- Components ----------
@dataclass(frozen=True)
class Shaft(_Snapshot):
    """Arrow shaft."""
    length: float                 # inches
    linear_weight: float          # grains per inch
    diameter: float = 0.246       # inches (standard carbon shaft)
    material: ShaftMaterial = ShaftMaterial.CARBON

    @property
    def weight(self) -> float:
        """Total shaft weight in grains."""
        return self.length * self.linear_weight


@dataclass(frozen=True)
class Tip(_Snapshot):
    """Field point or broadhead."""
    weight: float                 # grains
    type: TipType = TipType.FIELD_POINT


@dataclass(frozen=True)
class Insert(_Snapshot):
    weight: float                 # grains


@dataclass(frozen=True)
class Vanes(_Snapshot):
    """Fletching set. ``count`` is expected to be 2, 3 or 4."""
    weight_per_vane: float        # grains
    count: int = 3
    length: float = 2.1           # inches
    height: float = 0.5           # inches
    type: VaneType = VaneType.PLASTIC

    @property
    def total_weight(self) -> float:
        return self.weight_per_vane * self.count


@dataclass(frozen=True)
class Nock(_Snapshot):
    weight: float                 # grains


@dataclass(frozen=True)
class BowSettings(_Snapshot):
    """Bow parameters.

    Only ``arrow_speed`` enters the metrics. ``draw_weight`` and
    ``draw_length`` are carried for display and do not affect any output.
    """
    arrow_speed: float            # feet per second (chronograph or IBO/ATA rating)
    draw_weight: float = 70.0     # pounds
    draw_length: float = 29.0     # inches


@dataclass(frozen=True)
class ArrowConfiguration(_Snapshot):
    """A complete arrow build plus the bow it is shot from."""
    shaft: Shaft
    tip: Tip
    insert: Insert
    vanes: Vanes
    nock: Nock
    bow: BowSettings

    def with_component(self, name: str, **changes) -> "ArrowConfiguration":
        """Return a new configuration with one component's fields changed.

        Example:
            config.with_component("tip", weight=125.0)
        """
        component = getattr(self, name)
        return self.replace(**{name: component.replace(**changes)})


# ---------- Derived Metrics ----------
@dataclass(frozen=True)
class ArrowMetrics:
    """Metrics derived from an ArrowConfiguration. Recomputed on every call."""
    total_weight: float           # grains
    foc: float                    # percent, negative when balance is behind center
    balance_point: float          # inches from tip
    kinetic_energy: float         # foot-pounds
    momentum: float               # display unit (see metrics.compute_arrow_metrics)

    def to_dict(self) -> dict:
        """JSON-friendly representation (unrounded)."""
        return dataclasses.asdict(self)

    def rounded(self) -> "ArrowMetrics":
        """Return a copy rounded to display precision."""
        return ArrowMetrics(**{
            name: round_half_up(value, DISPLAY_PRECISION[name])
            for name, value in self.to_dict().items()
        })


# ---------- Default Build ----------
DEFAULT_ARROW = ArrowConfiguration(
    shaft=Shaft(length=28.5, linear_weight=8.5, diameter=0.246, material=ShaftMaterial.CARBON),
    tip=Tip(weight=100.0, type=TipType.FIELD_POINT),
    insert=Insert(weight=20.0),
    vanes=Vanes(weight_per_vane=8.0, count=3, length=2.1, height=0.5, type=VaneType.PLASTIC),
    nock=Nock(weight=10.0),
    bow=BowSettings(arrow_speed=280.0, draw_weight=70.0, draw_length=29.0),
)

COMPONENT_NAMES = ("shaft", "tip", "insert", "vanes", "nock", "bow")


def settable_fields(component) -> set:
    """Names accepted by ``component.replace``; excludes derived properties."""
    return {f.name for f in dataclasses.fields(component)}
