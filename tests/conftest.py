"""
Arrow Tuning Test Suite — Shared Fixtures

Provides reusable pytest fixtures for all test stages.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from arrow_engine.components import (
    ArrowConfiguration,
    BowSettings,
    DEFAULT_ARROW,
    Insert,
    Nock,
    Shaft,
    Tip,
    Vanes,
)
from tuning_app.setup_form import ArrowSetupForm


# ---------- Configuration Fixtures ----------
@pytest.fixture
def default_arrow():
    """28.5" x 8.5 gr/in shaft, 100 gr tip, 20 gr insert, 3 x 8 gr vanes, 10 gr nock, 280 fps."""
    return DEFAULT_ARROW


@pytest.fixture
def bare_shaft():
    """Shaft only: every accessory weighs nothing."""
    return ArrowConfiguration(
        shaft=Shaft(length=28.5, linear_weight=8.5),
        tip=Tip(weight=0.0),
        insert=Insert(weight=0.0),
        vanes=Vanes(weight_per_vane=0.0, count=3),
        nock=Nock(weight=0.0),
        bow=BowSettings(arrow_speed=280.0),
    )


@pytest.fixture
def weightless_arrow(bare_shaft):
    """Every component weight zero: balance point is undefined."""
    return bare_shaft.with_component("shaft", linear_weight=0.0)


@pytest.fixture
def heavy_hunting_arrow():
    """Elk build: 29" x 9.5 gr/in, 125 gr broadhead, 50 gr insert, 4 x 6 gr vanes."""
    return DEFAULT_ARROW.replace(
        shaft=Shaft(length=29.0, linear_weight=9.5),
        tip=Tip(weight=125.0),
        insert=Insert(weight=50.0),
        vanes=Vanes(weight_per_vane=6.0, count=4),
        bow=BowSettings(arrow_speed=275.0),
    )


@pytest.fixture
def setup_form():
    """Form seeded with the default build."""
    return ArrowSetupForm()
