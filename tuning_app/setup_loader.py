"""
Tuning App — Setup Loader

Reads an arrow build from YAML. Each component section is merged over
the default build, so a file only needs the fields it changes.
"""

from pathlib import Path
from typing import Optional

import yaml

from arrow_engine.components import ArrowConfiguration, COMPONENT_NAMES, DEFAULT_ARROW, settable_fields
from tuning_app.option_registry import OPTIONS

CONFIGS_DIR = Path(__file__).resolve().parent / "configs"
DEFAULT_SETUP_PATH = CONFIGS_DIR / "default_setup.yaml"


def _to_number(path: str, value, kind):
    try:
        return kind(value)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"Field {path!r} must be a number, got {value!r}") from None


def configuration_from_dict(data: Optional[dict], base: ArrowConfiguration = DEFAULT_ARROW) -> ArrowConfiguration:
    """Build a configuration from nested ``{component: {field: value}}`` data.

    Raises:
        ValueError: unknown component, unknown field, or unknown option label.
    """
    if data is not None and not isinstance(data, dict):
        raise ValueError(f"Arrow setup must be a mapping of components, got {type(data).__name__}")

    config = base
    for component, overrides in (data or {}).items():
        if component not in COMPONENT_NAMES:
            raise ValueError(f"Unknown arrow component {component!r}; expected one of {list(COMPONENT_NAMES)}")
        if not isinstance(overrides, dict):
            raise ValueError(f"Section {component!r} must be a mapping, got {type(overrides).__name__}")

        fields = {}
        for name, value in overrides.items():
            path = f"{component}.{name}"
            if path in OPTIONS.fields():
                value = OPTIONS.parse(path, value)
            elif name not in settable_fields(getattr(base, component)):
                raise ValueError(f"Unknown field {path!r}")
            else:
                value = _to_number(path, value, int if name == "count" else float)
            fields[name] = value

        config = config.with_component(component, **fields)
    return config


def load_setup(config_path: Path = None) -> ArrowConfiguration:
    """Load an arrow build from YAML (defaults to configs/default_setup.yaml)."""
    if config_path is None:
        config_path = DEFAULT_SETUP_PATH
    with open(config_path) as f:
        data = yaml.safe_load(f)
    return configuration_from_dict(data)
