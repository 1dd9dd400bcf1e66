"""
Tuning App — Option Registry

Selectable labels for the categorical arrow fields, as offered by the
setup form. Provides lookups from user-facing labels back to enum members
and a JSON dump for front ends.
"""

import json
from enum import Enum
from typing import Dict, List, Type

from arrow_engine.components import ShaftMaterial, TipType, VaneType

VANE_COUNTS = [2, 3, 4]


class OptionRegistry:
    """Maps a field path (``"tip.type"``) to its enum of allowed labels."""

    def __init__(self):
        self._options: Dict[str, Type[Enum]] = {
            "shaft.material": ShaftMaterial,
            "tip.type": TipType,
            "vanes.type": VaneType,
        }

    def fields(self) -> List[str]:
        return list(self._options)

    def labels(self, field: str) -> List[str]:
        """All labels for a categorical field, in display order."""
        return [member.value for member in self._options[field]]

    def parse(self, field: str, label) -> Enum:
        """Resolve a label (or enum member name) to the enum member.

        Raises:
            KeyError: unknown field.
            ValueError: label is not one of the field's options.
        """
        enum_cls = self._options[field]
        if isinstance(label, enum_cls):
            return label
        try:
            return enum_cls(label)
        except ValueError:
            pass
        if isinstance(label, str) and label.upper() in enum_cls.__members__:
            return enum_cls[label.upper()]
        raise ValueError(
            f"Unknown {field} option {label!r}; expected one of {self.labels(field)}"
        )

    def to_dict(self) -> dict:
        """JSON-serializable option sets."""
        options = {field: self.labels(field) for field in self._options}
        options["vanes.count"] = list(VANE_COUNTS)
        return options

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


OPTIONS = OptionRegistry()
