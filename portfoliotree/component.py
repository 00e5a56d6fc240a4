"""Portfolio components: the securities and portfolios a portfolio holds."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

COMPONENT_TYPE_SECURITY = "Security"
COMPONENT_TYPE_PORTFOLIO = "Portfolio"
COMPONENT_TYPE_EQUITY = "Equity"
COMPONENT_TYPE_ETF = "ETF"
COMPONENT_TYPE_FACTOR = "Factor"
COMPONENT_TYPE_MUTUAL_FUND = "Mutual Fund"

COMPONENT_ID_PATTERN = "^[a-zA-Z0-9.:]{1,24}$"
_COMPONENT_ID = re.compile(COMPONENT_ID_PATTERN)

_FIELDS = ("type", "id", "label")


def component_types() -> list[str]:
    """Return every known component type."""
    return [
        COMPONENT_TYPE_SECURITY,
        COMPONENT_TYPE_PORTFOLIO,
        COMPONENT_TYPE_EQUITY,
        COMPONENT_TYPE_ETF,
        COMPONENT_TYPE_FACTOR,
        COMPONENT_TYPE_MUTUAL_FUND,
    ]


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


@dataclass
class Component:
    """An asset or portfolio identified by its ID."""

    type: str = ""
    id: str = ""
    label: str = ""

    def validate(self) -> None:
        """Raise ValueError if the component is not well formed."""
        if self.id == "":
            raise ValueError("component ID must be set")
        if self.id == "undefined":
            raise ValueError('component ID must not be "undefined"')
        if not _COMPONENT_ID.fullmatch(self.id):
            raise ValueError(
                f'component id "{self.id}" does not match the component ID pattern '
                f'"{COMPONENT_ID_PATTERN}"'
            )
        if self.type != "" and self.type not in component_types():
            raise ValueError(f'component type "{self.type}" is not a known component type')

    @classmethod
    def from_value(cls, value: Any) -> Component:
        """Build a component from an identifier or from a mapping of its fields."""
        if _is_scalar(value):
            return cls(id=str(value))
        if isinstance(value, Mapping):
            fields = {}
            for name in _FIELDS:
                field_value = value.get(name)
                if field_value is None:
                    continue
                if not _is_scalar(field_value):
                    raise TypeError(f"component field {name} must be a string")
                fields[name] = str(field_value)
            return cls(**fields)
        raise TypeError(
            "wrong YAML type: expected either a component identifier (string) or a Component"
        )