"""Input resolution: raw form values -> fully defaulted ResolvedInputs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from mowroi.engine.numeric import clamp, coerce_number
from mowroi.models.enums import MaintenanceType, PropertyType
from mowroi.models.inputs import PROPERTY_DEFAULTS, PropertyDefaults, ResolvedInputs

_TRUE_STRINGS = {"true", "1", "yes", "on"}


@dataclass(frozen=True)
class FieldRule:
    """Default and valid range for one numeric input."""

    default: float
    minimum: float = 0.0
    maximum: float = math.inf
    zero_is_missing: bool = False


# Fields whose defaults depend on the property type are filled in by
# ``_rules_for`` below.
FIELD_RULES: dict[str, FieldRule] = {
    "acreage": FieldRule(default=0),
    "season_weeks": FieldRule(default=30, minimum=1, zero_is_missing=True),
    "employees": FieldRule(default=0),
    "hourly_rate": FieldRule(default=0),
    "mowing_time_percent": FieldRule(default=0, maximum=100),
    "monthly_contract": FieldRule(default=0),
    "benefits_rate": FieldRule(default=12, maximum=100),
    "fuel_cost_per_gallon": FieldRule(default=3.50),
    "labor_reduction": FieldRule(default=85, minimum=50, maximum=95),
    "buffer_time": FieldRule(default=15, minimum=5, maximum=40),
    "annual_labor_increase": FieldRule(default=2.5, maximum=10),
    "annual_fuel_increase": FieldRule(default=3.5, maximum=15),
    "base_equipment_cost": FieldRule(default=15000),
    "equipment_cost_per_acre": FieldRule(default=2000),
    "maintenance_rate": FieldRule(default=10, minimum=5, maximum=25),
    "insurance_rate": FieldRule(default=5, minimum=1, maximum=15),
    "leasing_premium": FieldRule(default=7, maximum=20),
    "robotic_maintenance": FieldRule(default=3),
    "electricity_per_acre": FieldRule(default=1.5),
    "co2_per_gallon": FieldRule(default=19.59),
    "automation_level": FieldRule(default=50, minimum=25, maximum=100),
    "desired_mowing_time": FieldRule(default=20, minimum=5, maximum=60),
}


def _rules_for(defaults: PropertyDefaults) -> dict[str, FieldRule]:
    rules = dict(FIELD_RULES)
    rules["fuel_per_acre"] = FieldRule(default=defaults.fuel_per_acre)
    rules["mowing_time_per_acre"] = FieldRule(default=defaults.mowing_time_per_acre)
    return rules


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _lookup(raw: Mapping[str, Any], name: str) -> Any:
    """Read a raw value by snake_case name, falling back to camelCase."""
    if name in raw:
        return raw[name]
    return raw.get(_camel(name))


def resolve_property_type(value: Any) -> PropertyType:
    if isinstance(value, PropertyType):
        return value
    if isinstance(value, str):
        try:
            return PropertyType(value.strip().lower())
        except ValueError:
            pass
    return PropertyType.COMMERCIAL


def resolve_maintenance_type(value: Any) -> MaintenanceType:
    if isinstance(value, MaintenanceType):
        return value
    if value == MaintenanceType.OUTSOURCED.value:
        return MaintenanceType.OUTSOURCED
    return MaintenanceType.INHOUSE


def resolve_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def resolve_number(value: Any, rule: FieldRule) -> float:
    """Apply a field rule: coerce, substitute the default, then clamp."""
    number: Optional[float] = coerce_number(value)
    if number is None or (rule.zero_is_missing and number == 0):
        number = float(rule.default)
    return clamp(number, rule.minimum, rule.maximum)


def resolve_inputs(raw: Optional[Mapping[str, Any]]) -> ResolvedInputs:
    """Build a ResolvedInputs from a partial raw input mapping.

    Never raises and never mutates ``raw``. Keys may be given in
    snake_case or in the camelCase used by the web form.
    """
    raw = raw or {}
    property_type = resolve_property_type(_lookup(raw, "property_type"))
    defaults = PROPERTY_DEFAULTS[property_type]

    numbers = {
        name: resolve_number(_lookup(raw, name), rule)
        for name, rule in _rules_for(defaults).items()
    }

    return ResolvedInputs(
        property_type=property_type,
        mows_per_week=defaults.mows_per_week,
        maintenance_type=resolve_maintenance_type(_lookup(raw, "maintenance_type")),
        is_leased=resolve_flag(_lookup(raw, "is_leased")),
        **numbers,
    )
