from __future__ import annotations

from dataclasses import dataclass

from .enums import MaintenanceType, PropertyType


@dataclass(frozen=True)
class PropertyDefaults:
    """Category-specific values keyed by property type."""

    mowing_time_per_acre: float  # minutes
    mows_per_week: int
    fuel_per_acre: float  # gallons


PROPERTY_DEFAULTS: dict[PropertyType, PropertyDefaults] = {
    PropertyType.COMMERCIAL: PropertyDefaults(
        mowing_time_per_acre=45, mows_per_week=1, fuel_per_acre=0.75
    ),
    PropertyType.GOLF: PropertyDefaults(
        mowing_time_per_acre=60, mows_per_week=3, fuel_per_acre=1.0
    ),
    PropertyType.ATHLETIC: PropertyDefaults(
        mowing_time_per_acre=50, mows_per_week=2, fuel_per_acre=0.85
    ),
}


@dataclass(frozen=True)
class ResolvedInputs:
    """Fully defaulted and clamped calculator inputs.

    Produced once per calculation by ``resolve_inputs`` and never mutated.
    Percentages are stored on a 0-100 scale, money in dollars.
    """

    # Property
    property_type: PropertyType
    acreage: float
    season_weeks: float
    mows_per_week: int

    maintenance_type: MaintenanceType

    # In-house crew
    employees: float
    hourly_rate: float
    mowing_time_percent: float
    is_leased: bool

    # Outsourced contract
    monthly_contract: float

    # Economic assumptions
    benefits_rate: float
    fuel_cost_per_gallon: float
    labor_reduction: float
    buffer_time: float
    annual_labor_increase: float
    fuel_per_acre: float
    annual_fuel_increase: float
    base_equipment_cost: float
    equipment_cost_per_acre: float
    maintenance_rate: float
    insurance_rate: float
    leasing_premium: float
    robotic_maintenance: float
    electricity_per_acre: float
    co2_per_gallon: float
    mowing_time_per_acre: float

    # Automation goals
    automation_level: float
    desired_mowing_time: float

    @property
    def is_outsourced(self) -> bool:
        return self.maintenance_type is MaintenanceType.OUTSOURCED

    @property
    def automation_fraction(self) -> float:
        return self.automation_level / 100
