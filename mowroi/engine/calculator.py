"""Cost & savings engine.

Takes resolved inputs -> produces the current cost picture, automation
savings, new robotic operating costs, labor and environmental figures.
Monetary values are rounded to cents at every step, in the same order as
the published calculator, so totals reproduce to the cent.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from mowroi.engine.numeric import round_half_up, round_int
from mowroi.engine.resolver import resolve_inputs
from mowroi.engine.result import (
    CostComponents,
    CurrentCosts,
    EnvironmentalImpact,
    LaborAnalysis,
    NewCosts,
    ROIResult,
    Savings,
)
from mowroi.models.inputs import ResolvedInputs

logger = logging.getLogger(__name__)

HOURS_PER_WEEK = 40
# Share of an outsourced contract that robotic mowing displaces.
OUTSOURCED_DISPLACEMENT = 0.85
# Equipment wear falls at half the automation rate.
EQUIPMENT_WEAR_FACTOR = 0.5
ELECTRICITY_RATE_PER_KWH = 0.12
# EPA: lbs of CO2 absorbed per tree per year.
CO2_LBS_PER_TREE = 48
NOISE_REDUCTION_DB = 30
MONTHS_PER_YEAR = 12


class CalculationEngine:
    """Stateless engine that runs the single-year ROI calculation."""

    def calculate(self, inputs: ResolvedInputs) -> ROIResult:
        """Run the full cost, savings, labor and environmental analysis."""
        components = self._cost_components(inputs)
        current = CurrentCosts(
            labor=components.labor_cost,
            fuel=components.fuel_cost,
            equipment=components.equipment_annual_cost,
            total=round_half_up(
                components.labor_cost
                + components.fuel_cost
                + components.equipment_annual_cost
            ),
        )
        savings = self._savings(inputs, components)
        new_costs = NewCosts(
            maintenance=components.robotic_maintenance_cost,
            electricity=components.electricity_cost,
            total=components.total_new_costs,
        )

        logger.debug(
            f"{inputs.property_type.value}/{inputs.maintenance_type.value}: "
            f"gross savings {savings.gross}, new costs {new_costs.total}"
        )

        return ROIResult(
            current_costs=current,
            savings=savings,
            new_costs=new_costs,
            net_annual_savings=round_half_up(savings.gross - new_costs.total),
            labor=self._labor(inputs),
            environmental=self._environmental(inputs),
            inputs=inputs,
            components=components,
        )

    def _cost_components(self, i: ResolvedInputs) -> CostComponents:
        if i.is_outsourced:
            labor_cost = i.monthly_contract * MONTHS_PER_YEAR
            fuel_cost = 0.0
            equipment_cost = 0.0
        else:
            labor_cost = (
                i.employees
                * i.hourly_rate
                * (1 + i.benefits_rate / 100)
                * HOURS_PER_WEEK
                * i.season_weeks
                * (i.mowing_time_percent / 100)
                * (1 + i.buffer_time / 100)
            )
            fuel_cost = (
                i.acreage
                * i.fuel_per_acre
                * i.mows_per_week
                * i.season_weeks
                * i.fuel_cost_per_gallon
            )
            equipment_base = i.base_equipment_cost + i.equipment_cost_per_acre * i.acreage
            equipment_cost = equipment_base * (
                i.maintenance_rate / 100 + i.insurance_rate / 100
            )
            if i.is_leased:
                equipment_cost *= 1 + i.leasing_premium / 100

        robotic_maintenance = round_half_up(
            i.acreage * i.automation_fraction * i.robotic_maintenance * MONTHS_PER_YEAR
        )
        electricity = round_half_up(
            i.acreage
            * i.automation_fraction
            * i.electricity_per_acre
            * ELECTRICITY_RATE_PER_KWH
            * i.mows_per_week
            * i.season_weeks
        )

        return CostComponents(
            labor_cost=round_half_up(labor_cost),
            fuel_cost=round_half_up(fuel_cost),
            equipment_annual_cost=round_half_up(equipment_cost),
            robotic_maintenance_cost=robotic_maintenance,
            electricity_cost=electricity,
            total_new_costs=round_half_up(robotic_maintenance + electricity),
        )

    def _savings(self, i: ResolvedInputs, c: CostComponents) -> Savings:
        if i.is_outsourced:
            labor = round_half_up(
                c.labor_cost * i.automation_fraction * OUTSOURCED_DISPLACEMENT
            )
            fuel = 0.0
            equipment = 0.0
        else:
            labor = round_half_up(
                c.labor_cost * i.automation_fraction * (i.labor_reduction / 100)
            )
            fuel = round_half_up(c.fuel_cost * i.automation_fraction)
            equipment = round_half_up(
                c.equipment_annual_cost * i.automation_fraction * EQUIPMENT_WEAR_FACTOR
            )

        return Savings(
            labor=labor,
            fuel=fuel,
            equipment=equipment,
            gross=round_half_up(labor + fuel + equipment),
        )

    def _labor(self, i: ResolvedInputs) -> LaborAnalysis:
        current_hours = round_int(
            i.acreage * (i.mowing_time_per_acre / 60) * i.mows_per_week * i.season_weeks
        )
        hours_saved = round_int(
            current_hours * i.automation_fraction * (i.labor_reduction / 100)
        )

        if i.is_outsourced:
            current_fte = 0.0
            reduced_fte = 0.0
        else:
            current_fte = i.employees
            reduced_fte = max(
                0.0,
                round_half_up(
                    current_fte * (1 - i.automation_fraction * (i.labor_reduction / 100)),
                    1,
                ),
            )

        return LaborAnalysis(
            current_hours=current_hours,
            hours_saved=hours_saved,
            current_fte=current_fte,
            reduced_fte=reduced_fte,
        )

    def _environmental(self, i: ResolvedInputs) -> EnvironmentalImpact:
        gallons = i.acreage * i.automation_fraction * i.fuel_per_acre * i.mows_per_week * i.season_weeks
        co2_reduced = round_half_up(
            i.acreage
            * i.automation_fraction
            * i.fuel_per_acre
            * i.co2_per_gallon
            * i.mows_per_week
            * i.season_weeks
        )
        return EnvironmentalImpact(
            co2_reduced=co2_reduced,
            fuel_gallons_saved=round_half_up(gallons),
            tree_equivalents=round_half_up(co2_reduced / CO2_LBS_PER_TREE),
            noise_reduction=NOISE_REDUCTION_DB,
        )


def calculate_roi(raw_inputs: Optional[Mapping[str, Any]] = None) -> ROIResult:
    """Resolve raw form inputs and run the single-year calculation."""
    return CalculationEngine().calculate(resolve_inputs(raw_inputs))
