"""Immutable result data structures produced by the ROI engine."""

from __future__ import annotations

import math
from dataclasses import dataclass

from mowroi.models.inputs import ResolvedInputs


@dataclass(frozen=True)
class CurrentCosts:
    """Annual cost of the status-quo mowing operation."""

    labor: float
    fuel: float
    equipment: float
    total: float


@dataclass(frozen=True)
class Savings:
    """Annual savings attributable to automation, before new costs."""

    labor: float
    fuel: float
    equipment: float
    gross: float


@dataclass(frozen=True)
class NewCosts:
    """Annual operating cost of the robotic fleet."""

    maintenance: float
    electricity: float
    total: float


@dataclass(frozen=True)
class LaborAnalysis:
    # Whole hours; infinite only when the inputs overflow
    current_hours: float
    hours_saved: float
    current_fte: float
    reduced_fte: float


@dataclass(frozen=True)
class EnvironmentalImpact:
    co2_reduced: float  # lbs / year
    fuel_gallons_saved: float
    tree_equivalents: float
    noise_reduction: int  # dB


@dataclass(frozen=True)
class CostComponents:
    """Rounded annual cost components shared with the projection engine."""

    labor_cost: float
    fuel_cost: float
    equipment_annual_cost: float
    robotic_maintenance_cost: float
    electricity_cost: float
    total_new_costs: float


@dataclass(frozen=True)
class ROIResult:
    """Single-year outcome of the cost & savings engine."""

    current_costs: CurrentCosts
    savings: Savings
    new_costs: NewCosts
    net_annual_savings: float
    labor: LaborAnalysis
    environmental: EnvironmentalImpact
    inputs: ResolvedInputs
    components: CostComponents


@dataclass(frozen=True)
class InvestmentMetrics:
    """ROI and payback once the equipment investment is known.

    ``roi`` is a percentage. ``math.inf`` marks an unbounded ROI (no
    investment) or a payback that never happens.
    """

    roi: float
    payback_years: float
    payback_months: float
    total_investment: float
    annual_service_cost: float

    @property
    def pays_back(self) -> bool:
        return math.isfinite(self.payback_years)

    @property
    def roi_is_unbounded(self) -> bool:
        return math.isinf(self.roi)


@dataclass(frozen=True)
class ProjectionYear:
    """Single year in the 5-year cost projection."""

    year: int
    labor_multiplier: float
    fuel_multiplier: float
    traditional_cost: float
    automated_cost: float
    annual_savings: float
    cumulative_traditional: float
    cumulative_automated: float
    cumulative_savings: float
