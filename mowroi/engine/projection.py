"""5-year compounding cost projection."""

from __future__ import annotations

from typing import Any

from mowroi.engine.calculator import EQUIPMENT_WEAR_FACTOR
from mowroi.engine.numeric import non_negative, round_half_up
from mowroi.engine.result import CostComponents, ProjectionYear, ROIResult
from mowroi.models.inputs import ResolvedInputs

PROJECTION_YEARS = 5


def project(
    result: ROIResult,
    total_investment: Any,
    annual_service_cost: Any = 0,
) -> list[ProjectionYear]:
    """Project traditional vs. automated costs over five years."""
    return project_costs(
        result.components, result.inputs, total_investment, annual_service_cost
    )


def project_costs(
    components: CostComponents,
    inputs: ResolvedInputs,
    total_investment: Any,
    annual_service_cost: Any = 0,
) -> list[ProjectionYear]:
    """Compound labor and fuel costs year over year.

    Equipment cost does not escalate. The up-front investment is a
    one-time cost, so it sits as a constant offset in every cumulative
    automated total rather than being spread across years.
    """
    total_investment = non_negative(total_investment)
    annual_service_cost = non_negative(annual_service_cost)

    automation = inputs.automation_fraction
    labor_retained = 1 - automation * (inputs.labor_reduction / 100)
    fuel_retained = 1 - automation
    equipment_retained = 1 - automation * EQUIPMENT_WEAR_FACTOR

    projections: list[ProjectionYear] = []
    cumulative_traditional = 0.0
    cumulative_automated = 0.0

    for year in range(1, PROJECTION_YEARS + 1):
        labor_multiplier = (1 + inputs.annual_labor_increase / 100) ** year
        fuel_multiplier = (1 + inputs.annual_fuel_increase / 100) ** year

        traditional = round_half_up(
            components.labor_cost * labor_multiplier
            + components.fuel_cost * fuel_multiplier
            + components.equipment_annual_cost
        )
        automated = round_half_up(
            components.labor_cost * labor_retained * labor_multiplier
            + components.fuel_cost * fuel_retained * fuel_multiplier
            + components.equipment_annual_cost * equipment_retained
            + components.total_new_costs
            + annual_service_cost
        )

        cumulative_traditional += traditional
        cumulative_automated += automated

        reported_traditional = round_half_up(cumulative_traditional)
        reported_automated = round_half_up(cumulative_automated + total_investment)

        projections.append(
            ProjectionYear(
                year=year,
                labor_multiplier=round_half_up(labor_multiplier, 4),
                fuel_multiplier=round_half_up(fuel_multiplier, 4),
                traditional_cost=traditional,
                automated_cost=automated,
                annual_savings=round_half_up(traditional - automated),
                cumulative_traditional=reported_traditional,
                cumulative_automated=reported_automated,
                cumulative_savings=round_half_up(
                    reported_traditional - reported_automated
                ),
            )
        )

    return projections
