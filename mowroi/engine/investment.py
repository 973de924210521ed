"""ROI and payback once the equipment investment is known."""

from __future__ import annotations

import math
from typing import Any

from mowroi.engine.numeric import non_negative, round_half_up
from mowroi.engine.result import InvestmentMetrics


def with_investment(
    net_annual_savings: float,
    total_investment: Any,
    annual_service_cost: Any = 0,
) -> InvestmentMetrics:
    """Compute ROI and payback for an up-front investment.

    Service cost is netted off the annual savings first. Division by zero
    is never attempted: a zero investment with positive savings yields an
    unbounded ROI, and non-positive savings yield an infinite payback.
    """
    total_investment = non_negative(total_investment)
    annual_service_cost = non_negative(annual_service_cost)

    effective_savings = net_annual_savings - annual_service_cost

    if total_investment == 0:
        roi = math.inf if effective_savings > 0 else 0.0
        payback_years = 0.0
        payback_months = 0.0
    elif effective_savings <= 0:
        roi = round_half_up(effective_savings / total_investment * 100)
        payback_years = math.inf
        payback_months = math.inf
    else:
        roi = round_half_up(effective_savings / total_investment * 100)
        payback_years = round_half_up(total_investment / effective_savings, 2)
        payback_months = round_half_up(payback_years * 12, 1)

    return InvestmentMetrics(
        roi=roi,
        payback_years=payback_years,
        payback_months=payback_months,
        total_investment=total_investment,
        annual_service_cost=annual_service_cost,
    )
