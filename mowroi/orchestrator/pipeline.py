"""End-to-end analysis: resolve -> calculate -> recommend -> invest -> project."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from mowroi.engine.calculator import CalculationEngine
from mowroi.engine.investment import with_investment
from mowroi.engine.projection import project
from mowroi.engine.resolver import resolve_inputs
from mowroi.engine.result import InvestmentMetrics, ProjectionYear, ROIResult
from mowroi.equipment.recommender import EquipmentRecommender
from mowroi.equipment.result import EquipmentRecommendation
from mowroi.equipment.schema import EquipmentCatalog
from mowroi.models.enums import PropertyType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisReport:
    """Everything the results page, PDF and lead email are built from."""

    result: ROIResult
    recommendation: EquipmentRecommendation
    investment: InvestmentMetrics
    projection: list[ProjectionYear]


class ROIPipeline:
    """Runs the complete ROI analysis against a fixed equipment catalog."""

    def __init__(self, catalog: Optional[EquipmentCatalog] = None):
        self._engine = CalculationEngine()
        self._recommender = EquipmentRecommender(catalog)

    def run(
        self,
        raw_inputs: Optional[Mapping[str, Any]],
        is_hilly: Optional[bool] = None,
    ) -> AnalysisReport:
        inputs = resolve_inputs(raw_inputs)
        result = self._engine.calculate(inputs)

        # Golf courses are treated as hilly unless told otherwise
        if is_hilly is None:
            is_hilly = inputs.property_type is PropertyType.GOLF

        recommendation = self._recommender.recommend(
            inputs.property_type,
            inputs.acreage,
            inputs.automation_level,
            is_hilly,
        )
        costs = recommendation.costs
        investment = with_investment(
            result.net_annual_savings, costs.total_investment, costs.annual_service
        )
        projection = project(result, costs.total_investment, costs.annual_service)

        logger.info(
            f"Analysis for {inputs.acreage:g} ac {inputs.property_type.value}: "
            f"{recommendation.units_needed} x {recommendation.model.short_name}, "
            f"net savings {result.net_annual_savings}"
        )

        return AnalysisReport(
            result=result,
            recommendation=recommendation,
            investment=investment,
            projection=projection,
        )


def run_analysis(
    raw_inputs: Optional[Mapping[str, Any]],
    catalog: Optional[EquipmentCatalog] = None,
    is_hilly: Optional[bool] = None,
) -> AnalysisReport:
    """Run the full analysis with a one-off pipeline."""
    return ROIPipeline(catalog).run(raw_inputs, is_hilly=is_hilly)
