"""Serialize analysis results for the presentation layer and lead email.

Keys follow the camelCase shapes the web front end consumes. Numbers are
left unformatted; infinite ROI / payback stay ``math.inf`` here and are
only mapped for transports that cannot carry them.
"""

from __future__ import annotations

import math
from typing import Any

from mowroi.engine.numeric import round_int
from mowroi.engine.result import InvestmentMetrics, ProjectionYear, ROIResult
from mowroi.equipment.result import EquipmentRecommendation, LineItem
from mowroi.models.inputs import ResolvedInputs
from mowroi.orchestrator.pipeline import AnalysisReport


def inputs_to_dict(i: ResolvedInputs) -> dict[str, Any]:
    return {
        "propertyType": i.property_type.value,
        "acreage": i.acreage,
        "seasonWeeks": i.season_weeks,
        "mowsPerWeek": i.mows_per_week,
        "maintenanceType": i.maintenance_type.value,
        "employees": i.employees,
        "hourlyRate": i.hourly_rate,
        "mowingTimePercent": i.mowing_time_percent,
        "isLeased": i.is_leased,
        "monthlyContract": i.monthly_contract,
        "benefitsRate": i.benefits_rate,
        "fuelCostPerGallon": i.fuel_cost_per_gallon,
        "laborReduction": i.labor_reduction,
        "bufferTime": i.buffer_time,
        "annualLaborIncrease": i.annual_labor_increase,
        "fuelPerAcre": i.fuel_per_acre,
        "annualFuelIncrease": i.annual_fuel_increase,
        "baseEquipmentCost": i.base_equipment_cost,
        "equipmentCostPerAcre": i.equipment_cost_per_acre,
        "maintenanceRate": i.maintenance_rate,
        "insuranceRate": i.insurance_rate,
        "leasingPremium": i.leasing_premium,
        "roboticMaintenance": i.robotic_maintenance,
        "electricityPerAcre": i.electricity_per_acre,
        "co2PerGallon": i.co2_per_gallon,
        "mowingTimePerAcre": i.mowing_time_per_acre,
        "automationLevel": i.automation_level,
        "desiredMowingTime": i.desired_mowing_time,
    }


def roi_result_to_dict(r: ROIResult) -> dict[str, Any]:
    return {
        "currentCosts": {
            "labor": r.current_costs.labor,
            "fuel": r.current_costs.fuel,
            "equipment": r.current_costs.equipment,
            "total": r.current_costs.total,
        },
        "savings": {
            "labor": r.savings.labor,
            "fuel": r.savings.fuel,
            "equipment": r.savings.equipment,
            "gross": r.savings.gross,
        },
        "newCosts": {
            "maintenance": r.new_costs.maintenance,
            "electricity": r.new_costs.electricity,
            "total": r.new_costs.total,
        },
        "netAnnualSavings": r.net_annual_savings,
        "labor": {
            "currentHours": r.labor.current_hours,
            "hoursSaved": r.labor.hours_saved,
            "currentFTE": r.labor.current_fte,
            "reducedFTE": r.labor.reduced_fte,
        },
        "environmental": {
            "co2Reduced": r.environmental.co2_reduced,
            "fuelGallonsSaved": r.environmental.fuel_gallons_saved,
            "treeEquivalents": r.environmental.tree_equivalents,
            "noiseReduction": r.environmental.noise_reduction,
        },
        "inputs": inputs_to_dict(r.inputs),
    }


def investment_to_dict(m: InvestmentMetrics) -> dict[str, Any]:
    return {
        "roi": m.roi,
        "paybackYears": m.payback_years,
        "paybackMonths": m.payback_months,
        "totalInvestment": m.total_investment,
        "annualServiceCost": m.annual_service_cost,
    }


def projection_to_list(projection: list[ProjectionYear]) -> list[dict[str, Any]]:
    return [
        {
            "year": p.year,
            "laborMultiplier": p.labor_multiplier,
            "fuelMultiplier": p.fuel_multiplier,
            "traditionalCost": p.traditional_cost,
            "automatedCost": p.automated_cost,
            "annualSavings": p.annual_savings,
            "cumulativeTraditional": p.cumulative_traditional,
            "cumulativeAutomated": p.cumulative_automated,
            "cumulativeSavings": p.cumulative_savings,
        }
        for p in projection
    ]


def _line_items(items: tuple[LineItem, ...]) -> list[dict[str, Any]]:
    return [{"label": item.label, "amount": item.amount} for item in items]


def recommendation_to_dict(eq: EquipmentRecommendation) -> dict[str, Any]:
    return {
        "model": {
            "name": eq.model.name,
            "shortName": eq.model.short_name,
            "price": eq.model.price,
            "coverage": eq.model.coverage,
            "description": eq.model.description,
        },
        "unitsNeeded": eq.units_needed,
        "targetAcreage": eq.target_acreage,
        "costs": {
            "mowers": eq.costs.mowers,
            "referenceStation": eq.costs.reference_station,
            "housing": eq.costs.housing,
            "installation": eq.costs.installation,
            "setup": eq.costs.setup,
            "totalEquipment": eq.costs.total_equipment,
            "totalInvestment": eq.costs.total_investment,
            "annualService": eq.costs.annual_service,
        },
        "breakdown": _line_items(eq.breakdown),
        "annualBreakdown": _line_items(eq.annual_breakdown),
    }


def report_to_dict(report: AnalysisReport) -> dict[str, Any]:
    """Convert an AnalysisReport to the presentation layer's shape."""
    return {
        "results": roi_result_to_dict(report.result),
        "equipment": recommendation_to_dict(report.recommendation),
        "investment": investment_to_dict(report.investment),
        "projection": projection_to_list(report.projection),
    }


def format_payback_period(payback_years: float) -> str:
    if not math.isfinite(payback_years):
        return "N/A"
    return f"{payback_years:.1f} years"


def build_calculator_data(report: AnalysisReport) -> dict[str, Any]:
    """Flatten a report into the lead submission's ``calculatorData``."""
    r = report.result
    eq = report.recommendation
    m = report.investment
    return {
        "propertyType": r.inputs.property_type.value,
        "acreage": r.inputs.acreage,
        "seasonWeeks": r.inputs.season_weeks,
        "maintenanceType": r.inputs.maintenance_type.value,
        "projectedSavings": round_int(r.net_annual_savings),
        "roi": round_int(m.roi) if math.isfinite(m.roi) else None,
        "paybackPeriod": format_payback_period(m.payback_years),
        "recommendedEquipment": f"{eq.model.name} x {eq.units_needed}",
        "totalInvestment": round_int(eq.costs.total_investment),
        "co2Reduced": round_int(r.environmental.co2_reduced),
        "laborHoursSaved": r.labor.hours_saved,
    }


def json_safe(value: Any) -> Any:
    """Replace non-finite floats with None so the payload is valid JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: json_safe(v) for k, v in value.items()}
    if isinstance(value, list):
        return [json_safe(v) for v in value]
    return value
