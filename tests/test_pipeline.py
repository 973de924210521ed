"""Tests for the end-to-end analysis pipeline and its payloads."""

import json
import math

import pytest

from mowroi.orchestrator import ROIPipeline, build_calculator_data, json_safe, report_to_dict, run_analysis
from mowroi.orchestrator.payload import format_payback_period

# Nothing to save: robotic running costs exceed the (zero) savings.
LOSING_SITE = {
    "acreage": 1,
    "fuelCostPerGallon": 0,
    "baseEquipmentCost": 0,
    "equipmentCostPerAcre": 0,
}


class TestRunAnalysis:
    def test_reference_scenario(self, commercial_raw, catalog):
        report = run_analysis(commercial_raw, catalog=catalog)
        assert report.recommendation.model.short_name == "550 EPOS"
        assert report.recommendation.units_needed == 2
        assert report.investment.total_investment == pytest.approx(16403.95)
        assert report.investment.annual_service_cost == pytest.approx(892.97)
        # (17264.37 - 892.97) / 16403.95
        assert report.investment.roi == pytest.approx(99.8, abs=0.01)
        assert report.investment.payback_years == pytest.approx(1.0)
        assert len(report.projection) == 5

    def test_projection_uses_recommended_investment(self, commercial_raw):
        report = run_analysis(commercial_raw)
        y1 = report.projection[0]
        assert y1.cumulative_automated == pytest.approx(
            y1.automated_cost + report.recommendation.costs.total_investment, abs=0.01
        )

    def test_golf_defaults_to_hilly(self):
        report = run_analysis({"propertyType": "golf", "acreage": 1, "automationLevel": 100})
        assert report.recommendation.model.short_name == "520H EPOS"

    def test_hilly_can_be_overridden(self):
        report = run_analysis(
            {"propertyType": "golf", "acreage": 1, "automationLevel": 100}, is_hilly=False
        )
        # golf always needs the H-series
        assert report.recommendation.model.short_name == "520H EPOS"
        report = run_analysis({"acreage": 1, "automationLevel": 100}, is_hilly=True)
        assert report.recommendation.model.short_name == "520H EPOS"

    def test_recommendation_uses_resolved_automation(self):
        # automationLevel below 25 is clamped before sizing
        report = run_analysis({"acreage": 40, "automationLevel": 5})
        assert report.recommendation.target_acreage == pytest.approx(10)

    def test_pipeline_reusable(self, commercial_raw, outsourced_raw):
        pipeline = ROIPipeline()
        first = pipeline.run(commercial_raw)
        pipeline.run(outsourced_raw)
        assert pipeline.run(commercial_raw) == first


class TestCalculatorData:
    def test_lead_fields(self, commercial_raw):
        data = build_calculator_data(run_analysis(commercial_raw))
        assert data == {
            "propertyType": "commercial",
            "acreage": 10,
            "seasonWeeks": 30,
            "maintenanceType": "inhouse",
            "projectedSavings": 17264,
            "roi": 100,
            "paybackPeriod": "1.0 years",
            "recommendedEquipment": "Husqvarna Automower 550 EPOS x 2",
            "totalInvestment": 16404,
            "co2Reduced": 2204,
            "laborHoursSaved": 96,
        }

    def test_no_payback_is_na(self):
        data = build_calculator_data(run_analysis(LOSING_SITE))
        assert data["paybackPeriod"] == "N/A"
        assert data["roi"] < 0

    def test_format_payback_period(self):
        assert format_payback_period(math.inf) == "N/A"
        assert format_payback_period(2.345) == "2.3 years"


class TestReportToDict:
    def test_shape(self, commercial_raw):
        payload = report_to_dict(run_analysis(commercial_raw))
        assert set(payload) == {"results", "equipment", "investment", "projection"}
        results = payload["results"]
        assert set(results["currentCosts"]) == {"labor", "fuel", "equipment", "total"}
        assert set(results["labor"]) == {"currentHours", "hoursSaved", "currentFTE", "reducedFTE"}
        assert results["inputs"]["propertyType"] == "commercial"
        assert payload["equipment"]["model"]["shortName"] == "550 EPOS"
        assert payload["investment"]["totalInvestment"] == pytest.approx(16403.95)
        assert [p["year"] for p in payload["projection"]] == [1, 2, 3, 4, 5]

    def test_infinity_preserved_until_json(self):
        payload = report_to_dict(run_analysis(LOSING_SITE))
        assert payload["investment"]["paybackYears"] == math.inf
        safe = json_safe(payload)
        assert safe["investment"]["paybackYears"] is None
        json.dumps(safe, allow_nan=False)


class TestOverflowingInputs:
    def test_payloads_stay_serializable(self):
        report = run_analysis({"acreage": 1e308, "propertyType": "golf"})
        data = json_safe(build_calculator_data(report))
        assert data["laborHoursSaved"] is None
        assert data["co2Reduced"] is None
        json.dumps(data, allow_nan=False)
        json.dumps(json_safe(report_to_dict(report)), allow_nan=False)
