"""Tests for equipment selection, sizing and pricing."""

import pytest

from mowroi.equipment.fallback import FALLBACK_CATALOG_DATA
from mowroi.equipment.recommender import EquipmentRecommender, recommend, select_model_name
from mowroi.equipment.schema import EquipmentCatalog
from mowroi.models.enums import PropertyType


@pytest.fixture
def recommender(catalog):
    return EquipmentRecommender(catalog)


class TestModelSelection:
    @pytest.mark.parametrize(
        "property_type,target,hilly,expected",
        [
            (PropertyType.COMMERCIAL, 1.5, False, "520 EPOS"),
            (PropertyType.COMMERCIAL, 2.0, False, "520 EPOS"),
            (PropertyType.COMMERCIAL, 2.01, False, "550 EPOS"),
            (PropertyType.ATHLETIC, 8, False, "550 EPOS"),
            (PropertyType.GOLF, 2, False, "520H EPOS"),
            (PropertyType.GOLF, 12, False, "550H EPOS"),
            (PropertyType.COMMERCIAL, 1, True, "520H EPOS"),
            (PropertyType.ATHLETIC, 5, True, "550H EPOS"),
        ],
    )
    def test_selection_table(self, property_type, target, hilly, expected):
        assert select_model_name(property_type, target, hilly) == expected


class TestRecommend:
    def test_reference_commercial_site(self, recommender):
        # 10 acres at 50% -> 5 target acres -> 550 EPOS (2.5 ac each)
        eq = recommender.recommend("commercial", 10, 50, False)
        assert eq.model.short_name == "550 EPOS"
        assert eq.target_acreage == pytest.approx(5.0)
        assert eq.units_needed == 2

    def test_costs(self, recommender):
        eq = recommender.recommend("commercial", 10, 50, False)
        assert eq.costs.mowers == pytest.approx(2 * 5829.99)
        assert eq.costs.reference_station == pytest.approx(899.99)
        assert eq.costs.housing == pytest.approx(2 * 171.99)
        assert eq.costs.installation == pytest.approx(3000)
        assert eq.costs.setup == pytest.approx(500)
        assert eq.costs.total_equipment == pytest.approx(12903.95)
        assert eq.costs.total_investment == pytest.approx(16403.95)
        # 2 x 249 + 94.99 + 2 x 149.99
        assert eq.costs.annual_service == pytest.approx(892.97)

    @pytest.mark.parametrize("acreage,automation", [(0, 50), (0, 0), (10, 0), (-4, 80)])
    def test_at_least_one_unit(self, recommender, acreage, automation):
        assert recommender.recommend("commercial", acreage, automation).units_needed >= 1

    def test_units_round_up(self, recommender):
        # 3.3 target acres / 2.5 -> 2 units
        eq = recommender.recommend("athletic", 3.3, 100)
        assert eq.units_needed == 2

    def test_property_type_normalized(self, recommender):
        eq = recommender.recommend("GOLF", 1, 100)
        assert eq.model.short_name == "520H EPOS"

    def test_unknown_property_type_is_commercial(self, recommender):
        eq = recommender.recommend(None, 1, 100)
        assert eq.model.short_name == "520 EPOS"

    def test_automation_level_clamped(self, recommender):
        eq = recommender.recommend("commercial", 4, 250)
        assert eq.target_acreage == pytest.approx(4)

    def test_single_unit_labels_have_no_suffix(self, recommender):
        eq = recommender.recommend("commercial", 1, 100)
        assert eq.units_needed == 1
        assert all("×" not in item.label for item in eq.breakdown + eq.annual_breakdown)

    def test_breakdown_labels_and_totals(self, recommender):
        eq = recommender.recommend("golf", 20, 50, True)
        assert eq.units_needed == 4
        labels = [item.label for item in eq.breakdown]
        assert labels == [
            "Husqvarna Automower 550H EPOS × 4",
            "EPOS RS5 Reference Station",
            "Automower House (400/500 series) × 4",
            "Site Installation & Mapping × 4",
            "Training & App Configuration",
        ]
        assert sum(item.amount for item in eq.breakdown) == pytest.approx(eq.costs.total_investment)
        assert sum(item.amount for item in eq.annual_breakdown) == pytest.approx(
            eq.costs.annual_service
        )
        assert [item.label for item in eq.annual_breakdown] == [
            "Annual Onsite Maintenance × 4",
            "Remote Support",
            "Winter Storage & Service × 4",
        ]

    def test_missing_model_uses_first_catalog_model(self, caplog):
        data = dict(FALLBACK_CATALOG_DATA)
        data["models"] = [m for m in FALLBACK_CATALOG_DATA["models"] if m["shortName"] == "535 AWD EPOS"]
        catalog = EquipmentCatalog.model_validate(data)
        with caplog.at_level("WARNING"):
            eq = EquipmentRecommender(catalog).recommend("commercial", 10, 50)
        assert eq.model.short_name == "535 AWD EPOS"
        # 5 acres / 1.25 -> 4 units
        assert eq.units_needed == 4
        assert "not in catalog" in caplog.text

    def test_uses_supplied_catalog_prices(self):
        data = dict(FALLBACK_CATALOG_DATA)
        data["installation"] = {
            "perUnit": {"name": "Install", "price": 1000},
            "flat": {"name": "Setup", "price": 0},
        }
        eq = recommend("commercial", 1, 100, catalog=EquipmentCatalog.model_validate(data))
        assert eq.costs.installation == 1000
        assert eq.costs.setup == 0

    def test_default_recommender_uses_fallback(self):
        assert EquipmentRecommender().catalog.get_model("550 EPOS").price == 5829.99
