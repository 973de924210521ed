"""Tests for ROI / payback with an up-front investment."""

import math

import pytest

from mowroi.engine.investment import with_investment


class TestWithInvestment:
    def test_regular_payback(self):
        m = with_investment(12_000, 24_000, 0)
        assert m.roi == pytest.approx(50.0)
        assert m.payback_years == pytest.approx(2.0)
        assert m.payback_months == pytest.approx(24.0)
        assert m.pays_back

    def test_service_cost_reduces_savings(self):
        m = with_investment(12_000, 20_000, 2_000)
        assert m.roi == pytest.approx(50.0)
        assert m.payback_years == pytest.approx(2.0)
        assert m.annual_service_cost == 2_000

    def test_payback_rounding(self):
        m = with_investment(3_000, 10_000, 0)
        assert m.payback_years == pytest.approx(3.33)
        assert m.payback_months == pytest.approx(40.0)

    def test_zero_investment_positive_savings_is_unbounded(self):
        m = with_investment(1_000, 0, 0)
        assert m.roi == math.inf
        assert m.roi_is_unbounded
        assert m.payback_years == 0
        assert m.payback_months == 0

    def test_zero_investment_no_savings(self):
        m = with_investment(0, 0, 0)
        assert m.roi == 0
        assert m.payback_years == 0

    def test_service_cost_exceeds_savings(self):
        m = with_investment(500, 10_000, 600)
        assert m.roi == pytest.approx(-1.0)
        assert m.payback_years == math.inf
        assert m.payback_months == math.inf
        assert not m.pays_back

    def test_zero_effective_savings_never_pays_back(self):
        m = with_investment(600, 10_000, 600)
        assert m.roi == 0
        assert math.isinf(m.payback_years)

    def test_negative_money_inputs_clamped(self):
        m = with_investment(1_000, -5_000, -100)
        assert m.total_investment == 0
        assert m.annual_service_cost == 0
        assert m.roi == math.inf

    def test_unusable_money_inputs_treated_as_zero(self):
        m = with_investment(1_000, "n/a", None)
        assert m.total_investment == 0
        assert m.annual_service_cost == 0

    def test_no_nan(self):
        for net in (-1_000, 0, 1_000):
            for investment in (0, 5_000):
                m = with_investment(net, investment, 250)
                for value in (m.roi, m.payback_years, m.payback_months):
                    assert not math.isnan(value)
