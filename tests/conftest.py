"""Shared test fixtures for the mowroi test suite."""

import pytest

from mowroi.engine.calculator import CalculationEngine
from mowroi.engine.resolver import resolve_inputs
from mowroi.equipment.fallback import FALLBACK_CATALOG


@pytest.fixture
def engine():
    return CalculationEngine()


@pytest.fixture
def catalog():
    return FALLBACK_CATALOG


@pytest.fixture
def commercial_raw() -> dict:
    """10-acre in-house commercial site, 50% automation.

    Everything not listed here resolves to its documented default.
    """
    return {
        "propertyType": "commercial",
        "acreage": 10,
        "seasonWeeks": 30,
        "maintenanceType": "inhouse",
        "employees": 2,
        "hourlyRate": 20,
        "mowingTimePercent": 60,
        "benefitsRate": 12,
        "fuelCostPerGallon": 3.5,
        "laborReduction": 85,
        "bufferTime": 15,
        "automationLevel": 50,
    }


@pytest.fixture
def outsourced_raw() -> dict:
    """Golf course on a $2,000/month contract, 80% automation."""
    return {
        "propertyType": "golf",
        "acreage": 40,
        "seasonWeeks": 32,
        "maintenanceType": "outsourced",
        "monthlyContract": 2000,
        "automationLevel": 80,
    }


@pytest.fixture
def commercial_inputs(commercial_raw):
    return resolve_inputs(commercial_raw)


@pytest.fixture
def outsourced_inputs(outsourced_raw):
    return resolve_inputs(outsourced_raw)
