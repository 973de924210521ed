"""Immutable equipment recommendation structures."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ModelSummary:
    name: str
    short_name: str
    price: float
    coverage: float
    description: str


@dataclass(frozen=True)
class EquipmentCosts:
    """Up-front and recurring costs for a recommended configuration."""

    mowers: float
    reference_station: float
    housing: float
    installation: float
    setup: float
    total_equipment: float
    total_investment: float
    annual_service: float


@dataclass(frozen=True)
class LineItem:
    label: str
    amount: float


@dataclass(frozen=True)
class EquipmentRecommendation:
    model: ModelSummary
    units_needed: int
    target_acreage: float
    costs: EquipmentCosts
    breakdown: tuple[LineItem, ...]
    annual_breakdown: tuple[LineItem, ...]
