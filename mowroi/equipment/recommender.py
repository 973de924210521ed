"""Equipment sizing and pricing.

Picks a mower model from property parameters, sizes the fleet to the
acreage being automated and prices the full installation from the
catalog it was constructed with.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional

from mowroi.engine.numeric import clamp, coerce_number, round_half_up
from mowroi.engine.resolver import resolve_property_type
from mowroi.equipment.fallback import FALLBACK_CATALOG
from mowroi.equipment.result import (
    EquipmentCosts,
    EquipmentRecommendation,
    LineItem,
    ModelSummary,
)
from mowroi.equipment.schema import EquipmentCatalog, EquipmentModel
from mowroi.models.enums import PropertyType

logger = logging.getLogger(__name__)

# Target acreage at or below which the smaller model is sufficient.
SMALL_SITE_ACRES = 2

# (hilly terrain, small site) -> model shortName
MODEL_SELECTION: dict[tuple[bool, bool], str] = {
    (True, True): "520H EPOS",
    (True, False): "550H EPOS",
    (False, True): "520 EPOS",
    (False, False): "550 EPOS",
}


def select_model_name(
    property_type: PropertyType, target_acreage: float, is_hilly: bool
) -> str:
    """Golf courses and hilly sites need the H-series all-wheel models."""
    hilly = property_type is PropertyType.GOLF or is_hilly
    return MODEL_SELECTION[(hilly, target_acreage <= SMALL_SITE_ACRES)]


class EquipmentRecommender:
    """Recommends a mower configuration from an explicitly supplied catalog."""

    def __init__(self, catalog: Optional[EquipmentCatalog] = None):
        self._catalog = catalog if catalog is not None else FALLBACK_CATALOG

    @property
    def catalog(self) -> EquipmentCatalog:
        return self._catalog

    def recommend(
        self,
        property_type: Any,
        acreage: Any,
        automation_level: Any,
        is_hilly: bool = False,
    ) -> EquipmentRecommendation:
        """Size and price a robotic mowing installation."""
        acreage = max(0.0, coerce_number(acreage) or 0.0)
        automation_level = clamp(coerce_number(automation_level) or 0.0, 0, 100)
        property_type = resolve_property_type(property_type)

        target_acreage = acreage * (automation_level / 100)
        model = self._model_for(select_model_name(property_type, target_acreage, bool(is_hilly)))

        units = max(1, math.ceil(target_acreage / model.coverage))
        return self._price(model, units, target_acreage)

    def _model_for(self, short_name: str) -> EquipmentModel:
        model = self._catalog.get_model(short_name)
        if model is None:
            model = self._catalog.models[0]
            logger.warning(
                f"Model '{short_name}' not in catalog, recommending '{model.short_name}'"
            )
        return model

    def _price(
        self, model: EquipmentModel, units: int, target_acreage: float
    ) -> EquipmentRecommendation:
        accessories = self._catalog.accessories
        services = self._catalog.services
        installation = self._catalog.installation

        mowers = round_half_up(units * model.price)
        reference_station = accessories.reference_station.price  # one per site
        housing = round_half_up(units * accessories.housing.price)
        total_equipment = round_half_up(mowers + reference_station + housing)

        installation_cost = round_half_up(units * installation.per_unit.price)
        setup = installation.flat.price

        annual_maintenance = round_half_up(units * services.annual_maintenance.price)
        remote_support = services.remote_support.price
        winter_storage = round_half_up(units * services.winter_storage.price)

        suffix = f" × {units}" if units > 1 else ""

        return EquipmentRecommendation(
            model=ModelSummary(
                name=model.name,
                short_name=model.short_name,
                price=model.price,
                coverage=model.coverage,
                description=model.description,
            ),
            units_needed=units,
            target_acreage=target_acreage,
            costs=EquipmentCosts(
                mowers=mowers,
                reference_station=reference_station,
                housing=housing,
                installation=installation_cost,
                setup=setup,
                total_equipment=total_equipment,
                total_investment=round_half_up(total_equipment + installation_cost + setup),
                annual_service=round_half_up(
                    annual_maintenance + remote_support + winter_storage
                ),
            ),
            breakdown=(
                LineItem(model.name + suffix, mowers),
                LineItem(accessories.reference_station.name, reference_station),
                LineItem(accessories.housing.name + suffix, housing),
                LineItem(installation.per_unit.name + suffix, installation_cost),
                LineItem(installation.flat.name, setup),
            ),
            annual_breakdown=(
                LineItem(services.annual_maintenance.name + suffix, annual_maintenance),
                LineItem(services.remote_support.name, remote_support),
                LineItem(services.winter_storage.name + suffix, winter_storage),
            ),
        )


def recommend(
    property_type: Any,
    acreage: Any,
    automation_level: Any,
    is_hilly: bool = False,
    catalog: Optional[EquipmentCatalog] = None,
) -> EquipmentRecommendation:
    """Convenience wrapper around ``EquipmentRecommender.recommend``."""
    return EquipmentRecommender(catalog).recommend(
        property_type, acreage, automation_level, is_hilly
    )
