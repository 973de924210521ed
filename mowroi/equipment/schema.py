"""Pydantic models for equipment catalog validation."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class CatalogModel(BaseModel):
    """Base for catalog records: camelCase on the wire, immutable once parsed."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class EquipmentModel(CatalogModel):
    """A single robotic mower model."""

    id: str
    name: str
    short_name: str = Field(description="Key used by the model selection table")
    price: float = Field(ge=0)
    coverage: float = Field(gt=0, description="Acres one unit can maintain")
    description: str = ""
    terrain: str = "flat"
    categories: list[str] = Field(default_factory=list)


class PricedItem(CatalogModel):
    """An accessory, service or installation charge."""

    name: str
    price: float = Field(ge=0)
    per_site: Optional[bool] = None
    per_unit: Optional[bool] = None


class Accessories(CatalogModel):
    reference_station: PricedItem
    housing: PricedItem


class Services(CatalogModel):
    annual_maintenance: PricedItem
    remote_support: PricedItem
    winter_storage: PricedItem


class Installation(CatalogModel):
    per_unit: PricedItem
    flat: PricedItem


class EquipmentCatalog(CatalogModel):
    """Top-level equipment catalog: models plus price tables."""

    models: list[EquipmentModel] = Field(min_length=1)
    accessories: Accessories
    services: Services
    installation: Installation

    @model_validator(mode="after")
    def short_names_unique(self) -> EquipmentCatalog:
        names = [m.short_name for m in self.models]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate model shortName(s): {duplicates}")
        return self

    def get_model(self, short_name: str) -> Optional[EquipmentModel]:
        """Look up a model by its shortName."""
        for model in self.models:
            if model.short_name == short_name:
                return model
        return None
