from .loader import CatalogLoadResult, fetch_catalog, get_default_catalog, load_catalog, parse_catalog
from .recommender import EquipmentRecommender, recommend
from .schema import EquipmentCatalog, EquipmentModel

__all__ = [
    "CatalogLoadResult",
    "EquipmentCatalog",
    "EquipmentModel",
    "EquipmentRecommender",
    "fetch_catalog",
    "get_default_catalog",
    "load_catalog",
    "parse_catalog",
    "recommend",
]
