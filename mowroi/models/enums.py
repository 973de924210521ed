from enum import Enum


class PropertyType(str, Enum):
    COMMERCIAL = "commercial"
    GOLF = "golf"
    ATHLETIC = "athletic"


class MaintenanceType(str, Enum):
    INHOUSE = "inhouse"
    OUTSOURCED = "outsourced"


class CatalogSource(str, Enum):
    FILE = "file"
    REMOTE = "remote"
    SUPPLIED = "supplied"
    FALLBACK = "fallback"
