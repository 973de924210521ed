"""Built-in equipment catalog used when no valid catalog is available."""

from __future__ import annotations

from mowroi.equipment.schema import EquipmentCatalog

FALLBACK_CATALOG_DATA: dict = {
    "models": [
        {
            "id": "520-epos",
            "name": "Husqvarna Automower 520 EPOS",
            "shortName": "520 EPOS",
            "price": 3299.99,
            "coverage": 1.25,
            "description": "Best for small commercial properties",
            "terrain": "flat",
            "categories": ["commercial"],
        },
        {
            "id": "520h-epos",
            "name": "Husqvarna Automower 520H EPOS",
            "shortName": "520H EPOS",
            "price": 3299.99,
            "coverage": 1.25,
            "description": "Best for hilly commercial properties and golf courses",
            "terrain": "hilly",
            "categories": ["commercial", "golf"],
        },
        {
            "id": "535-awd-epos",
            "name": "Husqvarna Automower 535 AWD EPOS",
            "shortName": "535 AWD EPOS",
            "price": 4999.99,
            "coverage": 1.25,
            "description": "Best for rough terrain and challenging landscapes",
            "terrain": "rough",
            "categories": ["commercial"],
        },
        {
            "id": "550-epos",
            "name": "Husqvarna Automower 550 EPOS",
            "shortName": "550 EPOS",
            "price": 5829.99,
            "coverage": 2.5,
            "description": "Best for large commercial properties and athletic fields",
            "terrain": "flat",
            "categories": ["commercial", "athletic"],
        },
        {
            "id": "550h-epos",
            "name": "Husqvarna Automower 550H EPOS",
            "shortName": "550H EPOS",
            "price": 5299.99,
            "coverage": 2.5,
            "description": "Best for large hilly properties and golf courses",
            "terrain": "hilly",
            "categories": ["commercial", "golf"],
        },
    ],
    "accessories": {
        "referenceStation": {
            "name": "EPOS RS5 Reference Station",
            "price": 899.99,
            "perSite": True,
        },
        "housing": {
            "name": "Automower House (400/500 series)",
            "price": 171.99,
            "perUnit": True,
        },
    },
    "services": {
        "annualMaintenance": {
            "name": "Annual Onsite Maintenance",
            "price": 249.00,
            "perUnit": True,
        },
        "remoteSupport": {
            "name": "Remote Support",
            "price": 94.99,
            "perUnit": False,
        },
        "winterStorage": {
            "name": "Winter Storage & Service",
            "price": 149.99,
            "perUnit": True,
        },
    },
    "installation": {
        "perUnit": {"name": "Site Installation & Mapping", "price": 1500},
        "flat": {"name": "Training & App Configuration", "price": 500},
    },
}

FALLBACK_CATALOG: EquipmentCatalog = EquipmentCatalog.model_validate(FALLBACK_CATALOG_DATA)
