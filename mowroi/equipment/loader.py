"""Load and validate equipment catalogs, falling back to the built-in one.

Loading never raises: every failure path yields the fallback catalog
together with the reason, so callers can log or surface it.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from mowroi.equipment.fallback import FALLBACK_CATALOG
from mowroi.equipment.schema import EquipmentCatalog
from mowroi.models.enums import CatalogSource

logger = logging.getLogger(__name__)

# Default directory for catalog files shipped with the package
_CONFIG_DIR = Path(__file__).parent / "configs"
DEFAULT_CATALOG_PATH = _CONFIG_DIR / "equipment.json"


@dataclass(frozen=True)
class CatalogLoadResult:
    """A usable catalog plus where it came from."""

    catalog: EquipmentCatalog
    source: CatalogSource
    error: Optional[str] = None

    @property
    def used_fallback(self) -> bool:
        return self.source is CatalogSource.FALLBACK


def _fallback(reason: str) -> CatalogLoadResult:
    logger.warning(f"Using built-in equipment catalog: {reason}")
    return CatalogLoadResult(
        catalog=FALLBACK_CATALOG, source=CatalogSource.FALLBACK, error=reason
    )


def parse_catalog(
    raw: Any, source: CatalogSource = CatalogSource.SUPPLIED
) -> CatalogLoadResult:
    """Validate already-fetched catalog data."""
    if isinstance(raw, EquipmentCatalog):
        return CatalogLoadResult(catalog=raw, source=source)
    try:
        catalog = EquipmentCatalog.model_validate(raw)
    except ValidationError as e:
        return _fallback(f"catalog has unexpected shape ({e.error_count()} errors)")
    return CatalogLoadResult(catalog=catalog, source=source)


def load_catalog(file_path: Optional[Path] = None) -> CatalogLoadResult:
    """Load a catalog from a JSON file.

    If no path is provided, loads the catalog shipped with the package.
    """
    if file_path is None:
        file_path = DEFAULT_CATALOG_PATH

    try:
        with open(file_path, "r") as f:
            raw = json.load(f)
    except FileNotFoundError:
        return _fallback(f"catalog not found: {file_path}")
    except (OSError, json.JSONDecodeError) as e:
        return _fallback(f"could not read {file_path}: {e}")

    return parse_catalog(raw, source=CatalogSource.FILE)


async def fetch_catalog(
    url: str, client: Optional[httpx.AsyncClient] = None
) -> CatalogLoadResult:
    """Fetch a catalog over HTTP."""
    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient(timeout=10.0)
    try:
        response = await client.get(url)
        if not response.is_success:
            return _fallback(f"GET {url} returned HTTP {response.status_code}")
        raw = response.json()
    except httpx.HTTPError as e:
        return _fallback(f"GET {url} failed: {e}")
    except ValueError as e:
        return _fallback(f"GET {url} returned invalid JSON: {e}")
    finally:
        if owns_client:
            await client.aclose()

    return parse_catalog(raw, source=CatalogSource.REMOTE)


def get_default_catalog() -> EquipmentCatalog:
    """Return the shipped catalog, or the built-in one if it is unusable."""
    return load_catalog().catalog
