"""Reference data loading.

Reads the region hierarchy and the price per m² table from JSON files.
The file formats follow the public datasets the wizard was built on:

* regions: ``[{"distrito": ..., "concelhos": [{"concelho": ..., "freguesias": [...]}]}]``
* prices: ``[{"Concelho": ..., "Preço médio €/m²": ...}]``
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from avaliador.core.exceptions import DataLoadError
from avaliador.core.logging import get_logger
from avaliador.domain.models.reference import DEFAULT_PRICE_PER_M2, PriceTable, RegionCatalog

log = get_logger(__name__)

PRICE_NAME_KEY = "Concelho"
PRICE_VALUE_KEY = "Preço médio €/m²"


class MunicipalityRecord(BaseModel):
    concelho: str
    freguesias: list[str] = Field(default_factory=list)


class DistrictRecord(BaseModel):
    """One district entry of the regions file."""

    distrito: str
    concelhos: list[MunicipalityRecord] = Field(default_factory=list)


def _read_json(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DataLoadError(f"Cannot read {path}: {e}") from e


def parse_regions(raw: Any) -> RegionCatalog:
    """Build a RegionCatalog from the decoded regions file.

    Raises:
        DataLoadError: If the payload is not a list of district records
    """
    if not isinstance(raw, list):
        raise DataLoadError("Regions file must contain a list of districts")
    try:
        districts = [DistrictRecord.model_validate(item) for item in raw]
    except ValidationError as e:
        raise DataLoadError(f"Invalid district record: {e}") from e

    hierarchy: dict[str, dict[str, list[str]]] = {}
    for d in districts:
        municipalities = hierarchy.setdefault(d.distrito, {})
        for m in d.concelhos:
            municipalities[m.concelho] = list(m.freguesias)
    return RegionCatalog.from_mapping(hierarchy)


def parse_prices(raw: Any, default: float = DEFAULT_PRICE_PER_M2) -> PriceTable:
    """Build a PriceTable, skipping entries without a name or a numeric price."""
    if not isinstance(raw, list):
        raise DataLoadError("Prices file must contain a list of records")

    prices: dict[str, float] = {}
    skipped = 0
    for item in raw:
        if not isinstance(item, dict):
            skipped += 1
            continue
        name = str(item.get(PRICE_NAME_KEY) or "").strip()
        value = item.get(PRICE_VALUE_KEY)
        if not name or isinstance(value, bool) or not isinstance(value, (int, float)) or value != value:
            skipped += 1
            continue
        prices[name] = float(value)

    if skipped:
        log.warning("price_records_skipped", count=skipped)
    return PriceTable(prices=prices, default=default)


def load_regions(path: Path) -> RegionCatalog:
    catalog = parse_regions(_read_json(path))
    log.info("reference_data_loaded", kind="regions", path=str(path), count=len(catalog.regions))
    return catalog


def load_prices(path: Path, default: float = DEFAULT_PRICE_PER_M2) -> PriceTable:
    table = parse_prices(_read_json(path), default=default)
    log.info("reference_data_loaded", kind="prices", path=str(path), count=len(table))
    return table
