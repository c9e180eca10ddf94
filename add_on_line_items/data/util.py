from __future__ import annotations

from typing import Literal, Optional

from ..config import get_config
from .backends.csv_backend import CsvCatalog
from .interface import CatalogServices


def get_catalog(kind: Optional[Literal["csv"]] = None) -> CatalogServices:
    kind = kind or get_config().catalog_backend
    if kind == "csv":
        # Reads from configured CSV folder
        return CsvCatalog(data_dir=get_config().data_dir).services()
    raise ValueError(f"Unknown catalog kind: {kind}")
