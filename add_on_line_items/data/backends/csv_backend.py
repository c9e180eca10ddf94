from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

import pandas as pd

from ...config import get_config
from ...errors import LineItemError
from ..interface import CatalogServices
from ..models import AddOn, Product, ProductVariant, Region


REQUIRED_FILES = [
    "variants.csv",
    "products.csv",
    "regions.csv",
    "add_ons.csv",
    "variant_prices.csv",
    "add_on_prices.csv",
]


@dataclass
class _Tables:
    variants: pd.DataFrame
    products: pd.DataFrame
    regions: pd.DataFrame
    add_ons: pd.DataFrame
    variant_prices: pd.DataFrame
    add_on_prices: pd.DataFrame


def _not_found(kind: str, record_id: str) -> LineItemError:
    return LineItemError(LineItemError.Types.NOT_FOUND, f"{kind} with id: {record_id} was not found")


def _optional(value: str):
    return value if value != "" else None


class CsvCatalog:
    """
    CSV-backed catalogue.
    - Loads CSVs from `data_dir` once at construction.
    - Every lookup performs a fresh filter pass over the loaded frames.
    """

    def __init__(self, data_dir: str | Path = None) -> None:
        if data_dir is None:
            data_dir = get_config().data_dir

        self.data_dir = Path(data_dir)
        if not self.data_dir.is_absolute():
            self.data_dir = Path.cwd() / self.data_dir

        self._tables = self._load_tables(self.data_dir)

    # ---------- loading ----------

    @staticmethod
    def _load_tables(data_dir: Path) -> _Tables:
        if not data_dir.exists():
            raise FileNotFoundError(
                f"Catalogue directory not found: {data_dir}\n"
                f"Please either:\n"
                f"  1. Set DATA_DIR environment variable to point to your catalogue directory\n"
                f"  2. Create a .env file with DATA_DIR=/path/to/your/catalogue"
            )

        missing_files = [f for f in REQUIRED_FILES if not (data_dir / f).exists()]
        if missing_files:
            raise FileNotFoundError(
                f"Required CSV files missing in {data_dir}:\n"
                f"  Missing: {', '.join(missing_files)}\n"
                f"  Expected files: {', '.join(REQUIRED_FILES)}"
            )

        try:
            frames = {
                name[:-len(".csv")]: pd.read_csv(data_dir / name, dtype=str, keep_default_na=False)
                for name in REQUIRED_FILES
            }
            for prices in ("variant_prices", "add_on_prices"):
                frames[prices]["amount"] = frames[prices]["amount"].astype(float)
        except Exception as e:
            raise RuntimeError(
                f"Error reading CSV files from {data_dir}: {e}\n"
                f"Please check that the CSV files are valid and readable."
            ) from e

        return _Tables(**frames)

    # ---------- lookup helpers ----------

    @staticmethod
    def _single_row(df: pd.DataFrame, column: str, value: str, kind: str) -> pd.Series:
        rows = df[df[column] == str(value)]
        if rows.empty:
            raise _not_found(kind, value)
        return rows.iloc[0]

    @staticmethod
    def _price(df: pd.DataFrame, id_column: str, record_id: str, region_id: str, kind: str) -> float:
        rows = df[(df[id_column] == str(record_id)) & (df["region_id"] == str(region_id))]
        if rows.empty:
            raise LineItemError(
                LineItemError.Types.NOT_FOUND,
                f"No price for {kind} with id: {record_id} in region: {region_id}",
            )
        return float(rows.iloc[0]["amount"])

    def _variant_ids(self, product_id: str) -> List[str]:
        variants = self._tables.variants
        return variants.loc[variants["product_id"] == product_id, "variant_id"].tolist()

    def _product(self, row: pd.Series) -> Product:
        return Product(
            id=row["product_id"],
            title=row["title"],
            thumbnail=_optional(row["thumbnail"]),
            variants=self._variant_ids(row["product_id"]),
        )

    # ---------- record lookups ----------

    def get_variant(self, variant_id: str) -> ProductVariant:
        row = self._single_row(self._tables.variants, "variant_id", variant_id, "Variant")
        return ProductVariant(
            id=row["variant_id"],
            title=row["title"],
            sku=_optional(row["sku"]),
            product_id=row["product_id"],
        )

    def get_variant_price(self, variant_id: str, region_id: str) -> float:
        return self._price(self._tables.variant_prices, "variant_id", variant_id, region_id, "variant")

    def get_region(self, region_id: str) -> Region:
        row = self._single_row(self._tables.regions, "region_id", region_id, "Region")
        return Region(id=row["region_id"], name=row["name"], currency_code=row["currency_code"])

    def list_products(self, variant_id: str) -> List[Product]:
        variants = self._tables.variants
        product_ids = variants.loc[variants["variant_id"] == str(variant_id), "product_id"].unique()
        products = self._tables.products
        return [self._product(row) for _, row in products[products["product_id"].isin(product_ids)].iterrows()]

    def get_add_on(self, add_on_id: str) -> AddOn:
        row = self._single_row(self._tables.add_ons, "add_on_id", add_on_id, "Add-on")
        valid_for = [p.strip() for p in row["valid_for"].split(";") if p.strip()]
        return AddOn(id=row["add_on_id"], name=row["name"], valid_for=valid_for)

    def get_add_on_price(self, add_on_id: str, region_id: str) -> float:
        return self._price(self._tables.add_on_prices, "add_on_id", add_on_id, region_id, "add-on")

    def services(self) -> CatalogServices:
        """Expose the catalogue through the collaborator protocols."""
        return CatalogServices(
            product_variant_service=CsvProductVariantService(self),
            region_service=CsvRegionService(self),
            product_service=CsvProductService(self),
            add_on_service=CsvAddOnService(self),
        )


# ---------- protocol adapters ----------

class CsvProductVariantService:
    def __init__(self, catalog: CsvCatalog) -> None:
        self.catalog = catalog

    async def retrieve(self, variant_id: str) -> ProductVariant:
        return self.catalog.get_variant(variant_id)

    async def get_region_price(self, variant_id: str, region_id: str) -> float:
        return self.catalog.get_variant_price(variant_id, region_id)


class CsvRegionService:
    def __init__(self, catalog: CsvCatalog) -> None:
        self.catalog = catalog

    async def retrieve(self, region_id: str) -> Region:
        return self.catalog.get_region(region_id)


class CsvProductService:
    def __init__(self, catalog: CsvCatalog) -> None:
        self.catalog = catalog

    async def list(self, variants: str) -> List[Product]:
        return self.catalog.list_products(variants)


class CsvAddOnService:
    def __init__(self, catalog: CsvCatalog) -> None:
        self.catalog = catalog

    async def retrieve(self, add_on_id: str) -> AddOn:
        return self.catalog.get_add_on(add_on_id)

    async def get_region_price(self, add_on_id: str, region_id: str) -> float:
        return self.catalog.get_add_on_price(add_on_id, region_id)
