import json
import os
import re
from typing import Any, List, Optional

from src.config.paths import ALL_PRODUCTS_SCANS_PATH, COUNTRIES_PATH, PRODUCTS_DIR
from src.core.countries import CountryTable
from src.core.scan_stats import ScanStatistics
from src.models.product import Product
from src.utils.exceptions import DataLoadError
from src.utils.logger import logger

def _load_json(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        logger.error(f"File not found: {path}")
        raise DataLoadError(f"File not found: {path}") from e
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}")
        raise DataLoadError(f"Invalid JSON in {path}") from e

def _load_optional_json(path: str) -> Optional[Any]:
    if not os.path.exists(path):
        return None
    return _load_json(path)

def product_path(code: str) -> str:
    """Storage sub-path of a product: long barcodes are split in 3/3/3/rest."""
    code = str(code).strip()
    m = re.match(r"^(\d{3})(\d{3})(\d{3})(\d*)$", code)
    if m is None or not m.group(4):
        return code
    return "/".join(m.groups())

def load_all_products_scans(path: str = ALL_PRODUCTS_SCANS_PATH) -> ScanStatistics:
    stats = ScanStatistics.from_json(_load_json(path))
    logger.info(f"Loaded catalog scan statistics for years {stats.years()} from {path}")
    return stats

def load_product_scans(code: str, products_dir: str = PRODUCTS_DIR) -> Optional[ScanStatistics]:
    path = os.path.join(products_dir, product_path(code), "scans.json")
    raw = _load_optional_json(path)
    if raw is None:
        logger.debug(f"No scans file for product {code}")
        return None
    return ScanStatistics.from_json(raw)

def load_country_table(path: str = COUNTRIES_PATH) -> CountryTable:
    table = CountryTable.from_json(_load_json(path))
    logger.info(f"Loaded {len(table)} countries from {path}")
    return table

def load_products(path: str) -> List[Product]:
    raw = _load_json(path)
    products = [Product.from_dict(item) for item in raw]
    logger.info(f"Loaded {len(products)} products from {path}")
    return products
