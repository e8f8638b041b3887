from typing import Any, Dict, Iterable, List, Optional

from src.config.paths import PRODUCTS_DIR
from src.config.settings import ClassifierSettings
from src.core.countries import CountryTable
from src.core.main_countries import NAMESPACE, compute_main_countries
from src.core.scan_stats import ScanStatistics
from src.data_access.loader import load_all_products_scans, load_country_table, load_product_scans, load_products
from src.models.product import CountryAssessment, Product
from src.utils.logger import logger

class MainCountriesService:
    """Loads the shared reference tables once and classifies products against them."""

    def __init__(
        self,
        catalog_stats: Optional[ScanStatistics] = None,
        countries: Optional[CountryTable] = None,
        settings: Optional[ClassifierSettings] = None,
        products_dir: str = PRODUCTS_DIR,
    ) -> None:
        self.catalog_stats: ScanStatistics = catalog_stats if catalog_stats is not None else load_all_products_scans()
        self.countries: CountryTable = countries if countries is not None else load_country_table()
        self.settings: ClassifierSettings = settings if settings is not None else ClassifierSettings.from_env()
        self.products_dir = products_dir

    def classify_product(
        self,
        product: Product,
        product_stats: Optional[ScanStatistics] = None,
    ) -> List[CountryAssessment]:
        if product_stats is None:
            product_stats = load_product_scans(product.code, self.products_dir)
        return compute_main_countries(product, self.catalog_stats, product_stats, self.countries, self.settings)

    def classify_products(self, products: Iterable[Product]) -> Dict[str, List[str]]:
        summary: Dict[str, List[str]] = {}
        for product in products:
            self.classify_product(product)
            summary[product.code] = [t for t in product.misc_tags if NAMESPACE in t]
        logger.info(f"Classified {len(summary)} products")
        return summary

    def classify_file(self, path: str) -> List[Dict[str, Any]]:
        """Classify every product record of a JSON file and return the updated records."""
        products = load_products(path)
        self.classify_products(products)
        return [p.to_dict() for p in products]
