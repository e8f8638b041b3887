"""Flag asserted countries a product is unlikely to be really sold in."""

from typing import Iterable, List, Optional, Tuple

from src.config.settings import DEFAULT_SETTINGS, ClassifierSettings
from src.core.countries import CountryTable
from src.core.scan_stats import WORLD, ScanStatistics
from src.models.product import LANG_FIELDS, CountryAssessment, Product
from src.utils.exceptions import InvalidInputError
from src.utils.logger import logger

NAMESPACE = "main-countries"

# (fraction of the expected ratio, reason), tightest first
LOW_SCAN_BANDS: Tuple[Tuple[float, str], ...] = (
    (0.1, "unexpectedly-low-scans-0-10-percent-of-expected"),
    (0.2, "unexpectedly-low-scans-10-20-percent-of-expected"),
    (0.3, "unexpectedly-low-scans-20-30-percent-of-expected"),
)

LOW_SCAN_THRESHOLD = LOW_SCAN_BANDS[-1][0]

def main_countries_tag(reason: str, cc: Optional[str] = None, prefix: str = "") -> str:
    if cc is None:
        return f"{prefix}{NAMESPACE}-{reason}"
    return f"{prefix}{NAMESPACE}-{cc}-{reason}"

def reset_main_countries(product: Product) -> None:
    product.main_countries_tags = []
    product.removed_countries_tags = []
    product.added_countries_tags = []
    product.misc_tags = [t for t in product.misc_tags if NAMESPACE not in t]

def language_coverage(product: Product, languages: Iterable[str]) -> Tuple[int, bool]:
    """Number of (field, language) pairs with a value, and whether the name is one of them."""
    coverage = 0
    name_present = False
    for lang in languages:
        for field_name in LANG_FIELDS:
            if product.get_text(field_name, lang) != "":
                coverage += 1
                if field_name == "product_name":
                    name_present = True
    return coverage, name_present

def band_reason(
    product_ratio: float,
    average_ratio: float,
    bands: Tuple[Tuple[float, str], ...] = LOW_SCAN_BANDS,
) -> Optional[str]:
    for fraction, reason in bands:
        if product_ratio <= fraction * average_ratio:
            return reason
    return None

def _assess_country(
    product: Product,
    country_tag: str,
    cc: str,
    year: int,
    catalog_stats: ScanStatistics,
    product_stats: ScanStatistics,
    countries: CountryTable,
    settings: ClassifierSettings,
) -> CountryAssessment:
    prefix = settings.tag_prefix
    average_ratio = catalog_stats.ratio(year, cc)
    product_ratio = product_stats.ratio(year, cc, missing_as_zero=True)
    coverage, name_present = language_coverage(product, countries.languages(cc))

    assessment = CountryAssessment(
        country_tag=country_tag,
        cc=cc,
        year=year,
        average_ratio=average_ratio,
        product_ratio=product_ratio,
        language_coverage=coverage,
        product_name_in_language=name_present,
    )
    tags = assessment.tags

    catalog_world = catalog_stats.get(year, WORLD) or 0
    if average_ratio is None or product_ratio is None:
        logger.debug(
            f"main countries - no scan ratio for {product.code} in {cc} ({year}): "
            f"average={average_ratio} product={product_ratio}"
        )
    elif catalog_world >= settings.min_world_scans and product_ratio <= LOW_SCAN_THRESHOLD * average_ratio:
        logger.debug(
            f"main countries - low scan ratio for {product.code} in {cc} ({year}): "
            f"{product_ratio:.4f} vs average {average_ratio:.4f}, coverage={coverage}"
        )
        tags.append(main_countries_tag("unexpectedly-low-scans", cc, prefix))
        reason = band_reason(product_ratio, average_ratio)
        if reason is not None:
            tags.append(main_countries_tag(reason, cc, prefix))
        if coverage < 1:
            tags.append(main_countries_tag("unexpectedly-low-scans-and-no-data-in-country-language", cc, prefix))
        elif coverage == 1:
            tags.append(main_countries_tag("unexpectedly-low-scans-and-only-1-field-in-country-language", cc, prefix))

    if not name_present:
        tags.append(main_countries_tag("product-name-not-in-country-language", cc, prefix))

    if coverage < 1:
        tags.append(main_countries_tag("no-data-in-country-language", cc, prefix))
    elif coverage == 1:
        tags.append(main_countries_tag("only-1-field-in-country-language", cc, prefix))

    return assessment

def compute_main_countries(
    product: Product,
    catalog_stats: ScanStatistics,
    product_stats: Optional[ScanStatistics],
    countries: CountryTable,
    settings: ClassifierSettings = DEFAULT_SETTINGS,
) -> List[CountryAssessment]:
    """Recompute the main-countries misc tags of a product in place.

    product_stats is None when the product has never been scanned.
    Returns the per-country assessments that produced the tags.
    """
    if not isinstance(product, Product):
        raise InvalidInputError(f"Expected a Product, got {type(product).__name__}")
    if catalog_stats is None or countries is None:
        raise InvalidInputError("catalog scan statistics and country table are required")

    reset_main_countries(product)
    prefix = settings.tag_prefix
    assessments: List[CountryAssessment] = []

    if product_stats is None:
        if product.created_t < settings.recency_cutoff_epoch:
            product.misc_tags.append(main_countries_tag("no-scans", prefix=prefix))
        else:
            product.misc_tags.append(main_countries_tag("new-product", prefix=prefix))
        logger.info(f"main countries - {product.code}: no scan data")
        return assessments

    year = product_stats.latest_year(settings.reference_year_latest)
    if year is not None:
        for country_tag in product.countries_tags:
            cc = countries.country_to_cc(country_tag)
            if cc is None:
                logger.debug(f"main countries - {product.code}: unknown country {country_tag!r}, skipped")
                continue
            if cc == WORLD:
                continue
            assessment = _assess_country(
                product, country_tag, cc, year, catalog_stats, product_stats, countries, settings
            )
            product.misc_tags.extend(assessment.tags)
            assessments.append(assessment)

    if not product_stats.has_year(settings.reference_year_floor):
        product.misc_tags.append(
            main_countries_tag(f"old-product-without-scans-in-{settings.reference_year_floor}", prefix=prefix)
        )

    flagged = sum(1 for a in assessments if a.tags)
    logger.info(
        f"main countries - {product.code}: year={year}, {len(assessments)} countries evaluated, {flagged} flagged"
    )
    return assessments

def classify(
    product: Product,
    catalog_stats: ScanStatistics,
    product_stats: Optional[ScanStatistics],
    country_language_table: CountryTable,
    reference_year_latest: int = 2030,
    reference_year_floor: int = 2020,
    recency_cutoff_epoch: int = 1609462800,
) -> List[str]:
    settings = ClassifierSettings(
        reference_year_latest=reference_year_latest,
        reference_year_floor=reference_year_floor,
        recency_cutoff_epoch=recency_cutoff_epoch,
    )
    compute_main_countries(product, catalog_stats, product_stats, country_language_table, settings)
    return product.misc_tags
