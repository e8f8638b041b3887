import pytest

from src.core.countries import CountryTable
from src.core.scan_stats import ScanStatistics
from src.models.product import Product


@pytest.fixture
def countries():
    return CountryTable(
        tag_to_cc={
            "en:france": "fr",
            "en:germany": "de",
            "en:belgium": "be",
            "en:world": "world",
        },
        languages={
            "fr": ["fr"],
            "de": ["de"],
            "be": ["fr", "nl", "de"],
            "world": [],
        },
    )


@pytest.fixture
def catalog_stats():
    return ScanStatistics({
        2020: {"world": 800, "fr": 400, "de": 80},
        2022: {"world": 1000, "fr": 500, "de": 100, "be": 40},
        2025: {"world": 1000, "fr": 500, "de": 100, "be": 40},
    })


@pytest.fixture
def make_product():
    def _make(countries_tags=None, created_t=1577836800, misc_tags=None, **texts):
        product = Product(
            code="3017620422003",
            countries_tags=list(countries_tags or []),
            created_t=created_t,
            misc_tags=list(misc_tags or []),
        )
        # texts given as product_name_fr="...", generic_name_de="..."
        for key, value in texts.items():
            field_name, lang = key.rsplit("_", 1)
            product.set_text(field_name, lang, value)
        return product
    return _make
