import os

# src/config/paths.py

# SRC_DIR = .../src/config  → src  → project root
CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))      # .../src/config
SRC_DIR = os.path.dirname(CONFIG_DIR)                        # .../src
PROJECT_ROOT = os.path.dirname(SRC_DIR)                      # .../main-countries

DATA_DIR = os.environ.get("MAIN_COUNTRIES_DATA_DIR", os.path.join(PROJECT_ROOT, "data"))

PRODUCTS_DIR = os.path.join(DATA_DIR, "products")
ALL_PRODUCTS_SCANS_PATH = os.path.join(PRODUCTS_DIR, "all_products_scans.json")
COUNTRIES_PATH = os.path.join(DATA_DIR, "countries.json")
