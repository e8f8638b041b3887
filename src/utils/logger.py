import logging
import os

LOG_LEVEL = os.environ.get("MAIN_COUNTRIES_LOG_LEVEL", "INFO").upper()

logger = logging.getLogger("main_countries")
if not logger.handlers:
    logger.setLevel(LOG_LEVEL)
    ch = logging.StreamHandler()
    fmt = logging.Formatter("[%(asctime)s] [%(levelname)s] %(message)s")
    ch.setFormatter(fmt)
    logger.addHandler(ch)
