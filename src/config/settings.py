import os
from dataclasses import dataclass

# Thresholds and reference constants of the main countries heuristic.

@dataclass(frozen=True)
class ClassifierSettings:
    reference_year_latest: int = 2030
    reference_year_floor: int = 2020
    recency_cutoff_epoch: int = 1609462800   # 2021-01-01
    min_world_scans: int = 10
    tag_prefix: str = ""

    @classmethod
    def from_env(cls) -> "ClassifierSettings":
        env = os.environ
        return cls(
            reference_year_latest=int(env.get("MAIN_COUNTRIES_LATEST_YEAR", cls.reference_year_latest)),
            reference_year_floor=int(env.get("MAIN_COUNTRIES_FLOOR_YEAR", cls.reference_year_floor)),
            recency_cutoff_epoch=int(env.get("MAIN_COUNTRIES_RECENCY_CUTOFF", cls.recency_cutoff_epoch)),
            min_world_scans=int(env.get("MAIN_COUNTRIES_MIN_WORLD_SCANS", cls.min_world_scans)),
            tag_prefix=env.get("MAIN_COUNTRIES_TAG_PREFIX", cls.tag_prefix),
        )

DEFAULT_SETTINGS = ClassifierSettings()
