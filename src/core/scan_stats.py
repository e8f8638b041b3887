from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

WORLD = "world"

# Key holding the per-country counts in scans.json / all_products_scans.json
BY_COUNTRY_KEY = "unique_scans_n_by_country"

class ScanStatistics:
    """Read-only unique scan counts, keyed by year then country code.

    Used both for the catalog-wide aggregate and for a single product.
    A missing year or country means "not recorded", which is not the same
    as a count of zero.
    """

    def __init__(self, counts: Mapping[int, Mapping[str, int]]) -> None:
        self._counts = MappingProxyType({
            int(year): MappingProxyType({str(cc): int(n) for cc, n in by_cc.items()})
            for year, by_cc in counts.items()
        })

    @classmethod
    def from_json(cls, raw: Mapping[str, Any]) -> "ScanStatistics":
        counts: Dict[int, Dict[str, int]] = {}
        for year, entry in raw.items():
            if not str(year).isdigit():
                continue
            if isinstance(entry, Mapping) and BY_COUNTRY_KEY in entry:
                entry = entry[BY_COUNTRY_KEY]
            counts[int(year)] = {cc: n for cc, n in (entry or {}).items() if n is not None}
        return cls(counts)

    def years(self) -> List[int]:
        return sorted(self._counts)

    def has_year(self, year: int) -> bool:
        return year in self._counts

    def get(self, year: int, cc: str) -> Optional[int]:
        by_cc = self._counts.get(year)
        if by_cc is None:
            return None
        return by_cc.get(cc)

    def latest_year(self, ceiling: int) -> Optional[int]:
        """Most recent year present in the table that is not after ceiling."""
        eligible = [y for y in self._counts if y <= ceiling]
        return max(eligible) if eligible else None

    def ratio(self, year: int, cc: str, missing_as_zero: bool = False) -> Optional[float]:
        """Share of the world unique scans that come from cc.

        None when the world count is absent or zero, or when the country count
        is absent and missing_as_zero is not set.
        """
        world = self.get(year, WORLD)
        if not world:
            return None
        count = self.get(year, cc)
        if count is None:
            if not missing_as_zero:
                return None
            count = 0
        return count / world

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"ScanStatistics(years={self.years()})"

def get_unique_scan_count(table: Optional[ScanStatistics], year: int, country_code: str) -> Optional[int]:
    if table is None:
        return None
    return table.get(year, country_code)
