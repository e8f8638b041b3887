from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from src.core.scan_stats import WORLD

WORLD_TAG = "en:world"

class CountryTable:
    """Country tag -> country code resolution and country code -> languages."""

    def __init__(
        self,
        tag_to_cc: Mapping[str, str],
        languages: Mapping[str, Iterable[str]],
    ) -> None:
        tags = {tag.lower(): cc.lower() for tag, cc in tag_to_cc.items()}
        tags.setdefault(WORLD_TAG, WORLD)
        self._tag_to_cc = MappingProxyType(tags)
        self._languages = MappingProxyType({cc.lower(): tuple(langs) for cc, langs in languages.items()})

    @classmethod
    def from_json(cls, raw: Mapping[str, Any]) -> "CountryTable":
        tag_to_cc: Dict[str, str] = {}
        languages: Dict[str, Tuple[str, ...]] = {}
        for tag, entry in raw.items():
            cc = entry["cc"]
            tag_to_cc[tag] = cc
            languages[cc] = tuple(entry.get("languages") or ())
        return cls(tag_to_cc, languages)

    def country_to_cc(self, country_tag: str) -> Optional[str]:
        if not country_tag:
            return None
        tag = country_tag.strip().lower()
        cc = self._tag_to_cc.get(tag)
        if cc is not None:
            return cc
        # already a country code
        if tag in self._languages or tag == WORLD:
            return tag
        return None

    def languages(self, cc: str) -> Tuple[str, ...]:
        return self._languages.get(cc, ())

    def __len__(self) -> int:
        return len(self._tag_to_cc)
