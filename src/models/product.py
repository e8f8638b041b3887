import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

LANG_FIELDS = ("product_name", "generic_name", "ingredients_text")

_LANG_FIELD_RE = re.compile(r"^(%s)_([a-z]{2,3})$" % "|".join(LANG_FIELDS))

_OUTPUT_FIELDS = ("main_countries_tags", "removed_countries_tags", "added_countries_tags")

@dataclass
class Product:
    code: str
    countries_tags: List[str] = field(default_factory=list)
    created_t: int = 0
    lang_fields: Dict[str, Dict[str, str]] = field(default_factory=dict)
    misc_tags: List[str] = field(default_factory=list)
    main_countries_tags: List[str] = field(default_factory=list)
    removed_countries_tags: List[str] = field(default_factory=list)
    added_countries_tags: List[str] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    def get_text(self, field_name: str, lang: str) -> str:
        value = self.lang_fields.get(field_name, {}).get(lang)
        if value is None:
            return ""
        if not isinstance(value, str):
            return str(value)
        return value

    def set_text(self, field_name: str, lang: str, value: str) -> None:
        self.lang_fields.setdefault(field_name, {})[lang] = value

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Product":
        lang_fields: Dict[str, Dict[str, str]] = {}
        extra: Dict[str, Any] = {}
        known = {"code", "countries_tags", "created_t", "misc_tags"} | set(_OUTPUT_FIELDS)
        for key, value in raw.items():
            m = _LANG_FIELD_RE.match(key)
            if m:
                lang_fields.setdefault(m.group(1), {})[m.group(2)] = value
            elif key not in known:
                extra[key] = value
        return cls(
            code=str(raw["code"]),
            countries_tags=list(raw.get("countries_tags") or []),
            created_t=int(raw.get("created_t") or 0),
            lang_fields=lang_fields,
            misc_tags=list(raw.get("misc_tags") or []),
            main_countries_tags=list(raw.get("main_countries_tags") or []),
            removed_countries_tags=list(raw.get("removed_countries_tags") or []),
            added_countries_tags=list(raw.get("added_countries_tags") or []),
            extra=extra,
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = dict(self.extra)
        out["code"] = self.code
        out["countries_tags"] = list(self.countries_tags)
        out["created_t"] = self.created_t
        for field_name, values in self.lang_fields.items():
            for lang, value in values.items():
                out[f"{field_name}_{lang}"] = value
        out["misc_tags"] = list(self.misc_tags)
        for name in _OUTPUT_FIELDS:
            out[name] = list(getattr(self, name))
        return out

@dataclass
class CountryAssessment:
    country_tag: str
    cc: str
    year: int
    average_ratio: Optional[float]
    product_ratio: Optional[float]
    language_coverage: int
    product_name_in_language: bool
    tags: List[str] = field(default_factory=list)
