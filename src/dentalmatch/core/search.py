"""Smart search parsing of free-text job queries."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..schemas import SearchFilters

KNOWN_CITIES: tuple[str, ...] = (
    "baghdad",
    "najaf",
    "basra",
    "erbil",
    "karbala",
    "mosul",
    "kirkuk",
    "nasiriyah",
)

KNOWN_TYPES: dict[str, str] = {
    "part time": "part_time",
    "full time": "full_time",
    "جزئي": "part_time",
    "كامل": "full_time",
    "contract": "contract",
    "عقد": "contract",
}


@dataclass
class SmartSearchConfig:
    """Dictionaries of recognized tokens, all lowercase."""

    known_cities: tuple[str, ...] = KNOWN_CITIES
    known_types: dict[str, str] = field(default_factory=lambda: dict(KNOWN_TYPES))


class SmartSearchParser:
    """Extract location and employment-type filters from a search string.

    Matching is by substring on the lowercased query. The returned filters keep
    the raw query untouched, so matched phrases are still present in it.
    """

    def __init__(self, *, config: SmartSearchConfig | None = None) -> None:
        self._config = config or SmartSearchConfig()

    def parse(self, raw_query: str) -> SearchFilters:
        query = raw_query if isinstance(raw_query, str) else ""
        lower = query.lower()

        locations: list[str] = []
        for city in self._config.known_cities:
            if city and city in lower and city not in locations:
                locations.append(city)

        types: list[str] = []
        for phrase, canonical in self._config.known_types.items():
            if phrase and phrase in lower and canonical not in types:
                types.append(canonical)

        return SearchFilters(
            query=query,
            location=tuple(locations) or None,
            employment_type=tuple(types) or None,
        )


_DEFAULT_PARSER = SmartSearchParser()


def parse_smart_search(raw_query: str) -> SearchFilters:
    return _DEFAULT_PARSER.parse(raw_query)
