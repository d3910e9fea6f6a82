"""Catalogue of supported zones with human-readable labels and search.

The supported set is pytz's common zones plus UTC. Labels come from a small
static city/country table; zones it doesn't know fall back to the city
and region parts of the IANA id.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

import pytz

CONTINENT_REGIONS = frozenset(
    {
        "Africa",
        "America",
        "Antarctica",
        "Asia",
        "Atlantic",
        "Australia",
        "Europe",
        "Indian",
        "Pacific",
    }
)

TIMEZONE_COUNTRY_OVERRIDES: Dict[str, str] = {
    "Europe/Helsinki": "Finland",
    "Asia/Manila": "Philippines",
    "America/Los_Angeles": "USA",
    "Asia/Shanghai": "China",
    "Europe/Amsterdam": "Netherlands",
    "Australia/Sydney": "Australia",
    "Asia/Tokyo": "Japan",
}

CITY_COUNTRY_FALLBACK: Dict[str, str] = {
    "helsinki": "Finland",
    "manila": "Philippines",
    "los angeles": "USA",
    "shanghai": "China",
    "amsterdam": "Netherlands",
    "sydney": "Australia",
    "tokyo": "Japan",
    "london": "United Kingdom",
    "paris": "France",
    "berlin": "Germany",
    "madrid": "Spain",
    "rome": "Italy",
    "lisbon": "Portugal",
    "stockholm": "Sweden",
    "oslo": "Norway",
    "copenhagen": "Denmark",
    "warsaw": "Poland",
    "prague": "Czech Republic",
    "vienna": "Austria",
    "athens": "Greece",
    "dublin": "Ireland",
    "brussels": "Belgium",
    "zurich": "Switzerland",
    "budapest": "Hungary",
    "bucharest": "Romania",
    "sofia": "Bulgaria",
    "zagreb": "Croatia",
    "vilnius": "Lithuania",
    "riga": "Latvia",
    "tallinn": "Estonia",
    "kyiv": "Ukraine",
    "moscow": "Russia",
    "istanbul": "Turkey",
    "dubai": "United Arab Emirates",
    "doha": "Qatar",
    "riyadh": "Saudi Arabia",
    "tehran": "Iran",
    "baghdad": "Iraq",
    "jerusalem": "Israel",
    "cairo": "Egypt",
    "nairobi": "Kenya",
    "lagos": "Nigeria",
    "addis ababa": "Ethiopia",
    "casablanca": "Morocco",
    "johannesburg": "South Africa",
    "beijing": "China",
    "seoul": "South Korea",
    "bangkok": "Thailand",
    "ho chi minh": "Vietnam",
    "jakarta": "Indonesia",
    "singapore": "Singapore",
    "kuala lumpur": "Malaysia",
    "delhi": "India",
    "kolkata": "India",
    "mumbai": "India",
    "karachi": "Pakistan",
    "dhaka": "Bangladesh",
    "kathmandu": "Nepal",
    "colombo": "Sri Lanka",
    "perth": "Australia",
    "melbourne": "Australia",
    "brisbane": "Australia",
    "adelaide": "Australia",
    "auckland": "New Zealand",
    "wellington": "New Zealand",
    "honolulu": "USA",
    "anchorage": "USA",
    "chicago": "USA",
    "denver": "USA",
    "new york": "USA",
    "toronto": "Canada",
    "vancouver": "Canada",
    "montreal": "Canada",
    "mexico": "Mexico",
    "bogota": "Colombia",
    "lima": "Peru",
    "quito": "Ecuador",
    "sao paulo": "Brazil",
    "rio de janeiro": "Brazil",
    "santiago": "Chile",
    "caracas": "Venezuela",
    "buenos aires": "Argentina",
    "montevideo": "Uruguay",
}


@dataclass(frozen=True)
class TimeZoneOption:
    time_zone: str
    label: str
    label_lower: str
    time_zone_lower: str


_options: List[TimeZoneOption] = []
_options_by_zone: Dict[str, TimeZoneOption] = {}


def format_time_zone_label(time_zone: str) -> str:
    """Turn an IANA id into "City, Country" (or the best approximation)."""
    if time_zone == "UTC":
        return "UTC"

    parts = [part.replace("_", " ") for part in time_zone.split("/")]
    city = parts[-1]
    country = TIMEZONE_COUNTRY_OVERRIDES.get(time_zone) or CITY_COUNTRY_FALLBACK.get(
        city.lower()
    )
    if country:
        return f"{city}, {country}"

    if len(parts) == 2 and parts[0] in CONTINENT_REGIONS:
        return city

    region = parts[-2] if len(parts) > 1 else city
    if region == city:
        return city
    return f"{city}, {region}"


def _build_option(time_zone: str) -> TimeZoneOption:
    label = format_time_zone_label(time_zone)
    return TimeZoneOption(
        time_zone=time_zone,
        label=label,
        label_lower=label.lower(),
        time_zone_lower=time_zone.lower(),
    )


def get_time_zone_options() -> List[TimeZoneOption]:
    """All supported zones, sorted by label. Built once per process."""
    if not _options:
        zones = set(pytz.common_timezones)
        zones.add("UTC")
        built = sorted(
            (_build_option(zone) for zone in zones),
            key=lambda option: (option.label.casefold(), option.time_zone),
        )
        _options.extend(built)
        _options_by_zone.update({option.time_zone: option for option in built})
    return _options


def find_time_zone_option_by_time_zone(time_zone: str) -> Optional[TimeZoneOption]:
    get_time_zone_options()
    return _options_by_zone.get(time_zone)


def is_supported_time_zone(time_zone: str) -> bool:
    return find_time_zone_option_by_time_zone(time_zone) is not None


def filter_time_zone_options(query: str, limit: int) -> List[TimeZoneOption]:
    """Substring search over labels and ids, at most `limit` results."""
    options = get_time_zone_options()
    needle = query.strip().lower()
    if not needle:
        return options[:limit]

    return [
        option
        for option in options
        if needle in option.label_lower or needle in option.time_zone_lower
    ][:limit]


def find_time_zone_option_by_input(value: str) -> Optional[TimeZoneOption]:
    """Resolve typed text to a zone: exact label/id, else a unique prefix."""
    needle = value.strip().lower()
    if not needle:
        return None

    options = get_time_zone_options()
    for option in options:
        if needle in (option.label_lower, option.time_zone_lower):
            return option

    prefix_matches = [
        option
        for option in options
        if option.label_lower.startswith(needle)
        or option.time_zone_lower.startswith(needle)
    ]
    return prefix_matches[0] if len(prefix_matches) == 1 else None


def format_zone_input_value(time_zone: str) -> str:
    option = find_time_zone_option_by_time_zone(time_zone)
    return option.label if option else time_zone
