"""Static catalog of supported locations and their names."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import NameKind
from .models import Location


@dataclass(frozen=True, slots=True)
class LocationNames:
    """Names a location goes by outside the database."""

    config: str
    human: str


# Ordered: the engine walks maps in this order.
LOCATION_NAMES: dict[str, LocationNames] = {
    "bigmap": LocationNames(config="customs", human="Customs"),
    "factory4_day": LocationNames(config="factoryDay", human="Factory (Day)"),
    "factory4_night": LocationNames(config="factoryNight", human="Factory (Night)"),
    "interchange": LocationNames(config="interchange", human="Interchange"),
    "laboratory": LocationNames(config="laboratory", human="Laboratory"),
    "lighthouse": LocationNames(config="lighthouse", human="Lighthouse"),
    "rezervbase": LocationNames(config="reserve", human="Reserve"),
    "shoreline": LocationNames(config="shoreline", human="Shoreline"),
    "tarkovstreets": LocationNames(config="streets", human="Streets of Tarkov"),
    "woods": LocationNames(config="woods", human="Woods"),
}

# Alternate spellings seen in location ids, mapped to the canonical id.
LOCATION_ALIASES: dict[str, str] = {
    "reservebase": "rezervbase",
}

ENABLED_LOCATIONS: frozenset[str] = frozenset(LOCATION_NAMES)


def enabled_locations() -> frozenset[str]:
    """Return the internal identifiers of every location the rules apply to."""

    return ENABLED_LOCATIONS


def canonical_location_id(raw: str) -> str:
    """Lowercase an identifier and resolve known aliases."""

    location_id = raw.lower()
    return LOCATION_ALIASES.get(location_id, location_id)


def resolve_location_name(raw: str, kind: NameKind | str) -> str:
    """Translate a database identifier into its config key or display name.

    Unknown identifiers resolve to their lowercased form.
    """

    names = LOCATION_NAMES.get(canonical_location_id(raw))
    if names is None:
        return raw.lower()
    return getattr(names, NameKind(kind).value)


def all_entry_points(location: Location) -> str:
    """Union of every extract's entry points, in first-seen order."""

    seen: dict[str, None] = {}
    for extract in location.base.exits:
        for entry_point in extract.entry_point_names():
            seen.setdefault(entry_point, None)
    return ",".join(seen)
