"""Dataclasses describing the location records patched by the rule engine.

These mirror the layout of the host database (``locations[name].base.exits``)
with Python naming.  The records are owned by the host store; the rule
engine borrows them for a single pass and mutates them in place.  Fields the
engine does not care about travel in ``extras`` so nothing is lost when the
store writes the records back.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .enums import EquipmentSlot, ExfiltrationType, PassageRequirement, RequirementTip


@dataclass(slots=True)
class Extract:
    """A single exit point of a location."""

    name: str
    entry_points: str = ""
    passage_requirement: PassageRequirement | str = PassageRequirement.NONE
    requirement_tip: RequirementTip | str = RequirementTip.NONE
    required_slot: EquipmentSlot | str = EquipmentSlot.FIRST_PRIMARY_WEAPON
    chance: float = 100
    exfiltration_time: float = 0
    exfiltration_type: ExfiltrationType | str = ExfiltrationType.INDIVIDUAL
    players_count: int = 0
    id: str = ""
    count: int = 0
    extras: dict[str, object] = field(default_factory=dict)

    def entry_point_names(self) -> list[str]:
        """Return the entry points as a list, dropping empty fragments."""

        return [name for name in self.entry_points.split(",") if name]


@dataclass(slots=True)
class LocationBase:
    """Static description of a map and its extracts."""

    id: str
    exits: list[Extract] = field(default_factory=list)
    extras: dict[str, object] = field(default_factory=dict)


@dataclass(slots=True)
class Location:
    """Database entry for a map."""

    base: LocationBase
