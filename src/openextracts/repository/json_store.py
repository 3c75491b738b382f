"""JSON-backed location database laid out like the host's ``locations`` folder.

Each location lives at ``<base>/<name>/base.json`` with the host's PascalCase
keys.  Keys the domain model does not know about are preserved.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_pascal

from openextracts.domain import models as dm


class ExitRecord(BaseModel):
    """Wire format of one entry in ``base.exits``."""

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True, extra="allow")

    name: str
    entry_points: str = ""
    passage_requirement: str = "None"
    requirement_tip: str = ""
    required_slot: str = "FirstPrimaryWeapon"
    chance: int | float = 100
    exfiltration_time: int | float = 0
    exfiltration_type: str = "Individual"
    players_count: int = 0
    id: str = ""
    count: int = 0

    def to_domain(self) -> dm.Extract:
        return dm.Extract(
            name=self.name,
            entry_points=self.entry_points,
            passage_requirement=self.passage_requirement,
            requirement_tip=self.requirement_tip,
            required_slot=self.required_slot,
            chance=self.chance,
            exfiltration_time=self.exfiltration_time,
            exfiltration_type=self.exfiltration_type,
            players_count=self.players_count,
            id=self.id,
            count=self.count,
            extras=dict(self.model_extra or {}),
        )

    @classmethod
    def from_domain(cls, extract: dm.Extract) -> ExitRecord:
        return cls(
            name=extract.name,
            entry_points=extract.entry_points,
            passage_requirement=str(extract.passage_requirement),
            requirement_tip=str(extract.requirement_tip),
            required_slot=str(extract.required_slot),
            chance=extract.chance,
            exfiltration_time=extract.exfiltration_time,
            exfiltration_type=str(extract.exfiltration_type),
            players_count=extract.players_count,
            id=extract.id,
            count=extract.count,
            **extract.extras,
        )

    def unset_defaults(self, loaded_fields: set[str] | None) -> set[str]:
        """Fields still at their default that the stored record never had."""

        if loaded_fields is None:
            return set()
        return {
            name
            for name, info in type(self).model_fields.items()
            if name not in loaded_fields
            and not info.is_required()
            and getattr(self, name) == info.default
        }


class LocationBaseRecord(BaseModel):
    """Wire format of a location's ``base.json``."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(alias="Id")
    exits: list[ExitRecord] = Field(default_factory=list)

    def to_domain(self) -> dm.Location:
        base = dm.LocationBase(
            id=self.id,
            exits=[record.to_domain() for record in self.exits],
            extras=dict(self.model_extra or {}),
        )
        return dm.Location(base=base)

    @classmethod
    def from_domain(cls, location: dm.Location) -> LocationBaseRecord:
        return cls(
            id=location.base.id,
            exits=[ExitRecord.from_domain(extract) for extract in location.base.exits],
            **location.base.extras,
        )


class LocationStoreError(RuntimeError):
    """Raised when a stored location cannot be parsed."""


class JsonLocationDatabase:
    """Load location records from disk and write them back after patching.

    Keys absent from a stored exit stay absent on save unless a rule gave
    them a non-default value, and locations whose records did not change are
    not rewritten.
    """

    def __init__(self, base_path: Path) -> None:
        self.base_path = base_path
        self._locations: dict[str, dm.Location] | None = None
        self._loaded_fields: dict[str, dict[str, set[str]]] = {}
        self._snapshots: dict[str, str] = {}

    def _path_for(self, name: str) -> Path:
        return self.base_path / name / "base.json"

    def list_locations(self) -> list[str]:
        """Return the names of every location folder that holds a ``base.json``."""

        if not self.base_path.is_dir():
            raise FileNotFoundError(f"location database not found: {self.base_path}")
        return sorted(
            path.name for path in self.base_path.iterdir() if self._path_for(path.name).is_file()
        )

    def load(self, name: str) -> dm.Location:
        """Read a single location from disk."""

        path = self._path_for(name)
        try:
            record = LocationBaseRecord.model_validate_json(path.read_bytes())
        except ValidationError as exc:
            raise LocationStoreError(f"invalid location data in {path}: {exc}") from exc

        self._loaded_fields[name] = {
            exit_.name: set(exit_.model_fields_set) for exit_ in record.exits
        }
        location = record.to_domain()
        self._snapshots[name] = self._dump(name, location)
        return location

    def get_locations(self) -> dict[str, dm.Location]:
        """Return the live location records, loading them on first use."""

        if self._locations is None:
            self._locations = {name: self.load(name) for name in self.list_locations()}
        return self._locations

    def _dump(self, name: str, location: dm.Location) -> str:
        record = LocationBaseRecord.from_domain(location)
        loaded = self._loaded_fields.get(name, {})
        omitted = {
            index: exit_.unset_defaults(loaded.get(exit_.name))
            for index, exit_ in enumerate(record.exits)
        }
        omitted = {index: fields for index, fields in omitted.items() if fields}
        return record.model_dump_json(
            by_alias=True, indent=2, exclude={"exits": omitted} if omitted else None
        )

    def save(self) -> list[Path]:
        """Write every changed location back to disk and return the paths written."""

        if self._locations is None:
            return []

        paths: list[Path] = []
        for name, location in self._locations.items():
            payload = self._dump(name, location)
            if payload == self._snapshots.get(name):
                continue
            path = self._path_for(name)
            path.write_text(payload, encoding="utf-8")
            self._snapshots[name] = payload
            paths.append(path)
        return paths
