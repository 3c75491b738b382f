"""Rule pipeline that adjusts location extracts according to the configuration.

Every rule is a plain function ``(extract, ctx) -> bool`` that owns a single
group of fields and returns ``True`` when it changed the extract.  Rules are
composed into two ordered tuples; train extracts stop after the first one.
All rules compare against the current value before writing, so running the
pipeline a second time changes nothing.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .catalog import LOCATION_NAMES, all_entry_points, enabled_locations, resolve_location_name
from .enums import (
    EquipmentSlot,
    ExfiltrationType,
    LogColor,
    NameKind,
    PassageRequirement,
    RequirementTip,
)
from .models import Extract, Location
from .rules_config import ModConfig

if TYPE_CHECKING:
    from openextracts.interfaces.logger import ILogger

BACKPACK_REQUIREMENT_TIPS = frozenset({RequirementTip.BACKPACK, RequirementTip.INTERCHANGE_HOLE})
CLIFF_EXTRACT_KEYWORD = "alpinist"
CLIFF_PASSAGE_REQUIREMENT = PassageRequirement.REFERENCE
COMPLETION_MESSAGE = (
    "OpenExtracts: Extracts have successfully adjusted according to the configuration."
)


@dataclass(slots=True)
class RuleContext:
    """Everything a rule may consult besides the extract itself."""

    config: ModConfig
    logger: ILogger
    location: Location

    @property
    def location_name(self) -> str:
        return resolve_location_name(self.location.base.id, NameKind.HUMAN)

    @property
    def config_key(self) -> str:
        return resolve_location_name(self.location.base.id, NameKind.CONFIG)

    def debug(self, extract: Extract, message: str) -> None:
        """Emit a gray trace line when debug output is enabled."""

        if not self.config.general.debug:
            return
        self.logger.log(
            f"OpenExtracts: {extract.name} on {self.location_name} {message}", LogColor.GRAY
        )


Rule = Callable[[Extract, RuleContext], bool]


@dataclass(slots=True)
class ExtractChange:
    """One rule that modified one extract."""

    location_id: str
    extract_name: str
    rule: str


@dataclass(slots=True)
class AdjustmentSummary:
    """Outcome of a full pass over the enabled locations."""

    locations_processed: int = 0
    extracts_processed: int = 0
    changes: list[ExtractChange] = field(default_factory=list)

    @property
    def changed_extracts(self) -> int:
        return len({(change.location_id, change.extract_name) for change in self.changes})


# ---------------------------------------------------------------------------
# Predicates


def is_train_extract(extract: Extract) -> bool:
    return extract.passage_requirement == PassageRequirement.TRAIN


def is_cooperation_extract(extract: Extract) -> bool:
    return extract.passage_requirement == PassageRequirement.SCAV_COOPERATION


def is_backpack_extract(extract: Extract) -> bool:
    return (
        extract.requirement_tip in BACKPACK_REQUIREMENT_TIPS
        and extract.required_slot == EquipmentSlot.BACKPACK
    )


def is_cliff_extract(extract: Extract) -> bool:
    return (
        CLIFF_EXTRACT_KEYWORD in extract.name.lower()
        and extract.passage_requirement == CLIFF_PASSAGE_REQUIREMENT
    )


# ---------------------------------------------------------------------------
# Rules


def normalize_multiplayer(extract: Extract, ctx: RuleContext) -> bool:
    """Make every extract individual with no party size requirement."""

    changed = (
        extract.exfiltration_type != ExfiltrationType.INDIVIDUAL or extract.players_count != 0
    )
    extract.exfiltration_type = ExfiltrationType.INDIVIDUAL
    extract.players_count = 0
    return changed


def broaden_entry_points(extract: Extract, ctx: RuleContext) -> bool:
    """Allow the extract from every spawn side of the map."""

    if not ctx.config.extracts.ignore_entry_point:
        return False

    entry_points = all_entry_points(ctx.location)
    if extract.entry_points == entry_points:
        return False

    extract.entry_points = entry_points
    ctx.debug(extract, f"has been updated to allow all entry points: {entry_points}.")
    return True


def override_chance(extract: Extract, ctx: RuleContext) -> bool:
    """Replace the activation chance with the configured one, when listed."""

    if not ctx.config.extracts.random.enabled:
        return False

    configured = ctx.config.chance_for(ctx.config_key, extract.name)
    if configured is None or configured == extract.chance:
        return False

    original = extract.chance
    extract.chance = configured
    ctx.debug(
        extract,
        f"has had its chance to be enabled changed from {original}% to {configured}%.",
    )
    return True


def cap_extraction_time(extract: Extract, ctx: RuleContext) -> bool:
    """Clamp the extraction timer down to the configured maximum."""

    max_time = ctx.config.extracts.max_extraction_time
    original = extract.exfiltration_time
    if original <= max_time:
        return False

    extract.exfiltration_time = max_time
    ctx.debug(
        extract,
        f"has had its extraction time updated from {original} seconds to {max_time} seconds.",
    )
    return True


def convert_cooperation_to_payment(extract: Extract, ctx: RuleContext) -> bool:
    """Turn a cooperation extract into an item payment extract."""

    cooperation = ctx.config.extracts.cooperation
    if not cooperation.convert_to_payment or not is_cooperation_extract(extract):
        return False

    extract.passage_requirement = PassageRequirement.TRANSFER_ITEM
    extract.requirement_tip = RequirementTip.ITEM
    extract.id = cooperation.item
    extract.count = cooperation.number
    ctx.debug(extract, "has been converted to a payment extract.")
    return True


def remove_backpack_requirement(extract: Extract, ctx: RuleContext) -> bool:
    """Let players use no-backpack extracts while wearing one."""

    if not ctx.config.extracts.ignore_backpack_requirements or not is_backpack_extract(extract):
        return False

    extract.passage_requirement = PassageRequirement.NONE
    extract.required_slot = EquipmentSlot.FIRST_PRIMARY_WEAPON
    extract.requirement_tip = RequirementTip.NONE
    ctx.debug(extract, "has had its backpack requirement removed.")
    return True


def remove_cliff_requirement(extract: Extract, ctx: RuleContext) -> bool:
    """Drop the paracord, red rebel and armored rig requirements of cliff extracts."""

    if not ctx.config.extracts.ignore_cliff_requirements or not is_cliff_extract(extract):
        return False

    extract.id = ""
    extract.passage_requirement = PassageRequirement.NONE
    ctx.debug(extract, "has had its paracord, red rebel, and armored rig requirements removed.")
    return True


PRE_TRANSIT_RULES: tuple[Rule, ...] = (
    normalize_multiplayer,
    broaden_entry_points,
    override_chance,
    cap_extraction_time,
)

POST_TRANSIT_RULES: tuple[Rule, ...] = (
    convert_cooperation_to_payment,
    remove_backpack_requirement,
    remove_cliff_requirement,
)


# ---------------------------------------------------------------------------
# Pipeline


def apply_rules(extract: Extract, ctx: RuleContext) -> list[str]:
    """Run the pipeline on one extract and return the names of rules that changed it."""

    applied = [rule.__name__ for rule in PRE_TRANSIT_RULES if rule(extract, ctx)]

    # Train extracts are transit mechanisms; leave the rest of them alone.
    if is_train_extract(extract):
        return applied

    applied.extend(rule.__name__ for rule in POST_TRANSIT_RULES if rule(extract, ctx))
    return applied


def _ordered_locations(enabled: Iterable[str]) -> list[str]:
    wanted = set(enabled)
    ordered = [location_id for location_id in LOCATION_NAMES if location_id in wanted]
    ordered.extend(sorted(wanted.difference(LOCATION_NAMES)))
    return ordered


def adjust_extracts(
    locations: Mapping[str, Location],
    config: ModConfig,
    sink: ILogger,
    *,
    enabled: Iterable[str] | None = None,
) -> AdjustmentSummary:
    """Apply the rule pipeline to every extract of every enabled location.

    Args:
        locations: Host database locations keyed by database name
        config: Loaded configuration
        sink: Host logging sink for the banner and debug traces
        enabled: Location ids to process; defaults to the catalog

    Returns:
        AdjustmentSummary listing every change made
    """

    if enabled is None:
        enabled = enabled_locations()

    summary = AdjustmentSummary()
    for location_id in _ordered_locations(enabled):
        location = locations.get(location_id)
        if location is None:
            sink.log(
                f"OpenExtracts: location {location_id} missing from database; skipping",
                LogColor.YELLOW,
            )
            continue

        summary.locations_processed += 1
        ctx = RuleContext(config=config, logger=sink, location=location)
        for extract in location.base.exits:
            summary.extracts_processed += 1
            for rule_name in apply_rules(extract, ctx):
                summary.changes.append(
                    ExtractChange(
                        location_id=location_id, extract_name=extract.name, rule=rule_name
                    )
                )

    sink.log(COMPLETION_MESSAGE, LogColor.CYAN)
    return summary
