"""Enumerations used by the extract domain."""

from __future__ import annotations

from enum import StrEnum


class PassageRequirement(StrEnum):
    """Mechanism that unlocks an extract.

    The game data uses more tags than are modelled here; unknown values are
    carried through as plain strings.
    """

    NONE = "None"
    EMPTY = "Empty"
    TRAIN = "Train"
    SCAV_COOPERATION = "ScavCooperation"
    TRANSFER_ITEM = "TransferItem"
    REFERENCE = "Reference"
    WORLD_EVENT = "WorldEvent"


class ExfiltrationType(StrEnum):
    """How an extract is shared between players."""

    INDIVIDUAL = "Individual"
    SHARED_TIMER = "SharedTimer"
    MANUAL = "Manual"


class EquipmentSlot(StrEnum):
    """Equipment slots referenced by extract requirements."""

    BACKPACK = "Backpack"
    FIRST_PRIMARY_WEAPON = "FirstPrimaryWeapon"
    SECOND_PRIMARY_WEAPON = "SecondPrimaryWeapon"
    TACTICAL_VEST = "TacticalVest"
    ARMOR_VEST = "ArmorVest"


class RequirementTip(StrEnum):
    """Hint keys shown to the player for gated extracts."""

    NONE = ""
    ITEM = "EXFIL_Item"
    BACKPACK = "EXFIL_tip_backpack"
    INTERCHANGE_HOLE = "EXFIL_INTERCHANGE_HOLE_TIP"


class NameKind(StrEnum):
    """Vocabularies a location identifier can be resolved into."""

    CONFIG = "config"
    HUMAN = "human"


class LogColor(StrEnum):
    """Colors understood by the logging sink."""

    CYAN = "cyan"
    GRAY = "gray"
    RED = "red"
    YELLOW = "yellow"
