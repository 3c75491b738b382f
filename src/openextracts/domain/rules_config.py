"""Configuration model for the extract rules.

The configuration file uses camelCase keys (``ignoreEntryPoint``,
``maxExtractionTime``...).  Every key is required; values are type-checked by
pydantic but not range-checked.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _ConfigModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class GeneralConfig(_ConfigModel):
    """Top-level switches."""

    enabled: bool
    debug: bool


class RandomChanceConfig(_ConfigModel):
    """Per-extract chance overrides keyed by config location name, then extract name.

    Chances are meant to lie in 0-100 but are not range-checked here; the
    values are written to the extracts as given.
    """

    enabled: bool
    chances: dict[str, dict[str, int | float]]


class CooperationConfig(_ConfigModel):
    """Payment used to replace cooperation extracts."""

    convert_to_payment: bool
    item: str
    number: int


class ExtractsConfig(_ConfigModel):
    """Rule toggles and thresholds."""

    ignore_entry_point: bool
    random: RandomChanceConfig
    max_extraction_time: int | float
    cooperation: CooperationConfig
    ignore_backpack_requirements: bool
    ignore_cliff_requirements: bool


class ModConfig(_ConfigModel):
    """Complete configuration document."""

    general: GeneralConfig
    extracts: ExtractsConfig

    def chance_for(self, config_key: str, extract_name: str) -> int | float | None:
        """Return the configured chance for an extract, or ``None`` when not listed."""

        location_chances = self.extracts.random.chances.get(config_key)
        if location_chances is None:
            return None
        return location_chances.get(extract_name)
