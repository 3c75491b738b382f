"""Host lifecycle entry point for the extract adjustments."""

from __future__ import annotations

from openextracts.domain.enums import LogColor
from openextracts.domain.extracts import AdjustmentSummary, adjust_extracts
from openextracts.domain.rules_config import ModConfig
from openextracts.interfaces import ILocationDatabase, ILogger

DISABLED_MESSAGE = "OpenExtracts is disabled in the config file."


class OpenExtracts:
    """Runs the extract rules once the host database has been loaded."""

    def post_db_load(
        self, database: ILocationDatabase, config: ModConfig, logger: ILogger
    ) -> AdjustmentSummary | None:
        """Adjust every enabled location, unless the configuration disables the mod.

        Returns ``None`` when disabled; no record is touched in that case.
        """

        if not config.general.enabled:
            logger.log(DISABLED_MESSAGE, LogColor.RED)
            return None

        return adjust_extracts(database.get_locations(), config, logger)
