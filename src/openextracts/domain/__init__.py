"""Domain layer for OpenExtracts.

This package holds everything needed to patch extracts in memory:

* Dataclasses for locations and extracts (see :mod:`models`).
* Enumerations of the tags found in the location data.
* The configuration model (see :mod:`rules_config`).
* The static location catalog (see :mod:`catalog`).
* The ordered extract rule pipeline (see :mod:`extracts`).

Nothing here touches disk or the host runtime; persistence lives in
:mod:`openextracts.repository`.
"""

from . import catalog, enums, extracts, models, rules_config

__all__ = [
    "catalog",
    "enums",
    "extracts",
    "models",
    "rules_config",
]
