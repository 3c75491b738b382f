"""Location Database Protocol Interface.

This module defines the protocol for the host data store holding location
records.
"""

from typing import Protocol

from openextracts.domain.models import Location


class ILocationDatabase(Protocol):
    """Protocol for the store that owns the location records.

    Records returned by ``get_locations`` are live: mutations made by the
    caller are visible to the store.
    """

    def get_locations(self) -> dict[str, Location]:
        """Return every location keyed by its database name.

        Returns:
            Mapping of database name (e.g. ``"bigmap"``) to location
        """
        ...
