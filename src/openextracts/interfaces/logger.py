"""Logger Protocol Interface.

This module defines the protocol for the colorized logging sink the host
provides to the extract rules.
"""

from typing import Protocol

from openextracts.domain.enums import LogColor


class ILogger(Protocol):
    """Protocol for a leveled, colorized single-line logging sink."""

    def log(self, message: str, color: LogColor) -> None:
        """Write one message.

        Args:
            message: Text of the line, without trailing newline
            color: Color the host should render the line in
        """
        ...
