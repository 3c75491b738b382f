"""Protocol-based interfaces for the collaborators the extract rules need.

The host supplies the logging sink and the location store; tests inject
protocol-compatible fakes.
"""

from openextracts.interfaces.database import ILocationDatabase
from openextracts.interfaces.logger import ILogger

__all__ = [
    "ILocationDatabase",
    "ILogger",
]
