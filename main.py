"""Development entrypoint for the OpenExtracts command line tool."""

from __future__ import annotations

import sys

from openextracts.main import main

if __name__ == "__main__":
    sys.exit(main())
