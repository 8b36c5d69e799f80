"""Module entrypoint for ``python -m fuzzypick``.

This keeps module-mode execution behavior identical to the console script.
All argument parsing and runtime setup happen in ``fuzzypick.cli``.
"""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
