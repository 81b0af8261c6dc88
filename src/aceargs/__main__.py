"""aceargs executable module.

No error handling here: cli.main() is the single boundary for both
`python -m aceargs` and the installed `aceargs` script.
"""

from __future__ import annotations

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
