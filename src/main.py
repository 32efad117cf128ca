"""Script entry point.

Lets `python -m main` work from inside `src/` during development, next to
the `patternbook` console script.
"""

from __future__ import annotations

import sys

# Box drawing and bullet characters fail on cp1252 Windows consoles.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
