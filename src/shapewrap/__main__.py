"""Allow ``python -m shapewrap``."""

import sys

from shapewrap.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
