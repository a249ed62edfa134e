"""Allow ``python -m lgrep``."""

import sys

from lgrep.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
