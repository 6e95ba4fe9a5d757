"""Allow ``python -m ytdtd``."""

import sys

from ytdtd.ui.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
