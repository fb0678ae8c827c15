"""Entry point for ``python -m htmlcsstoimage``."""

import sys

from htmlcsstoimage.cli import main

sys.exit(main())
