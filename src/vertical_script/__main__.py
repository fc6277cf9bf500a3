"""Entry point for ``python -m vertical_script``."""

import sys

from vertical_script.cli import main

sys.exit(main())
