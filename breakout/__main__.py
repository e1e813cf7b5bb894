"""Run Breakout with ``python -m breakout``."""

import sys

from breakout.main import main

sys.exit(main())
