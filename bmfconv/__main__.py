"""
bmfconv - convert AngelCode BMFont XML descriptors

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import sys

from .scripts.convert import main

sys.exit(main())
