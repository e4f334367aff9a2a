# SPDX-License-Identifier: MIT
"""Allow running tr2make as ``python -m tr2make``."""

import sys

from tr2make.cli import main

sys.exit(main())
