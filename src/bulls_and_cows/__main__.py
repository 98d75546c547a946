"""Allow ``python -m bulls_and_cows``."""

import sys

from .cli import main

sys.exit(main())
