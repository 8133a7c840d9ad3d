"""Allow ``python -m digit_knn``."""

import sys

from digit_knn.cli import main

sys.exit(main())
