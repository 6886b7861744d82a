"""Allow ``python -m rotationpairing``."""

import sys

from rotationpairing.cli import main

sys.exit(main())
