"""Allow running as python -m esperanto_text."""

import sys

from .cli import main

sys.exit(main())
