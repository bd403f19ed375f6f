"""Allow ``python -m specimen_media``."""

import sys

from specimen_media.cli import main

sys.exit(main())
