"""Allow ``python -m taskbook``."""

import sys

from taskbook.main import main

sys.exit(main())
