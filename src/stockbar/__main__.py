"""Allow ``python -m stockbar``."""

import sys

from stockbar.main import main

sys.exit(main())
