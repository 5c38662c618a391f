"""Run the console table with ``python -m console_ui``."""

import sys

from console_ui.main import main

sys.exit(main())
