"""Run the report CLI with ``python -m folder_census``."""

import sys

from folder_census.main import main

sys.exit(main())
