"""Allow ``python -m db_backup``."""

import sys

from db_backup.cli import main

sys.exit(main())
