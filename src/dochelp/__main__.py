"""Allow ``python -m dochelp``."""

import sys

from dochelp.cli import main


sys.exit(main())
