"""
Verbosity level constants.

The emit rule is ``message.level <= threshold``. Negative thresholds come
from -Q flags, positive ones from -v flags.

    -4    -3     -2       -1      0        1       2      3
    wall  errors warnings minimal default  detail  config debug
"""

DEBUG = 3          # Parser line classification, layout widths
CONFIG = 2         # Resolved settings, catalog registration
DETAIL = 1         # Extra help-command output
DEFAULT = 0        # Normal output and result hints

MINIMAL = -1       # Suppress hints
WARNING = -2       # Suppress status lines
ERROR = -3         # Errors only
NOTHING = -4       # Hard wall, exit code only
