"""dochelp hints for the verbosity system.

Import this module to register them. Each hint shows at most once per
session.
"""

from dochelp.lib.log_lib import Hint, register_hints


register_hints(
    Hint(
        id='help.details',
        message="Run '{prog} help <command>' for details on a command.",
        context={'result'},
        min_level=0,
        category='help',
    ),
    Hint(
        id='help.list',
        message="Run '{prog} help' to list the available commands.",
        context={'error'},
        min_level=0,
        category='help',
    ),
    Hint(
        id='help.sub_commands',
        message="Run '{prog} help {command} <sub command>' for details on a sub command.",
        context={'result'},
        min_level=1,
        category='help',
    ),
    Hint(
        id='table.header',
        message='Tip: Use --header to draw a rule under the first row.',
        context={'verbose'},
        min_level=1,
        category='table',
    ),
)
