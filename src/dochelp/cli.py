"""Main CLI entry point for dochelp.

Implements a Docker-style two-pass argument parser:
  1. First pass: extract global flags (--verbose, --no-color, --config)
  2. Second pass: dispatch to subcommand with shared parent args

Global flags can appear before OR after the subcommand:
  dochelp --no-color help table      # works
  dochelp help table --no-color      # also works

Subcommands self-register via register(subparsers, parents) and are
added to the command catalog, which is where 'help' reads their
documentation from.
"""

import argparse
import sys
from pathlib import Path

from dochelp._version import VERSION
from dochelp.errors import DochelpError


# ---------------------------------------------------------------------------
# Global flags (Docker-style: can precede the subcommand)
# ---------------------------------------------------------------------------
GLOBAL_FLAGS = {
    "--verbose": {"aliases": ["-v"], "action": "count", "default": 0,
                  "help": "Increase verbosity (-v, -vv, -vvv)"},
    "--quiet": {"aliases": ["-Q"], "action": "count", "default": 0,
                "help": "Decrease verbosity (-Q, -QQ, -QQQ, -QQQQ=silent)"},
    "--show": {"nargs": "?", "action": "append", "metavar": "CHANNEL[:LEVEL]",
               "help": "Show output channel (bare --show lists channels)"},
    "--no-color": {"action": "store_true", "default": False,
                   "help": "Disable colored output"},
    "--config": {"metavar": "PATH", "default": None,
                 "help": "Path to a project config file (default: nearest .dochelp.json)"},
}


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        global_parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    global_args, remaining = global_parser.parse_known_args(argv)
    return global_args, remaining


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules.

    Each module in dochelp.commands must export:
      NAME: the command name
      register(subparsers, parents): add itself to the subparser
      run(args): execute the command
    and documents itself in its module docstring.
    """
    from dochelp.commands import help, table
    return [help, table]


def _build_catalog(commands):
    """Register every command module in a fresh catalog."""
    from dochelp.lib.help_lib import CommandCatalog

    catalog = CommandCatalog()
    for cmd_module in commands:
        catalog.register(cmd_module.NAME, cmd_module)
    return catalog


def _invoked_name():
    """Program name as invoked; 'python -m dochelp' reports 'dochelp'."""
    name = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else ""
    if not name or name in ("__main__.py", "-m", "-c"):
        return "dochelp"
    return name


def _build_parser(commands):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="dochelp",
        description="dochelp: doc-comment driven help and text tables",
        epilog=(
            "Run 'dochelp help <command>' for details on a specific command.\n"
            "\n"
            "Global flags (--verbose, --no-color, --config) can appear\n"
            "before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"dochelp {VERSION}",
    )

    # Add global flags to main parser too (for --help display)
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        parser.add_argument(flag, *kwargs.get("aliases", []), **kw)

    subparsers = parser.add_subparsers(
        dest="command_name",
        title="commands",
        metavar="<command>",
    )

    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[])

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None, prog=None):
    """Main entry point for the dochelp CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].
        prog: Program name substituted for $0 in help text. None means
              the configured program_name, else the basename of argv[0].

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    # Handle bare --show (list channels and exit)
    if global_args.show and None in global_args.show:
        from dochelp.lib.log_lib import format_channel_list
        print(format_channel_list())
        return 0

    verbosity = (global_args.verbose or 0) - (global_args.quiet or 0)
    channels = [s for s in (global_args.show or []) if s is not None]
    from dochelp.config import resolve_settings
    from dochelp.output import get_output, init_output, print_error
    try:
        init_output(verbosity=verbosity, channels=channels)
    except ValueError as e:
        print(f"ERROR: invalid --show value: {e}", file=sys.stderr)
        return 2
    import dochelp.hints  # noqa: F401  (registers dochelp hints)

    settings = resolve_settings(global_args)
    prog = prog or settings["program_name"] or _invoked_name()

    # Pass 2: parse subcommand + its args
    commands = _discover_commands()
    parser = _build_parser(commands)

    # No args: same as 'help'
    if not remaining:
        remaining = ["help"]

    args = parser.parse_args(remaining)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    # Merge global args into the namespace for convenience
    for key, value in vars(global_args).items():
        if key not in vars(args) or getattr(args, key) is None:
            setattr(args, key, value)
    args.catalog = _build_catalog(commands)
    args.settings = settings
    args.prog = prog

    # Dispatch
    try:
        return args.func(args) or 0
    except DochelpError as e:
        print_error(str(e))
        get_output().hint('help.list', 'error', prog=prog)
        return 1
    except OSError as e:
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1


if __name__ == "__main__":
    sys.exit(main())
