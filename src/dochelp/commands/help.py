"""Displays the list of commands and help for a command.

Help is read from the documentation of each command. Without arguments
the available commands are listed with their short descriptions.

@usage $0 help [command] [sub_command]
@arg command      The command name
@arg sub_command  A sub command of the command

@example `$0 help`            Show a list of all commands
@example `$0 help help`       Display help for the help command
@example `$0 help table csv`  Display help for the csv sub command of table
"""

import argparse

from dochelp.lib.help_lib import HelpRenderer, Style
from dochelp.output import get_output, write_text


NAME = "help"


def register(subparsers, parents):
    """Register the 'help' subcommand."""
    p = subparsers.add_parser(
        NAME,
        parents=parents,
        help="Show the list of commands or help for one command",
        description="Show the list of commands or help for one command.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("command", nargs="?", default=None,
                   help="Command to show help for")
    p.add_argument("sub_command", nargs="?", default=None,
                   help="Sub command to show help for")
    p.set_defaults(func=run)


def render_usage(prog, style):
    """The generic usage block shown above the command list."""
    return style.heading("Usage:") + f"\n  {prog} command [arguments]\n"


def render_commands(catalog, prog, settings, style):
    """The 'Available commands:' table."""
    renderer = HelpRenderer(style, settings["indent"])
    listing = catalog.short_descriptions(prog, settings["substitution_token"])
    return renderer.render_command_list(listing).rstrip("\n")


def render_help(catalog, command, sub_command, prog, settings, style):
    """Rendered help for one command or sub-command.

    Raises:
        NotFound: If the command or sub-command does not exist.
    """
    model = catalog.load_help(command, sub_command, prog,
                              settings["substitution_token"])
    return HelpRenderer(style, settings["indent"]).render(model), model


def run(args):
    """Execute the help command.

    Expects the CLI to have set ``catalog``, ``settings`` and ``prog`` on
    the namespace.
    """
    out = get_output()
    style = Style(enabled=bool(args.settings["color"]))

    if not args.command:
        write_text(render_usage(args.prog, style))
        write_text(render_commands(args.catalog, args.prog, args.settings, style))
        out.hint('help.details', 'result', prog=args.prog)
        return 0

    text, model = render_help(args.catalog, args.command, args.sub_command,
                              args.prog, args.settings, style)
    write_text(text)
    if model.sub_commands:
        out.hint('help.sub_commands', 'result',
                 prog=args.prog, command=args.command)
    return 0
