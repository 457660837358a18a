"""Renders comma or tab separated rows as a text table.

Rows are read from a file, or from standard input when no file is
given. Rows may have different numbers of cells.

@usage $0 table <format> [options] [file]
@arg format  Input format, one of the sub commands below
@arg file    Input file (default: standard input)
@opt --border -b  Draw an outer border
@opt --frame -f   Draw rules between the cells
@opt --header     Draw a rule under the first row
@opt --skip-empty Leave out columns without any text

@example `$0 table csv data.csv`             Align a CSV file in columns
@example `$0 table tsv -b -f --header < t.tsv` Draw a TSV file as a boxed table
"""

import argparse
import csv
import sys
from contextlib import contextmanager

from dochelp.lib.help_lib import Table, TableConfig
from dochelp.output import get_output


NAME = "table"
FORMATS = ("csv", "tsv")


def register(subparsers, parents):
    """Register the 'table' subcommand."""
    p = subparsers.add_parser(
        NAME,
        parents=parents,
        help="Render CSV or TSV rows as a text table",
        description="Render CSV or TSV rows as a text table.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("format", choices=FORMATS,
                   help="Input format")
    p.add_argument("file", nargs="?", default=None,
                   help="Input file (default: stdin)")
    p.add_argument("--border", "-b", action="store_true", default=False,
                   help="Draw an outer border")
    p.add_argument("--frame", "-f", action="store_true", default=False,
                   help="Draw rules between the cells")
    p.add_argument("--header", action="store_true", default=False,
                   help="Draw a rule under the first row")
    p.add_argument("--skip-empty", action="store_true", default=False,
                   help="Leave out columns without any text")
    p.set_defaults(func=run)


@contextmanager
def _open_input(path):
    """Yield the input stream: the named file or stdin."""
    if path is None:
        yield sys.stdin
    else:
        with open(path, encoding="utf-8", newline="") as f:
            yield f


def _config(args):
    return TableConfig(
        draw_border=args.border,
        draw_frame=args.frame,
        skip_empty_columns=args.skip_empty,
        use_header_row=args.header,
    )


def _write(rows, args):
    out = get_output()
    out.emit(1, "{n} rows read", channel='render', n=len(rows))
    Table(sys.stdout, rows, _config(args)).write()
    if not args.header:
        out.hint('table.header', 'verbose')
    return 0


def execute_csv(args):
    """Renders comma separated rows.

    Quoted cells may contain commas and newlines.

    @usage $0 table csv [options] [file]
    @example `$0 table csv -b -f people.csv`  Draw people.csv in a box
    """
    with _open_input(args.file) as stream:
        rows = list(csv.reader(stream))
    return _write(rows, args)


def execute_tsv(args):
    """Renders tab separated rows.

    @usage $0 table tsv [options] [file]
    """
    with _open_input(args.file) as stream:
        rows = [line.rstrip("\r\n").split("\t") for line in stream]
    return _write(rows, args)


def run(args):
    """Dispatch to the execute_<format> sub command."""
    return globals()[f"execute_{args.format}"](args)
