"""
Fixed-width text tables.

TableLayoutEngine computes column widths over all rows and renders them
either tab-separated (the default, used by the help sections) or inside
an ASCII frame::

    +-----+----+
    | a   | bb |
    +-----+----+
    | ccc | d  |
    +-----+----+

Widths are byte lengths of the UTF-8 encoded cell text. Rows may have
different lengths: a missing cell renders as padding.
"""

from dataclasses import dataclass, fields
from typing import Any, List, Mapping, Optional, Sequence, TextIO

from ...errors import InvalidConfiguration
from ..log_lib import get_output


TAB_STOP = 8

# Keys accepted by TableConfig.from_options() besides the field names
LEGACY_OPTION_NAMES = {
    'border': 'draw_border',
    'frame': 'draw_frame',
    'skipEmpty': 'skip_empty_columns',
    'headers': 'use_header_row',
}


@dataclass(frozen=True)
class TableConfig:
    """How a table is drawn.

    Attributes:
        draw_border: Outer ``|`` bars and rules at top and bottom
        draw_frame: Padded cells and ``+``-capped rules with a ``+`` at
            every column boundary
        skip_empty_columns: Leave out columns whose cells are all empty
        use_header_row: Draw a rule after the first row

    Framed cells are also separated by ``|``, so each bar sits under a
    ``+`` of the rule (``| a | bb |`` rather than ``| a  bb |``).
    """
    draw_border: bool = False
    draw_frame: bool = False
    skip_empty_columns: bool = False
    use_header_row: bool = False

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                raise InvalidConfiguration(
                    f"TableConfig.{f.name} must be a bool, got {value!r}")

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> 'TableConfig':
        """Build a config from an options mapping.

        Accepts field names and the short legacy names ('border', 'frame',
        'skipEmpty', 'headers').

        Raises:
            InvalidConfiguration: On an unknown key or a non-bool value.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in options.items():
            name = LEGACY_OPTION_NAMES.get(key, key)
            if name not in known:
                raise InvalidConfiguration(f"Unknown table option: {key!r}")
            kwargs[name] = value
        return cls(**kwargs)


def cell_text(value: Any) -> str:
    """Text for a cell value; None is an empty cell."""
    if value is None:
        return ''
    return value if isinstance(value, str) else str(value)


def measure(text: str) -> int:
    """Display width of ``text`` in bytes."""
    return len(text.encode('utf-8'))


def pad(text: str, width: int) -> str:
    """Left-justify ``text`` to ``width`` bytes."""
    return text + ' ' * max(width - measure(text), 0)


def round_to_tab_stop(width: int) -> int:
    """Round ``width`` up to a multiple of the tab stop."""
    return -(-width // TAB_STOP) * TAB_STOP


class TableLayoutEngine:
    """
    Lays out rows of cells as text.

    The engine knows nothing about colour. Callers that want styled
    cells decorate the rendered text afterwards.
    """

    def __init__(self, config: Optional[TableConfig] = None):
        self.config = config or TableConfig()

    def column_widths(self, rows: Sequence[Sequence[Any]]) -> List[int]:
        """
        Width of every column index present in any row.

        Rows that lack an index contribute nothing to its width.
        """
        widths: List[int] = []
        for row in rows:
            for i, value in enumerate(row):
                width = measure(cell_text(value))
                if i >= len(widths):
                    widths.append(width)
                elif width > widths[i]:
                    widths[i] = width
        return widths

    def visible_columns(self, widths: Sequence[int]) -> List[int]:
        """Indexes of the columns that are drawn."""
        if self.config.skip_empty_columns:
            return [i for i, width in enumerate(widths) if width > 0]
        return list(range(len(widths)))

    def format_row(self, row: Sequence[Any], widths: Sequence[int],
                   columns: Sequence[int]) -> str:
        """Render one row, newline terminated."""
        cfg = self.config
        cells = []
        for i in columns:
            text = cell_text(row[i]) if i < len(row) else ''
            cell = pad(text, widths[i])
            cells.append(f" {cell} " if cfg.draw_frame else cell)

        line = ('|' if cfg.draw_frame else '\t').join(cells)
        if cfg.draw_border:
            if cfg.draw_frame:
                line = f"|{line}|"
            else:
                line = f"| {line} |"
        return line + "\n"

    def format_rule(self, widths: Sequence[int], columns: Sequence[int]) -> str:
        """Render a horizontal rule, newline terminated.

        Without border or frame the rule is an empty line.
        """
        cfg = self.config
        if cfg.draw_frame:
            return '+' + '+'.join('-' * (widths[i] + 2) for i in columns) + "+\n"

        if cfg.draw_border:
            dashes = 0
            for n, i in enumerate(columns):
                width = widths[i] + 1 if n == 0 else widths[i]
                dashes += round_to_tab_stop(width)
            return '+' + '-' * dashes + "+\n"

        return "\n"

    def render(self, rows: Sequence[Sequence[Any]]) -> str:
        """
        Render all rows as one block of text.

        Args:
            rows: Sequence of rows, each a sequence of cell values

        Returns:
            The table, every line newline terminated
        """
        cfg = self.config
        widths = self.column_widths(rows)
        columns = self.visible_columns(widths)
        ruled = cfg.draw_border or cfg.draw_frame

        out = get_output()
        if out.channel_active('render', 3):
            out.emit(3, "table widths={widths} columns={columns}",
                     channel='render', widths=widths, columns=columns)

        parts = []
        if ruled:
            parts.append(self.format_rule(widths, columns))
        for i, row in enumerate(rows):
            parts.append(self.format_row(row, widths, columns))
            if i == 0 and cfg.use_header_row:
                parts.append(self.format_rule(widths, columns))
        if ruled:
            parts.append(self.format_rule(widths, columns))

        return ''.join(parts)


def render_table(rows: Sequence[Sequence[Any]],
                 config: Optional[TableConfig] = None) -> str:
    """Render ``rows`` with a one-off TableLayoutEngine."""
    return TableLayoutEngine(config).render(rows)


class Table:
    """
    Table widget bound to an optional output sink.

    Usage::

        table = Table(sys.stdout, [["name", "size"], ["a.txt", "12"]],
                      TableConfig(draw_border=True, draw_frame=True,
                                  use_header_row=True))
        table.write()
    """

    def __init__(self, writer: Optional[TextIO] = None,
                 values: Sequence[Sequence[Any]] = (),
                 config: Optional[TableConfig] = None):
        self.writer = writer
        self.values = [list(row) for row in values]
        self.config = config or TableConfig()

    def add_row(self, *cells: Any) -> 'Table':
        """Append a row."""
        self.values.append(list(cells))
        return self

    def render(self) -> str:
        """Render the table text."""
        return TableLayoutEngine(self.config).render(self.values)

    def write(self) -> 'Table':
        """Write the rendered table to the writer.

        Raises:
            InvalidConfiguration: If the table has no writer.
        """
        if self.writer is None:
            raise InvalidConfiguration('No writer specified for table output')
        self.writer.write(self.render())
        return self

    def __str__(self) -> str:
        return self.render()
