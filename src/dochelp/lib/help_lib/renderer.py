"""
Renders a HelpModel as console text.
"""

from typing import List, Mapping, Optional, Sequence

from .model import HelpModel
from .style import PLAIN, Style
from .table import TableConfig, TableLayoutEngine


NAME_TABLE = TableConfig()
OPTION_TABLE = TableConfig(skip_empty_columns=True)


class HelpRenderer:
    """
    Composes help text section by section.

    Sections without data are left out entirely. Tables are laid out as
    plain text first; colour is added to the name columns afterwards.
    """

    def __init__(self, style: Optional[Style] = None, indent: int = 2):
        self.style = style or PLAIN
        self.indent = ' ' * indent

    def render(self, model: HelpModel) -> str:
        """Full help text for ``model``, without trailing blank lines."""
        output = (
            (f"{model.description}\n\n" if model.description else '')
            + self.render_usage(model)
            + self.render_args(model)
            + self.render_options(model)
            + self.render_sub_commands(model)
            + (f"{model.long_description}\n\n" if model.long_description else '')
            + self.render_examples(model)
        )
        return output.strip('\n ')

    def render_usage(self, model: HelpModel) -> str:
        if not model.usage:
            return ''
        return self.style.heading("Usage:") + f"\n{self.indent}{model.usage}\n\n"

    def render_args(self, model: HelpModel) -> str:
        if not model.args:
            return ''
        rows = [[name, desc] for name, desc in model.args.items()]
        return self.section("Arguments:", rows, NAME_TABLE, styled_columns=1)

    def render_options(self, model: HelpModel) -> str:
        if not model.options:
            return ''
        rows = [[opt.long_label, opt.short_label, opt.description]
                for opt in model.options]
        # Only the flag columns that survive skip_empty_columns get colour
        styled = (any(opt.long_name for opt in model.options)
                  + any(opt.short_flag for opt in model.options))
        return self.section("Options:", rows, OPTION_TABLE, styled_columns=styled)

    def render_sub_commands(self, model: HelpModel) -> str:
        if not model.sub_commands:
            return ''
        return self.render_name_list("Sub commands:", model.sub_commands)

    def render_examples(self, model: HelpModel) -> str:
        if not model.examples:
            return ''
        output = self.style.heading("Examples:") + "\n"
        for example in model.examples:
            if example.description:
                output += f"{self.indent}{example.description}:\n"
            output += (self.indent * 2 + self.style.emphasis(example.code)
                       + "\n\n")
        return output

    def render_command_list(self, commands: Mapping[str, str]) -> str:
        """The 'Available commands:' listing, names mapped to short descriptions."""
        return self.render_name_list("Available commands:", commands)

    def render_name_list(self, title: str, entries: Mapping[str, str]) -> str:
        """A heading followed by a name / description table."""
        rows = [[name, desc] for name, desc in entries.items()]
        return self.section(title, rows, NAME_TABLE, styled_columns=1)

    def section(self, title: str, rows: Sequence[Sequence[str]],
                config: TableConfig, styled_columns: int) -> str:
        """Heading, indented table and a trailing blank line."""
        table = TableLayoutEngine(config).render(rows)
        lines = [self.indent + self.style_cells(line, styled_columns)
                 for line in table.splitlines()]
        return self.style.heading(title) + "\n" + "\n".join(lines) + "\n\n"

    def style_cells(self, line: str, count: int) -> str:
        """Emphasize the first ``count`` tab-separated cells of a line.

        Padding stays outside the escape codes.
        """
        if not self.style.enabled or count <= 0:
            return line
        cells: List[str] = line.split('\t', count)
        for i in range(min(count, len(cells))):
            text = cells[i].rstrip(' ')
            cells[i] = self.style.emphasis(text) + cells[i][len(text):]
        return '\t'.join(cells)


def render_help(model: HelpModel, style: Optional[Style] = None,
                indent: int = 2) -> str:
    """Render ``model`` with a one-off HelpRenderer."""
    return HelpRenderer(style, indent).render(model)
