"""
Doc-comment driven help for CLI applications.

Help text lives in the doc comments of commands. The parser turns a
comment into a HelpModel, the renderer turns the model into console text,
and the table engine lays out the name/description columns.
"""

from .model import HelpModel, OptionSpec, Example
from .parser import DocCommentParser, parse_doc_comment, DEFAULT_SUBSTITUTION_TOKEN
from .table import Table, TableConfig, TableLayoutEngine, render_table
from .style import Style, PLAIN
from .renderer import HelpRenderer, render_help
from .catalog import CommandCatalog

__all__ = [
    'HelpModel',
    'OptionSpec',
    'Example',
    'DocCommentParser',
    'parse_doc_comment',
    'DEFAULT_SUBSTITUTION_TOKEN',
    'Table',
    'TableConfig',
    'TableLayoutEngine',
    'render_table',
    'Style',
    'PLAIN',
    'HelpRenderer',
    'render_help',
    'CommandCatalog',
]
