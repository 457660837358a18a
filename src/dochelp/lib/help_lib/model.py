"""
Structured help data extracted from doc comments.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class OptionSpec:
    """
    A single documented option.

    Either name may be missing: ``@opt --force`` has no short flag and
    ``@flag -q`` has no long name.
    """
    long_name: Optional[str] = None     # Without the leading "--"
    short_flag: Optional[str] = None    # Single character, without "-"
    description: str = ''

    @property
    def long_label(self) -> str:
        """Long name as typed on the command line, or empty string."""
        return f"--{self.long_name}" if self.long_name else ''

    @property
    def short_label(self) -> str:
        """Short flag as typed on the command line, or empty string."""
        return f"-{self.short_flag}" if self.short_flag else ''


@dataclass(frozen=True)
class Example:
    """An example invocation and what it does."""
    code: str
    description: str = ''


@dataclass(frozen=True)
class HelpModel:
    """
    Help for one command, function or sub-command.

    Built once by the parser. The only part that changes afterwards is
    ``sub_commands``, which the help command fills in from the
    ``execute_*`` members of a command before rendering.
    """
    description: str = ''
    long_description: Optional[str] = None
    usage: Optional[str] = None
    args: Dict[str, str] = field(default_factory=dict)
    options: List[OptionSpec] = field(default_factory=list)
    sub_commands: Dict[str, str] = field(default_factory=dict)
    examples: List[Example] = field(default_factory=list)

    @property
    def short_description(self) -> str:
        """
        First line of the description.

        This is what command listings show, so it never contains a newline.
        """
        return self.description.split('\n', 1)[0]

    def add_sub_command(self, name: str, description: str) -> None:
        """Record a sub-command and its short description."""
        self.sub_commands[name] = description
