"""
Terminal colours for help output.

Styles are applied to text that has already been laid out, so escape
codes never count towards column widths.
"""

from rich.color import ColorSystem
from rich.style import Style as RichStyle


HEADING = 'yellow'
EMPHASIS = 'green'


class Style:
    """
    Wraps text in ANSI colour codes.

    A disabled Style returns text unchanged, which is what tests and
    ``--no-color`` use.
    """

    def __init__(self, enabled: bool = True,
                 color_system: ColorSystem = ColorSystem.STANDARD):
        self.enabled = enabled
        self.color_system = color_system

    def colorize(self, text: str, style: str) -> str:
        """Wrap ``text`` in the codes for ``style`` (a rich style string)."""
        if not self.enabled or not text:
            return text
        return RichStyle.parse(style).render(text, color_system=self.color_system)

    def heading(self, text: str) -> str:
        """Section headings such as 'Usage:'."""
        return self.colorize(text, HEADING)

    def emphasis(self, text: str) -> str:
        """Command names, argument names and option flags."""
        return self.colorize(text, EMPHASIS)


PLAIN = Style(enabled=False)
