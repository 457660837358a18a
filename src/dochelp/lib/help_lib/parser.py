"""
Doc-comment parser.

Turns a documentation comment into a HelpModel. Comments are free text
followed (or interleaved) with tag lines::

    /**
     * Copy files between hosts.
     *
     * Longer explanation, shown after the option tables.
     *
     * @usage $0 copy [options] <src> <dest>
     * @arg src   Source path
     * @arg dest  Destination path
     * @opt --recursive -r  Copy directories
     * @flag -q  Quiet
     * @example `$0 copy -r a b`  Copy directory a to b
     */

Python docstrings use the same tags without the comment delimiters.
The parser is permissive: a tag line that does not fit its grammar is
either dropped (it still looks like an ``@tag``) or kept as description
text. Nothing raises.
"""

import re
from typing import List, Optional, Tuple

from ..log_lib import get_output
from .model import Example, HelpModel, OptionSpec


DEFAULT_SUBSTITUTION_TOKEN = '$0'

USAGE_RE = re.compile(r'@usage\s+(?P<text>.+)$')
ARG_RE = re.compile(r'@arg\s+(?P<name>\S+)(?:\s+(?P<desc>.*))?$')
OPT_RE = re.compile(
    r'@opt(?=\s)'
    r'(?:\s+(?:--)?(?!-)(?P<long>[A-Za-z0-9_=-]+))?'
    r'(?:\s+-(?P<flag>\w)(?=\s|$))?'
    r'(?:\s+(?P<desc>.*))?$'
)
FLAG_RE = re.compile(r'@flag\s+-?(?P<flag>[A-Za-z0-9])(?:\s+(?P<desc>.*))?$')
EXAMPLE_RE = re.compile(r'@example\s+`(?P<code>[^`]+)`(?:\s+(?P<desc>.*))?$')
ANY_TAG_RE = re.compile(r'@[A-Za-z0-9_-]+')
PARAGRAPH_BREAK_RE = re.compile(r'\n{2,}')


def strip_comment(raw_text: str) -> List[str]:
    """Remove comment delimiters and leading asterisks.

    ``/* ... */`` delimiters are removed only when both are present, so
    docstrings and plain strings pass through untouched.

    Returns:
        Content lines, in order, each stripped of surrounding whitespace
        and any leading ``*`` / space run.
    """
    text = raw_text.strip()
    if len(text) >= 4 and text.startswith('/*') and text.endswith('*/'):
        text = text[2:-2]
    return [line.strip().lstrip('* ') for line in text.split('\n')]


def split_description(text: str) -> Tuple[str, Optional[str]]:
    """Split description text at the first blank-line run.

    Returns:
        (description, long_description); long_description is None when
        the text is a single paragraph.
    """
    text = text.strip('\n ')
    parts = PARAGRAPH_BREAK_RE.split(text, maxsplit=1)
    if len(parts) == 1:
        return text, None
    return parts[0], parts[1]


class DocCommentParser:
    """
    Extracts a HelpModel from doc-comment text.

    ``substitution_token`` is replaced by ``program_name`` in usage and
    example text, so ``$0 help`` reads as ``app help`` when the program
    was invoked as ``app``.
    """

    def __init__(self, substitution_token: str = DEFAULT_SUBSTITUTION_TOKEN,
                 program_name: str = 'app'):
        self.substitution_token = substitution_token
        self.program_name = program_name

    def substitute(self, text: str) -> str:
        """Replace every substitution token in ``text`` with the program name."""
        if not self.substitution_token:
            return text
        return text.replace(self.substitution_token, self.program_name)

    def parse(self, raw_text: str) -> HelpModel:
        """
        Parse a doc comment.

        Args:
            raw_text: Comment or docstring text; None is treated as empty

        Returns:
            A new HelpModel
        """
        out = get_output()
        usage = None
        args = {}
        options = []
        examples = []
        desc_lines = []

        for line in strip_comment(raw_text or ''):
            m = USAGE_RE.match(line)
            if m:
                usage = self.substitute(m.group('text'))
                continue

            m = ARG_RE.match(line)
            if m:
                args[m.group('name')] = m.group('desc') or ''
                continue

            m = OPT_RE.match(line)
            if m:
                options.append(OptionSpec(
                    long_name=m.group('long'),
                    short_flag=m.group('flag'),
                    description=m.group('desc') or '',
                ))
                continue

            m = FLAG_RE.match(line)
            if m:
                options.append(OptionSpec(
                    short_flag=m.group('flag'),
                    description=m.group('desc') or '',
                ))
                continue

            m = EXAMPLE_RE.match(line)
            if m:
                examples.append(Example(
                    code=self.substitute(m.group('code')),
                    description=m.group('desc') or '',
                ))
                continue

            if ANY_TAG_RE.match(line):
                out.emit(3, "dropped tag line: {line}", channel='parse', line=line)
                continue

            desc_lines.append(line)

        description, long_description = split_description('\n'.join(desc_lines))
        out.emit(3, "parsed {a} args, {o} options, {e} examples",
                 channel='parse', a=len(args), o=len(options), e=len(examples))

        return HelpModel(
            description=description,
            long_description=long_description,
            usage=usage,
            args=args,
            options=options,
            examples=examples,
        )


def parse_doc_comment(raw_text: str,
                      substitution_token: str = DEFAULT_SUBSTITUTION_TOKEN,
                      program_name: str = 'app') -> HelpModel:
    """Parse ``raw_text`` with a one-off DocCommentParser."""
    return DocCommentParser(substitution_token, program_name).parse(raw_text)
