"""
Hint dataclass and registry.

Domain modules register hints at import time. OutputManager.hint()
filters them by context and verbosity and shows each one once.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Set


@dataclass
class Hint:
    """A templated tip shown in specific contexts.

    Attributes:
        id: Dotted identifier, e.g. 'help.details'
        message: str.format() template
        context: Contexts the hint applies to ('error', 'result', 'verbose')
        min_level: Lowest verbosity threshold that shows the hint
        category: Grouping key
    """
    id: str
    message: str
    context: Set[str] = field(default_factory=lambda: {'verbose'})
    min_level: int = 1
    category: str = 'general'


_HINTS: Dict[str, Hint] = {}


def register_hint(hint: Hint) -> None:
    """Register a hint. Re-registering an id replaces it."""
    _HINTS[hint.id] = hint


def register_hints(*hints: Hint) -> None:
    """Register several hints at once."""
    for h in hints:
        register_hint(h)


def get_hint(hint_id: str) -> Optional[Hint]:
    """Look up a hint by id."""
    return _HINTS.get(hint_id)


def get_hints_by_category(category: str) -> list:
    """All registered hints in a category."""
    return [h for h in _HINTS.values() if h.category == category]
