"""
OutputManager, the verbosity-gated output coordinator.

A message is shown when ``level <= threshold``, where the threshold is the
channel's override if it has one and the global verbosity otherwise.
A threshold of -4 or lower silences everything.

    -v raises the verbosity by one, -Q lowers it by one.
    --show parse:3 pins the 'parse' channel to threshold 3.
"""

import sys
from typing import Any, Dict, Optional, Set, TextIO

from .channels import OPT_IN_CHANNELS, parse_channel_spec
from .hints import get_hint
from .levels import ERROR, NOTHING


class OutputManager:
    """Write verbosity-gated messages to a file handle (default: stderr).

    Usage::

        out = OutputManager(verbosity=1)
        out.emit(3, "width[{i}] = {w}", channel='render', i=0, w=12)
        out.hint('help.details', 'result', prog='app')
        out.error("Command 'foo' not found")
    """

    def __init__(
        self,
        verbosity: int = 0,
        channel_overrides: Dict[str, int] = None,
        file: TextIO = None,
    ):
        self.verbosity = verbosity
        self.channel_overrides: Dict[str, int] = dict(channel_overrides or {})
        self.file = file if file is not None else sys.stderr
        self._shown_hints: Set[str] = set()

    def threshold(self, channel: str) -> int:
        """Effective threshold for a channel."""
        return self.channel_overrides.get(channel, self.verbosity)

    def emit(self, level: int, message: str, *,
             channel: str = 'general', **kwargs: Any) -> None:
        """Emit ``message`` if ``level`` passes the channel threshold.

        Args:
            level: Message level (higher = more verbose)
            message: str.format() template
            channel: Output channel name
            **kwargs: Template values
        """
        threshold = self.threshold(channel)
        if threshold <= NOTHING or level > threshold:
            return
        text = message.format(**kwargs) if kwargs else message
        print(text, file=self.file)

    def hint(self, hint_id: str, context: str = 'result', **kwargs: Any) -> None:
        """Show a registered hint once per session.

        The hint must apply to ``context`` and its ``min_level`` must pass
        the 'hint' channel threshold. Unknown ids are ignored.
        """
        if hint_id in self._shown_hints:
            return
        h = get_hint(hint_id)
        if h is None or context not in h.context:
            return

        threshold = self.threshold('hint')
        if threshold <= NOTHING or h.min_level > threshold:
            return

        text = h.message.format(**kwargs) if kwargs else h.message
        print(text, file=self.file)
        self._shown_hints.add(hint_id)

    def error(self, message: str) -> None:
        """Emit an error (shown at every level except the hard wall)."""
        self.emit(ERROR, message, channel='error')

    def channel_active(self, channel: str, level: int = 0) -> bool:
        """True if a message at ``level`` on ``channel`` would be shown.

        Lets callers skip building expensive diagnostic strings.
        """
        threshold = self.threshold(channel)
        return threshold > NOTHING and level <= threshold

    @property
    def shown_hints(self) -> Set[str]:
        """Ids of hints displayed this session."""
        return self._shown_hints.copy()


# =============================================================================
# Module-level singleton
# =============================================================================

_manager: Optional[OutputManager] = None


def init_output(verbosity: int = 0, channels: list = None,
                file: TextIO = None) -> OutputManager:
    """Initialize the module-level OutputManager.

    Call once at startup after parsing the global flags.

    Args:
        verbosity: Net verbosity (-v count minus -Q count)
        channels: Channel spec strings such as ['parse:3', 'trace']
        file: Destination handle, stderr when omitted

    Returns:
        The new OutputManager
    """
    global _manager

    channel_overrides = {ch: -1 for ch in OPT_IN_CHANNELS}
    for spec in channels or []:
        cfg = parse_channel_spec(spec)
        channel_overrides[cfg.name] = cfg.level

    _manager = OutputManager(
        verbosity=verbosity,
        channel_overrides=channel_overrides,
        file=file,
    )
    return _manager


def get_output() -> OutputManager:
    """The module-level OutputManager, created with defaults on first use."""
    global _manager
    if _manager is None:
        _manager = OutputManager()
    return _manager
