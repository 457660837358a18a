"""
log_lib: verbosity-gated output with named channels.

Public API:
    OutputManager      central coordinator
    init_output        singleton initialization
    get_output         access the singleton
    Hint               hint dataclass
    register_hint      register a hint
    register_hints     register several hints
    get_hint           look up a hint by id
    ChannelConfig      per-channel threshold
    parse_channel_spec parse a CHANNEL[:LEVEL] string
    trace              function tracing decorator
"""

from .manager import OutputManager, init_output, get_output
from .hints import (
    Hint, register_hint, register_hints, get_hint, get_hints_by_category,
)
from .channels import (
    ChannelConfig, parse_channel_spec, KNOWN_CHANNELS,
    CHANNEL_DESCRIPTIONS, OPT_IN_CHANNELS, format_channel_list,
)
from .trace import trace

__all__ = [
    'OutputManager', 'init_output', 'get_output',
    'Hint', 'register_hint', 'register_hints', 'get_hint', 'get_hints_by_category',
    'ChannelConfig', 'parse_channel_spec', 'KNOWN_CHANNELS',
    'CHANNEL_DESCRIPTIONS', 'OPT_IN_CHANNELS', 'format_channel_list',
    'trace',
]
