"""
Output channels for the verbosity system.

Channels are named output categories. Each channel may pin its own
threshold with a spec string of the form ``CHANNEL[:LEVEL]``, e.g.
``parse:3`` to see every doc-comment line the parser classifies.
"""

from dataclasses import dataclass


KNOWN_CHANNELS = {
    'parse',        # Doc-comment line classification
    'render',       # Table layout and help rendering
    'catalog',      # Command registration and doc-source lookups
    'config',       # Settings resolution
    'general',      # Default channel
    'hint',         # Contextual tips
    'error',        # Error messages
    'trace',        # Function tracing (@trace decorator)
}

CHANNEL_DESCRIPTIONS = {
    'parse':   'Doc-comment line classification',
    'render':  'Table layout and help rendering',
    'catalog': 'Command registration and doc-source lookups',
    'config':  'Settings resolution',
    'general': 'General output',
    'hint':    'Contextual tips and suggestions',
    'error':   'Error messages',
    'trace':   'Function call tracing',
}

# Off unless enabled with --show
OPT_IN_CHANNELS = {
    'trace',
}


@dataclass
class ChannelConfig:
    """Threshold override for one channel."""
    name: str
    level: int = 0


def parse_channel_spec(spec: str) -> ChannelConfig:
    """Parse ``CHANNEL[:LEVEL]`` into a ChannelConfig.

    An empty or missing level means 0.

    Raises:
        ValueError: If LEVEL is not an integer.
    """
    name, _, level = spec.partition(':')
    return ChannelConfig(name=name, level=int(level) if level else 0)


def format_channel_list() -> str:
    """Format the known channels for ``--show`` without an argument."""
    lines = ["Available channels:"]
    max_name = max(len(name) for name in KNOWN_CHANNELS)
    for name in sorted(KNOWN_CHANNELS):
        desc = CHANNEL_DESCRIPTIONS.get(name, '')
        opt_in = " (opt-in)" if name in OPT_IN_CHANNELS else ""
        lines.append(f"  {name:<{max_name}}  {desc}{opt_in}")
    return "\n".join(lines)
