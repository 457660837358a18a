"""
Function tracing decorator.

Writes entry, return value and exceptions through the OutputManager at
level 3 on the 'trace' channel.
"""

import functools


def _short_repr(value) -> str:
    text = repr(value)
    if len(text) > 50:
        return text[:47] + '...'
    return text


def trace(func):
    """Trace calls to ``func`` when the 'trace' channel is at level 3."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from .manager import get_output

        out = get_output()
        if not out.channel_active('trace', 3):
            return func(*args, **kwargs)

        name = f"{func.__module__}.{func.__qualname__}"
        parts = [_short_repr(a) for a in args]
        parts += [f"{k}={_short_repr(v)}" for k, v in kwargs.items()]
        out.emit(3, "[TRACE] >> {fn}({args})",
                 channel='trace', fn=name, args=', '.join(parts))
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            out.emit(3, "[TRACE] !! {fn} raised: {exc}: {msg}",
                     channel='trace', fn=name,
                     exc=type(e).__name__, msg=str(e))
            raise
        out.emit(3, "[TRACE] << {fn} returned: {val}",
                 channel='trace', fn=name, val=_short_repr(result))
        return result

    return wrapper
