"""dochelp: doc-comment driven help and text tables for console apps.

Parses ``@usage``/``@arg``/``@opt`` tags out of documentation comments
and renders them as aligned, optionally coloured, help text.
"""

from dochelp._version import __version__, __app_name__

__all__ = ["__version__", "__app_name__"]
