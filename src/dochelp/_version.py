"""
Version information for dochelp.

This file is the canonical source for version numbers.

Format: MAJOR.MINOR.PATCH[-PHASE]
"""

MAJOR = 0
MINOR = 1
PATCH = 0
PHASE = "beta"  # None, "alpha", "beta", "rc1", ...

__app_name__ = "dochelp"


def get_base_version():
    """Return the semantic version string (MAJOR.MINOR.PATCH[-PHASE])."""
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        base = f"{base}-{PHASE}"
    return base


def get_pip_version():
    """Return the PEP 440 form of the version (0.1.0-beta -> 0.1.0b0)."""
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    phase_map = {"alpha": "a0", "beta": "b0"}
    if PHASE:
        base += phase_map.get(PHASE, PHASE)
    return base


__version__ = get_base_version()
VERSION = __version__
PIP_VERSION = get_pip_version()
