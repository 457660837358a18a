"""Shared test fixtures for the dochelp test suite."""

from unittest.mock import patch

import pytest

from dochelp.lib.help_lib import CommandCatalog
from dochelp.lib.log_lib import manager as _manager_mod


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep real ~/.dochelp and .dochelp.json files out of every test."""
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    with patch("pathlib.Path.home", return_value=home):
        yield work


@pytest.fixture(autouse=True)
def reset_output():
    """Reset the OutputManager singleton between tests."""
    old = _manager_mod._manager
    _manager_mod._manager = None
    yield
    _manager_mod._manager = old


@pytest.fixture
def tmp_home(tmp_path):
    """The patched home directory."""
    return tmp_path / "home"


# ---------------------------------------------------------------------------
# Doc comment samples
# ---------------------------------------------------------------------------
COPY_COMMENT = """
/**
 * Copy files between hosts.
 * Second line of the summary.
 *
 * Longer explanation of the command.
 * It spans two lines.
 *
 * @usage $0 copy [options] <src> <dest>
 * @arg src Source path
 * @arg dest Destination path
 * @opt --recursive -r Copy directories
 * @opt --dry-run Preview only
 * @flag -q Quiet output
 * @example `$0 copy -r a b` Copy directory a to b
 * @internal Not shown to users
 */
"""


@pytest.fixture
def copy_comment():
    """A PHP-style doc comment using every tag."""
    return COPY_COMMENT


class Deploy:
    """Deploys the application.

    @usage $0 deploy <sub_command>
    @arg sub_command What to do
    """

    def execute(self):
        """Runs the default deployment."""

    def execute_start(self):
        """Starts a deployment.

        Waits until every host reports back.

        @usage $0 deploy start [--force]
        @opt --force -f Skip the health check
        """

    def execute_roll_back(self):
        """Rolls back the last deployment.
        Hosts are restored one at a time."""

    def helper(self):
        """Not a sub command."""


def greet():
    """Says hello.

    @usage $0 greet <name>
    @arg name Who to greet
    """


@pytest.fixture
def catalog():
    """A catalog with a class command, a function and a raw doc string."""
    c = CommandCatalog()
    c.register("deploy", Deploy)
    c.register("greet", greet)
    c.register("status", "Shows the status.\n\n@usage $0 status")
    return c
