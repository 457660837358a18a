"""
Tests for dochelp.lib.log_lib: verbosity thresholds, channels and hints.
"""

import io

import pytest

from dochelp.lib.help_lib import CommandCatalog
from dochelp.lib.log_lib import (
    Hint,
    OutputManager,
    get_hint,
    get_hints_by_category,
    get_output,
    init_output,
    register_hint,
    trace,
)
from dochelp.lib.log_lib.channels import (
    CHANNEL_DESCRIPTIONS,
    KNOWN_CHANNELS,
    OPT_IN_CHANNELS,
    format_channel_list,
    parse_channel_spec,
)
from dochelp.lib.log_lib.levels import (
    CONFIG, DEBUG, DEFAULT, DETAIL, ERROR, MINIMAL, NOTHING, WARNING,
)


@pytest.fixture
def buf():
    """A StringIO buffer for capturing output."""
    return io.StringIO()


@pytest.fixture
def out(buf):
    """An OutputManager writing to a buffer (verbosity=0)."""
    return OutputManager(verbosity=0, file=buf)


# =============================================================================
# Level constants
# =============================================================================

class TestLevelConstants:

    def test_level_ordering(self):
        assert NOTHING < ERROR < WARNING < MINIMAL < DEFAULT < DETAIL < CONFIG < DEBUG

    def test_specific_values(self):
        assert DEFAULT == 0
        assert NOTHING == -4
        assert ERROR == -3
        assert DEBUG == 3


# =============================================================================
# Emit
# =============================================================================

class TestEmit:
    """Threshold checks and per-channel overrides."""

    def test_default_level_shown(self, out, buf):
        out.emit(0, "hello {name}", name="world")
        assert buf.getvalue() == "hello world\n"

    def test_higher_level_hidden(self, out, buf):
        out.emit(1, "detail")
        assert buf.getvalue() == ""

    def test_braces_without_kwargs(self, out, buf):
        """Templates are only formatted when values are given."""
        out.emit(0, "literal {braces}")
        assert buf.getvalue() == "literal {braces}\n"

    def test_channel_override_shows_message(self, buf):
        out = OutputManager(verbosity=0, channel_overrides={'parse': 3}, file=buf)
        out.emit(3, "parse detail", channel='parse')
        assert "parse detail" in buf.getvalue()

    def test_channel_override_hides_message(self, buf):
        out = OutputManager(verbosity=2, channel_overrides={'render': 0}, file=buf)
        out.emit(1, "hidden", channel='render')
        assert buf.getvalue() == ""

    def test_negative_verbosity_shows_errors(self, buf):
        out = OutputManager(verbosity=-1, file=buf)
        out.emit(0, "hidden")
        out.error("visible error")
        assert buf.getvalue() == "visible error\n"

    def test_hard_wall_blocks_everything(self, buf):
        out = OutputManager(verbosity=-4, file=buf)
        out.error("blocked error")
        assert buf.getvalue() == ""


class TestChannelActive:

    def test_general_active_at_v0(self, out):
        assert out.channel_active('general') is True

    def test_level_checked(self, out):
        assert out.channel_active('general', 1) is False

    def test_opt_in_channel_inactive_by_default(self):
        assert init_output(verbosity=2).channel_active('trace') is False

    def test_opt_in_channel_enabled(self):
        assert init_output(channels=['trace:3']).channel_active('trace', 3) is True

    def test_hard_wall(self, buf):
        out = OutputManager(channel_overrides={'parse': -4}, file=buf)
        assert out.channel_active('parse') is False


# =============================================================================
# Channel specs
# =============================================================================

class TestParseChannelSpec:

    def test_name_only(self):
        cfg = parse_channel_spec("parse")
        assert (cfg.name, cfg.level) == ("parse", 0)

    def test_name_and_level(self):
        cfg = parse_channel_spec("render:2")
        assert (cfg.name, cfg.level) == ("render", 2)

    def test_negative_level(self):
        assert parse_channel_spec("error:-3").level == -3

    def test_bad_level(self):
        with pytest.raises(ValueError):
            parse_channel_spec("parse:loud")


class TestKnownChannels:

    def test_all_channels_have_descriptions(self):
        for ch in KNOWN_CHANNELS:
            assert ch in CHANNEL_DESCRIPTIONS, f"Missing description for '{ch}'"

    def test_opt_in_subset_of_known(self):
        assert OPT_IN_CHANNELS <= KNOWN_CHANNELS

    def test_format_channel_list_includes_all(self):
        listing = format_channel_list()
        for ch in KNOWN_CHANNELS:
            assert ch in listing
        assert "(opt-in)" in listing


class TestInitOutput:

    def test_singleton(self):
        mgr = init_output(verbosity=1)
        assert get_output() is mgr

    def test_get_output_creates_default(self):
        assert get_output().verbosity == 0

    def test_explicit_overrides_win(self):
        mgr = init_output(channels=['trace:2', 'parse:3'])
        assert mgr.channel_overrides == {'trace': 2, 'parse': 3}


# =============================================================================
# Hints
# =============================================================================

class TestHints:

    @pytest.fixture(autouse=True)
    def sample_hint(self):
        register_hint(Hint(id='test.sample', message="Try {what}.",
                           context={'result'}, min_level=0, category='test'))

    def test_registered(self):
        assert get_hint('test.sample').message == "Try {what}."
        assert [h.id for h in get_hints_by_category('test')] == ['test.sample']

    def test_shown_once(self, out, buf):
        out.hint('test.sample', 'result', what='again')
        out.hint('test.sample', 'result', what='again')
        assert buf.getvalue() == "Try again.\n"
        assert out.shown_hints == {'test.sample'}

    def test_wrong_context(self, out, buf):
        out.hint('test.sample', 'error', what='x')
        assert buf.getvalue() == ""

    def test_unknown_id_ignored(self, out, buf):
        out.hint('no.such.hint')
        assert buf.getvalue() == ""

    def test_quiet_hides_hints(self, buf):
        OutputManager(verbosity=-1, file=buf).hint('test.sample', 'result', what='x')
        assert buf.getvalue() == ""


# =============================================================================
# Trace
# =============================================================================

class TestTrace:

    def test_silent_by_default(self, buf):
        init_output(file=buf)

        @trace
        def double(x):
            return x * 2

        assert double(4) == 8
        assert buf.getvalue() == ""

    def test_call_and_return_traced(self, buf):
        init_output(channels=['trace:3'], file=buf)

        @trace
        def double(x):
            return x * 2

        double(4)
        text = buf.getvalue()
        assert "[TRACE] >> " in text and "double(4)" in text
        assert "returned: 8" in text

    def test_exception_traced_and_raised(self, buf):
        init_output(channels=['trace:3'], file=buf)
        catalog = CommandCatalog()
        with pytest.raises(LookupError):
            catalog.resolve_doc_source("missing")
        assert "raised: NotFound" in buf.getvalue()
