"""Tests for dochelp.lib.help_lib.catalog: doc-source lookup and aggregation."""

import pytest

from dochelp.commands import table as table_command
from dochelp.errors import DochelpError, NotFound
from dochelp.lib.help_lib import CommandCatalog
from dochelp.lib.help_lib.catalog import dashed, underscored


class Pipeline:
    """Runs a pipeline."""

    def execute_start(self):
        """Starts the pipeline."""

    def execute_stop(self):
        """Stops the pipeline."""


class Release(Pipeline):
    """Releases a build."""

    def execute_stop(self):
        """Stops the release."""

    @classmethod
    def execute_status(cls):
        """Shows release status."""


class TestRegistration:
    """Registering commands."""

    def test_names_in_registration_order(self, catalog):
        assert catalog.names() == ["deploy", "greet", "status"]

    def test_contains(self, catalog):
        assert "greet" in catalog
        assert "nope" not in catalog

    def test_duplicate_rejected(self, catalog):
        with pytest.raises(ValueError, match="greet"):
            catalog.register("greet", "Another.")

    def test_get_missing(self, catalog):
        with pytest.raises(NotFound, match="'nope'"):
            catalog.get("nope")

    def test_not_found_hierarchy(self):
        assert issubclass(NotFound, LookupError)
        assert issubclass(NotFound, DochelpError)


class TestResolveDocSource:
    """Raw doc text for commands and sub-commands."""

    def test_class(self, catalog):
        assert catalog.resolve_doc_source("deploy").startswith("Deploys the application.")

    def test_function(self, catalog):
        assert catalog.resolve_doc_source("greet").startswith("Says hello.")

    def test_raw_string(self, catalog):
        assert catalog.resolve_doc_source("status") == "Shows the status.\n\n@usage $0 status"

    def test_sub_command(self, catalog):
        assert catalog.resolve_doc_source("deploy", "start").startswith("Starts a deployment.")

    def test_dashed_sub_command(self, catalog):
        source = catalog.resolve_doc_source("deploy", "roll-back")
        assert source.startswith("Rolls back the last deployment.")

    def test_missing_sub_command(self, catalog):
        with pytest.raises(NotFound, match="Sub command 'nope' of 'deploy' does not exist"):
            catalog.resolve_doc_source("deploy", "nope")

    def test_sub_command_of_string_target(self, catalog):
        with pytest.raises(NotFound):
            catalog.resolve_doc_source("status", "start")

    def test_missing_command(self, catalog):
        with pytest.raises(NotFound):
            catalog.resolve_doc_source("nope")

    def test_undocumented_target(self):
        def bare():
            pass
        c = CommandCatalog()
        c.register("bare", bare)
        assert c.resolve_doc_source("bare") == ""


class TestSubCommands:
    """execute_* members become sub-commands."""

    def test_sources_in_definition_order(self, catalog):
        assert list(catalog.sub_command_sources("deploy")) == ["start", "roll-back"]

    def test_plain_execute_and_helpers_ignored(self, catalog):
        sources = catalog.sub_command_sources("deploy")
        assert "" not in sources
        assert "helper" not in sources

    def test_function_has_none(self, catalog):
        assert catalog.sub_command_sources("greet") == {}

    def test_inherited_sub_commands_listed(self):
        """Own sub-commands come first, then those of the base class."""
        c = CommandCatalog()
        c.register("release", Release)
        assert list(c.sub_command_sources("release")) == [
            "stop", "status", "start",
        ]

    def test_override_keeps_subclass_doc(self):
        c = CommandCatalog()
        c.register("release", Release)
        assert c.sub_command_sources("release")["stop"] == "Stops the release."
        assert c.sub_command_sources("release")["start"] == "Starts the pipeline."

    def test_listing_matches_lookup(self):
        """Every listed sub-command resolves, inherited ones included."""
        c = CommandCatalog()
        c.register("release", Release)
        model = c.load_help("release")
        assert model.sub_commands["status"] == "Shows release status."
        for sub in model.sub_commands:
            assert c.resolve_doc_source("release", sub)

    def test_module_sub_commands(self):
        c = CommandCatalog()
        c.register("table", table_command)
        assert list(c.sub_command_sources("table")) == ["csv", "tsv"]

    @pytest.mark.parametrize("name,expected", [
        ("list_all", "list-all"), ("start", "start"),
    ])
    def test_dashed(self, name, expected):
        assert dashed(name) == expected
        assert underscored(expected) == name


class TestLoadHelp:
    """Parsing plus sub-command aggregation."""

    def test_aggregates_short_descriptions(self, catalog):
        model = catalog.load_help("deploy", program_name="tool")
        assert model.sub_commands == {
            "start": "Starts a deployment.",
            "roll-back": "Rolls back the last deployment.",
        }
        assert model.usage == "tool deploy <sub_command>"

    def test_sub_command_help(self, catalog):
        model = catalog.load_help("deploy", "start", program_name="tool")
        assert model.description == "Starts a deployment."
        assert model.long_description == "Waits until every host reports back."
        assert model.usage == "tool deploy start [--force]"
        assert model.options[0].long_name == "force"
        assert model.sub_commands == {}

    def test_custom_token(self):
        c = CommandCatalog()
        c.register("run", "Runs.\n@usage %p run")
        assert c.load_help("run", program_name="x", substitution_token="%p").usage == "x run"

    def test_missing_sub_command_raises(self, catalog):
        with pytest.raises(NotFound):
            catalog.load_help("deploy", "nope")

    def test_short_descriptions(self, catalog):
        assert catalog.short_descriptions() == {
            "deploy": "Deploys the application.",
            "greet": "Says hello.",
            "status": "Shows the status.",
        }
