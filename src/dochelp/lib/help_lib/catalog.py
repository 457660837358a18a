"""
Command catalog: maps command names to their documentation.

A command target is a module, a class, a function or a raw doc string.
Modules and classes may carry sub-commands as ``execute_<name>``
members; ``execute_list_all`` is the sub-command ``list-all``.
"""

import inspect
from typing import Any, Dict, List, Optional

from ...errors import NotFound
from ..log_lib import get_output, trace
from .model import HelpModel
from .parser import DEFAULT_SUBSTITUTION_TOKEN, DocCommentParser


SUB_COMMAND_PREFIX = 'execute_'


def dashed(name: str) -> str:
    """``list_all`` -> ``list-all``."""
    return name.replace('_', '-')


def underscored(name: str) -> str:
    """``list-all`` -> ``list_all``."""
    return name.replace('-', '_')


def doc_text(target: Any) -> str:
    """Documentation text of a target, or '' when it has none."""
    if isinstance(target, str):
        return target
    return inspect.getdoc(target) or ''


class CommandCatalog:
    """
    Registry of documented commands.

    Registration order is listing order.
    """

    def __init__(self):
        self._commands: Dict[str, Any] = {}

    def register(self, name: str, target: Any) -> None:
        """Register a command.

        Raises:
            ValueError: If ``name`` is already registered.
        """
        if name in self._commands:
            raise ValueError(f"Duplicate command name: {name}")
        self._commands[name] = target
        get_output().emit(2, "registered command '{name}'",
                          channel='catalog', name=name)

    def names(self) -> List[str]:
        """Registered command names in registration order."""
        return list(self._commands)

    def __contains__(self, name: str) -> bool:
        return name in self._commands

    def get(self, name: str) -> Any:
        """The target registered as ``name``.

        Raises:
            NotFound: If no such command is registered.
        """
        if name not in self._commands:
            raise NotFound(f"Command '{name}' does not exist")
        return self._commands[name]

    def sub_command_sources(self, name: str) -> Dict[str, str]:
        """Doc text of each sub-command of ``name``.

        A class lists its own sub-commands in definition order, followed
        by those it inherits, base by base along the MRO.
        """
        target = self.get(name)
        if inspect.ismodule(target):
            namespaces = [target]
        elif inspect.isclass(target):
            namespaces = [cls for cls in target.__mro__ if cls is not object]
        else:
            return {}

        sources = {}
        for namespace in namespaces:
            for member_name in vars(namespace):
                if (len(member_name) <= len(SUB_COMMAND_PREFIX)
                        or not member_name.startswith(SUB_COMMAND_PREFIX)):
                    continue
                sub_name = dashed(member_name[len(SUB_COMMAND_PREFIX):])
                member = getattr(target, member_name)
                if sub_name not in sources and callable(member):
                    sources[sub_name] = doc_text(member)
        return sources

    @trace
    def resolve_doc_source(self, name: str, sub_name: Optional[str] = None) -> str:
        """
        Raw doc text for a command or one of its sub-commands.

        Raises:
            NotFound: If the command, or the requested sub-command, does
                not exist.
        """
        target = self.get(name)
        if not sub_name:
            return doc_text(target)

        member = None
        if not isinstance(target, str):
            member = getattr(target, SUB_COMMAND_PREFIX + underscored(sub_name), None)
        if member is None or not callable(member):
            raise NotFound(f"Sub command '{sub_name}' of '{name}' does not exist")
        return doc_text(member)

    def load_help(self, name: str, sub_name: Optional[str] = None,
                  program_name: str = 'app',
                  substitution_token: str = DEFAULT_SUBSTITUTION_TOKEN) -> HelpModel:
        """
        Parse the help for a command.

        Without ``sub_name`` the model also lists the command's
        sub-commands with their short descriptions.

        Raises:
            NotFound: As for resolve_doc_source().
        """
        parser = DocCommentParser(substitution_token, program_name)
        model = parser.parse(self.resolve_doc_source(name, sub_name))
        if not sub_name:
            for sub, source in self.sub_command_sources(name).items():
                model.add_sub_command(sub, parser.parse(source).short_description)
        return model

    def short_descriptions(self, program_name: str = 'app',
                           substitution_token: str = DEFAULT_SUBSTITUTION_TOKEN
                           ) -> Dict[str, str]:
        """Short description of every command, for command listings."""
        parser = DocCommentParser(substitution_token, program_name)
        return {name: parser.parse(self.resolve_doc_source(name)).short_description
                for name in self._commands}
