"""
    CommandProcessor - parses script lines and dispatches commands.

    Design Patterns
    ───────────────
    • Interpreter   – parses each line into a structured ``Command`` object.
    • Invoker       – executes commands against the ``GraphPlatform``.
    • Facade        – single ``process(line)`` / ``run(lines)`` entry-points
                      hide all parsing and error reporting.

    Script format: one command per line, tokens separated by whitespace.
    Blank lines and lines starting with ``#`` are not commands; the
    runner copies them to the output.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, TextIO

from api.api.exceptions import GraphError
from core.graph_platform.config import PlatformConfig
from core.graph_platform.core import GraphPlatform

from .commands import (
    Command,
    CommandResult,
    CreateGraphCommand,
    CreateNodeCommand,
    AddNodeCommand,
    AddEdgeCommand,
    ListNodesCommand,
    ListChildrenCommand,
    FindPathCommand,
    DfsCommand,
    HelpCommand,
)

logger = logging.getLogger(__name__)


class UnrecognizedCommandError(ValueError):
    """The first token of a line names no known command."""


class CommandProcessor:
    """
    Parses raw script lines, creates ``Command`` objects and executes
    them on the platform.

    Usage:
        processor = CommandProcessor(GraphPlatform())
        result = processor.process("CreateGraph G1")
        failures = processor.run(open("script.txt"), sys.stdout, sys.stderr)
    """

    def __init__(self, platform: Optional[GraphPlatform] = None,
                 config: Optional[PlatformConfig] = None):
        """
        Args:
            platform: Platform to run commands against (a fresh one by default).
            config:   Runner settings; defaults to the platform's config.
        """
        self._platform = platform or GraphPlatform(config)
        self._config = config or self._platform.config

    @property
    def platform(self) -> GraphPlatform:
        return self._platform

    # ── Public API ───────────────────────────────────────────────

    def process(self, line: str) -> Optional[CommandResult]:
        """
        Parse and execute a single script line.

        Returns:
            ``None`` for blank and comment lines, otherwise the
            ``CommandResult`` of the command.  Parse errors, structural
            errors and unexpected exceptions are reported in the result,
            never raised.
        """
        if self.is_passthrough(line):
            return None

        try:
            command = self._parse(line.split())
        except UnrecognizedCommandError as e:
            return CommandResult(False, str(e))
        except ValueError as e:
            return CommandResult(False, f"Parse error: {e}")

        try:
            return command.execute(self._platform)
        except GraphError as e:
            logger.warning("Command '%s' failed: %s", line.strip(), e)
            return CommandResult(False, f"Error: {e}", data={'result': e.result.value})
        except Exception as e:
            logger.exception("Command '%s' raised an unexpected error", line.strip())
            return CommandResult(False, f"Exception: {e!r}")

    def run(self, lines: Iterable[str], out: TextIO, err: TextIO) -> int:
        """
        Execute a whole script.

        Successful results go to ``out`` and failures to ``err``; blank and
        comment lines are echoed to ``out`` when ``echo_comments`` is set.

        Returns:
            Number of commands that failed.
        """
        failures = 0
        for raw in lines:
            line = raw.rstrip("\r\n")
            result = self.process(line)

            if result is None:
                if self._config.echo_comments:
                    out.write(line + "\n")
                continue

            if result.success:
                out.write(result.message + "\n")
            else:
                failures += 1
                err.write(result.message + "\n")

        out.flush()
        return failures

    @staticmethod
    def is_passthrough(line: str) -> bool:
        """Blank lines and lines whose first character is '#'"""
        return not line.strip() or line.startswith("#")

    # ── Parser ───────────────────────────────────────────────────

    def _parse(self, tokens: List[str]) -> Command:
        """
        Parse whitespace-separated tokens into a ``Command`` object.

        Raises:
            UnrecognizedCommandError: If the command name is unknown.
            ValueError: If the arguments cannot be parsed.
        """
        if not tokens:
            raise ValueError("Empty command.")

        name, arguments = tokens[0], tokens[1:]
        verb = name.lower()

        if verb == "help":
            return HelpCommand()
        if verb == "creategraph":
            self._expect(name, arguments, 1)
            return CreateGraphCommand(*arguments)
        if verb == "createnode":
            self._expect(name, arguments, 2)
            return CreateNodeCommand(*arguments)
        if verb == "addnode":
            self._expect(name, arguments, 2)
            return AddNodeCommand(*arguments)
        if verb == "addedge":
            self._expect(name, arguments, 3)
            return AddEdgeCommand(*arguments)
        if verb == "listnodes":
            self._expect(name, arguments, 1)
            return ListNodesCommand(*arguments)
        if verb == "listchildren":
            self._expect(name, arguments, 2)
            return ListChildrenCommand(*arguments)
        if verb == "findpath":
            return self._parse_find_path(name, arguments)
        if verb == "dfsalgorithm":
            if len(arguments) not in (2, 3):
                raise ValueError(f"Bad arguments to {name}: {arguments}")
            return DfsCommand(*arguments)

        raise UnrecognizedCommandError(f"Unrecognized command: {name}")

    @staticmethod
    def _expect(name: str, arguments: List[str], count: int) -> None:
        if len(arguments) != count:
            raise ValueError(f"Bad arguments to {name}: {arguments}")

    def _parse_find_path(self, name: str, arguments: List[str]) -> FindPathCommand:
        """
        ``<graph> <src> [<src> ...] -> <dst> [<dst> ...]``
        Everything before the first arrow is a source, everything after it
        a destination.
        """
        if not arguments:
            raise ValueError(f"Bad arguments to {name}: {arguments}")

        graph_name, rest = arguments[0], arguments[1:]
        arrow = self._config.path_arrow
        if arrow in rest:
            split = rest.index(arrow)
            sources, destinations = rest[:split], rest[split + 1:]
        else:
            sources, destinations = rest, []

        if not sources:
            raise ValueError(f"Too few source args for {name}")
        if not destinations:
            raise ValueError(f"Too few dest args for {name}")

        return FindPathCommand(graph_name, sources, destinations)
