"""
CLI package - line-oriented script interface to the graph platform.

Design Patterns
───────────────
• Command       – each script command is a ``Command`` object with
                  ``execute(platform)``.
• Interpreter   – ``CommandProcessor`` parses script lines into
                  structured command objects.
"""
from .command_processor import CommandProcessor, UnrecognizedCommandError
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

__all__ = [
    'CommandProcessor',
    'UnrecognizedCommandError',
    'Command',
    'CommandResult',
    'CreateGraphCommand',
    'CreateNodeCommand',
    'AddNodeCommand',
    'AddEdgeCommand',
    'ListNodesCommand',
    'ListChildrenCommand',
    'FindPathCommand',
    'DfsCommand',
    'HelpCommand',
]
