from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class Position:
    """A 1-based line/column position in the source"""

    line: int
    column: int


@dataclass(frozen=True)
class SourceLocation:
    start: Position
    end: Position


@dataclass(frozen=True)
class Identifier:
    type: ClassVar[str] = "Identifier"
    name: str
    loc: SourceLocation


@dataclass(frozen=True)
class NumberLiteral:
    type: ClassVar[str] = "NumberLiteral"
    value: float
    loc: SourceLocation


@dataclass(frozen=True)
class StringLiteral:
    type: ClassVar[str] = "StringLiteral"
    value: str
    loc: SourceLocation


@dataclass(frozen=True)
class BooleanLiteral:
    type: ClassVar[str] = "BooleanLiteral"
    value: bool
    loc: SourceLocation


@dataclass(frozen=True)
class ListLiteral:
    """Brace-delimited list, e.g. {1, 2, 3}"""

    type: ClassVar[str] = "ListLiteral"
    elements: tuple["Expression", ...]
    loc: SourceLocation


@dataclass(frozen=True)
class TupleLiteral:
    """Parenthesized, comma-separated elements, e.g. the point (0, 0, 3)"""

    type: ClassVar[str] = "TupleLiteral"
    elements: tuple["Expression", ...]
    loc: SourceLocation


@dataclass(frozen=True)
class FunctionCall:
    """Nested command call used as an argument, e.g. x(A) in SetValue(b, x(A))"""

    type: ClassVar[str] = "FunctionCall"
    callee: Identifier
    arguments: tuple["Expression", ...]
    loc: SourceLocation


Expression = Union[
    Identifier,
    NumberLiteral,
    StringLiteral,
    BooleanLiteral,
    ListLiteral,
    TupleLiteral,
    FunctionCall,
]


@dataclass(frozen=True)
class CommandStatement:
    """One top-level statement.

    Both ``Name(args)`` and ``target = Name(args)`` produce a statement named
    ``Name``; a plain assignment such as ``A = {1, 2}`` is kept as a statement
    named ``A`` with the right-hand side as its only argument.
    """

    type: ClassVar[str] = "CommandStatement"
    command_name: Identifier
    arguments: tuple[Expression, ...]
    loc: SourceLocation


@dataclass(frozen=True)
class Program:
    """Root of the tree: every statement of a script, in source order"""

    type: ClassVar[str] = "Program"
    body: tuple[CommandStatement, ...]
    loc: SourceLocation


ASTNode = Union[Program, CommandStatement, Expression]

LITERAL_TYPES = (
    ListLiteral,
    TupleLiteral,
    NumberLiteral,
    StringLiteral,
    BooleanLiteral,
    Identifier,
)


def iter_children(node: ASTNode) -> tuple:
    """Return the direct child nodes of ``node`` in source order"""
    if isinstance(node, Program):
        return node.body
    if isinstance(node, CommandStatement):
        return (node.command_name, *node.arguments)
    if isinstance(node, FunctionCall):
        return (node.callee, *node.arguments)
    if isinstance(node, (ListLiteral, TupleLiteral)):
        return node.elements
    return ()


def to_dict(node: ASTNode) -> dict:
    """Plain-dict rendering of a node, used by the ``ast`` dump command"""
    data: dict = {"type": node.type}
    if isinstance(node, Identifier):
        data["name"] = node.name
    elif isinstance(node, (NumberLiteral, StringLiteral, BooleanLiteral)):
        data["value"] = node.value
    elif isinstance(node, Program):
        data["body"] = [to_dict(stmt) for stmt in node.body]
    elif isinstance(node, CommandStatement):
        data["commandName"] = to_dict(node.command_name)
        data["arguments"] = [to_dict(arg) for arg in node.arguments]
    elif isinstance(node, FunctionCall):
        data["callee"] = to_dict(node.callee)
        data["arguments"] = [to_dict(arg) for arg in node.arguments]
    else:
        data["elements"] = [to_dict(elem) for elem in node.elements]
    data["loc"] = {
        "start": {"line": node.loc.start.line, "column": node.loc.start.column},
        "end": {"line": node.loc.end.line, "column": node.loc.end.column},
    }
    return data
