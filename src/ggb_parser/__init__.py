"""
GeoGebra script parsing: lexer, immutable AST and recursive-descent parser.
"""

from .lexer import Lexer, Token, TokenType, tokenize
from .nodes import (
    LITERAL_TYPES,
    ASTNode,
    BooleanLiteral,
    CommandStatement,
    Expression,
    FunctionCall,
    Identifier,
    ListLiteral,
    NumberLiteral,
    Position,
    Program,
    SourceLocation,
    StringLiteral,
    TupleLiteral,
    iter_children,
    to_dict,
)
from .parser import ParseError, ParseResult, Parser, parse_script, try_parse

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    "LITERAL_TYPES",
    "ASTNode",
    "BooleanLiteral",
    "CommandStatement",
    "Expression",
    "FunctionCall",
    "Identifier",
    "ListLiteral",
    "NumberLiteral",
    "Position",
    "Program",
    "SourceLocation",
    "StringLiteral",
    "TupleLiteral",
    "iter_children",
    "to_dict",
    "ParseError",
    "ParseResult",
    "Parser",
    "parse_script",
    "try_parse",
]
