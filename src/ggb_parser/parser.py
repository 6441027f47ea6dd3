"""
Recursive-descent parser for GeoGebra scripts.

Grammar (one flat statement list, no control flow)::

    program     := (NEWLINE | ';')* (statement (NEWLINE | ';')*)* EOF
    statement   := IDENT '=' IDENT '(' args ')'
                 | IDENT '=' expression
                 | IDENT '(' args ')'
    args        := [expression (',' expression)*]
    expression  := NUMBER | STRING | BOOLEAN | list | group | IDENT ['(' args ')']
    list        := '{' [expression (',' expression)*] '}'
    group       := '(' ')' | '(' expression ')' | '(' expression (',' expression)* [','] ')'

The only backtracking is the one-token peek in ``_parse_command_statement``
that tells ``P = Point(1, 2)`` apart from ``A = B``.
"""

from dataclasses import dataclass

from .lexer import Lexer, Token, TokenType
from .nodes import (
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
)


class ParseError(Exception):
    """Unrecoverable syntax error at a specific source position"""

    def __init__(self, message: str, position: Position):
        self.message = message
        self.position = position
        super().__init__(
            f"Parse error at line {position.line}, column {position.column}: {message}"
        )


@dataclass(frozen=True)
class ParseResult:
    """Outcome of ``try_parse``: exactly one of ``program`` / ``error`` is set"""

    source: str
    program: Program | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Parser:
    def __init__(self):
        self.tokens: list[Token] = []
        self.current = 0

    def parse(self, source: str) -> Program:
        self.tokens = Lexer(source).tokenize()
        self.current = 0
        try:
            return self._parse_program()
        except RecursionError:
            raise ParseError("Expression nested too deeply", self._peek().position) from None

    def _parse_program(self) -> Program:
        start = self._peek().position
        body: list[CommandStatement] = []

        while not self._at_end():
            if self._match(TokenType.NEWLINE, TokenType.SEMICOLON):
                continue
            try:
                body.append(self._parse_command_statement())
            except ParseError:
                # Move past the broken statement, but the error still aborts
                # the whole script: callers never see a partial program.
                self._synchronize()
                raise

        end = self._previous().position if self.current > 0 else start
        return Program(body=tuple(body), loc=SourceLocation(start, end))

    def _parse_command_statement(self) -> CommandStatement:
        start = self._peek().position
        first = self._parse_identifier()

        if self._match(TokenType.EQUALS):
            if self._check(TokenType.IDENTIFIER):
                saved = self.current
                self._advance()
                is_command_call = self._check(TokenType.LPAREN)
                self.current = saved

                if is_command_call:
                    # target = Command(...): the target name is not kept
                    command_name = self._parse_identifier()
                    return self._finish_call_statement(start, command_name)

            expression = self._parse_expression()
            return CommandStatement(
                command_name=first,
                arguments=(expression,),
                loc=SourceLocation(start, self._previous().position),
            )

        return self._finish_call_statement(start, first)

    def _finish_call_statement(self, start: Position, name: Identifier) -> CommandStatement:
        self._consume(TokenType.LPAREN, "Expected '(' after command name")
        args = self._parse_argument_list()
        self._consume(TokenType.RPAREN, "Expected ')' after arguments")
        return CommandStatement(
            command_name=name,
            arguments=args,
            loc=SourceLocation(start, self._previous().position),
        )

    def _parse_argument_list(self) -> tuple[Expression, ...]:
        if self._check(TokenType.RPAREN):
            return ()
        args = [self._parse_expression()]
        while self._match(TokenType.COMMA):
            args.append(self._parse_expression())
        return tuple(args)

    def _parse_expression(self) -> Expression:
        token = self._peek()

        if token.type == TokenType.NUMBER:
            self._advance()
            return NumberLiteral(value=_to_number(token.value), loc=_point_loc(token))
        if token.type == TokenType.STRING:
            self._advance()
            return StringLiteral(value=token.value, loc=_point_loc(token))
        if token.type == TokenType.BOOLEAN:
            self._advance()
            return BooleanLiteral(value=token.value == "true", loc=_point_loc(token))
        if token.type == TokenType.LBRACE:
            return self._parse_list_literal()
        if token.type == TokenType.LPAREN:
            return self._parse_tuple_or_group()
        if token.type == TokenType.IDENTIFIER:
            return self._parse_identifier_or_call()

        raise ParseError(
            f"Unexpected token: {token.type.value} (value: '{token.value}')",
            token.position,
        )

    def _parse_identifier_or_call(self) -> Expression:
        identifier = self._parse_identifier()
        if not self._check(TokenType.LPAREN):
            return identifier

        self._advance()
        args = self._parse_argument_list()
        self._consume(TokenType.RPAREN, "Expected ')' after function arguments")
        return FunctionCall(
            callee=identifier,
            arguments=args,
            loc=SourceLocation(identifier.loc.start, self._previous().position),
        )

    def _parse_identifier(self) -> Identifier:
        token = self._consume(TokenType.IDENTIFIER, "Expected identifier")
        return Identifier(name=token.value, loc=_point_loc(token))

    def _parse_list_literal(self) -> ListLiteral:
        start = self._consume(TokenType.LBRACE, "Expected '{'").position

        elements: list[Expression] = []
        if not self._check(TokenType.RBRACE):
            elements.append(self._parse_expression())
            while self._match(TokenType.COMMA):
                elements.append(self._parse_expression())

        self._consume(TokenType.RBRACE, "Expected '}'")
        return ListLiteral(
            elements=tuple(elements),
            loc=SourceLocation(start, self._previous().position),
        )

    def _parse_tuple_or_group(self) -> Expression:
        """``()`` and ``(a, b)`` are tuples; ``(a)`` is just ``a``"""
        start = self._consume(TokenType.LPAREN, "Expected '('").position

        if self._match(TokenType.RPAREN):
            return TupleLiteral(
                elements=(), loc=SourceLocation(start, self._previous().position)
            )

        first = self._parse_expression()
        if not self._check(TokenType.COMMA):
            self._consume(TokenType.RPAREN, "Expected ')'")
            return first

        elements = [first]
        while self._match(TokenType.COMMA):
            if self._check(TokenType.RPAREN):
                break  # trailing comma
            elements.append(self._parse_expression())

        self._consume(TokenType.RPAREN, "Expected ')'")
        return TupleLiteral(
            elements=tuple(elements),
            loc=SourceLocation(start, self._previous().position),
        )

    # Token cursor helpers

    def _match(self, *types: TokenType) -> bool:
        for token_type in types:
            if self._check(token_type):
                self._advance()
                return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        if self._at_end():
            return False
        return self._peek().type == token_type

    def _consume(self, token_type: TokenType, message: str) -> Token:
        if self._check(token_type):
            return self._advance()
        raise ParseError(message, self._peek().position)

    def _advance(self) -> Token:
        if not self._at_end():
            self.current += 1
        return self._previous()

    def _at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _peek(self) -> Token:
        return self.tokens[self.current]

    def _previous(self) -> Token:
        return self.tokens[self.current - 1]

    def _synchronize(self):
        """Skip to just past the next statement separator"""
        self._advance()
        while not self._at_end():
            if self._previous().type in (TokenType.NEWLINE, TokenType.SEMICOLON):
                return
            self._advance()


def _point_loc(token: Token) -> SourceLocation:
    return SourceLocation(token.position, token.position)


def _to_number(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        # dangling exponent such as "2e" or "2e-"
        return float(text.rstrip("eE+-"))


def parse_script(source: str) -> Program:
    """Parse GeoGebra script source, raising ``ParseError`` on bad syntax"""
    return Parser().parse(source)


def try_parse(source: str) -> ParseResult:
    """Parse without raising; the failure, if any, is returned in the result"""
    try:
        return ParseResult(source=source, program=parse_script(source))
    except ParseError as e:
        return ParseResult(source=source, error=e)
