from dataclasses import dataclass
from enum import Enum

from .nodes import Position


class TokenType(str, Enum):
    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"
    STRING = "STRING"
    BOOLEAN = "BOOLEAN"

    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    COMMA = "COMMA"
    EQUALS = "EQUALS"
    SEMICOLON = "SEMICOLON"
    NEWLINE = "NEWLINE"

    EOF = "EOF"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    position: Position


PUNCTUATION = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ",": TokenType.COMMA,
    "=": TokenType.EQUALS,
    ";": TokenType.SEMICOLON,
}

ESCAPES = {"n": "\n", "t": "\t", "\\": "\\", '"': '"', "'": "'"}


class Lexer:
    """Turns GeoGebra script source into a flat token stream"""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1

    def tokenize(self) -> list[Token]:
        """Scan the whole source. The result always ends with an EOF token.

        Characters the scanner does not recognize come back as UNKNOWN tokens
        from ``next_token`` and are dropped here without a diagnostic.
        """
        tokens: list[Token] = []
        token = self.next_token()
        while token.type != TokenType.EOF:
            if token.type != TokenType.UNKNOWN:
                tokens.append(token)
            token = self.next_token()
        tokens.append(token)
        return tokens

    def next_token(self) -> Token:
        while True:
            self._skip_whitespace()
            if self._at_end():
                return Token(TokenType.EOF, "", self._position())
            if self._peek() == "/" and self._peek_next() == "/":
                self._skip_comment()
                continue
            break

        char = self._peek()
        position = self._position()

        if char in ('"', "'"):
            return self._scan_string()
        if _is_digit(char) or (char == "-" and _is_digit(self._peek_next())):
            return self._scan_number()
        if _is_alpha(char) or char == "_":
            return self._scan_identifier()

        self._advance()
        if char in PUNCTUATION:
            return Token(PUNCTUATION[char], char, position)
        if char == "\n":
            self.line += 1
            self.column = 1
            return Token(TokenType.NEWLINE, char, position)
        return Token(TokenType.UNKNOWN, char, position)

    def _scan_string(self) -> Token:
        position = self._position()
        quote = self._peek()
        self._advance()

        chars = []
        while not self._at_end() and self._peek() != quote:
            char = self._peek()
            if char == "\\":
                self._advance()
                if self._at_end():
                    break
                escaped = self._peek()
                chars.append(ESCAPES.get(escaped, escaped))
            else:
                chars.append(char)
                # strings may span lines
                if char == "\n":
                    self._advance()
                    self.line += 1
                    self.column = 1
                    continue
            self._advance()

        if not self._at_end():
            self._advance()  # closing quote

        return Token(TokenType.STRING, "".join(chars), position)

    def _scan_number(self) -> Token:
        position = self._position()
        start = self.pos

        if self._peek() == "-":
            self._advance()
        self._consume_digits()

        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            self._consume_digits()

        if self._peek() in ("e", "E"):
            self._advance()
            if self._peek() in ("+", "-"):
                self._advance()
            self._consume_digits()

        return Token(TokenType.NUMBER, self.source[start : self.pos], position)

    def _scan_identifier(self) -> Token:
        position = self._position()
        start = self.pos
        while not self._at_end() and (_is_alpha(self._peek()) or _is_digit(self._peek()) or self._peek() == "_"):
            self._advance()

        value = self.source[start : self.pos]
        if value in ("true", "false"):
            return Token(TokenType.BOOLEAN, value, position)
        return Token(TokenType.IDENTIFIER, value, position)

    def _consume_digits(self):
        while _is_digit(self._peek()):
            self._advance()

    def _skip_whitespace(self):
        while self._peek() in (" ", "\t", "\r"):
            self._advance()

    def _skip_comment(self):
        while not self._at_end() and self._peek() != "\n":
            self._advance()

    def _advance(self):
        if not self._at_end():
            self.pos += 1
            self.column += 1

    def _peek(self) -> str:
        return "" if self._at_end() else self.source[self.pos]

    def _peek_next(self) -> str:
        return self.source[self.pos + 1] if self.pos + 1 < len(self.source) else ""

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _position(self) -> Position:
        return Position(self.line, self.column)


def _is_alpha(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9" if char else False


def tokenize(source: str) -> list[Token]:
    """Shortcut for ``Lexer(source).tokenize()``"""
    return Lexer(source).tokenize()
