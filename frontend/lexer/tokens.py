"""
Token definitions for the script scanner.

This module defines every token category the scanner can produce:
- Single-character punctuation
- One/two-character operators (``!`` / ``!=`` and friends)
- Literals (strings, numbers) and identifiers
- Reserved keywords
- Internal-only markers (comments, whitespace, end of input)

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Tuple, Union


class TokenType(Enum):
    """
    Enumeration of all token types.

    Organized by category. The set is closed: the scanner never produces
    anything outside of it.
    """

    # ========================================================================
    # Punctuation
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # Operators (optional trailing '=')
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    DOUBLE_EQUAL = auto()           # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals and identifiers
    # ========================================================================
    IDENTIFIER = auto()             # variable_name
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.14

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FOR = auto()
    FUNC = auto()
    IF = auto()
    LET = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    WHILE = auto()

    # ========================================================================
    # Internal-only (never returned by the driver)
    # ========================================================================
    COMMENT = auto()                # // to end of line
    WHITESPACE = auto()             # ' ', '\r', '\t', '\n'
    EOF = auto()                    # End of input


@dataclass(frozen=True, order=True)
class Position:
    """
    A 1-based line/column position in the source.

    Positions are immutable values ordered by ``(line, column)``; the scanner
    replaces its current position each time it consumes a character.
    """
    line: int
    column: int

    @classmethod
    def reset(cls) -> "Position":
        """Initial position of a scan pass."""
        return cls(1, 1)

    def advance_column(self) -> "Position":
        return Position(self.line, self.column + 1)

    def advance_line(self) -> "Position":
        return Position(self.line + 1, 1)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


LexemeValue = Union[str, float, None]


@dataclass(frozen=True)
class Lexeme:
    """
    The classified category of a token plus its payload.

    ``value`` is the identifier text for IDENTIFIER, the body between the
    quotes for STRING, a float for NUMBER and None for everything else.
    """
    type: TokenType
    value: LexemeValue = None

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.type.name}({self.value!r})"
        return self.type.name


@dataclass(frozen=True)
class Token:
    """
    A lexeme paired with the position at which the scanner recognized it.
    """
    lexeme: Lexeme
    position: Position

    def __str__(self) -> str:
        return f"{self.lexeme} @ {self.position}"

    def __repr__(self) -> str:
        return f"Token({self.lexeme}, {self.position})"

    @property
    def type(self) -> TokenType:
        return self.lexeme.type

    @property
    def value(self) -> LexemeValue:
        return self.lexeme.value

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a literal value."""
        return self.type in LITERAL_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved keyword."""
        return self.type in KEYWORD_TYPES

    @property
    def is_internal(self) -> bool:
        """Check if this token is filtered out before reaching the parser."""
        return self.type in INTERNAL_TYPES


# Lookup tables used by the scanner for dispatch and classification

KEYWORDS: Dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "func": TokenType.FUNC,
    "if": TokenType.IF,
    "let": TokenType.LET,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "while": TokenType.WHILE,
}

# '/' is absent: it may start a comment
SINGLE_CHAR_TOKENS: Dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# lead character -> (type without '=', type with '=')
ONE_OR_TWO_CHAR_TOKENS: Dict[str, Tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.DOUBLE_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
}

WHITESPACE_CHARS: FrozenSet[str] = frozenset(" \r\t\n")

KEYWORD_TYPES: FrozenSet[TokenType] = frozenset(KEYWORDS.values())

# true, false and nil are keywords, not literal carriers
LITERAL_TYPES: FrozenSet[TokenType] = frozenset({TokenType.STRING, TokenType.NUMBER})

INTERNAL_TYPES: FrozenSet[TokenType] = frozenset({
    TokenType.COMMENT, TokenType.WHITESPACE, TokenType.EOF,
})


def is_digit(char: Optional[str]) -> bool:
    return char is not None and "0" <= char <= "9"


def is_alpha(char: Optional[str]) -> bool:
    return char is not None and ("a" <= char <= "z" or "A" <= char <= "Z" or char == "_")


def is_alphanumeric(char: Optional[str]) -> bool:
    return is_alpha(char) or is_digit(char)
