"""
Script Scanner Package

Implements the lexical scanner for the scripting language: raw source text
in, an ordered list of classified tokens out.

Key Features:
- Fixed punctuation and one/two-character operators
- Reserved keyword classification by exact lookup
- String and number literal payloads
- Line comments and whitespace skipped by the driver
- 1-based line/column positions for diagnostics
- Fail-fast errors returned as values

Author: xwest
"""

from .tokens import Token, TokenType, Lexeme, Position, KEYWORDS
from .cursor import MultiPeekCursor
from .scanner import Scanner, scan_source, scan_into_peekable, tokenize_string
from .errors import ScanError, UnknownCharacterError, UnterminatedStringError, Diagnostic

__all__ = [
    "Scanner",
    "scan_source",
    "scan_into_peekable",
    "tokenize_string",
    "Token",
    "TokenType",
    "Lexeme",
    "Position",
    "KEYWORDS",
    "MultiPeekCursor",
    "ScanError",
    "UnknownCharacterError",
    "UnterminatedStringError",
    "Diagnostic",
]
