"""
Scanner - turns script source text into tokens

One forward pass over the source, one token per ``scan_token()`` call.
Whitespace and comments come back as internal tokens and the driver
functions at the bottom of this module drop them.

Failures are returned, not raised: ``scan_token`` and ``scan_source`` hand
back a ScanError value and the first one ends the pass. ``tokenize_string``
is there for callers that would rather get an exception.

xwest
"""

from typing import List, Optional, Union

from .cursor import MultiPeekCursor
from .tokens import (
    Token, TokenType, Lexeme, LexemeValue, Position, KEYWORDS, SINGLE_CHAR_TOKENS,
    ONE_OR_TWO_CHAR_TOKENS, WHITESPACE_CHARS, is_alpha, is_alphanumeric, is_digit
)
from .errors import (
    ScanError, create_unknown_character_error, create_unterminated_string_error
)
from ..logger import get_logger

logger = get_logger(__name__)

ScanResult = Union[Token, ScanError]


class Scanner:
    """
    Stateful scanner over a single source string.

    Holds the character cursor, the accumulation buffer for the token being
    recognized and the current position. Instances are single-use and not
    thread-safe; create one per scan.
    """

    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the scanner with source code.

        Args:
            source: Full source text
            filename: Name used in diagnostics
        """
        self.filename = filename
        self._cursor: MultiPeekCursor[str] = MultiPeekCursor(source)
        self._buffer: List[str] = []
        self._position = Position.reset()

    @property
    def position(self) -> Position:
        """Position after the last consumed character."""
        return self._position

    def scan_token(self) -> ScanResult:
        """
        Recognize exactly one token.

        Returns:
            The next Token (internal-only types included), or a ScanError
            describing the character that could not be scanned.
        """
        self._buffer.clear()
        char = self._advance()

        if char is None:
            return self._make_token(TokenType.EOF)

        if char in SINGLE_CHAR_TOKENS:
            return self._make_token(SINGLE_CHAR_TOKENS[char])

        if char in ONE_OR_TWO_CHAR_TOKENS:
            single, double = ONE_OR_TWO_CHAR_TOKENS[char]
            return self._make_token(double if self._match("=") else single)

        if char == "/":
            if self._match("/"):
                self._advance_until_newline()
                return self._make_token(TokenType.COMMENT)
            return self._make_token(TokenType.SLASH)

        if char == '"':
            return self._make_string()

        if char in WHITESPACE_CHARS:
            return self._make_token(TokenType.WHITESPACE)

        if is_digit(char):
            return self._make_number()

        if is_alpha(char):
            return self._make_identifier()

        return create_unknown_character_error(char, self._position, self.filename)

    def _advance(self) -> Optional[str]:
        """Consume one character into the buffer, updating line/column."""
        char = self._cursor.next()
        if char is not None:
            self._buffer.append(char)
            if char == "\n":
                self._position = self._position.advance_line()
            else:
                self._position = self._position.advance_column()
        return char

    def _match(self, expected: str) -> bool:
        """
        Consume the next character only if it is ``expected``.

        The matched character is buffered but does not move the position,
        so a two-character token keeps the column of its first character.
        """
        if self._cursor.peek() == expected:
            self._buffer.append(self._cursor.next())
            return True
        return False

    def _advance_until_newline(self):
        # A comment on the last line ends at end of input
        while True:
            char = self._advance()
            if char is None or char == "\n":
                break

    def _make_string(self) -> ScanResult:
        """Scan a string literal; the opening quote is already consumed."""
        self._buffer.pop()

        while self._cursor.peek() != '"':
            if self._cursor.at_end:
                return create_unterminated_string_error(
                    "".join(self._buffer), self._position, self.filename
                )
            self._advance()

        # closing quote is dropped without moving the position
        self._cursor.next()
        return self._make_token(TokenType.STRING, "".join(self._buffer))

    def _make_number(self) -> ScanResult:
        """Scan digits with at most one '.' that is followed by a digit."""
        seen_decimal = False
        while True:
            char = self._cursor.peek()
            if is_digit(char):
                self._advance()
            elif char == "." and not seen_decimal and is_digit(self._cursor.peek(1)):
                # a '.' with no digit after it is left for the next token
                seen_decimal = True
                self._advance()
            else:
                break

        return self._make_token(TokenType.NUMBER, float("".join(self._buffer)))

    def _make_identifier(self) -> ScanResult:
        while is_alphanumeric(self._cursor.peek()):
            self._advance()

        text = "".join(self._buffer)
        token_type = KEYWORDS.get(text)
        if token_type is None:
            return self._make_token(TokenType.IDENTIFIER, text)
        return self._make_token(token_type)

    def _make_token(self, token_type: TokenType, value: LexemeValue = None) -> Token:
        return Token(Lexeme(token_type, value), self._position)


def scan_source(source: str, filename: str = "<string>") -> Union[List[Token], ScanError]:
    """
    Scan a whole source string.

    Args:
        source: Source code string
        filename: Filename for diagnostics

    Returns:
        The tokens in source order without whitespace, comments or EOF,
        or the first ScanError. No partial token list is ever returned.
    """
    scanner = Scanner(source, filename)
    tokens: List[Token] = []

    while True:
        result = scanner.scan_token()
        if isinstance(result, ScanError):
            logger.debug("scan of %s failed: %s", filename, result.diagnostic.message)
            return result
        if result.type == TokenType.EOF:
            break
        if result.type in (TokenType.WHITESPACE, TokenType.COMMENT):
            continue
        tokens.append(result)

    logger.debug("scanned %d tokens from %s", len(tokens), filename)
    return tokens


def scan_into_peekable(source: str, filename: str = "<string>") -> Union[MultiPeekCursor[Token], ScanError]:
    """Scan a source string into a token cursor a parser can look ahead on."""
    result = scan_source(source, filename)
    if isinstance(result, ScanError):
        return result
    return MultiPeekCursor(result)


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to scan a source string.

    Args:
        source: Source code string
        filename: Filename for diagnostics

    Returns:
        List of tokens

    Raises:
        ScanError: If scanning fails
    """
    result = scan_source(source, filename)
    if isinstance(result, ScanError):
        raise result
    return result
