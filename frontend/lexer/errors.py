"""
Error handling for the script scanner.

Scan failures are values: the scanner returns a ScanError instead of raising
it, and only the ``tokenize_string`` convenience turns one into an exception.
Every error carries a Diagnostic with position information and a help text.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass

from .tokens import Position


@dataclass
class Diagnostic:
    """Diagnostic attached to a scan error."""
    message: str
    position: Position
    filename: str
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    @property
    def location(self) -> str:
        return f"{self.filename}:{self.position}"

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class ScanError(Exception):
    """
    Base class for every scan failure.

    The first ScanError ends a scan pass; there is no recovery.
    """

    def __init__(
        self,
        message: str,
        position: Position,
        filename: str = "<string>",
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.position = position
        self.filename = filename
        self.diagnostic = Diagnostic(
            message=message,
            position=position,
            filename=filename,
            severity="error",
            code=code,
            help_text=help_text
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnknownCharacterError(ScanError):
    """A consumed character matches no token category."""

    def __init__(self, position: Position, text: str, filename: str = "<string>", help_text: Optional[str] = None):
        super().__init__(
            f"Unknown character: {text!r}",
            position,
            filename=filename,
            code="L001",
            help_text=help_text
        )
        self.text = text


class UnterminatedStringError(ScanError):
    """End of input reached before the closing quote of a string literal."""

    def __init__(self, position: Position, text: str, filename: str = "<string>"):
        super().__init__(
            "Unterminated string literal",
            position,
            filename=filename,
            code="L002",
            help_text='String literals must be closed with a matching " quote.'
        )
        self.text = text


ERROR_CODES = {
    "L001": "Unknown character",
    "L002": "Unterminated string literal",
}


def create_unknown_character_error(char: str, position: Position, filename: str = "<string>") -> UnknownCharacterError:
    """Create an error for a character outside the recognized alphabet."""
    if char.isprintable():
        help_text = f"The character {char!r} is not valid in source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return UnknownCharacterError(position, char, filename=filename, help_text=help_text)


def create_unterminated_string_error(body: str, position: Position, filename: str = "<string>") -> UnterminatedStringError:
    """Create an error for a string literal that runs into end of input."""
    return UnterminatedStringError(position, body, filename=filename)
