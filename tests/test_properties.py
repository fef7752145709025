"""
Property-based tests for scanner invariants using Hypothesis.

These tests check properties that must hold for every input, not just the
hand-picked examples in the other test modules.

Author: xwest
"""

import sys
import os

from hypothesis import given, settings
from hypothesis import strategies as st

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from frontend.lexer import scan_source
from frontend.lexer.errors import ScanError, UnknownCharacterError
from frontend.lexer.tokens import (
    KEYWORDS, SINGLE_CHAR_TOKENS, Lexeme, Position, TokenType
)

PUNCTUATION = "".join(SINGLE_CHAR_TOKENS)
RECOGNIZED = set(PUNCTUATION) | set("!=<>/\" \r\t\n_") | set(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
)

identifiers = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,12}", fullmatch=True)


class TestPunctuationInvariants:
    """Punctuation-only inputs map one character to one token."""

    @given(st.text(alphabet=PUNCTUATION + " \t\n", max_size=200))
    @settings(max_examples=200)
    def test_one_token_per_punctuation_char(self, source: str) -> None:
        result = scan_source(source)
        assert not isinstance(result, ScanError)

        expected = [SINGLE_CHAR_TOKENS[c] for c in source if not c.isspace()]
        assert [t.type for t in result] == expected


class TestKeywordInvariants:
    """Keywords classify by exact full-string match."""

    @given(st.sampled_from(sorted(KEYWORDS)))
    def test_keyword_round_trip(self, text: str) -> None:
        result = scan_source(text)
        assert [t.lexeme for t in result] == [Lexeme(KEYWORDS[text])]

    @given(st.sampled_from(sorted(KEYWORDS)), st.sampled_from("abcxyzQ_9"))
    def test_keyword_with_suffix_is_identifier(self, text: str, extra: str) -> None:
        result = scan_source(text + extra)
        assert [t.lexeme for t in result] == [Lexeme(TokenType.IDENTIFIER, text + extra)]

    @given(identifiers)
    def test_identifier_text_is_preserved(self, text: str) -> None:
        result = scan_source(text)
        assert len(result) == 1
        if text in KEYWORDS:
            assert result[0].type == KEYWORDS[text]
        else:
            assert result[0].lexeme == Lexeme(TokenType.IDENTIFIER, text)


class TestLiteralInvariants:
    """Number and string payloads match their source text."""

    @given(st.from_regex(r"[0-9]{1,10}(\.[0-9]{1,10})?", fullmatch=True))
    def test_decimal_number_value(self, text: str) -> None:
        result = scan_source(text)
        assert [t.lexeme for t in result] == [Lexeme(TokenType.NUMBER, float(text))]

    @given(st.from_regex(r"[0-9]{1,10}", fullmatch=True))
    def test_trailing_dot_is_separate_token(self, digits: str) -> None:
        result = scan_source(digits + ".")
        assert [t.lexeme for t in result] == [
            Lexeme(TokenType.NUMBER, float(digits)),
            Lexeme(TokenType.DOT),
        ]

    @given(st.text(alphabet=st.characters(exclude_characters='"'), max_size=100))
    def test_string_body_round_trip(self, body: str) -> None:
        result = scan_source(f'"{body}"')
        assert [t.lexeme for t in result] == [Lexeme(TokenType.STRING, body)]


class TestPositionInvariants:
    """Positions never go backwards and errors point at the offending char."""

    @given(st.text(alphabet=sorted(RECOGNIZED - {'"'}), max_size=300))
    @settings(max_examples=200)
    def test_positions_non_decreasing(self, source: str) -> None:
        result = scan_source(source)
        assert not isinstance(result, ScanError)

        previous = Position.reset()
        for token in result:
            assert token.position >= previous
            assert token.position.line >= 1
            assert token.position.column >= 1
            previous = token.position

    @given(
        st.text(alphabet="ab ;", max_size=20),
        st.characters(categories=("P", "S"), exclude_characters="".join(RECOGNIZED)),
    )
    def test_unknown_character_position(self, prefix: str, bad: str) -> None:
        result = scan_source(prefix + bad)
        assert isinstance(result, UnknownCharacterError)
        assert result.text == bad
        assert result.position == Position(1, len(prefix) + 2)
