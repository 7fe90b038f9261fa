from __future__ import annotations

import pytest

from spdx_expressions._tokenizer import Tokenizer, describe
from spdx_expressions.errors import LexError, ParserSyntaxError, SpdxException


def kinds(source: str) -> list[tuple[str, str, int]]:
    return [(t.name, t.text, t.position) for t in Tokenizer(source).tokens]


class TestTokenize:
    def test_simple_expression(self) -> None:
        assert kinds("MIT OR Apache-2.0") == [
            ("ID", "MIT", 0),
            ("OR", "OR", 4),
            ("ID", "Apache-2.0", 7),
            ("END", "", 17),
        ]

    def test_parentheses_and_plus(self) -> None:
        assert kinds("(GPL-2.0+ AND 0BSD)") == [
            ("LPAREN", "(", 0),
            ("ID", "GPL-2.0", 1),
            ("PLUS", "+", 8),
            ("AND", "AND", 10),
            ("ID", "0BSD", 14),
            ("RPAREN", ")", 18),
            ("END", "", 19),
        ]

    def test_with(self) -> None:
        assert [t.name for t in Tokenizer("a WITH b").tokens] == [
            "ID",
            "WITH",
            "ID",
            "END",
        ]

    @pytest.mark.parametrize(
        ("source", "name"),
        [
            ("and", "AND"),
            ("AND", "AND"),
            ("or", "OR"),
            ("OR", "OR"),
            ("with", "WITH"),
            ("WITH", "WITH"),
        ],
    )
    def test_operator_case(self, source: str, name: str) -> None:
        assert Tokenizer(source).peek().name == name

    @pytest.mark.parametrize(
        "source", ["And", "oR", "With", "ANDROID", "Or-1.0", "and.x"]
    )
    def test_operator_lookalikes_are_identifiers(self, source: str) -> None:
        token = Tokenizer(source).peek()
        assert token.name == "ID"
        assert token.text == source

    @pytest.mark.parametrize("source", ["", "   ", "\t\n"])
    def test_empty(self, source: str) -> None:
        assert kinds(source) == [("END", "", len(source))]

    def test_whitespace_is_discarded(self) -> None:
        assert kinds("  MIT\t(\n") == [
            ("ID", "MIT", 2),
            ("LPAREN", "(", 6),
            ("END", "", 8),
        ]

    def test_no_whitespace_needed_around_parentheses(self) -> None:
        assert [t.name for t in Tokenizer("(MIT)AND(0BSD)").tokens] == [
            "LPAREN",
            "ID",
            "RPAREN",
            "AND",
            "LPAREN",
            "ID",
            "RPAREN",
            "END",
        ]


class TestLexError:
    @pytest.mark.parametrize(
        ("source", "character", "position"),
        [
            ("MIT/Apache-2.0", "/", 3),
            ("MIT, BSD", ",", 3),
            ("DocumentRef-x:LicenseRef-y", ":", 13),
            ("MIT OR Apache_2.0", "_", 13),
            ("é", "é", 0),
        ],
    )
    def test_invalid_character(
        self, source: str, character: str, position: int
    ) -> None:
        with pytest.raises(LexError) as ctx:
            Tokenizer(source)

        assert ctx.value.character == character
        assert ctx.value.position == position
        assert ctx.value.span == (position, position)

    def test_is_an_spdx_exception(self) -> None:
        with pytest.raises(SpdxException):
            Tokenizer("MIT;")

    def test_lexing_happens_before_parsing(self) -> None:
        # The malformed token sequence comes first, the invalid character wins.
        with pytest.raises(LexError):
            Tokenizer("AND AND MIT!")

    def test_str(self) -> None:
        with pytest.raises(LexError) as ctx:
            Tokenizer("MIT ; BSD")

        assert str(ctx.value) == "\n    ".join(
            ["Unexpected character ';'", "MIT ; BSD", "    ^"]
        )


class TestTokenizer:
    def test_read_and_peek(self) -> None:
        tokens = Tokenizer("MIT OR 0BSD")

        assert tokens.peek().text == "MIT"
        assert tokens.match("ID")
        assert not tokens.match("OR")
        assert tokens.read().text == "MIT"
        assert tokens.try_read("ID") is None
        assert tokens.try_read("OR") is not None
        assert tokens.read("ID").text == "0BSD"
        assert tokens.match("END")

    def test_read_does_not_go_past_end(self) -> None:
        tokens = Tokenizer("MIT")
        tokens.read()

        assert tokens.read().name == "END"
        assert tokens.read().name == "END"

    def test_expect_raises_at_next_token(self) -> None:
        tokens = Tokenizer("MIT Apache-2.0")
        tokens.read()

        with pytest.raises(ParserSyntaxError) as ctx:
            tokens.expect("AND", "OR", error_message="Expected an operator")

        assert ctx.value.message == "Expected an operator"
        assert ctx.value.span == (4, 13)
        assert ctx.value.source == "MIT Apache-2.0"

    def test_position(self) -> None:
        tokens = Tokenizer("MIT OR 0BSD")
        tokens.read()

        assert tokens.position == 4


@pytest.mark.parametrize(
    ("source", "description"),
    [("MIT", "'MIT'"), ("", "end of expression"), (")", "')'")],
)
def test_describe(source: str, description: str) -> None:
    assert describe(Tokenizer(source).peek()) == description
