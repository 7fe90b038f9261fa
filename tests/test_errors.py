import pytest

import spdx_expressions.errors
from spdx_expressions.errors import LexError, ParserSyntaxError, SpdxException


def test_error_collector_finalize() -> None:
    collector = spdx_expressions.errors._ErrorCollector()

    collector.error(ValueError("first error"))
    collector.error(TypeError("second error"))

    with pytest.raises(spdx_expressions.errors.ExceptionGroup) as exc_info:
        collector.finalize("collected errors")

    exception_group = exc_info.value
    assert exception_group.message == "collected errors"
    assert len(exception_group.exceptions) == 2
    assert isinstance(exception_group.exceptions[0], ValueError)
    assert str(exception_group.exceptions[0]) == "first error"
    assert isinstance(exception_group.exceptions[1], TypeError)
    assert str(exception_group.exceptions[1]) == "second error"


def test_error_collector_no_errors() -> None:
    collector = spdx_expressions.errors._ErrorCollector()

    collector.finalize("no errors")  # Should not raise


def test_error_collector_on_exit() -> None:
    collector = spdx_expressions.errors._ErrorCollector()

    with pytest.raises(
        spdx_expressions.errors.ExceptionGroup
    ) as exc_info, collector.on_exit("exiting"):
        collector.error(ValueError("an error"))

    exception_group = exc_info.value
    assert exception_group.message == "exiting"
    assert len(exception_group.exceptions) == 1
    assert str(exception_group.exceptions[0]) == "an error"


def test_error_collector_on_exit_no_errors() -> None:
    collector = spdx_expressions.errors._ErrorCollector()

    with collector.on_exit("exiting"):
        pass  # No errors added


def test_error_collector_on_exit_uncollected_error() -> None:
    collector = spdx_expressions.errors._ErrorCollector()

    with pytest.raises(KeyError), collector.on_exit("exiting"):
        collector.error(ValueError("collected"))
        raise KeyError("not collected")


class TestSpdxException:
    def test_attributes(self) -> None:
        error = ParserSyntaxError("Bad", source="MIT OR", span=(4, 5))

        assert error.message == "Bad"
        assert error.source == "MIT OR"
        assert error.span == (4, 5)
        assert error.position == 4

    def test_str_marks_span(self) -> None:
        error = ParserSyntaxError("Bad operator", source="MIT XOR BSD", span=(4, 6))

        assert str(error) == "Bad operator\n    MIT XOR BSD\n        ^^^"

    def test_str_at_end(self) -> None:
        error = ParserSyntaxError("Expected more", source="MIT OR", span=(6, 6))

        assert str(error).splitlines()[-1] == "          ^"

    @pytest.mark.parametrize("cls", [LexError, ParserSyntaxError])
    def test_hierarchy(self, cls: type) -> None:
        assert issubclass(cls, SpdxException)
        assert issubclass(cls, ValueError)

    def test_lex_error_character(self) -> None:
        error = LexError("Unexpected character", source="MIT/BSD", span=(3, 3))

        assert error.character == "/"
