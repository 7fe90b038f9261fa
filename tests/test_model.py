from __future__ import annotations

import functools

import attr
import pytest

from spdx_expressions.model import (
    Compound,
    Expression,
    LicenseException,
    LicenseId,
    LicenseRef,
    Operator,
)
from spdx_expressions.registry import LicenseRegistry

MIT = LicenseId("MIT")
APACHE = LicenseId("Apache-2.0")
BSD0 = LicenseId("0BSD")
GPL2 = LicenseId("GPL-2.0-only")
CLASSPATH = LicenseException("Classpath-exception-2.0")


def OR(left: Expression, right: Expression) -> Compound:
    return Compound(left, Operator.OR, right)


def AND(left: Expression, right: Expression) -> Compound:
    return Compound(left, Operator.AND, right)


def WITH(left: Expression, right: LicenseException) -> Compound:
    return Compound(left, Operator.WITH, right)


class TestOperator:
    def test_priorities(self) -> None:
        assert Operator.OR.priority == 0
        assert Operator.AND.priority == 1
        assert Operator.WITH.priority == 2

    @pytest.mark.parametrize("operator", list(Operator))
    def test_str(self, operator: Operator) -> None:
        assert str(operator) == operator.name


class TestSerialization:
    @pytest.mark.parametrize(
        ("expression", "text"),
        [
            (MIT, "MIT"),
            (LicenseId("GPL-2.0", or_later=True), "GPL-2.0+"),
            (LicenseRef("LicenseRef-foo"), "LicenseRef-foo"),
            (CLASSPATH, "Classpath-exception-2.0"),
            (OR(MIT, APACHE), "MIT OR Apache-2.0"),
            (AND(OR(MIT, APACHE), BSD0), "(MIT OR Apache-2.0) AND 0BSD"),
            (OR(AND(MIT, APACHE), BSD0), "MIT AND Apache-2.0 OR 0BSD"),
            (OR(MIT, AND(APACHE, BSD0)), "MIT OR Apache-2.0 AND 0BSD"),
            (AND(MIT, OR(APACHE, BSD0)), "MIT AND (Apache-2.0 OR 0BSD)"),
            (OR(OR(MIT, APACHE), BSD0), "MIT OR Apache-2.0 OR 0BSD"),
            (
                AND(WITH(GPL2, CLASSPATH), MIT),
                "GPL-2.0-only WITH Classpath-exception-2.0 AND MIT",
            ),
            (
                WITH(OR(MIT, GPL2), CLASSPATH),
                "(MIT OR GPL-2.0-only) WITH Classpath-exception-2.0",
            ),
            (
                WITH(AND(MIT, GPL2), CLASSPATH),
                "(MIT AND GPL-2.0-only) WITH Classpath-exception-2.0",
            ),
            (
                AND(OR(MIT, APACHE), OR(BSD0, GPL2)),
                "(MIT OR Apache-2.0) AND (0BSD OR GPL-2.0-only)",
            ),
        ],
    )
    def test_str(self, expression: Expression, text: str) -> None:
        assert str(expression) == text

    def test_equal_priority_on_the_right_is_not_parenthesized(self) -> None:
        # Only lower priority children get parentheses, regardless of side.
        assert str(OR(MIT, OR(APACHE, BSD0))) == "MIT OR Apache-2.0 OR 0BSD"

    @pytest.mark.parametrize(
        ("expression", "text"),
        [
            (MIT, "<LicenseId('MIT')>"),
            (LicenseId("MIT", True), "<LicenseId('MIT+')>"),
            (LicenseRef("LicenseRef-x"), "<LicenseRef('LicenseRef-x')>"),
            (CLASSPATH, "<LicenseException('Classpath-exception-2.0')>"),
            (OR(MIT, APACHE), "<Compound('MIT OR Apache-2.0')>"),
        ],
    )
    def test_repr(self, expression: Expression, text: str) -> None:
        assert repr(expression) == text


class TestEquality:
    def test_structural(self) -> None:
        assert AND(OR(MIT, APACHE), BSD0) == AND(
            OR(LicenseId("MIT"), LicenseId("Apache-2.0")), LicenseId("0BSD")
        )

    @pytest.mark.parametrize(
        ("left", "right"),
        [
            (MIT, LicenseId("MIT", or_later=True)),
            (MIT, LicenseId("mit")),
            (LicenseRef("LicenseRef-MIT"), LicenseId("LicenseRef-MIT")),
            (LicenseException("x"), LicenseId("x")),
            (OR(MIT, APACHE), AND(MIT, APACHE)),
            (OR(MIT, APACHE), OR(APACHE, MIT)),
            (OR(OR(MIT, APACHE), BSD0), OR(MIT, OR(APACHE, BSD0))),
        ],
    )
    def test_not_equal(self, left: Expression, right: Expression) -> None:
        assert left != right

    def test_hashable(self) -> None:
        assert len({OR(MIT, APACHE), OR(MIT, APACHE), MIT, LicenseId("MIT")}) == 2

    def test_immutable(self) -> None:
        expression = OR(MIT, APACHE)

        with pytest.raises(attr.exceptions.FrozenInstanceError):
            expression.left = BSD0  # type: ignore[misc]
        with pytest.raises(attr.exceptions.FrozenInstanceError):
            MIT.or_later = True  # type: ignore[misc]


class TestConstruction:
    @pytest.mark.parametrize("value", ["MIT", "licenseref-x", "LicenseRef-", ""])
    def test_license_ref_needs_prefix(self, value: str) -> None:
        with pytest.raises(ValueError, match="must consist of 'LicenseRef-'"):
            LicenseRef(value)

    def test_with_needs_exception(self) -> None:
        with pytest.raises(ValueError, match="right operand of WITH"):
            Compound(MIT, Operator.WITH, APACHE)

    @pytest.mark.parametrize(
        ("left", "operator", "right"),
        [
            (MIT, Operator.AND, CLASSPATH),
            (MIT, Operator.OR, CLASSPATH),
            (CLASSPATH, Operator.AND, MIT),
            (CLASSPATH, Operator.WITH, CLASSPATH),
        ],
    )
    def test_exception_only_right_of_with(
        self, left: Expression, operator: Operator, right: Expression
    ) -> None:
        with pytest.raises(ValueError, match="can only follow WITH"):
            Compound(left, operator, right)

    def test_operator_type(self) -> None:
        with pytest.raises(TypeError):
            Compound(MIT, "AND", APACHE)  # type: ignore[arg-type]

    def test_operand_type(self) -> None:
        with pytest.raises(TypeError):
            Compound("MIT", Operator.AND, APACHE)  # type: ignore[arg-type]


class TestCanonicalLicenses:
    def test_license_id(self) -> None:
        assert MIT.canonical_licenses() == frozenset(["MIT"])

    def test_canonical_spelling(self) -> None:
        assert LicenseId("apache-2.0").canonical_licenses() == frozenset(["Apache-2.0"])

    def test_or_later_keeps_base_license(self) -> None:
        assert LicenseId("GPL-2.0", or_later=True).canonical_licenses() == frozenset(
            ["GPL-2.0"]
        )

    @pytest.mark.parametrize(
        "expression",
        [
            LicenseRef("LicenseRef-x"),
            CLASSPATH,
            LicenseId("NONE"),
            LicenseId("NOASSERTION"),
            LicenseId("Not-A-Real-License"),
        ],
    )
    def test_nothing_canonical(self, expression: Expression) -> None:
        assert expression.canonical_licenses() == frozenset()

    def test_compound_union(self) -> None:
        expression = AND(
            OR(MIT, LicenseRef("LicenseRef-x")),
            AND(WITH(GPL2, CLASSPATH), MIT),
        )

        assert expression.canonical_licenses() == frozenset(["MIT", "GPL-2.0-only"])

    def test_custom_registry(self, registry: LicenseRegistry) -> None:
        expression = AND(OR(MIT, BSD0), APACHE)

        assert expression.canonical_licenses(registry) == frozenset(
            ["MIT", "Apache-2.0"]
        )

    def test_empty_registry(self) -> None:
        assert OR(MIT, APACHE).canonical_licenses(LicenseRegistry([])) == frozenset()


def test_walk() -> None:
    expression = AND(OR(MIT, APACHE), WITH(GPL2, CLASSPATH))

    assert list(expression.walk()) == [
        expression,
        OR(MIT, APACHE),
        MIT,
        APACHE,
        WITH(GPL2, CLASSPATH),
        GPL2,
        CLASSPATH,
    ]


class TestLargeExpressions:
    def chain(self, operator: Operator, size: int) -> Expression:
        operands = [MIT, APACHE, BSD0, GPL2] * (size // 4)
        return functools.reduce(
            lambda left, right: Compound(left, operator, right), operands
        )

    @pytest.mark.parametrize("operator", [Operator.AND, Operator.OR])
    def test_long_chain(self, operator: Operator) -> None:
        expression = self.chain(operator, 1000)

        assert str(expression) == f" {operator!s} ".join(
            ["MIT", "Apache-2.0", "0BSD", "GPL-2.0-only"] * 250
        )
        assert len(list(expression.walk())) == 1999
        assert expression.canonical_licenses() == frozenset(
            ["MIT", "Apache-2.0", "0BSD", "GPL-2.0-only"]
        )
        assert expression == self.chain(operator, 1000)
        assert expression != self.chain(operator, 996)
        assert hash(expression) == hash(self.chain(operator, 1000))

    def nested(self, depth: int) -> Expression:
        expression: Expression = MIT
        for i in range(depth):
            operator = Operator.AND if i % 2 else Operator.OR
            expression = Compound(expression, operator, BSD0)
        return expression

    def test_deeply_nested(self) -> None:
        expression = self.nested(1000)
        text = str(expression)

        assert text.count("(") == text.count(")") == 500
        assert text.startswith("(" * 500 + "MIT OR 0BSD) AND 0BSD OR 0BSD")
        assert expression == self.nested(1000)
        assert expression != self.nested(999)
        assert hash(expression) == hash(self.nested(1000))
