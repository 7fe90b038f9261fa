"""
The license expression tree.

Every node is an immutable, hashable value compared by structure. ``str()`` of
a node is its canonical textual form, which :func:`spdx_expressions.expression.parse`
turns back into an equal tree.
"""

from __future__ import annotations

import enum
import itertools
from typing import Iterator

import attr

from .registry import LicenseRegistry, default_registry

__all__ = [
    "Compound",
    "Expression",
    "LicenseException",
    "LicenseId",
    "LicenseRef",
    "Operator",
]

LICENSE_REF_PREFIX = "LicenseRef-"


class Operator(enum.Enum):
    """
    The operators of a compound expression.

    The value is the priority: an operator with a larger priority binds
    stronger. Operators with the same priority bind left-associative.
    """

    OR = 0
    AND = 1
    WITH = 2

    @property
    def priority(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.name


class Expression:
    """Base class of all license expression nodes."""

    __slots__ = ()

    def canonical_licenses(
        self, registry: LicenseRegistry | None = None
    ) -> frozenset[str]:
        """
        Return the canonical ids of all licenses known to ``registry`` in this
        expression. License refs, exceptions and unknown ids are ignored.
        """
        raise NotImplementedError

    def walk(self) -> Iterator[Expression]:
        """Iterate over this node and all nodes below it, in pre-order."""
        yield self


@attr.s(frozen=True, slots=True, repr=False)
class LicenseId(Expression):
    id: str = attr.ib()
    or_later: bool = attr.ib(default=False)

    def canonical_licenses(
        self, registry: LicenseRegistry | None = None
    ) -> frozenset[str]:
        if registry is None:
            registry = default_registry()
        record = registry.license(self.id)
        if record is None:
            return frozenset()
        return frozenset([record.id])

    def __str__(self) -> str:
        return f"{self.id}+" if self.or_later else self.id

    def __repr__(self) -> str:
        return f"<LicenseId({str(self)!r})>"


def _check_license_ref(
    instance: LicenseRef, attribute: attr.Attribute, value: str
) -> None:
    if not value.startswith(LICENSE_REF_PREFIX) or value == LICENSE_REF_PREFIX:
        raise ValueError(
            f"license ref {value!r} must consist of {LICENSE_REF_PREFIX!r} "
            "followed by an identifier"
        )


@attr.s(frozen=True, slots=True, repr=False)
class LicenseRef(Expression):
    id: str = attr.ib(validator=_check_license_ref)

    def canonical_licenses(
        self, registry: LicenseRegistry | None = None
    ) -> frozenset[str]:
        return frozenset()

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"<LicenseRef({self.id!r})>"


@attr.s(frozen=True, slots=True, repr=False)
class LicenseException(Expression):
    id: str = attr.ib()

    def canonical_licenses(
        self, registry: LicenseRegistry | None = None
    ) -> frozenset[str]:
        return frozenset()

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return f"<LicenseException({self.id!r})>"


def _check_operand(
    instance: Compound, attribute: attr.Attribute, value: Expression
) -> None:
    if attribute.name == "right" and instance.operator is Operator.WITH:
        if not isinstance(value, LicenseException):
            raise ValueError(
                f"the right operand of WITH must be a license exception, not {value!r}"
            )
    elif isinstance(value, LicenseException):
        raise ValueError(f"license exception {value.id!r} can only follow WITH")


@attr.s(frozen=True, slots=True, repr=False, eq=False)
class Compound(Expression):
    """
    Two expressions joined by an operator.

    Parsed ``AND``/``OR`` chains lean left, so their depth grows with the
    number of operands. None of the methods below recurse along the tree.
    """

    left: Expression = attr.ib(
        validator=[attr.validators.instance_of(Expression), _check_operand]
    )
    operator: Operator = attr.ib(validator=attr.validators.instance_of(Operator))
    right: Expression = attr.ib(
        validator=[attr.validators.instance_of(Expression), _check_operand]
    )

    def canonical_licenses(
        self, registry: LicenseRegistry | None = None
    ) -> frozenset[str]:
        if registry is None:
            registry = default_registry()
        return frozenset().union(
            *(
                node.canonical_licenses(registry)
                for node in self.walk()
                if not isinstance(node, Compound)
            )
        )

    def walk(self) -> Iterator[Expression]:
        stack: list[Expression] = [self]
        while stack:
            node = stack.pop()
            yield node
            if isinstance(node, Compound):
                stack.append(node.right)
                stack.append(node.left)

    def _shape(self) -> Iterator[object]:
        # Every compound has exactly two operands, so the pre-order sequence
        # of operators and leaves identifies the tree.
        for node in self.walk():
            yield node.operator if isinstance(node, Compound) else node

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Compound):
            return NotImplemented
        if other is self:
            return True
        missing = object()
        return all(
            mine == theirs
            for mine, theirs in itertools.zip_longest(
                self._shape(), other._shape(), fillvalue=missing
            )
        )

    def __hash__(self) -> int:
        return hash(tuple(self._shape()))

    def _operand_str(self, operand: Expression, text: str) -> str:
        # Only operands that bind weaker than this operator get parentheses.
        if (
            isinstance(operand, Compound)
            and operand.operator.priority < self.operator.priority
        ):
            return f"({text})"
        return text

    def __str__(self) -> str:
        rendered: list[str] = []
        stack: list[tuple[Expression, bool]] = [(self, False)]
        while stack:
            node, operands_done = stack.pop()
            if not isinstance(node, Compound):
                rendered.append(str(node))
            elif not operands_done:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
            else:
                right = rendered.pop()
                left = rendered.pop()
                rendered.append(
                    f"{node._operand_str(node.left, left)} {node.operator} "
                    f"{node._operand_str(node.right, right)}"
                )
        return rendered[0]

    def __repr__(self) -> str:
        return f"<Compound({str(self)!r})>"
