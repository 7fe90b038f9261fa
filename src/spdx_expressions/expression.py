from __future__ import annotations

from typing import Mapping, TypeVar

from ._parser import parse_license_expression
from .errors import (
    ExceptionGroup,
    InvalidLicenseExpression,
    LexError,
    ParserSyntaxError,
    SpdxException,
    _ErrorCollector,
)
from .model import (
    Compound,
    Expression,
    LicenseException,
    LicenseId,
    LicenseRef,
    Operator,
)
from .registry import NOASSERTION, NONE, LicenseRegistry, default_registry

__all__ = [
    "Compound",
    "ExceptionGroup",
    "Expression",
    "InvalidLicenseExpression",
    "LexError",
    "LicenseException",
    "LicenseId",
    "LicenseRef",
    "Operator",
    "ParserSyntaxError",
    "SpdxException",
    "normalize_license_expression",
    "parse",
    "parse_all",
    "validate",
]

K = TypeVar("K")


def parse(text: str, *, registry: LicenseRegistry | None = None) -> Expression:
    """
    Parse a license expression.

    Identifiers are looked up case-insensitively in ``registry`` (the bundled
    SPDX license list by default); identifiers it does not know become
    :class:`LicenseRef` nodes instead of failing.

    >>> str(parse("mit OR apache-2.0 AND 0bsd"))
    'MIT OR Apache-2.0 AND 0BSD'

    :raises SpdxException: If the text is not a well-formed license
        expression. No partial result is ever produced.
    """
    if registry is None:
        registry = default_registry()
    return parse_license_expression(text, registry)


def parse_all(
    texts: Mapping[K, str], *, registry: LicenseRegistry | None = None
) -> tuple[dict[K, Expression], dict[K, SpdxException]]:
    """
    Parse several independent license expressions, e.g. the license fields of
    a document.

    A malformed expression only affects its own key: it is left out of the
    parsed results and its error is reported under the same key instead.
    """
    if registry is None:
        registry = default_registry()
    expressions: dict[K, Expression] = {}
    errors: dict[K, SpdxException] = {}
    for key, text in texts.items():
        try:
            expressions[key] = parse_license_expression(text, registry)
        except SpdxException as error:
            errors[key] = error
    return expressions, errors


def validate(
    expression: Expression,
    *,
    registry: LicenseRegistry | None = None,
    allow_deprecated: bool = True,
    allow_license_refs: bool = True,
) -> None:
    """
    Check that an expression only uses what the license registry accepts.

    All problems are reported at once, as an :class:`ExceptionGroup` of
    :class:`InvalidLicenseExpression`.
    """
    if registry is None:
        registry = default_registry()

    with _ErrorCollector().on_exit(
        f"license expression {str(expression)!r} is not valid"
    ) as errors:
        for node in expression.walk():
            if isinstance(node, LicenseId):
                _validate_license_id(
                    node, expression, registry, allow_deprecated, errors
                )
            elif isinstance(node, LicenseRef):
                if not allow_license_refs:
                    message = f"license refs are not allowed: {node}"
                    errors.error(InvalidLicenseExpression(message))
            elif isinstance(node, LicenseException):
                record = registry.exception(node.id)
                if record is None:
                    message = f"unknown license exception: {node}"
                    errors.error(InvalidLicenseExpression(message))
                elif record.deprecated and not allow_deprecated:
                    message = f"deprecated license exception: {node}"
                    errors.error(InvalidLicenseExpression(message))


def _validate_license_id(
    node: LicenseId,
    expression: Expression,
    registry: LicenseRegistry,
    allow_deprecated: bool,
    errors: _ErrorCollector,
) -> None:
    if node.id in (NONE, NOASSERTION):
        if node is not expression:
            errors.error(
                InvalidLicenseExpression(
                    f"{node.id} cannot be combined with other licenses"
                )
            )
        return

    record = registry.license(node.id)
    if record is None:
        errors.error(InvalidLicenseExpression(f"unknown license: {node.id}"))
        return

    if record.deprecated and not allow_deprecated:
        errors.error(InvalidLicenseExpression(f"deprecated license: {record.id}"))
    if node.or_later and not record.or_later:
        errors.error(
            InvalidLicenseExpression(
                f"license {record.id} does not have later versions: {node}"
            )
        )


def normalize_license_expression(raw_license_expression: str) -> str | None:
    """
    Return the canonical form of a license expression, or ``None`` for an
    empty one.

    >>> normalize_license_expression("(mit or apache-2.0) and 0bsd")
    '(MIT OR Apache-2.0) AND 0BSD'
    """
    if not raw_license_expression or raw_license_expression.isspace():
        return None
    return str(parse(raw_license_expression))
