# The docstring for each parse function contains the grammar for the rule.
# The grammar uses a simple EBNF-inspired syntax:
#
# - Uppercase names are tokens
# - Lowercase names are rules (parsed with a parse_* function)
# - Parentheses are used for grouping
# - A | means either-or
# - A * means 0 or more
# - A + means 1 or more
# - A ? means 0 or 1

from __future__ import annotations

import functools
import logging

from ._tokenizer import Token, Tokenizer, describe
from .model import (
    LICENSE_REF_PREFIX,
    Compound,
    Expression,
    LicenseException,
    LicenseId,
    LicenseRef,
    Operator,
)
from .registry import NOASSERTION, NONE, LicenseRegistry, sanitize

logger = logging.getLogger(__name__)

OR_LATER_SUFFIX = "-or-later"

# Each level of parentheses costs several stack frames in the parser.
MAX_NESTING = 100


def parse_license_expression(source: str, registry: LicenseRegistry) -> Expression:
    """
    license_expression: or_expr END
    """
    tokens = Tokenizer(source)
    if tokens.match("END"):
        tokens.raise_syntax_error("Expected a license expression")
    _check_nesting(tokens)

    expression = _parse_or_expr(tokens, registry)

    if tokens.match("RPAREN"):
        tokens.raise_syntax_error("Unmatched closing parenthesis")
    tokens.expect(
        "END",
        error_message=(
            f"Expected AND, OR or end of expression, got {describe(tokens.peek())}"
        ),
    )
    return expression


def _parse_or_expr(
    tokens: Tokenizer, registry: LicenseRegistry, *, after: Token | None = None
) -> Expression:
    """
    or_expr: and_expr (OR and_expr)*
    """
    expression = _parse_and_expr(tokens, registry, after=after)
    while tokens.match("OR"):
        operator_token = tokens.read()
        right = _parse_and_expr(tokens, registry, after=operator_token)
        expression = _fold(expression, Operator.OR, right)
    return expression


def _parse_and_expr(
    tokens: Tokenizer, registry: LicenseRegistry, *, after: Token | None = None
) -> Expression:
    """
    and_expr: with_expr (AND with_expr)*
    """
    expression = _parse_with_expr(tokens, registry, after=after)
    while tokens.match("AND"):
        operator_token = tokens.read()
        right = _parse_with_expr(tokens, registry, after=operator_token)
        expression = _fold(expression, Operator.AND, right)
    return expression


def _parse_with_expr(
    tokens: Tokenizer, registry: LicenseRegistry, *, after: Token | None = None
) -> Expression:
    """
    with_expr: atom (WITH exception_id)?
    """
    expression = _parse_atom(tokens, registry, after=after)
    if tokens.match("WITH"):
        with_token = tokens.read()
        if isinstance(expression, Compound) and expression.operator is Operator.WITH:
            tokens.raise_syntax_error(
                "A license exception is already applied to this expression",
                token=with_token,
            )
        exception = _parse_exception_id(tokens, registry)
        expression = Compound(expression, Operator.WITH, exception)

        if tokens.match("WITH"):
            tokens.raise_syntax_error("Only one license exception can follow a license")
    return expression


def _parse_atom(
    tokens: Tokenizer, registry: LicenseRegistry, *, after: Token | None = None
) -> Expression:
    """
    atom: LPAREN or_expr RPAREN | id_expr
    """
    if tokens.match("LPAREN"):
        open_token = tokens.read()
        expression = _parse_or_expr(tokens, registry, after=open_token)
        tokens.read(
            "RPAREN",
            error_message=(
                "Expected closing parenthesis for the opening one at position "
                f"{open_token.position}, got {describe(tokens.peek())}"
            ),
        )
        return expression

    if tokens.match("ID"):
        return _parse_id_expr(tokens, registry)

    if after is not None:
        message = f"Expected license identifier or '(' after {after.text}"
    else:
        message = "Expected license identifier or '('"
    tokens.raise_syntax_error(f"{message}, got {describe(tokens.peek())}")


def _parse_id_expr(tokens: Tokenizer, registry: LicenseRegistry) -> Expression:
    """
    id_expr: ID PLUS?
    """
    id_token = tokens.read("ID")
    plus_token = tokens.try_read("PLUS")
    or_later = plus_token is not None
    text = id_token.text

    if text.upper() in (NONE, NOASSERTION):
        if plus_token is not None:
            tokens.raise_syntax_error(
                f"{text.upper()} cannot be followed by '+'", token=plus_token
            )
        return LicenseId(text.upper())

    if text.lower().startswith(LICENSE_REF_PREFIX.lower()):
        idstring = text[len(LICENSE_REF_PREFIX) :]
        if not idstring:
            tokens.raise_syntax_error(
                f"Expected an identifier after {LICENSE_REF_PREFIX!r}", token=id_token
            )
        return _license_ref(LICENSE_REF_PREFIX + idstring, or_later)

    license_ids = registry.resolve(text)
    if not license_ids:
        logger.debug("Unknown license identifier %r treated as a license ref", text)
        return _license_ref(LICENSE_REF_PREFIX + sanitize(text), or_later)

    if len(license_ids) > 1:
        logger.debug(
            "Expanding license alias %r to %s", text, " OR ".join(license_ids)
        )

    return functools.reduce(
        lambda left, right: Compound(left, Operator.OR, right),
        [LicenseId(license_id, or_later) for license_id in license_ids],
    )


def _parse_exception_id(
    tokens: Tokenizer, registry: LicenseRegistry
) -> LicenseException:
    """
    exception_id: ID
    """
    token = tokens.read(
        "ID",
        error_message=(
            "Expected license exception identifier after WITH, "
            f"got {describe(tokens.peek())}"
        ),
    )
    record = registry.exception(token.text)
    if record is None:
        logger.debug("Unknown license exception %r kept as written", token.text)
        return LicenseException(token.text)
    return LicenseException(record.id)


def _license_ref(license_ref: str, or_later: bool) -> LicenseRef:
    if or_later:
        license_ref += OR_LATER_SUFFIX
    return LicenseRef(license_ref)


def _fold(left: Expression, operator: Operator, right: Expression) -> Expression:
    # AND and OR are associative: keep chains of the same operator leaning
    # left, the shape a parenthesis-free rendering parses back into.
    operands: list[Expression] = []
    stack: list[Expression] = [right]
    while stack:
        node = stack.pop()
        if isinstance(node, Compound) and node.operator is operator:
            stack.append(node.right)
            stack.append(node.left)
        else:
            operands.append(node)
    for operand in operands:
        left = Compound(left, operator, operand)
    return left


def _check_nesting(tokens: Tokenizer) -> None:
    depth = 0
    for token in tokens.tokens:
        if token.name == "LPAREN":
            depth += 1
            if depth > MAX_NESTING:
                tokens.raise_syntax_error(
                    f"Expression is nested too deeply (more than {MAX_NESTING} "
                    "levels of parentheses)",
                    token=token,
                )
        elif token.name == "RPAREN":
            depth -= 1
