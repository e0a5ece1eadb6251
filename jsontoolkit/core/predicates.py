"""
Evaluation of filter predicates against candidate nodes.
"""

from decimal import Decimal
from numbers import Real
from typing import Any, Union

from .nodes import NodeKind, kind_of, resolve_path
from .segments import ComparisonOperator, Predicate

Numeric = Union[Real, Decimal]


def holds(predicate: Predicate, node: Any) -> bool:
    """Whether ``predicate`` is true for the candidate ``node``.

    Unresolvable references and comparisons between incompatible kinds are
    false, never errors.
    """
    found, value = resolve_path(node, predicate.path)
    if not found:
        return False

    literal = predicate.literal
    value_kind = kind_of(value)
    literal_kind = kind_of(literal)

    if value_kind == NodeKind.NUMBER and literal_kind == NodeKind.NUMBER:
        return _compare(predicate.operator, value, literal)

    if predicate.operator.is_ordering:
        return False

    if value_kind != literal_kind or value_kind not in (NodeKind.STRING, NodeKind.BOOLEAN):
        return False

    if predicate.operator == ComparisonOperator.EQ:
        return bool(value == literal)
    return bool(value != literal)


def _compare(operator: ComparisonOperator, left: Numeric, right: Numeric) -> bool:
    # Decimal NaN raises on ordering instead of comparing false like float NaN
    if isinstance(left, Decimal) and left.is_nan():
        return operator == ComparisonOperator.NE
    if operator == ComparisonOperator.EQ:
        return left == right
    if operator == ComparisonOperator.NE:
        return left != right
    if operator == ComparisonOperator.GT:
        return left > right
    if operator == ComparisonOperator.LT:
        return left < right
    if operator == ComparisonOperator.GE:
        return left >= right
    return left <= right
