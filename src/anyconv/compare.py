"""Relational comparison of dynamic values with best-effort coercion."""

from collections.abc import Callable
from enum import Enum
from typing import Any

from .convert import any2date, any2float32, any2float64, any2int, any2int32, any2int64
from .errors import ConversionError, NilInputError, UnsupportedOperatorError, UnsupportedTypeError
from .values import Kind, wrap


class Operator(str, Enum):
    """Supported comparison operators."""
    EQ = "=="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="


_NUMERIC_COERCIONS: dict[Kind, Callable[[Any], Any]] = {
    Kind.INT: any2int,
    Kind.INT32: any2int32,
    Kind.INT64: any2int64,
    Kind.FLOAT32: any2float32,
    Kind.FLOAT64: any2float64,
}


def _unquote(text: str) -> str:
    return text.replace("'", "")


def parse_operator(op: str) -> Operator:
    """Return the Operator for op or raise UnsupportedOperatorError."""
    try:
        return Operator(op)
    except ValueError as e:
        raise UnsupportedOperatorError(f"unsupported comparison: {op}", op) from e


def gt_any(a: Any, b: Any) -> bool:
    """Return a > b.

    b is coerced to a's kind when the kinds differ. Strings are compared with
    single quotes removed and only against other strings.

    Note: returns True whenever either operand is absent.
    """
    x, y = wrap(a), wrap(b)
    if x.is_absent or y.is_absent:
        return True

    if x.kind is Kind.STRING:
        if y.kind is not Kind.STRING:
            raise UnsupportedTypeError(f"cannot convert {y.value!r} to string", y.value)
        return _unquote(x.value) > _unquote(y.value)

    if x.kind.is_numeric:
        return x.value > _NUMERIC_COERCIONS[x.kind](y)

    if x.kind is Kind.DATE:
        return x.value > any2date(y)

    raise UnsupportedTypeError("unsupported comparison", x.value)


def lt_any(a: Any, b: Any) -> bool:
    """Return a < b for operands of the same kind; no coercion is attempted."""
    x, y = wrap(a), wrap(b)
    if x.is_absent or y.is_absent:
        raise NilInputError("cannot compare nil values")

    if x.kind is not y.kind or x.kind is Kind.UNSUPPORTED:
        raise UnsupportedTypeError(
            f"cannot compare {x.kind.value} with {y.kind.value}", (x.value, y.value)
        )

    if x.kind is Kind.STRING:
        return _unquote(x.value) < _unquote(y.value)

    return x.value < y.value


def _date_or_self(x: Any) -> Any:
    try:
        return any2date(x)
    except ConversionError:
        return x


def comparer(a: Any, b: Any, op: str) -> bool:
    """Evaluate ``a op b`` for op in ==, !=, >, <, >=, <=.

    Operands that read as dates (strings such as "Jan 2, 2024" or integers
    such as 20240102) are compared as dates.

    Raises:
        UnsupportedOperatorError: If op is not recognized
        ConversionError: If the operands cannot be compared
    """
    operator = parse_operator(op)

    a = _date_or_self(a)
    b = _date_or_self(b)

    gt = gt_any(a, b)
    lt = gt_any(b, a)

    if operator is Operator.GT:
        return gt
    if operator is Operator.GE:
        return not lt
    if operator is Operator.EQ:
        return not gt and not lt
    if operator is Operator.NE:
        return gt or lt
    if operator is Operator.LT:
        return lt
    return not gt
