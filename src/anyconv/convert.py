"""Coercion of dynamic values to concrete target types.

Every ``any2*`` function accepts a ``DynamicValue`` or a plain Python value
and either returns the coerced Python value or raises a ``ConversionError``
subclass describing why it could not.
"""

import math
import re
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from .dates import parse_date
from .errors import (
    ConversionError,
    ConversionFailure,
    NilInputError,
    ParseError,
    RangeOverflowError,
    UnsupportedTypeError,
)
from .values import DynamicValue, Kind, check_int_range, is_plain_int, round_float32, wrap

_INT_TEXT = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_TEXT = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|inf|infinity|nan)",
    re.ASCII | re.IGNORECASE,
)


def _reject(v: DynamicValue, target: str) -> ConversionError:
    if v.is_absent:
        return NilInputError(f"cannot convert nil to {target}")
    return UnsupportedTypeError(f"cannot convert {v.value!r} to {target}", v.value)


def _parse_int(text: str, kind: Kind) -> int:
    if not _INT_TEXT.fullmatch(text):
        raise ParseError(f"cannot convert {text!r} to {kind.value}", text)

    x = int(text)
    check_int_range(x, kind)
    return x


def _parse_float(text: str, kind: Kind) -> float:
    if not _FLOAT_TEXT.fullmatch(text):
        raise ParseError(f"cannot convert {text!r} to {kind.value}", text)

    x = float(text)
    if math.isinf(x) and "inf" not in text.lower():
        raise RangeOverflowError(f"{text!r} out of range for {kind.value}", text)

    return round_float32(x) if kind is Kind.FLOAT32 else x


def _to_integer(value: Any, kind: Kind) -> int:
    if is_plain_int(value):
        # any width; report overflow against the requested kind
        check_int_range(value, kind)
        return value

    v = wrap(value)

    if v.kind.is_integer:
        check_int_range(v.value, kind)
        return v.value

    if v.kind.is_float:
        # fail rather than wrap around; truncate toward zero once in range
        check_int_range(v.value, kind)
        return int(v.value)

    if v.kind is Kind.STRING:
        return _parse_int(v.value, kind)

    raise _reject(v, kind.value)


def _to_floating(value: Any, kind: Kind) -> float:
    if is_plain_int(value):
        try:
            x = float(value)
        except OverflowError as e:
            raise RangeOverflowError(f"{value!r} out of range for {kind.value}", value) from e
        return round_float32(x) if kind is Kind.FLOAT32 else x

    v = wrap(value)

    if v.kind.is_numeric:
        x = float(v.value)
        return round_float32(x) if kind is Kind.FLOAT32 else x

    if v.kind is Kind.STRING:
        return _parse_float(v.value, kind)

    raise _reject(v, kind.value)


def any2int(value: Any) -> int:
    """Convert to a platform (64-bit) integer."""
    return _to_integer(value, Kind.INT)


def any2int32(value: Any) -> int:
    """Convert to a 32-bit integer.

    Raises:
        RangeOverflowError: If the value is outside [-2**31, 2**31 - 1]
        ParseError: If a string is not base-10 integer text
        UnsupportedTypeError: For dates and other non-numeric kinds
    """
    return _to_integer(value, Kind.INT32)


def any2int64(value: Any) -> int:
    """Convert to a 64-bit integer."""
    return _to_integer(value, Kind.INT64)


def any2float32(value: Any) -> float:
    """Convert to a float rounded to single precision."""
    return _to_floating(value, Kind.FLOAT32)


def any2float64(value: Any) -> float:
    """Convert to a double-precision float."""
    return _to_floating(value, Kind.FLOAT64)


def any2date(value: Any) -> datetime:
    """Convert to a date.

    Strings are parsed with the accepted date layouts, integers are parsed
    from their decimal text (e.g. 20240131); both give midnight UTC. Dates
    pass through with their time of day, converted to UTC.

    Raises:
        ParseError: If the text is not a valid date
        UnsupportedTypeError: For floats and other kinds
    """
    v = wrap(value)

    if v.kind is Kind.DATE:
        return v.value

    if v.kind is Kind.STRING:
        return parse_date(v.value)

    if v.kind.is_integer:
        return parse_date(str(v.value))

    raise _reject(v, "date")


def any2string(value: Any) -> str:
    """Convert to a string; never fails.

    Dates render as M/D/YYYY and floats with two decimals. Everything else
    goes through str(), so absent renders as "None" and booleans as "True" or
    "False". Ints too wide for 64 bits render in full.
    """
    try:
        v = wrap(value)
    except ConversionError:
        return str(value)

    if v.kind is Kind.STRING:
        return v.value
    if v.kind is Kind.DATE:
        return f"{v.value.month}/{v.value.day}/{v.value.year}"
    if v.kind.is_float:
        return f"{v.value:.2f}"

    return str(v.value)


def anyslice2float64(values: Iterable[Any]) -> list[float]:
    """Convert every element to float64; the first failure is raised."""
    return [any2float64(x) for x in values]


_COERCIONS: dict[Kind, Callable[[Any], Any]] = {
    Kind.FLOAT64: any2float64,
    Kind.FLOAT32: any2float32,
    Kind.STRING: any2string,
    Kind.INT: any2int,
    Kind.INT32: any2int32,
    Kind.INT64: any2int64,
    Kind.DATE: any2date,
}

_KINDS_BY_NAME = {kind.value: kind for kind in _COERCIONS}


def string2kind(name: str) -> Kind:
    """Map a type name such as "int32" or "time.Time" to its Kind.

    Unknown names map to Kind.UNSUPPORTED, which fails when used.
    """
    return _KINDS_BY_NAME.get(name, Kind.UNSUPPORTED)


def any2kind(value: Any, kind: Kind | str) -> Any:
    """Convert value to the requested kind.

    Args:
        value: Dynamic or plain value
        kind: Target kind, or its name (see ``string2kind``)

    Returns:
        The coerced Python value

    Raises:
        NilInputError: If value is absent
        UnsupportedTypeError: If kind has no coercion
        ConversionError: Whatever the underlying coercion raises
    """
    if not isinstance(kind, Kind):
        kind = string2kind(kind)

    if value is None or (isinstance(value, DynamicValue) and value.is_absent):
        raise NilInputError("input is nil")

    convert = _COERCIONS.get(kind)
    if convert is None:
        raise UnsupportedTypeError(f"unsupported target type {kind.value}", value)

    return convert(value)


class Coercion(BaseModel):
    """Outcome of a coercion: a value or a failure, never both."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any = None
    failure: ConversionFailure | None = None
    message: str | None = None

    @model_validator(mode="after")
    def _value_xor_failure(self) -> "Coercion":
        if (self.value is None) == (self.failure is None):
            raise ValueError("coercion must carry exactly one of value or failure")
        return self

    @property
    def ok(self) -> bool:
        return self.failure is None


def try_any2kind(value: Any, kind: Kind | str) -> Coercion:
    """Like ``any2kind`` but reports failures in the result instead of raising."""
    try:
        return Coercion(value=any2kind(value, kind))
    except ConversionError as e:
        return Coercion(failure=e.reason, message=str(e))
