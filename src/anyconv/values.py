"""Dynamic values: a closed tagged union over the types found in query results.

Every value handled by the conversion engine is a ``DynamicValue`` with one
active ``Kind``. Plain Python values are wrapped on the way in with
``DynamicValue.of``:

    None                -> Kind.NONE
    int                 -> Kind.INT (must fit in 64 bits)
    float               -> Kind.FLOAT64
    str                 -> Kind.STRING
    datetime / date     -> Kind.DATE (UTC)
    bool, list, dict... -> Kind.UNSUPPORTED

Fixed-width kinds (INT32, INT64, FLOAT32) are created explicitly, e.g.
``DynamicValue(kind=Kind.INT32, value=7)``.
"""

import math
import struct
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from .errors import RangeOverflowError, UnsupportedTypeError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
FLOAT32_MAX = 3.4028234663852886e38


class Kind(str, Enum):
    """Tags of a dynamic value; also used as coercion targets."""
    INT = "int"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STRING = "string"
    DATE = "time.Time"
    NONE = "none"
    UNSUPPORTED = "unsupported"

    @property
    def is_integer(self) -> bool:
        return self in (Kind.INT, Kind.INT32, Kind.INT64)

    @property
    def is_float(self) -> bool:
        return self in (Kind.FLOAT32, Kind.FLOAT64)

    @property
    def is_numeric(self) -> bool:
        return self.is_integer or self.is_float


INT_LIMITS: dict[Kind, tuple[int, int]] = {
    Kind.INT: (INT64_MIN, INT64_MAX),
    Kind.INT32: (INT32_MIN, INT32_MAX),
    Kind.INT64: (INT64_MIN, INT64_MAX),
}


def round_float32(x: float) -> float:
    """Round a float to the nearest single-precision value.

    Raises:
        RangeOverflowError: If the finite value is too large for float32
    """
    try:
        y = struct.unpack("f", struct.pack("f", x))[0]
    except OverflowError as e:
        raise RangeOverflowError(f"{x!r} out of range for float32", x) from e

    # newer interpreters pack out-of-range values as inf instead of raising
    if math.isinf(y) and not math.isinf(x):
        raise RangeOverflowError(f"{x!r} out of range for float32", x)

    return y


def check_int_range(x: int | float, kind: Kind) -> None:
    """Raise RangeOverflowError unless x fits the integer kind."""
    low, high = INT_LIMITS[kind]
    if isinstance(x, float) and math.isnan(x):
        raise RangeOverflowError(f"nan out of range for {kind.value}", x)
    if x < low or x > high:
        raise RangeOverflowError(f"{x!r} out of range for {kind.value}", x)


def to_utc(value: date) -> datetime:
    """Normalize a date or datetime to an aware UTC datetime.

    Naive datetimes are taken to already be in UTC; plain dates become
    midnight UTC.
    """
    if not isinstance(value, datetime):
        return datetime.combine(value, time(0, 0), tzinfo=timezone.utc)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def is_plain_int(x: Any) -> bool:
    """True for Python ints of any width, excluding bool."""
    return isinstance(x, int) and not isinstance(x, bool)


def _is_plain_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _normalize(kind: Kind, value: Any) -> Any:
    if kind is Kind.UNSUPPORTED:
        return value

    if kind is Kind.NONE:
        if value is not None:
            raise UnsupportedTypeError(f"none value cannot hold {value!r}", value)
        return None

    if kind.is_integer:
        if not isinstance(value, int) or isinstance(value, bool):
            raise UnsupportedTypeError(f"{kind.value} value cannot hold {value!r}", value)
        check_int_range(value, kind)
        return value

    if kind.is_float:
        if not _is_plain_number(value):
            raise UnsupportedTypeError(f"{kind.value} value cannot hold {value!r}", value)
        value = float(value)
        return round_float32(value) if kind is Kind.FLOAT32 else value

    if kind is Kind.STRING:
        if not isinstance(value, str):
            raise UnsupportedTypeError(f"string value cannot hold {value!r}", value)
        return value

    # Kind.DATE
    if not isinstance(value, date):
        raise UnsupportedTypeError(f"date value cannot hold {value!r}", value)
    return to_utc(value)


class DynamicValue(BaseModel):
    """A value whose concrete type is known only at runtime.

    The tag never changes after creation; conversions build new values.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Kind
    value: Any = None

    @model_validator(mode="before")
    @classmethod
    def _normalize_payload(cls, data: Any) -> Any:
        """Check that the payload fits the tag and canonicalize it."""
        if not isinstance(data, dict):
            return data
        kind = Kind(data.get("kind"))
        return {"kind": kind, "value": _normalize(kind, data.get("value"))}

    @classmethod
    def of(cls, obj: Any) -> "DynamicValue":
        """Wrap a plain Python value, inferring its kind.

        Dynamic values are returned unchanged.
        """
        if isinstance(obj, DynamicValue):
            return obj
        if obj is None:
            return cls(kind=Kind.NONE)
        if isinstance(obj, bool):
            return cls(kind=Kind.UNSUPPORTED, value=obj)
        if isinstance(obj, int):
            return cls(kind=Kind.INT, value=obj)
        if isinstance(obj, float):
            return cls(kind=Kind.FLOAT64, value=obj)
        if isinstance(obj, str):
            return cls(kind=Kind.STRING, value=obj)
        if isinstance(obj, date):
            return cls(kind=Kind.DATE, value=obj)
        return cls(kind=Kind.UNSUPPORTED, value=obj)

    @property
    def is_absent(self) -> bool:
        return self.kind is Kind.NONE


def wrap(obj: Any) -> DynamicValue:
    """Shorthand for ``DynamicValue.of``."""
    return DynamicValue.of(obj)
