"""Conversion and comparison errors."""

from enum import Enum
from typing import Any


class ConversionFailure(str, Enum):
    """Reasons a coercion or comparison can fail."""
    UNSUPPORTED_TYPE = "unsupported_type"
    RANGE_OVERFLOW = "range_overflow"
    PARSE_FAILURE = "parse_failure"
    UNSUPPORTED_OPERATOR = "unsupported_operator"
    NIL_INPUT = "nil_input"


class ConversionError(Exception):
    """Base class for conversion errors.

    Attributes:
        reason: Structured failure reason
        value: The value (or operator) that could not be handled
    """

    reason: ConversionFailure = ConversionFailure.UNSUPPORTED_TYPE

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class UnsupportedTypeError(ConversionError):
    """Input type is not accepted by the requested operation."""
    reason = ConversionFailure.UNSUPPORTED_TYPE


class RangeOverflowError(ConversionError):
    """Source magnitude cannot be represented in the destination width."""
    reason = ConversionFailure.RANGE_OVERFLOW


class ParseError(ConversionError):
    """Text does not match the expected numeric or date grammar."""
    reason = ConversionFailure.PARSE_FAILURE


class UnsupportedOperatorError(ConversionError):
    """Comparison operator outside ==, !=, >, <, >=, <=."""
    reason = ConversionFailure.UNSUPPORTED_OPERATOR


class NilInputError(ConversionError):
    """Absent value where a concrete value was required."""
    reason = ConversionFailure.NIL_INPUT
