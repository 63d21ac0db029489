"""anyconv - Coercion and comparison of dynamically typed query-result values."""

__version__ = "0.1.0"

from .compare import Operator, comparer, gt_any, lt_any, parse_operator
from .config.settings import AnyConvConfig, config
from .convert import (
    Coercion,
    any2date,
    any2float32,
    any2float64,
    any2int,
    any2int32,
    any2int64,
    any2kind,
    any2string,
    anyslice2float64,
    string2kind,
    try_any2kind,
)
from .errors import (
    ConversionError,
    ConversionFailure,
    NilInputError,
    ParseError,
    RangeOverflowError,
    UnsupportedOperatorError,
    UnsupportedTypeError,
)
from .logging.setup import get_logger, setup_logging
from .values import DynamicValue, Kind, wrap

__all__ = [
    "AnyConvConfig",
    "config",
    "setup_logging",
    "get_logger",
    "DynamicValue",
    "Kind",
    "wrap",
    "any2int",
    "any2int32",
    "any2int64",
    "any2float32",
    "any2float64",
    "any2date",
    "any2string",
    "any2kind",
    "string2kind",
    "try_any2kind",
    "anyslice2float64",
    "Coercion",
    "Operator",
    "parse_operator",
    "gt_any",
    "lt_any",
    "comparer",
    "ConversionError",
    "ConversionFailure",
    "UnsupportedTypeError",
    "RangeOverflowError",
    "ParseError",
    "UnsupportedOperatorError",
    "NilInputError",
]
