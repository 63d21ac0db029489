"""Display and SQL-literal formatting of dynamic values."""

from collections.abc import Sequence
from typing import Any

from .config.settings import config
from .values import Kind, is_plain_int, round_float32, wrap

# |x| thresholds for the number of decimals shown by pretty_string
_DECIMAL_TIERS = ((0.1, 4), (1.0, 3), (10.0, 2))


def _shortest_float32(x: float) -> str:
    # fewest significant digits that still read back as the same float32
    for digits in range(1, 10):
        text = f"{x:.{digits}g}"
        if round_float32(float(text)) == x:
            return text
    return repr(x)


def pretty_string(x: Any) -> str:
    """Return a string version of x suitable for printing.

    Integers get thousands separators, floats get 4, 3, 2 or 1 decimals
    depending on magnitude, dates render as YYYY-MM-DD. Absent and
    unsupported values render as "".
    """
    if is_plain_int(x):
        # ints of any width, e.g. UInt64 columns
        return f"{x:,}"

    v = wrap(x)

    if v.kind.is_integer:
        return f"{v.value:,}"

    if v.kind.is_float:
        r = abs(v.value)
        for limit, decimals in _DECIMAL_TIERS:
            if r < limit:
                return f"{v.value:.{decimals}f}"
        return f"{v.value:.1f}"

    if v.kind is Kind.STRING:
        return v.value

    if v.kind is Kind.DATE:
        return v.value.strftime("%Y-%m-%d")

    return ""


def to_clickhouse(x: Any, date_format: str | None = None) -> str:
    """Return x as a ClickHouse constant.

    Args:
        x: Value to render
        date_format: strftime layout for dates (defaults to config.clickhouse_date_format)

    Returns:
        Numbers verbatim, quoted strings, quoted dates, or "" for anything else
    """
    if is_plain_int(x):
        return str(x)

    v = wrap(x)

    if v.kind.is_integer:
        return str(v.value)

    if v.kind is Kind.FLOAT32:
        return _shortest_float32(v.value)

    if v.kind is Kind.FLOAT64:
        return repr(v.value)

    if v.kind is Kind.STRING:
        escaped = v.value.replace("\\", "\\\\").replace("'", "\\'")
        return f"'{escaped}'"

    if v.kind is Kind.DATE:
        return f"'{v.value.strftime(date_format or config.clickhouse_date_format)}'"

    return ""


def aligner(left: Sequence[Any], right: Sequence[Any], pad: int) -> list[str] | None:
    """Lay out two sequences as aligned columns separated by at least pad spaces.

    Returns None if the sequences differ in length.
    """
    if left is None or right is None or len(left) != len(right):
        return None

    left_str = [str(x) for x in left]
    width = max((len(s) for s in left_str), default=0)

    return [f"{s}{' ' * (width - len(s) + pad)}{r}" for s, r in zip(left_str, right)]
