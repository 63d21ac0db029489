"""String search and manipulation helpers."""

from collections.abc import Sequence


def position(needle: str, haystack: str | Sequence[str], delim: str = ",") -> int:
    """Return the index of needle in haystack, or -1 if it is not there.

    A single string haystack is split on delim first, so
    ``position("b", "a,b,c")`` is 1.
    """
    if isinstance(haystack, str):
        straws = haystack.split(delim) if delim and delim in haystack else [haystack]
    else:
        straws = list(haystack)
        if len(straws) == 1 and delim and delim in straws[0]:
            straws = straws[0].split(delim)

    for ind, straw in enumerate(straws):
        if straw == needle:
            return ind

    return -1


def has(needle: str, haystack: str | Sequence[str], delim: str = ",") -> bool:
    """Return True if needle is in haystack."""
    return position(needle, haystack, delim) >= 0


def dedupe(values: Sequence[str], sort: bool = False) -> list[str]:
    """Remove duplicates keeping first occurrences, optionally sorting."""
    out = list(dict.fromkeys(values))
    if sort:
        out.sort()
    return out


def matched(text: str, start: str, end: str) -> str:
    """Return the substring inside the outermost start/end pair.

    Returns "" when start never occurs. An end character seen before the
    first start still counts, so "a)b(c)" is unbalanced.

    Raises:
        ValueError: If the first start character is never closed
    """
    first, depth = -1, 0

    for ind, ch in enumerate(text):
        if ch == start:
            if first == -1:
                first = ind
            depth += 1
        elif ch == end:
            depth -= 1
            if depth == 0:
                return text[first + 1:ind]

    if first == -1:
        return ""

    raise ValueError(f"unmatched {start!r} in {text!r}")


def yes_no(text: str) -> bool:
    """Interpret "yes" as True and "no" or "" as False."""
    if text not in ("yes", "no", ""):
        raise ValueError(f"expected yes/no, got {text!r}")

    return text == "yes"


def replace_smart(source: str, old: str, new: str, delim: str) -> str:
    """Replace old with new except inside spans enclosed by delim.

    >>> replace_smart("a,'b,c',d", ",", ";", "'")
    "a;'b,c';d"
    """
    if len(old) != 1 or len(new) > 1 or len(delim) != 1:
        raise ValueError("replace_smart works on single characters")

    inside = False
    out = []
    for ch in source:
        if ch == delim:
            inside = not inside
        elif ch == old and not inside:
            ch = new
        out.append(ch)

    return "".join(out)


def slash(path: str) -> str:
    """Add a trailing slash if path does not end with one."""
    return path if path.endswith("/") else path + "/"
