"""
English ordinal suffixes for display text.
"""


def ordinal_suffix(n: int) -> str:
    """
    Return the English ordinal suffix for a positive integer.

    11, 12 and 13 (and 111, 212, ...) take "th"; otherwise the last digit
    decides: 1 -> "st", 2 -> "nd", 3 -> "rd", anything else -> "th".
    """
    if n % 100 in (11, 12, 13):
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def ordinal(n: int) -> str:
    """Number followed by its suffix, e.g. ``ordinal(22) == "22nd"``."""
    return f"{n}{ordinal_suffix(n)}"
