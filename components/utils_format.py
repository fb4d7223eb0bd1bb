# components/utils_format.py
from __future__ import annotations


def fmt_number(x: int | float | None, max_decimals: int = 3) -> str:
    """Thousands separators, up to `max_decimals` decimals, no trailing zeros."""
    if x is None:
        return "No Data"
    try:
        x = float(x)
    except (ValueError, TypeError):
        return "No Data"
    s = f"{x:,.{max_decimals}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return "0" if s in ("-0", "") else s


def fmt_compact(x: int | float | None) -> str:
    """
    Format numbers into compact form:
    - 1,234         -> 1.23K
    - 1,234,567     -> 1.23M
    - 5,000,000,000 -> 5.00B
    """
    if x is None:
        return "—"
    try:
        x = float(x)
    except (ValueError, TypeError):
        return "—"

    if abs(x) >= 1_000_000_000:
        return f"{x/1_000_000_000:.2f}B"
    elif abs(x) >= 1_000_000:
        return f"{x/1_000_000:.2f}M"
    elif abs(x) >= 1_000:
        return f"{x/1_000:.2f}K"
    else:
        return f"{x:.0f}"


def truncate_label(s: str | None, n: int = 10) -> str:
    if not s:
        return ""
    return f"{s[:n]}..." if len(s) > n else s
