import math
from typing import Optional


BAD_TO_GOOD = (
    ("\u2212", "-"), ("\u2013", "-"), ("\u2014", "-"),
    ("\u2012", "-"), ("\u2010", "-"),
    ("\u00A0", ""), ("\u202F", ""), ("\u2009", ""), ("\u2007", ""),
    ("\u2002", ""), ("\u2003", ""),
)


def normalize_num_str(s) -> str:
    if s is None:
        return ""
    t = str(s).strip()
    for bad, good in BAD_TO_GOOD:
        t = t.replace(bad, good)
    t = t.replace(",", ".")
    return t


def try_parse_float(s) -> Optional[float]:
    """Finite float or None. Accepts decimal commas and unicode minus."""
    if s is None or isinstance(s, bool):
        return None
    if isinstance(s, (int, float)):
        f = float(s)
        return f if math.isfinite(f) else None
    t = normalize_num_str(s)
    if not t:
        return None
    try:
        f = float(t)
    except ValueError:
        return None
    return f if math.isfinite(f) else None


def clean_text(s) -> Optional[str]:
    # empty cells and whitespace-only strings are "absent"
    if s is None:
        return None
    t = str(s).strip()
    return t or None


def fmt_num(f: Optional[float], digits: int = 2) -> str:
    if f is None:
        return ""
    i = int(round(f))
    if abs(f - i) < 1e-9:
        return str(i)
    return f"{f:.{digits}f}"
