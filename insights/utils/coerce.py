from typing import Optional


def to_int(v) -> Optional[int]:
    try:
        if v is None or v == "" or str(v).lower() == "null":
            return None
        return int(float(v))
    except (TypeError, ValueError):
        return None


def to_strict_int(v) -> Optional[int]:
    """Parse form text into an int, rejecting fractions and stray characters."""
    if v is None:
        return None
    if isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    text = str(v).strip()
    digits = text[1:] if text.startswith("-") else text
    if not digits.isdecimal():
        return None
    return int(text)


def to_float(v) -> Optional[float]:
    try:
        if v is None or v == "" or str(v).lower() == "null":
            return None
        return float(v)
    except (TypeError, ValueError):
        return None


def to_str(v) -> str:
    return "" if v is None else str(v)
