"""Integer coercion shared by year values and state codes."""

from typing import Any, Optional


def to_int(value: Any) -> Optional[int]:
    """Coerce *value* to ``int``, truncating float-like input.

    Accepts ``36``, ``'36'``, ``36.0`` and ``'36.0'`` alike.

    Args:
        value: Year, state code or similar numeric identifier.

    Returns:
        The integer, or ``None`` when *value* is not numeric (including
        ``NaN`` and infinities).
    """
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        pass
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return None
