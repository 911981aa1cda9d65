from __future__ import annotations

import math
from typing import Optional, Union

from ..core.exceptions import ValidationError

MAX_INT64 = 2**63 - 1
MIN_INT64 = -(2**63)


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def optional_text(value: Optional[str]) -> Optional[str]:
    """Strip a submitted text value; ``None`` means the field was not submitted."""
    if value is None:
        return None
    return value.strip()


def optional_number(value: Optional[str], field_name: str) -> Optional[Union[int, float]]:
    """Coerce a submitted numeric value.

    Blank or missing input means "not provided". Integral values come back as
    ``int`` so that ``"90000"`` and ``"90000.0"`` are stored the same way, and
    must fit a signed 64-bit integer (the widest integer BSON stores).
    """
    if value is None or not value.strip():
        return None
    text = value.strip().replace(",", "")
    try:
        number: Union[int, float] = int(text)
    except ValueError:
        try:
            number = float(text)
        except ValueError:
            raise ValidationError(f"{field_name} must be a number")
        if not math.isfinite(number):
            raise ValidationError(f"{field_name} must be a number")
        if number.is_integer():
            number = int(number)
    if isinstance(number, int) and not MIN_INT64 <= number <= MAX_INT64:
        raise ValidationError(f"{field_name} is too large")
    return number
