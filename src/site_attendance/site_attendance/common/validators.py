from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from numbers import Real

from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Normalized:
    """A numeric input after normalization, tagged with whether it was changed."""

    value: float
    was_clamped: bool = False


def normalize_labor_hours(value: object) -> Normalized:
    """Clamp a labor-hours value to a finite number >= 0.

    Negative, non-numeric and non-finite inputs become 0.
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        if value is not None:
            logger.debug("labor hours %r is not numeric, using 0", value)
        return Normalized(0.0, was_clamped=value is not None)

    try:
        number = float(value)
    except (OverflowError, ValueError):
        number = math.nan
    if not math.isfinite(number) or number < 0:
        logger.debug("labor hours %r out of range, using 0", value)
        return Normalized(0.0, was_clamped=True)
    return Normalized(number)


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()
