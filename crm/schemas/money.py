"""
Money helpers shared by schemas
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

CENT = Decimal("0.01")

def to_cents(value: Optional[Decimal]) -> Optional[Decimal]:
    """Round to the 2 places the amount columns store"""
    if value is None:
        return None
    return value.quantize(CENT, rounding=ROUND_HALF_UP)
