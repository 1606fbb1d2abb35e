from datetime import datetime
from decimal import Decimal
from typing import List, Sequence
from pydantic import BaseModel, Field

from ..errors import ValidationError

class PriceBar(BaseModel):
    """
    Single daily price candle (OHLCV).
    """
    timestamp: datetime
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: int = Field(ge=0)

    class Config:
        frozen = True

    @property
    def day(self):
        return self.timestamp.date()


def ensure_chronological(bars: Sequence[PriceBar]) -> List[PriceBar]:
    """Reject series whose timestamps are not strictly increasing."""
    for prev, cur in zip(bars, bars[1:]):
        if cur.timestamp <= prev.timestamp:
            raise ValidationError(
                "Price bars must have strictly increasing timestamps",
                {"previous": prev.timestamp.isoformat(), "current": cur.timestamp.isoformat()},
            )
    return list(bars)
