"""DailyPerformance data model."""

from datetime import date as date_type

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class DailyPerformance(BaseModel):
    """Realized P&L for one exit day, with running totals."""

    date: date_type = Field(..., description="Exit day")
    profit: float = Field(..., description="Realized P&L closed on this day")
    cumulative: float = Field(..., description="Realized P&L up to and including this day")
    wins: int = Field(..., ge=0, description="Profitable trades closed on this day")
    daily_trades: int = Field(..., ge=1, description="Trades closed on this day")
    total_trades: int = Field(..., ge=1, description="Trades closed up to this day")

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }
