"""MonthlyPerformance data model."""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class MonthlyPerformance(BaseModel):
    """Realized P&L summary for one calendar month."""

    month: str = Field(..., pattern=r"^\d{4}-\d{2}$", description="Month key (YYYY-MM)")
    profit: float = Field(..., description="Total realized P&L")
    trades: int = Field(..., ge=0, description="Number of closed trades")
    winning_trades: int = Field(..., ge=0, description="Number of profitable trades")
    win_rate: float = Field(..., ge=0, le=100, description="Win rate percentage")

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }
