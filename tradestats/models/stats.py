"""Stats aggregate data model."""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class Stats(BaseModel):
    """Canonical trade statistics aggregate."""

    total_trades: int = Field(..., ge=0, description="Number of trades")
    profitable_trades: int = Field(..., ge=0, description="Number of profitable trades")
    losing_trades: int = Field(..., ge=0, description="Number of losing trades")
    total_profit: float = Field(..., description="Total realized P&L")
    win_rate: float = Field(..., ge=0, le=100, description="Win rate percentage")
    win_loss_ratio: float = Field(..., description="Profitable to losing trades ratio")

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }
