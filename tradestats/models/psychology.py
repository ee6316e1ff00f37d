"""EmotionPerformance data model."""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class EmotionPerformance(BaseModel):
    """Realized P&L of trades entered in one emotional state."""

    emotion: str = Field(..., description="Reported emotion")
    count: int = Field(..., ge=1, description="Number of closed trades")
    profit: float = Field(..., description="Total realized P&L")
    avg_profit: float = Field(..., description="Average realized P&L per trade")

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }
