"""DrawdownSummary data model."""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class DrawdownSummary(BaseModel):
    """Equity curve summary for an ordered sequence of trades."""

    max_drawdown: float = Field(..., ge=0, description="Largest peak-to-trough decline")
    peak_equity: float = Field(..., description="Highest equity reached")
    current_equity: float = Field(..., description="Equity after the last trade")
    current_drawdown: float = Field(..., ge=0, description="Decline from peak to current equity")
    max_consecutive_losses: int = Field(..., ge=0, description="Longest run of losing trades")
    biggest_loss: float = Field(..., le=0, description="Largest single loss (0 if none)")

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @property
    def max_drawdown_percent(self) -> float:
        """Maximum drawdown as a percentage of peak equity."""
        if self.peak_equity <= 0:
            return 0.0
        return self.max_drawdown / self.peak_equity * 100

    @property
    def current_drawdown_percent(self) -> float:
        """Current drawdown as a percentage of peak equity."""
        if self.peak_equity <= 0:
            return 0.0
        return self.current_drawdown / self.peak_equity * 100
