"""Trade data model."""

from datetime import datetime, timezone
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

Emotion = Literal["Calm", "Excited", "Fearful", "Confident", "Frustrated", "Neutral"]

Pattern = Literal[
    "Gap Up",
    "Gap Down",
    "Breakout",
    "Breakdown",
    "Reversal",
    "Trend Following",
    "Range Play",
    "VWAP Play",
    "Opening Range",
    "First Pullback",
    "ABCD Pattern",
    "1st Green Day",
    "1st Red Day",
    "RCT",
    "Other",
]

KNOWN_MISTAKES = frozenset(
    {
        "FOMO",
        "Sized Too Big",
        "Poor Entry",
        "Poor Exit",
        "No Stop Loss",
        "Moved Stop Loss",
        "Break Trading Rules",
        "Chasing",
        "Revenge Trading",
        "Other",
    }
)


def as_utc(value: datetime) -> datetime:
    """Make a timestamp comparable with any other, reading naive values as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value

class MentalState(BaseModel):
    """Trader's self-reported state of mind for a trade."""

    focus: Optional[int] = Field(default=None, ge=1, le=10, description="Focus level (1-10)")
    emotion: Optional[Emotion] = Field(default=None, description="Dominant emotion")

    model_config = {"frozen": True}

    @field_validator("focus", "emotion", mode="before")
    @classmethod
    def _blank_is_none(cls, value: Any) -> Any:
        return None if value == "" else value


class Trade(BaseModel):
    """Represents a journaled trade execution.

    Records coming from the trade store use camelCase keys (``entryDate``,
    ``realizedProfitLoss``); both spellings are accepted. The older nested
    ``profitLoss: {"realized": ...}`` shape and the ``type`` key for the
    direction are lifted into their flat fields.
    """

    symbol: str = Field(..., min_length=1, description="Trading symbol")
    direction: Literal["LONG", "SHORT"] = Field(..., description="Trade direction")
    entry_price: float = Field(..., ge=0, description="Entry price")
    entry_quantity: float = Field(..., gt=0, description="Entry quantity")
    entry_date: datetime = Field(..., description="Entry timestamp")
    exit_price: Optional[float] = Field(default=None, ge=0, description="Exit price")
    exit_quantity: Optional[float] = Field(default=None, gt=0, description="Exit quantity")
    exit_date: Optional[datetime] = Field(default=None, description="Exit timestamp")
    status: Literal["OPEN", "CLOSED"] = Field(default="OPEN", description="Trade status")
    realized_profit_loss: Optional[float] = Field(
        default=None, description="Realized P&L (closed trades only)"
    )
    shares: Optional[float] = Field(default=None, ge=0, description="Quantity traded")
    mental_state: Optional[MentalState] = Field(default=None, description="Mental state")
    mistakes: frozenset[str] = Field(default_factory=frozenset, description="Mistakes made")
    pattern: Optional[Pattern] = Field(default=None, description="Setup pattern")
    session: Literal["Pre-Market", "Regular", "After-Hours"] = Field(
        default="Regular", description="Market session"
    )

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @model_validator(mode="before")
    @classmethod
    def _lift_legacy_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if "direction" not in data and "type" in data:
            data["direction"] = data.pop("type")
        profit_loss = data.pop("profitLoss", None)
        # open records may carry a placeholder realized value
        if (
            isinstance(profit_loss, dict)
            and data.get("status") == "CLOSED"
            and "realizedProfitLoss" not in data
            and "realized_profit_loss" not in data
        ):
            data["realizedProfitLoss"] = profit_loss.get("realized")
        return data

    @field_validator("pattern", mode="before")
    @classmethod
    def _blank_pattern(cls, value: Any) -> Any:
        return None if value == "" else value

    @model_validator(mode="after")
    def _check_realized_only_when_closed(self) -> "Trade":
        if self.status == "OPEN" and self.realized_profit_loss is not None:
            raise ValueError("Open trades cannot carry a realized P&L")
        return self

    @property
    def is_closed(self) -> bool:
        return self.status == "CLOSED"

    @property
    def position_size(self) -> float:
        """Shares traded, falling back to the entry quantity."""
        return self.shares if self.shares is not None else self.entry_quantity

    @property
    def hold_minutes(self) -> Optional[float]:
        """Minutes between entry and exit, or None while the trade has no exit."""
        if self.exit_date is None:
            return None
        return (as_utc(self.exit_date) - as_utc(self.entry_date)).total_seconds() / 60
