"""Histogram bin data model."""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class DistributionBin(BaseModel):
    """A fixed-width bucket of realized P&L values."""

    bin_lower_bound: float = Field(..., description="Inclusive lower bound of the bin")
    count: int = Field(..., ge=0, description="Number of trades in the bin")
    is_profit: bool = Field(..., description="Whether the bin starts at or above zero")

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }
