"""Insight data model."""

from typing import Literal

from pydantic import BaseModel, Field


class Insight(BaseModel):
    """A qualitative observation about trading behaviour."""

    category: Literal["timing", "risk", "performance"] = Field(
        ..., description="Insight category"
    )
    severity: Literal["positive", "warning", "negative", "info"] = Field(
        ..., description="How the insight should be read"
    )
    message: str = Field(..., min_length=1, description="Human readable message")

    model_config = {"frozen": True}
