"""Pydantic schemas for cycle default suggestions."""

from pydantic import BaseModel, Field


class CycleDefaultsResponse(BaseModel):
    """Pre-filled (not submitted) values for the new-cycle form.

    Empty strings mean "let the user fill it in".
    """

    name: str = ""
    start_date: str = Field("", description="YYYY-MM-DD or empty")
    end_date: str = Field("", description="YYYY-MM-DD or empty")
