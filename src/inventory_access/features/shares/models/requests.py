"""Share request models."""

from pydantic import BaseModel, Field


class CreateShareRequest(BaseModel):
    shared_with_username: str = Field(..., description="Username of the user receiving access")
    permission_level: str = Field(
        ...,
        description="One of view, edit_items, edit_inventory",
        examples=["edit_items"],
    )


class UpdateShareRequest(BaseModel):
    permission_level: str = Field(..., description="One of view, edit_items, edit_inventory")
