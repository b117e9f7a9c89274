"""Grant request models."""

from pydantic import BaseModel, Field


class CreateGrantRequest(BaseModel):
    grantee_username: str = Field(..., description="Username receiving access to all your inventories")
