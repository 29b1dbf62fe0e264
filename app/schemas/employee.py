from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal


class EmployeeResponse(BaseModel):
    """Schema for employee directory entries"""
    id: int
    name: str = Field(..., description="Display name, used for meeting lookups")
    email: str = Field(..., description="Email address of the employee")

    model_config = ConfigDict(from_attributes=True, alias_generator=to_pascal, populate_by_name=True)
