from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_pascal
from typing import Optional
from datetime import datetime
from app.models.visitor import VisitReason


class VisitorRequest(BaseModel):
    """Base schema for inbound visitor requests (PascalCase JSON keys)"""
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)


class VisitorArriveMeeting(VisitorRequest):
    """Schema for signing in a visitor who has come for a meeting"""
    visitor_name: str = Field(..., min_length=1, description="Name of the visitor")
    meeting_with: str = Field(..., min_length=1, description="Name of the employee to meet")


class VisitorArriveCourier(VisitorRequest):
    """Schema for signing in a courier"""
    courier_name: str = Field(..., min_length=1, description="Name of the courier")


class VisitorArriveContractor(VisitorRequest):
    """Schema for signing in a contractor"""
    visitor_name: str = Field(..., min_length=1, description="Name of the contractor")
    company: str = Field(..., min_length=1, description="Contractor's company")


class VisitorSignOut(VisitorRequest):
    """Schema for signing out an existing visitor by ID"""
    visitor_id: int = Field(..., description="ID assigned at check-in")


class VisitorResponse(BaseModel):
    """Schema for visitor response"""
    id: int
    name: str
    arrival_time: datetime
    is_on_site: bool
    reason: VisitReason
    meeting_with: Optional[str] = Field(None, description="Employee met (meetings only)")
    contractor_company: Optional[str] = Field(None, description="Approved company (contractors only)")
    departure_time: Optional[datetime] = Field(None, description="Set once the visitor signs out")

    model_config = ConfigDict(from_attributes=True, alias_generator=to_pascal, populate_by_name=True)
