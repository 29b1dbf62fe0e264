from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional
import enum


class VisitReason(str, enum.Enum):
    """Enum for the reason a visitor is on site"""
    MEETING = "Meeting"
    COURIER = "Courier"
    CONTRACTOR = "Contractor"


@dataclass(frozen=True)
class Visitor:
    """
    Visitor record held in the registry roster.
    Records are immutable; signing out produces a new record for the same id.
    """
    id: int
    name: str
    arrival_time: datetime
    is_on_site: bool
    reason: VisitReason
    meeting_with: Optional[str] = None  # employee's canonical name, meetings only
    contractor_company: Optional[str] = None  # contractors only
    departure_time: Optional[datetime] = None

    def signed_out(self, departure_time: datetime) -> "Visitor":
        return replace(self, is_on_site=False, departure_time=departure_time)

    def __repr__(self):
        return f"<Visitor(id={self.id}, name='{self.name}', reason='{self.reason.value}', on_site={self.is_on_site})>"
