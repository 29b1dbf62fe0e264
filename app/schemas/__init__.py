from app.schemas.employee import EmployeeResponse
from app.schemas.visitor import (
    VisitorArriveMeeting,
    VisitorArriveCourier,
    VisitorArriveContractor,
    VisitorSignOut,
    VisitorResponse,
)

__all__ = [
    "EmployeeResponse",
    "VisitorArriveMeeting",
    "VisitorArriveCourier",
    "VisitorArriveContractor",
    "VisitorSignOut",
    "VisitorResponse",
]
