from app.models.employee import Employee
from app.models.visitor import Visitor, VisitReason

__all__ = ["Employee", "Visitor", "VisitReason"]
