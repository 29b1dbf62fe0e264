from typing import List
from fastapi import APIRouter, Depends

from app.core.registry import get_registry
from app.schemas.employee import EmployeeResponse
from app.services.visitor_registry import VisitorRegistry


router = APIRouter(prefix="/employees", tags=["Employees"])


@router.get("", response_model=List[EmployeeResponse])
def list_employees(registry: VisitorRegistry = Depends(get_registry)):
    """Get the employee directory in seed order."""
    return registry.list_employees()
