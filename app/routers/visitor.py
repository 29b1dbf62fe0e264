from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
import logging

from app.core.exceptions import NotApprovedError, NotFoundError
from app.core.registry import get_registry
from app.schemas.visitor import (
    VisitorArriveMeeting,
    VisitorArriveCourier,
    VisitorArriveContractor,
    VisitorSignOut,
    VisitorResponse,
)
from app.services.visitor_registry import VisitorRegistry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/visitors", tags=["Visitors"])


@router.get("", response_model=List[VisitorResponse])
def list_visitors(registry: VisitorRegistry = Depends(get_registry)):
    """Get every visitor record, on-site and departed, in check-in order."""
    return registry.list_visitors()


@router.get("/on-site", response_model=List[VisitorResponse])
def list_on_site_visitors(registry: VisitorRegistry = Depends(get_registry)):
    """Get visitors who have checked in and not yet signed out."""
    return registry.list_on_site_visitors()


@router.get("/{visitor_id}", response_model=VisitorResponse)
def get_visitor(visitor_id: int, registry: VisitorRegistry = Depends(get_registry)):
    """
    Get a single visitor record by ID.

    Raises:
        HTTPException: 404 if the visitor ID was never issued
    """
    try:
        return registry.get_visitor(visitor_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/arrive-meeting", response_model=str)
def arrive_meeting(
    request: VisitorArriveMeeting,
    registry: VisitorRegistry = Depends(get_registry)
):
    """
    Sign in a visitor who has come to meet an employee.
    The employee name is matched case-insensitively.

    Args:
        request: Visitor name and the employee to meet
        registry: Visitor registry

    Returns:
        Confirmation message

    Raises:
        HTTPException: 404 if no employee matches
    """
    try:
        return registry.check_in_for_meeting(request.visitor_name, request.meeting_with)
    except NotFoundError as e:
        logger.warning(f"[Visitor] Meeting check-in rejected for '{request.visitor_name}': {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/arrive-courier", response_model=str)
def arrive_courier(
    request: VisitorArriveCourier,
    registry: VisitorRegistry = Depends(get_registry)
):
    """Sign in a courier."""
    return registry.check_in_courier(request.courier_name)


@router.post("/arrive-contractor", response_model=str)
def arrive_contractor(
    request: VisitorArriveContractor,
    registry: VisitorRegistry = Depends(get_registry)
):
    """
    Sign in a contractor. The company must be on the approved list.

    Raises:
        HTTPException: 400 if the company is not approved
    """
    try:
        return registry.check_in_contractor(request.visitor_name, request.company)
    except NotApprovedError as e:
        logger.warning(f"[Visitor] Contractor check-in rejected for '{request.visitor_name}': {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/sign-out", response_model=str)
def sign_out(
    request: VisitorSignOut,
    registry: VisitorRegistry = Depends(get_registry)
):
    """
    Sign out a visitor by ID. Signing out twice reports the visitor
    as already signed out.

    Raises:
        HTTPException: 404 if the visitor ID was never issued
    """
    try:
        return registry.sign_out(request.visitor_id)
    except NotFoundError as e:
        logger.warning(f"[Visitor] Sign-out rejected: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
