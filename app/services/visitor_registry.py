"""
Visitor Registry Service
Holds the employee directory, approved contractor companies and the visitor roster
"""
import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional

from app.core.exceptions import NotApprovedError, NotFoundError
from app.models.employee import Employee
from app.models.visitor import Visitor, VisitReason

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _matches(left: str, right: str) -> bool:
    """Exact, case-insensitive comparison."""
    return left.casefold() == right.casefold()


class VisitorRegistry:
    """
    In-memory visitor registry.

    All reads and writes go through a single lock so that visitor ids stay
    unique and strictly increasing when requests are served from a thread pool.
    """

    def __init__(
        self,
        employees: Iterable[Employee],
        approved_companies: Iterable[str],
        clock: Callable[[], datetime] = utc_now,
    ):
        self._employees: List[Employee] = list(employees)
        self._approved_companies: List[str] = list(approved_companies)
        self._visitors: List[Visitor] = []
        self._next_visitor_id = 1
        self._clock = clock
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def approved_companies(self) -> List[str]:
        return list(self._approved_companies)

    def list_employees(self) -> List[Employee]:
        with self._lock:
            return list(self._employees)

    def list_visitors(self) -> List[Visitor]:
        with self._lock:
            return list(self._visitors)

    def list_on_site_visitors(self) -> List[Visitor]:
        with self._lock:
            return [v for v in self._visitors if v.is_on_site]

    def get_visitor(self, visitor_id: int) -> Visitor:
        with self._lock:
            index = self._index_of(visitor_id)
            if index is None:
                raise NotFoundError(f"Visitor with ID {visitor_id} not found.")
            return self._visitors[index]

    # ------------------------------------------------------------------
    # Check-in / sign-out
    # ------------------------------------------------------------------

    def check_in_for_meeting(self, visitor_name: str, meeting_with: str) -> str:
        """
        Check in a visitor who has come to meet an employee.

        Raises:
            NotFoundError: If no employee matches ``meeting_with``
        """
        with self._lock:
            employee = self._find_employee(meeting_with)
            if employee is None:
                raise NotFoundError(f"Employee '{meeting_with}' not found.")

            visitor = self._add_visitor(
                name=visitor_name,
                reason=VisitReason.MEETING,
                meeting_with=employee.name,
            )

        logger.info(f"[Registry] Visitor {visitor.id} '{visitor_name}' arrived for meeting with '{employee.name}'")
        return f"Visitor '{visitor_name}' has arrived for meeting with '{employee.name}'. Notification sent."

    def check_in_courier(self, courier_name: str) -> str:
        with self._lock:
            visitor = self._add_visitor(name=courier_name, reason=VisitReason.COURIER)

        logger.info(f"[Registry] Visitor {visitor.id} courier '{courier_name}' arrived")
        return (
            f"Courier '{courier_name}' has arrived. Reception notified. "
            "Please leave the parcel at the designated location."
        )

    def check_in_contractor(self, visitor_name: str, company: str) -> str:
        """
        Check in a contractor from an approved company.

        Raises:
            NotApprovedError: If ``company`` is not on the approved list
        """
        with self._lock:
            if not self._is_approved(company):
                raise NotApprovedError(f"Contractor's company '{company}' is not approved.")

            visitor = self._add_visitor(
                name=visitor_name,
                reason=VisitReason.CONTRACTOR,
                contractor_company=company,
            )

        logger.info(f"[Registry] Visitor {visitor.id} contractor '{visitor_name}' from '{company}' arrived")
        return f"Contractor '{visitor_name}' from '{company}' has arrived. Reception notified."

    def sign_out(self, visitor_id: int) -> str:
        """
        Sign a visitor out. Repeating the call for the same id is a no-op.

        Raises:
            NotFoundError: If no visitor with ``visitor_id`` was ever checked in
        """
        with self._lock:
            index = self._index_of(visitor_id)
            if index is None:
                raise NotFoundError(f"Visitor with ID {visitor_id} not found.")

            visitor = self._visitors[index]
            if not visitor.is_on_site:
                return f"Visitor '{visitor.name}' (ID {visitor.id}) is already signed out."

            self._visitors[index] = visitor.signed_out(self._clock())

        logger.info(f"[Registry] Visitor {visitor.id} '{visitor.name}' signed out")
        return f"Visitor '{visitor.name}' (ID {visitor.id}) has been signed out."

    # ------------------------------------------------------------------
    # Internals; callers must hold the lock
    # ------------------------------------------------------------------

    def _find_employee(self, name: str) -> Optional[Employee]:
        return next((e for e in self._employees if _matches(e.name, name)), None)

    def _is_approved(self, company: str) -> bool:
        return any(_matches(c, company) for c in self._approved_companies)

    def _index_of(self, visitor_id: int) -> Optional[int]:
        for index, visitor in enumerate(self._visitors):
            if visitor.id == visitor_id:
                return index
        return None

    def _add_visitor(
        self,
        name: str,
        reason: VisitReason,
        meeting_with: Optional[str] = None,
        contractor_company: Optional[str] = None,
    ) -> Visitor:
        visitor = Visitor(
            id=self._next_visitor_id,
            name=name,
            arrival_time=self._clock(),
            is_on_site=True,
            reason=reason,
            meeting_with=meeting_with,
            contractor_company=contractor_company,
        )
        self._next_visitor_id += 1
        self._visitors.append(visitor)
        return visitor
