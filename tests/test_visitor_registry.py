import threading

import pytest

from app.core.exceptions import NotApprovedError, NotFoundError
from app.models.employee import Employee
from app.models.visitor import VisitReason
from app.services.visitor_registry import VisitorRegistry


def test_list_employees_preserves_seed_order(registry):
    assert [e.name for e in registry.list_employees()] == ["Alice", "Bob", "Charlie"]


def test_new_registry_has_no_visitors(registry):
    assert registry.list_visitors() == []
    assert registry.list_on_site_visitors() == []


@pytest.mark.parametrize("meeting_with", ["Alice", "alice", "ALICE", "aLiCe"])
def test_meeting_check_in_matches_employee_case_insensitively(registry, meeting_with):
    message = registry.check_in_for_meeting("Dan", meeting_with)

    visitor = registry.list_visitors()[0]
    assert visitor.reason is VisitReason.MEETING
    assert visitor.meeting_with == "Alice"
    assert visitor.contractor_company is None
    assert visitor.is_on_site is True
    assert visitor.departure_time is None
    assert message == "Visitor 'Dan' has arrived for meeting with 'Alice'. Notification sent."


def test_meeting_check_in_unknown_employee_raises_not_found(registry):
    with pytest.raises(NotFoundError, match="Employee 'Zed' not found."):
        registry.check_in_for_meeting("Dan", "Zed")
    assert registry.list_visitors() == []


def test_meeting_check_in_requires_exact_name(registry):
    with pytest.raises(NotFoundError):
        registry.check_in_for_meeting("Dan", "Ali")


def test_meeting_check_in_first_matching_employee_wins(clock):
    employees = [
        Employee(id=1, name="Sam", email="sam.one@example.com"),
        Employee(id=2, name="SAM", email="sam.two@example.com"),
    ]
    registry = VisitorRegistry(employees, [], clock=clock)

    registry.check_in_for_meeting("Dan", "sam")

    assert registry.list_visitors()[0].meeting_with == "Sam"


def test_courier_check_in(registry):
    message = registry.check_in_courier("Pat")

    visitor = registry.list_visitors()[0]
    assert visitor.reason is VisitReason.COURIER
    assert visitor.meeting_with is None
    assert visitor.contractor_company is None
    assert "Courier 'Pat' has arrived" in message


@pytest.mark.parametrize("company", ["Acme Plumbing", "acme plumbing", "ACME PLUMBING"])
def test_contractor_check_in_approved_company(registry, company):
    message = registry.check_in_contractor("Eve", company)

    visitor = registry.list_visitors()[0]
    assert visitor.reason is VisitReason.CONTRACTOR
    assert visitor.contractor_company == company
    assert visitor.meeting_with is None
    assert message == f"Contractor 'Eve' from '{company}' has arrived. Reception notified."


def test_contractor_check_in_unapproved_company_is_not_stored(registry):
    with pytest.raises(NotApprovedError, match="Contractor's company 'Unknown Co' is not approved."):
        registry.check_in_contractor("Eve", "Unknown Co")
    assert registry.list_visitors() == []


def test_rejected_check_in_does_not_consume_an_id(registry):
    with pytest.raises(NotApprovedError):
        registry.check_in_contractor("Eve", "Unknown Co")
    registry.check_in_courier("Pat")

    assert registry.list_visitors()[0].id == 1


def test_visitor_ids_are_unique_and_increasing(registry):
    registry.check_in_for_meeting("Dan", "Bob")
    registry.check_in_courier("Pat")
    registry.check_in_contractor("Eve", "XYZ Electrical")
    registry.sign_out(2)
    registry.check_in_courier("Quinn")

    ids = [v.id for v in registry.list_visitors()]
    assert ids == [1, 2, 3, 4]


def test_sign_out_sets_departure_time(registry):
    registry.check_in_courier("Pat")

    message = registry.sign_out(1)

    visitor = registry.get_visitor(1)
    assert message == "Visitor 'Pat' (ID 1) has been signed out."
    assert visitor.is_on_site is False
    assert visitor.departure_time is not None
    assert visitor.departure_time >= visitor.arrival_time
    assert visitor.name == "Pat"
    assert visitor.reason is VisitReason.COURIER


def test_sign_out_is_idempotent(registry):
    registry.check_in_courier("Pat")
    registry.sign_out(1)
    departed_at = registry.get_visitor(1).departure_time

    message = registry.sign_out(1)

    assert message == "Visitor 'Pat' (ID 1) is already signed out."
    assert registry.get_visitor(1).departure_time == departed_at


def test_sign_out_unknown_visitor_raises_not_found(registry):
    with pytest.raises(NotFoundError, match="Visitor with ID 42 not found."):
        registry.sign_out(42)


def test_sign_out_keeps_roster_order(registry):
    registry.check_in_courier("Pat")
    registry.check_in_courier("Quinn")

    registry.sign_out(1)

    assert [v.name for v in registry.list_visitors()] == ["Pat", "Quinn"]


def test_on_site_list_tracks_sign_outs(registry):
    registry.check_in_for_meeting("Dan", "Alice")
    registry.check_in_courier("Pat")
    registry.check_in_contractor("Eve", "Best Builders")
    registry.sign_out(2)
    registry.check_in_courier("Quinn")
    registry.sign_out(1)

    assert [v.name for v in registry.list_on_site_visitors()] == ["Eve", "Quinn"]
    assert len(registry.list_visitors()) == 4


def test_get_unknown_visitor_raises_not_found(registry):
    with pytest.raises(NotFoundError):
        registry.get_visitor(7)


def test_listing_returns_snapshot(registry):
    registry.check_in_courier("Pat")
    snapshot = registry.list_visitors()

    registry.check_in_courier("Quinn")

    assert len(snapshot) == 1


def test_concurrent_check_ins_assign_distinct_ids(registry):
    def check_in_many(prefix):
        for i in range(50):
            registry.check_in_courier(f"{prefix}-{i}")

    threads = [threading.Thread(target=check_in_many, args=(f"t{n}",)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [v.id for v in registry.list_visitors()]
    assert ids == list(range(1, 401))
