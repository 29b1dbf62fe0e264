# File: registry.py
# Path: app/core/registry.py

import logging

from app.core.config import Settings, settings
from app.models.employee import Employee
from app.services.visitor_registry import VisitorRegistry

logger = logging.getLogger(__name__)


def build_registry(config: Settings = settings) -> VisitorRegistry:
    """
    Create a registry seeded with the configured employee directory
    and approved contractor companies.
    """
    employees = [
        Employee(id=e.id, name=e.name, email=e.email)
        for e in config.seed_employees
    ]
    logger.debug(f"Seeding registry with {len(employees)} employee(s)")
    return VisitorRegistry(employees, config.approved_contractor_companies)


# Process-wide registry, lives until the process exits
registry = build_registry()


def get_registry() -> VisitorRegistry:
    """
    Dependency function for FastAPI endpoints.
    Returns the shared in-memory registry.
    """
    return registry
