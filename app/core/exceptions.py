class RegistryError(Exception):
    """Base exception for visitor registry business rule violations."""


class NotFoundError(RegistryError):
    """Raised when a referenced employee or visitor does not exist."""


class NotApprovedError(RegistryError):
    """Raised when a contractor's company is not on the approved list."""
