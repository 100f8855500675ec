"""Domain exceptions raised by the service layer and mapped to HTTP by the routers."""


class CareersError(Exception):
    """Base class for service-layer errors."""
    pass


class NotFoundError(CareersError):
    """Raised when a referenced resource does not exist."""

    def __init__(self, resource: str, resource_id=None):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} not found")


class NotAuthorizedError(CareersError):
    """Raised when the caller's company does not own the resource."""

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message)


class ConflictError(CareersError):
    """Raised on uniqueness violations (slug, email)."""
    pass


class StaleVersionError(ConflictError):
    """Raised when a reorder carries an outdated sections_version."""

    def __init__(self, expected: int, current: int):
        self.expected = expected
        self.current = current
        super().__init__(
            f"Sections were modified by someone else (expected version {expected}, current {current})"
        )
