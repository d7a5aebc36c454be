"""Domain errors raised by the service layer and mapped to HTTP statuses in the routers."""


class ScrimFinderError(Exception):
    """Base class for domain errors."""


class NotFoundError(ScrimFinderError):
    """A referenced team, scrim or user does not exist."""
