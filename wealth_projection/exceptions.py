"""Exception hierarchy for wealth-projection."""


class ProjectionError(Exception):
    """Base exception for all wealth-projection errors."""


class SimulationNotFoundError(ProjectionError, LookupError):
    """Raised when a referenced simulation does not exist."""


class InvalidProjectionRequestError(ProjectionError, ValueError):
    """Raised when a projection request or simulation snapshot fails validation."""


class ConfigurationError(ProjectionError):
    """Raised when configuration is invalid."""
