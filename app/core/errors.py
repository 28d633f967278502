class KozaniError(Exception):
    """Base class for errors raised by the Kozani services."""

    status_code = 500


class ValidationError(KozaniError):
    # empty query, missing login fields
    status_code = 400


class AuthError(KozaniError):
    status_code = 401


class DependencyError(KozaniError):
    """The store or the generation service failed."""

    status_code = 500


class PersistenceWarning(Warning):
    """History append failed. Logged, never surfaced to the caller."""
