"""Exception hierarchy shared by all school components."""


class SchoolSystemError(Exception):
    """Base class for all errors raised by this package."""


class InvalidConfigurationError(SchoolSystemError, ValueError):
    """Component constructed with unusable parameters."""


class OutOfRangeError(SchoolSystemError, IndexError):
    """Assessment index outside the configured columns."""


class NotFoundError(SchoolSystemError, LookupError):
    """Lookup on an identifier that is not tracked."""


class CourseNotFoundError(NotFoundError):
    """Course code has not been created."""


class BookNotFoundError(NotFoundError):
    """ISBN is not in the catalog."""


class DuplicateStudentError(SchoolSystemError, ValueError):
    """Student id already present in the registry."""


class PermissionDeniedError(SchoolSystemError, PermissionError):
    """User lacks the permission required for an operation."""
