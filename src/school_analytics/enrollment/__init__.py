"""Course enrollment."""

from .scheduler import CourseScheduler

__all__ = ["CourseScheduler"]
