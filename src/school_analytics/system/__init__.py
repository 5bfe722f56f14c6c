"""School system composition."""

from .facade import SchoolSystem, SeedSummary

__all__ = ["SchoolSystem", "SeedSummary"]
