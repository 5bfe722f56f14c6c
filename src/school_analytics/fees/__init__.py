"""Fee tracking."""

from .tracker import FeeRecord, FeeTracker

__all__ = ["FeeRecord", "FeeTracker"]
