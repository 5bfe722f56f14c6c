"""Analytics report container."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List
from uuid import uuid4

from .performance import ClassStatistics, StudentPerformance


def new_run_id() -> str:
    """Short unique id naming a run's report directory and log file."""
    return uuid4().hex[:12]


@dataclass
class AnalyticsReport:
    """Snapshot of rankings and per-course statistics."""

    run_id: str = field(default_factory=new_run_id)
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    rankings: List[StudentPerformance] = field(default_factory=list)
    class_stats: Dict[str, ClassStatistics] = field(default_factory=dict)

    tracked_students: int = 0
    assessment_count: int = 0
