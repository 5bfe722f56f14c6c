"""Student performance analytics.

Keeps every student's marks in a dense matrix and answers three questions:
a student's average, the top-K students by average, and aggregate statistics
for a cohort that never reveal which students contributed.
"""

import heapq
import operator
import threading
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from ..errors import NotFoundError, OutOfRangeError
from .matrix import MarkMatrix


@dataclass(frozen=True)
class StudentPerformance:
    """A student paired with their average mark."""

    student_id: str
    average: float

    def __str__(self) -> str:
        return f"{self.student_id} -> {self.average:.2f}"


@dataclass(frozen=True)
class ClassStatistics:
    """Anonymized aggregate statistics over a cohort's averages."""

    average: float = 0.0
    median: float = 0.0
    std_dev: float = 0.0
    count: int = 0

    def __str__(self) -> str:
        return (
            f"ClassStats{{avg={self.average:.2f}, median={self.median:.2f}, "
            f"stdDev={self.std_dev:.2f}, n={self.count}}}"
        )


class PerformanceAnalyzer:
    """Grade matrix with top-K selection and anonymized cohort statistics.

    Each student is assigned a matrix row the first time they are seen.
    Rows are never removed or reassigned. All public methods hold a single
    lock so the row map and the matrix are always observed together.

    Unset marks are stored as 0.0 and count towards every average.
    """

    def __init__(self, assessment_count: int) -> None:
        """Initialize performance analyzer.

        Args:
            assessment_count: Number of assessments per student.

        Raises:
            InvalidConfigurationError: If assessment_count <= 0.
        """
        self._matrix = MarkMatrix(assessment_count)
        self._index: Dict[str, int] = {}
        self._students: List[str] = []
        self._lock = threading.Lock()

    @property
    def assessment_count(self) -> int:
        """Number of assessments (matrix columns)."""
        return self._matrix.columns

    def __len__(self) -> int:
        return self.tracked_count()

    def tracked_count(self) -> int:
        """Number of students with an assigned row."""
        with self._lock:
            return len(self._students)

    def is_tracked(self, student_id: str) -> bool:
        """Check if a student has an assigned row."""
        with self._lock:
            return student_id in self._index

    def row_index(self, student_id: str) -> int:
        """Row assigned to a student.

        Raises:
            NotFoundError: If the student is not tracked.
        """
        with self._lock:
            return self._require_row(student_id)

    def student_ids(self) -> List[str]:
        """Tracked students in row order."""
        with self._lock:
            return list(self._students)

    def register_student(self, student_id: str) -> None:
        """Assign a row to a student if they don't already have one."""
        with self._lock:
            self._register(student_id)

    def record_mark(self, student_id: str, assessment_index: int, value: float) -> None:
        """Record a mark, overwriting any previous value for that assessment.

        Unknown students are registered first.

        Args:
            student_id: Student identifier.
            assessment_index: Column in [0, assessment_count).
            value: Mark value (not bounded).

        Raises:
            OutOfRangeError: If assessment_index is not an integer in
                [0, assessment_count).
            TypeError, ValueError: If value is not a number.
        """
        # Validate everything before a row can be assigned
        try:
            index = operator.index(assessment_index)
        except TypeError:
            raise OutOfRangeError(
                f"Assessment index must be an integer, got {assessment_index!r}"
            ) from None
        mark = float(value)

        with self._lock:
            if not 0 <= index < self._matrix.columns:
                raise OutOfRangeError(
                    f"Invalid assessment index {index}, "
                    f"expected 0 <= index < {self._matrix.columns}"
                )
            row = self._register(student_id)
            self._matrix.set(row, index, mark)

    def get_average(self, student_id: str) -> float:
        """Average mark across all assessments.

        Raises:
            NotFoundError: If the student is not tracked.
        """
        with self._lock:
            return self._matrix.row_mean(self._require_row(student_id))

    def top_k(self, k: int) -> List[StudentPerformance]:
        """Return the k students with the highest averages.

        Uses a size-bounded min-heap, O(N log k). Ties go to the student
        registered first.

        Args:
            k: Number of students to return.

        Returns:
            Up to k results sorted by average, highest first.
        """
        if k <= 0:
            return []

        with self._lock:
            means = self._matrix.row_means()
            # (average, -row, id): heap minimum is the lowest average,
            # and among equal averages the most recently registered
            heap: List[Tuple[float, int, str]] = []

            for row, student_id in enumerate(self._students):
                entry = (float(means[row]), -row, student_id)
                if len(heap) < k:
                    heapq.heappush(heap, entry)
                elif heap[0][0] < entry[0]:
                    heapq.heapreplace(heap, entry)

        heap.sort(key=lambda e: (-e[0], -e[1]))
        return [StudentPerformance(student_id=sid, average=avg) for avg, _, sid in heap]

    def get_anonymized_class_stats(
        self, student_ids: Optional[Iterable[str]]
    ) -> ClassStatistics:
        """Aggregate statistics over a cohort's averages.

        Untracked ids are skipped silently. A missing, empty or fully
        untracked cohort yields all-zero statistics. A bare string is one id.

        Args:
            student_ids: Cohort members, e.g. a course roster.

        Returns:
            Mean, median, population standard deviation and count.
        """
        if student_ids is None:
            return ClassStatistics()
        if isinstance(student_ids, str):
            student_ids = [student_ids]

        with self._lock:
            rows = [self._index[sid] for sid in student_ids if sid in self._index]
            if not rows:
                return ClassStatistics()
            averages = self._matrix.row_means()[rows]

        return ClassStatistics(
            average=float(np.mean(averages)),
            median=float(np.median(averages)),
            std_dev=float(np.std(averages)),
            count=len(averages),
        )

    def _register(self, student_id: str) -> int:
        row = self._index.get(student_id)
        if row is not None:
            return row

        row = self._matrix.append_row()
        self._index[student_id] = row
        self._students.append(student_id)
        return row

    def _require_row(self, student_id: str) -> int:
        row = self._index.get(student_id)
        if row is None:
            raise NotFoundError(f"Student not tracked: {student_id}")
        return row
