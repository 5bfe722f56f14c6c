"""Course enrollment queues with fixed capacity."""

import threading
from collections import deque
from typing import Deque, Dict, List, Optional

from loguru import logger

from ..errors import CourseNotFoundError
from ..registry.students import Student


class CourseScheduler:
    """FIFO enrollment queue per course.

    A registration is accepted while the course queue is below capacity and
    rejected (not queued) once it is full.
    """

    def __init__(self) -> None:
        self._queues: Dict[str, Deque[Student]] = {}
        self._capacities: Dict[str, int] = {}
        self._lock = threading.Lock()

    def create_course(self, code: str, capacity: int) -> None:
        """Create a course, or update the capacity of an existing one.

        Args:
            code: Course code.
            capacity: Maximum number of queued students.

        Raises:
            ValueError: If code is empty or capacity is negative.
        """
        if not code or capacity < 0:
            raise ValueError(f"Invalid course or capacity: {code!r}, {capacity}")

        with self._lock:
            self._queues.setdefault(code, deque())
            self._capacities[code] = capacity

        logger.debug(f"Course {code} available with capacity {capacity}")

    def register_student(self, code: str, student: Student) -> bool:
        """Queue a student for a course.

        Returns:
            True if queued, False if the course is full.

        Raises:
            CourseNotFoundError: If the course does not exist.
        """
        with self._lock:
            queue = self._require_queue(code)
            capacity = self._capacities[code]
            if len(queue) >= capacity:
                logger.warning(
                    f"Registration of {student.student_id} for {code} rejected, "
                    f"course full ({capacity})"
                )
                return False
            queue.append(student)
            return True

    def dequeue_next(self, code: str) -> Optional[Student]:
        """Remove and return the earliest queued student, or None if empty."""
        with self._lock:
            queue = self._require_queue(code)
            return queue.popleft() if queue else None

    def queued_count(self, code: str) -> int:
        with self._lock:
            return len(self._require_queue(code))

    def roster(self, code: str) -> List[str]:
        """Ids of queued students in registration order."""
        with self._lock:
            return [s.student_id for s in self._require_queue(code)]

    def course_codes(self) -> List[str]:
        """Codes of all created courses in creation order."""
        with self._lock:
            return list(self._queues)

    def _require_queue(self, code: str) -> Deque[Student]:
        queue = self._queues.get(code)
        if queue is None:
            raise CourseNotFoundError(f"Course not found: {code}")
        return queue
