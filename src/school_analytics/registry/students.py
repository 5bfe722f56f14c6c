"""Student records and the registry that holds them."""

import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from loguru import logger

from ..errors import DuplicateStudentError, PermissionDeniedError
from .users import Permission, User


@dataclass
class Student:
    """A student with permission-guarded personal data."""

    student_id: str
    first_name: str
    last_name: str
    personal_data: Optional[str] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.student_id:
            raise ValueError("student_id must not be empty")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def get_personal_data(self, user: Optional[User]) -> Optional[str]:
        """Return personal data if the user may view it.

        Raises:
            PermissionDeniedError: If user is None or lacks VIEW_PERSONAL.
        """
        if user is not None and user.has_permission(Permission.VIEW_PERSONAL):
            return self.personal_data
        raise PermissionDeniedError("Insufficient permissions to view personal data")

    def __str__(self) -> str:
        return f"{self.student_id}: {self.full_name}"


class StudentRegistry:
    """Student lookup by id, preserving insertion order."""

    def __init__(self) -> None:
        self._students: Dict[str, Student] = {}
        self._lock = threading.Lock()

    def add_student(self, student: Student) -> None:
        """Add a student.

        Raises:
            DuplicateStudentError: If the id is already registered.
        """
        with self._lock:
            if student.student_id in self._students:
                raise DuplicateStudentError(f"Student already exists: {student.student_id}")
            self._students[student.student_id] = student

        logger.debug(f"Registered student {student.student_id}")

    def find_student(self, student_id: str) -> Optional[Student]:
        with self._lock:
            return self._students.get(student_id)

    def list_students(self) -> List[Student]:
        """All students in the order they were added."""
        with self._lock:
            return list(self._students.values())

    def size(self) -> int:
        with self._lock:
            return len(self._students)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, student_id: object) -> bool:
        with self._lock:
            return student_id in self._students
