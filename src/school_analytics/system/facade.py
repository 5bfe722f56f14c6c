"""Composition root wiring the school components together.

The system is an ordinary object: construct one (directly or from config)
and pass it to whatever needs it.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from ..analytics import AnalyticsReport, ClassStatistics, PerformanceAnalyzer, new_run_id
from ..config import SchoolConfig
from ..enrollment import CourseScheduler
from ..fees import FeeTracker
from ..library import Book, LibrarySystem
from ..registry import Student, StudentRegistry


@dataclass
class SeedSummary:
    """Outcome of loading seed data from configuration."""

    students: int = 0
    enrollments_accepted: int = 0
    enrollments_rejected: List[str] = field(default_factory=list)  # "CODE:student_id"
    books: int = 0
    marks: int = 0
    payments: int = 0
    loans_opened: int = 0
    loans_rejected: List[str] = field(default_factory=list)  # "student_id:isbn"


class SchoolSystem:
    """Holds one instance of every school component."""

    def __init__(
        self,
        analyzer: PerformanceAnalyzer,
        registry: Optional[StudentRegistry] = None,
        scheduler: Optional[CourseScheduler] = None,
        fees: Optional[FeeTracker] = None,
        library: Optional[LibrarySystem] = None,
    ) -> None:
        """Initialize school system.

        Args:
            analyzer: Performance analytics engine.
            registry: Student registry (new empty one if omitted).
            scheduler: Course scheduler (new empty one if omitted).
            fees: Fee tracker (new empty one if omitted).
            library: Library system (new empty one if omitted).
        """
        self.analyzer = analyzer
        self.registry = registry or StudentRegistry()
        self.scheduler = scheduler or CourseScheduler()
        self.fees = fees or FeeTracker()
        self.library = library or LibrarySystem()

    @classmethod
    def from_config(cls, config: SchoolConfig) -> "SchoolSystem":
        """Build an empty system sized from configuration."""
        return cls(analyzer=PerformanceAnalyzer(config.analytics.assessment_count))

    def seed(self, config: SchoolConfig) -> SeedSummary:
        """Load students, courses, books, marks, payments and loans.

        Enrollments past a course's capacity and loans of books already out
        are rejected and reported in the summary, not raised.
        """
        summary = SeedSummary()

        for s in config.students:
            self.registry.add_student(
                Student(
                    student_id=s.student_id,
                    first_name=s.first_name,
                    last_name=s.last_name,
                    personal_data=s.personal_data,
                )
            )
            summary.students += 1

        for code, course in config.courses.items():
            self.scheduler.create_course(code, course.capacity)
            for student_id in course.roster:
                student = self.registry.find_student(student_id)
                if self.scheduler.register_student(code, student):
                    summary.enrollments_accepted += 1
                else:
                    summary.enrollments_rejected.append(f"{code}:{student_id}")

        for b in config.books:
            self.library.add_book(Book(isbn=b.isbn, title=b.title))
            summary.books += 1

        for student_id, marks in config.marks.items():
            for index, value in enumerate(marks):
                self.analyzer.record_mark(student_id, index, value)
                summary.marks += 1

        for p in config.payments:
            self.fees.record_payment(p.payment_id, p.student_id, p.amount, p.timestamp)
            summary.payments += 1

        for loan in config.loans:
            if self.library.borrow_book(loan.student_id, loan.isbn):
                summary.loans_opened += 1
            else:
                summary.loans_rejected.append(f"{loan.student_id}:{loan.isbn}")

        logger.info(
            f"Seeded {summary.students} students, {summary.enrollments_accepted} enrollments "
            f"({len(summary.enrollments_rejected)} rejected), {summary.marks} marks, "
            f"{summary.payments} payments, {summary.loans_opened} loans"
        )

        return summary

    def course_statistics(self, code: str) -> ClassStatistics:
        """Anonymized statistics over a course's enrolled students.

        Raises:
            CourseNotFoundError: If the course does not exist.
        """
        return self.analyzer.get_anonymized_class_stats(self.scheduler.roster(code))

    def build_report(self, top_k: int, run_id: Optional[str] = None) -> AnalyticsReport:
        """Snapshot top-K rankings and statistics for every course.

        Args:
            top_k: Number of top performers to rank.
            run_id: Report id; a fresh one is generated when omitted.
        """
        report = AnalyticsReport(
            run_id=run_id or new_run_id(),
            rankings=self.analyzer.top_k(top_k),
            class_stats={code: self.course_statistics(code) for code in self.scheduler.course_codes()},
            tracked_students=self.analyzer.tracked_count(),
            assessment_count=self.analyzer.assessment_count,
        )

        logger.info(
            f"Built report {report.run_id}: {len(report.rankings)} ranked, "
            f"{len(report.class_stats)} courses"
        )

        return report
