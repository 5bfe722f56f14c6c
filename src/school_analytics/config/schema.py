"""Pydantic configuration schemas for the school system.

A single YAML file describes the analytics engine parameters, the seed data
used by the demo (students, courses, books, marks, payments, loans) and where
reports go. It is deserialized into these models and validated on load.
"""

from datetime import datetime
from pathlib import Path
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from ruamel.yaml import YAML


class AnalyticsConfig(BaseModel):
    """Performance analytics engine configuration."""

    assessment_count: int = Field(3, gt=0, description="Number of assessments (matrix columns)")
    top_k: int = Field(3, ge=0, description="Number of top performers to report")


class StudentConfig(BaseModel):
    """A student to add to the registry."""

    student_id: str = Field(..., min_length=1, description="Unique student identifier")
    first_name: str = Field(..., description="Given name")
    last_name: str = Field(..., description="Family name")
    personal_data: Optional[str] = Field(
        None, description="Sensitive data (DOB, national ID), permission-guarded"
    )


class CourseConfig(BaseModel):
    """A course with its enrollment capacity and requested roster."""

    capacity: int = Field(..., ge=0, description="Maximum number of enrolled students")
    roster: List[str] = Field(
        default_factory=list, description="Student ids to enroll, in request order"
    )


class BookConfig(BaseModel):
    """A library catalog entry."""

    isbn: str = Field(..., min_length=1, description="Book ISBN")
    title: str = Field("", description="Book title")


class PaymentConfig(BaseModel):
    """A fee payment to record."""

    payment_id: str = Field(..., min_length=1, description="Payment reference")
    student_id: str = Field(..., description="Paying student")
    amount: float = Field(..., ge=0.0, description="Amount paid")
    timestamp: datetime = Field(..., description="Time the payment was received")


class LoanConfig(BaseModel):
    """A book loan to open during seeding."""

    student_id: str = Field(..., description="Borrowing student")
    isbn: str = Field(..., description="Borrowed book ISBN")


class ReportConfig(BaseModel):
    """Report export configuration."""

    output_dir: Path = Field(Path("runs"), description="Output directory for reports")
    save_rankings: bool = Field(True, description="Save top-K ranking table")
    save_class_stats: bool = Field(True, description="Save per-course anonymized statistics")


class SchoolConfig(BaseModel):
    """Root school configuration."""

    name: str = Field("School", description="School name")
    version: str = Field("1.0", description="Configuration version")

    analytics: AnalyticsConfig = Field(default_factory=AnalyticsConfig)

    # Seed data
    students: List[StudentConfig] = Field(default_factory=list)
    courses: Dict[str, CourseConfig] = Field(default_factory=dict)
    books: List[BookConfig] = Field(default_factory=list)
    marks: Dict[str, List[float]] = Field(
        default_factory=dict, description="Marks per student, indexed by assessment"
    )
    payments: List[PaymentConfig] = Field(default_factory=list)
    loans: List[LoanConfig] = Field(default_factory=list)

    report: ReportConfig = Field(default_factory=ReportConfig)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", description="Logging level"
    )
    log_to_file: bool = Field(True, description="Write logs to file")
    log_dir: Path = Field(Path("logs"), description="Directory for run log files")
    log_serialize: bool = Field(False, description="Write log files as JSON lines")

    @field_validator("courses")
    @classmethod
    def normalize_course_codes(cls, v: Dict[str, CourseConfig]) -> Dict[str, CourseConfig]:
        """Ensure course codes are uppercase and unique ignoring case."""
        normalized: Dict[str, CourseConfig] = {}
        for code, course in v.items():
            key = code.upper()
            if key in normalized:
                raise ValueError(f"Duplicate course code (case-insensitive): {code}")
            normalized[key] = course
        return normalized

    @model_validator(mode="after")
    def validate_references(self) -> "SchoolConfig":
        """Cross-field validation of seed data."""
        student_ids = [s.student_id for s in self.students]
        known = set(student_ids)
        if len(known) != len(student_ids):
            raise ValueError("student_id values must be unique")

        for code, course in self.courses.items():
            unknown = [sid for sid in course.roster if sid not in known]
            if unknown:
                raise ValueError(f"Course {code} roster has unknown students: {unknown}")

        for sid, marks in self.marks.items():
            if sid not in known:
                raise ValueError(f"Marks given for unknown student: {sid}")
            if len(marks) > self.analytics.assessment_count:
                raise ValueError(
                    f"Student {sid} has {len(marks)} marks, "
                    f"assessment_count is {self.analytics.assessment_count}"
                )

        for payment in self.payments:
            if payment.student_id not in known:
                raise ValueError(f"Payment {payment.payment_id} references unknown student")

        isbns = {b.isbn for b in self.books}
        for loan in self.loans:
            if loan.student_id not in known:
                raise ValueError(f"Loan references unknown student: {loan.student_id}")
            if loan.isbn not in isbns:
                raise ValueError(f"Loan references unknown book: {loan.isbn}")

        return self


def load_config(path: Path | str) -> SchoolConfig:
    """Load and validate school configuration from YAML.

    Args:
        path: Path to YAML configuration file.

    Returns:
        Validated SchoolConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    yaml = YAML(typ="safe")
    with path.open("r") as f:
        raw_config = yaml.load(f) or {}

    try:
        config = SchoolConfig(**raw_config)
    except Exception as e:
        raise ValueError(f"Config validation failed: {e}") from e

    return config
