"""Test configuration loading and validation."""

import pytest
from pathlib import Path
from school_analytics.config import AnalyticsConfig, SchoolConfig, load_config


MINIMAL_YAML = """
name: Test_School
version: "1.0"

analytics:
  assessment_count: 2
  top_k: 1

students:
  - student_id: S001
    first_name: Alice
    last_name: Mwangi
  - student_id: S002
    first_name: Brian
    last_name: Otieno

courses:
  cs101:
    capacity: 1
    roster: [S001, S002]

marks:
  S001: [80, 90]
  S002: [70]

payments:
  - payment_id: P100
    student_id: S001
    amount: 5000.0
    timestamp: "2024-01-15T09:00:00"
"""


def test_analytics_config_validation():
    """Test analytics config validation."""
    config = AnalyticsConfig(assessment_count=5, top_k=0)
    assert config.assessment_count == 5

    # Invalid: no assessments
    with pytest.raises(ValueError):
        AnalyticsConfig(assessment_count=0)

    with pytest.raises(ValueError):
        AnalyticsConfig(top_k=-1)


def test_config_loading(tmp_path: Path):
    """Test loading config from YAML."""
    config_file = tmp_path / "school.yaml"
    config_file.write_text(MINIMAL_YAML)

    config = load_config(config_file)

    assert config.name == "Test_School"
    assert config.analytics.assessment_count == 2
    assert "CS101" in config.courses
    assert config.courses["CS101"].roster == ["S001", "S002"]
    assert config.marks["S002"] == [70.0]
    assert config.payments[0].timestamp.year == 2024


def test_config_defaults():
    """Test an empty config is valid."""
    config = SchoolConfig()

    assert config.analytics.assessment_count == 3
    assert config.students == []
    assert config.report.output_dir == Path("runs")


def test_unknown_roster_student():
    """Test rosters must reference configured students."""
    with pytest.raises(ValueError, match="unknown students"):
        SchoolConfig(
            students=[{"student_id": "S001", "first_name": "A", "last_name": "B"}],
            courses={"CS101": {"capacity": 2, "roster": ["S001", "S404"]}},
        )


def test_duplicate_course_codes_ignoring_case():
    """Test course codes differing only in case are rejected."""
    with pytest.raises(ValueError, match="Duplicate course code"):
        SchoolConfig(
            courses={
                "cs101": {"capacity": 1},
                "CS101": {"capacity": 5},
            },
        )


def test_duplicate_students():
    """Test student ids must be unique."""
    with pytest.raises(ValueError, match="unique"):
        SchoolConfig(
            students=[
                {"student_id": "S001", "first_name": "A", "last_name": "B"},
                {"student_id": "S001", "first_name": "C", "last_name": "D"},
            ],
        )


def test_too_many_marks():
    """Test mark lists cannot exceed the assessment count."""
    with pytest.raises(ValueError, match="assessment_count is 2"):
        SchoolConfig(
            analytics={"assessment_count": 2},
            students=[{"student_id": "S001", "first_name": "A", "last_name": "B"}],
            marks={"S001": [1, 2, 3]},
        )


def test_loan_of_unknown_book():
    """Test loans must reference catalog books."""
    with pytest.raises(ValueError, match="unknown book"):
        SchoolConfig(
            students=[{"student_id": "S001", "first_name": "A", "last_name": "B"}],
            loans=[{"student_id": "S001", "isbn": "978-404"}],
        )


def test_missing_config_file(tmp_path: Path):
    """Test missing file error."""
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_invalid_config_file(tmp_path: Path):
    """Test validation failures are wrapped."""
    config_file = tmp_path / "bad.yaml"
    config_file.write_text("analytics:\n  assessment_count: 0\n")

    with pytest.raises(ValueError, match="Config validation failed"):
        load_config(config_file)


def test_default_config_loads():
    """Test the bundled demo config is valid."""
    config = load_config(Path(__file__).parents[2] / "config" / "default.yaml")

    assert config.analytics.assessment_count == 3
    assert len(config.students) == 3
    assert config.courses["CS101"].capacity == 2
