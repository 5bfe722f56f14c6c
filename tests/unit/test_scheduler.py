"""Test course enrollment scheduler."""

import pytest

from school_analytics.enrollment import CourseScheduler
from school_analytics.errors import CourseNotFoundError
from school_analytics.registry import Student


@pytest.fixture
def students():
    """Create test students."""
    return [
        Student("S001", "Alice", "Mwangi"),
        Student("S002", "Brian", "Otieno"),
        Student("S003", "Catherine", "Kariuki"),
    ]


def test_capacity_enforced(students):
    """Test registrations beyond capacity are rejected."""
    scheduler = CourseScheduler()
    scheduler.create_course("CS101", 2)

    results = [scheduler.register_student("CS101", s) for s in students]

    assert results == [True, True, False]
    assert scheduler.queued_count("CS101") == 2
    assert scheduler.roster("CS101") == ["S001", "S002"]


def test_dequeue_fifo(students):
    """Test students leave the queue in registration order."""
    scheduler = CourseScheduler()
    scheduler.create_course("CS101", 5)
    for s in students:
        scheduler.register_student("CS101", s)

    assert scheduler.dequeue_next("CS101").student_id == "S001"
    assert scheduler.dequeue_next("CS101").student_id == "S002"
    assert scheduler.queued_count("CS101") == 1

    scheduler.dequeue_next("CS101")
    assert scheduler.dequeue_next("CS101") is None


def test_dequeue_frees_capacity(students):
    """Test a slot opens once a student is dequeued."""
    scheduler = CourseScheduler()
    scheduler.create_course("CS101", 1)
    scheduler.register_student("CS101", students[0])

    assert not scheduler.register_student("CS101", students[1])
    scheduler.dequeue_next("CS101")
    assert scheduler.register_student("CS101", students[1])


def test_unknown_course(students):
    """Test operations on missing courses."""
    scheduler = CourseScheduler()

    with pytest.raises(CourseNotFoundError, match="MATH200"):
        scheduler.register_student("MATH200", students[0])

    with pytest.raises(LookupError):
        scheduler.queued_count("MATH200")

    with pytest.raises(CourseNotFoundError):
        scheduler.dequeue_next("MATH200")

    with pytest.raises(CourseNotFoundError):
        scheduler.roster("MATH200")


def test_invalid_course():
    """Test course creation validation."""
    scheduler = CourseScheduler()

    with pytest.raises(ValueError):
        scheduler.create_course("CS101", -1)

    with pytest.raises(ValueError):
        scheduler.create_course("", 10)

    assert scheduler.course_codes() == []


def test_recreate_course_keeps_queue(students):
    """Test re-creating a course only changes its capacity."""
    scheduler = CourseScheduler()
    scheduler.create_course("CS101", 1)
    scheduler.register_student("CS101", students[0])

    scheduler.create_course("CS101", 3)

    assert scheduler.roster("CS101") == ["S001"]
    assert scheduler.register_student("CS101", students[1])
    assert scheduler.course_codes() == ["CS101"]


def test_zero_capacity(students):
    """Test a zero-capacity course accepts nobody."""
    scheduler = CourseScheduler()
    scheduler.create_course("SEM000", 0)

    assert not scheduler.register_student("SEM000", students[0])
