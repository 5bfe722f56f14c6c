"""Test report exporter."""

import json
from pathlib import Path

import pandas as pd
import pytest

from school_analytics.analytics import (
    AnalyticsReport,
    ClassStatistics,
    ReportExporter,
    StudentPerformance,
)


@pytest.fixture
def report():
    """Create test report."""
    return AnalyticsReport(
        run_id="test_run",
        rankings=[
            StudentPerformance("S003", 93.5),
            StudentPerformance("S001", 85.0),
        ],
        class_stats={
            "MATH200": ClassStatistics(),
            "CS101": ClassStatistics(average=80.0, median=80.0, std_dev=5.0, count=2),
        },
        tracked_students=3,
        assessment_count=3,
    )


def test_export_report(tmp_path: Path, report):
    """Test all artifacts are written."""
    exporter = ReportExporter(tmp_path / "reports")
    run_dir = exporter.export_report(report)

    assert run_dir == tmp_path / "reports" / "test_run"

    rankings = pd.read_csv(run_dir / "rankings.csv")
    assert list(rankings.columns) == ["rank", "student_id", "average"]
    assert rankings["rank"].tolist() == [1, 2]
    assert rankings["student_id"].tolist() == ["S003", "S001"]

    stats = pd.read_csv(run_dir / "class_stats.csv")
    assert stats["course"].tolist() == ["CS101", "MATH200"]
    assert stats["count"].tolist() == [2, 0]

    summary = json.loads((run_dir / "summary.json").read_text())
    assert summary["run_id"] == "test_run"
    assert summary["ranked_students"] == 2
    assert summary["courses"] == ["CS101", "MATH200"]


def test_export_flags(tmp_path: Path, report):
    """Test tables can be skipped."""
    exporter = ReportExporter(tmp_path)
    run_dir = exporter.export_report(report, save_rankings=False, save_class_stats=False)

    assert not (run_dir / "rankings.csv").exists()
    assert not (run_dir / "class_stats.csv").exists()
    assert (run_dir / "summary.json").exists()


def test_empty_rankings_frame():
    """Test empty inputs keep their columns."""
    df = ReportExporter.rankings_to_dataframe([])

    assert df.empty
    assert list(df.columns) == ["rank", "student_id", "average"]
