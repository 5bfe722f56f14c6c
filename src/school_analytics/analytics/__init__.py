"""Analytics and performance measurement."""

from .matrix import MarkMatrix
from .performance import PerformanceAnalyzer, StudentPerformance, ClassStatistics
from .report import AnalyticsReport, new_run_id
from .exporter import ReportExporter

__all__ = [
    "MarkMatrix",
    "PerformanceAnalyzer",
    "StudentPerformance",
    "ClassStatistics",
    "AnalyticsReport",
    "new_run_id",
    "ReportExporter",
]
