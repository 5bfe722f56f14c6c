"""Configuration schemas and validation."""

from .schema import (
    SchoolConfig,
    AnalyticsConfig,
    StudentConfig,
    CourseConfig,
    BookConfig,
    PaymentConfig,
    LoanConfig,
    ReportConfig,
    load_config,
)

__all__ = [
    "SchoolConfig",
    "AnalyticsConfig",
    "StudentConfig",
    "CourseConfig",
    "BookConfig",
    "PaymentConfig",
    "LoanConfig",
    "ReportConfig",
    "load_config",
]
