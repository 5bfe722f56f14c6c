"""Report exporter for saving analytics artifacts."""

import json
from pathlib import Path
from typing import Dict, List

import pandas as pd
from loguru import logger

from .performance import ClassStatistics, StudentPerformance
from .report import AnalyticsReport


class ReportExporter:
    """Exports analytics reports to disk.

    Saves:
    - Top-K rankings (CSV)
    - Per-course anonymized statistics (CSV)
    - Summary (JSON)
    """

    def __init__(self, output_dir: Path) -> None:
        """Initialize report exporter.

        Args:
            output_dir: Base output directory.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def export_report(
        self,
        report: AnalyticsReport,
        save_rankings: bool = True,
        save_class_stats: bool = True,
    ) -> Path:
        """Export report to files.

        Args:
            report: Report to export.
            save_rankings: Save rankings table.
            save_class_stats: Save per-course statistics table.

        Returns:
            Path to run directory.
        """
        run_dir = self.output_dir / report.run_id
        run_dir.mkdir(parents=True, exist_ok=True)

        logger.info(f"Exporting analytics report to {run_dir}")

        if save_rankings:
            rankings_path = run_dir / "rankings.csv"
            rankings_df = self.rankings_to_dataframe(report.rankings)
            rankings_df.to_csv(rankings_path, index=False)
            logger.info(f"Saved {len(rankings_df)} rankings to {rankings_path}")

        if save_class_stats:
            stats_path = run_dir / "class_stats.csv"
            stats_df = self.class_stats_to_dataframe(report.class_stats)
            stats_df.to_csv(stats_path, index=False)
            logger.info(f"Saved statistics for {len(stats_df)} courses to {stats_path}")

        summary_path = run_dir / "summary.json"
        with summary_path.open("w") as f:
            json.dump(self._extract_summary(report), f, indent=2, default=str)

        logger.info(f"Saved summary to {summary_path}")

        return run_dir

    @staticmethod
    def rankings_to_dataframe(rankings: List[StudentPerformance]) -> pd.DataFrame:
        """Convert rankings to a DataFrame with a 1-based rank column."""
        return pd.DataFrame(
            [
                {"rank": rank, "student_id": p.student_id, "average": p.average}
                for rank, p in enumerate(rankings, start=1)
            ],
            columns=["rank", "student_id", "average"],
        )

    @staticmethod
    def class_stats_to_dataframe(class_stats: Dict[str, ClassStatistics]) -> pd.DataFrame:
        """Convert per-course statistics to a DataFrame sorted by course."""
        return pd.DataFrame(
            [
                {
                    "course": code,
                    "average": stats.average,
                    "median": stats.median,
                    "std_dev": stats.std_dev,
                    "count": stats.count,
                }
                for code, stats in sorted(class_stats.items())
            ],
            columns=["course", "average", "median", "std_dev", "count"],
        )

    @staticmethod
    def _extract_summary(report: AnalyticsReport) -> dict:
        return {
            "run_id": report.run_id,
            "generated_at": report.generated_at.isoformat(),
            "tracked_students": report.tracked_students,
            "assessment_count": report.assessment_count,
            "ranked_students": len(report.rankings),
            "courses": sorted(report.class_stats),
        }
