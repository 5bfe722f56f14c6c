"""Command-line interface for running the school analytics demo."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from .analytics import ReportExporter, new_run_id
from .config import load_config
from .system import SchoolSystem
from .utils import setup_logger


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    parser = argparse.ArgumentParser(
        description="School registry and performance analytics demo"
    )

    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        required=True,
        help="Path to school configuration YAML file",
    )

    parser.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        default=None,
        help="Override report output directory (default from config)",
    )

    parser.add_argument(
        "--top-k",
        "-k",
        type=int,
        default=None,
        help="Override number of top performers (default from config)",
    )

    parser.add_argument(
        "--no-export",
        action="store_true",
        help="Print the summary without writing report files",
    )

    args = parser.parse_args(argv)

    if not args.config.exists():
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1

    try:
        config = load_config(args.config)

        # One id names both the run's log file and its report directory
        run_id = new_run_id()
        log_path = setup_logger(
            log_level=config.log_level,
            log_to_file=config.log_to_file,
            log_dir=config.log_dir,
            run_id=run_id,
            serialize=config.log_serialize,
        )

        logger.info(f"Loaded configuration from {args.config}")
        logger.info(f"School: {config.name} v{config.version}")

        system = SchoolSystem.from_config(config)
        seed = system.seed(config)

        top_k = args.top_k if args.top_k is not None else config.analytics.top_k
        report = system.build_report(top_k, run_id=run_id)

        run_dir = None
        if not args.no_export:
            output_dir = args.output_dir or config.report.output_dir
            exporter = ReportExporter(output_dir)
            run_dir = exporter.export_report(
                report,
                save_rankings=config.report.save_rankings,
                save_class_stats=config.report.save_class_stats,
            )
            logger.info(f"Report exported to {run_dir}")

        print("\n" + "=" * 60)
        print("SCHOOL ANALYTICS SUMMARY")
        print("=" * 60)
        print(f"Run ID:           {report.run_id}")
        print(f"Students:         {system.registry.size()}")
        print(f"Tracked:          {report.tracked_students}")
        print(f"Assessments:      {report.assessment_count}")
        print(f"Payments:         {system.fees.count()}")
        print(f"Open Loans:       {seed.loans_opened}")
        for rejected in seed.enrollments_rejected:
            print(f"Rejected:         {rejected} (course full)")

        print("-" * 60)
        print(f"Top {top_k} performers:")
        for rank, performance in enumerate(report.rankings, start=1):
            print(f"  {rank:>2}. {performance}")

        print("-" * 60)
        print("Anonymized course statistics:")
        for code, stats in sorted(report.class_stats.items()):
            print(f"  {code:<10} {stats}")
        print("=" * 60)

        if run_dir is not None:
            print(f"\nReport saved to: {run_dir}")
        if log_path is not None:
            print(f"Log written to:  {log_path}")

        return 0

    except Exception as e:
        logger.error(f"Demo run failed: {e}")
        print(f"\nError: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
