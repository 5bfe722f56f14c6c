"""Example script demonstrating programmatic usage.

Run this script to see how to use the school analytics toolkit without the CLI.
"""

from pathlib import Path
import sys

# Add src to path if running directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from school_analytics.analytics import ReportExporter
from school_analytics.config import load_config
from school_analytics.errors import NotFoundError, OutOfRangeError, PermissionDeniedError
from school_analytics.registry import User
from school_analytics.system import SchoolSystem


def main():
    """Run example analytics session."""
    print("=" * 60)
    print("School Analytics Example")
    print("=" * 60)

    # 1. Load configuration and seed the system
    config_path = Path(__file__).parent.parent / "config" / "default.yaml"
    config = load_config(config_path)

    system = SchoolSystem.from_config(config)
    system.seed(config)

    print(f"\nSchool: {config.name} v{config.version}")
    print(f"Students: {[str(s) for s in system.registry.list_students()]}")

    # 2. Permission-guarded personal data
    admin = User.with_roles("u_admin", "ADMIN")
    student_user = User.with_roles("u_student", "STUDENT")
    alice = system.registry.find_student("S001")

    print(f"\nAdmin can view: {alice.get_personal_data(admin)}")
    try:
        alice.get_personal_data(student_user)
    except PermissionDeniedError as e:
        print(f"Student user denied: {e}")

    # 3. Analytics
    analyzer = system.analyzer
    print("\n" + "=" * 60)
    print("PERFORMANCE")
    print("=" * 60)
    print(f"S001 average: {analyzer.get_average('S001'):.2f}")

    print("Top 2 performers:")
    for performance in analyzer.top_k(2):
        print(f"  {performance}")

    print(f"CS101 anonymized stats: {system.course_statistics('CS101')}")

    all_ids = [s.student_id for s in system.registry.list_students()]
    print(f"All students stats:     {analyzer.get_anonymized_class_stats(all_ids)}")

    # 4. Errors surfaced to the caller
    try:
        analyzer.record_mark("S999", 5, 10)
    except OutOfRangeError as e:
        print(f"\nRejected mark: {e}")
    try:
        analyzer.get_average("UNKNOWN")
    except NotFoundError as e:
        print(f"Rejected lookup: {e}")

    # 5. Library
    print("\n" + "=" * 60)
    print("LIBRARY")
    print("=" * 60)
    print(f"Loans for S001: {system.library.borrow_history('S001')}")
    system.library.return_book("S001", "978-001")
    print(f"After return:   {system.library.find_book('978-001')}")

    # 6. Export report
    report = system.build_report(config.analytics.top_k)
    exporter = ReportExporter(Path("runs"))
    run_dir = exporter.export_report(report)
    print(f"\nReport saved to: {run_dir}")


if __name__ == "__main__":
    main()
