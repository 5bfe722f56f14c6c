"""School Analytics Toolkit.

In-process school administration components (student registry, course
enrollment, fee ledger, library circulation) built around a grade matrix
with top-K ranking and anonymized cohort statistics.
"""

__version__ = "0.1.0"
