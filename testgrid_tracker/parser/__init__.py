"""
Data model for dashboard job reports and aggregated job results.
"""
from testgrid_tracker.parser.models import (
    AggregatedJobResult,
    JobReport,
    JobRunResult,
    Outcome,
    RawTest,
    TestResultEntry,
    TestStatus,
)

__all__ = [
    'AggregatedJobResult',
    'JobReport',
    'JobRunResult',
    'Outcome',
    'RawTest',
    'TestResultEntry',
    'TestStatus',
]
