"""
Builds aggregated job results from dashboard job reports.

Every raw test is normalized to its canonical name and folded into one
result entry per name. Outcome records are kept verbatim and concatenated
in the order the raw tests appear in the report.
"""
import logging
from typing import Dict, List, Optional, Tuple

from testgrid_tracker.config import Settings, get_settings
from testgrid_tracker.parser.models import (
    AggregatedJobResult,
    JobReport,
    JobRunResult,
    Outcome,
    TestResultEntry,
)
from testgrid_tracker.utils.test_name_utils import normalize_test_name

logger = logging.getLogger(__name__)


def job_run_url(base_url: str, query: str, change_list: str) -> str:
    """
    Build the link to a single job run.

    Examples:
        >>> job_run_url("https://prow.example.com/view/gs", "bucket/logs/job", "42")
        'https://prow.example.com/view/gs/bucket/logs/job/42'
    """
    return f"{base_url.rstrip('/')}/{query.strip('/')}/{change_list}"


def resolve_column_range(
    report: JobReport,
    start_column: int,
    end_column: int
) -> Tuple[int, int]:
    """
    Clamp a half-open column range to the columns present in the report.

    An inverted range resolves to an empty range at start_column.

    Args:
        report: Job report whose columns bound the range
        start_column: First column to include
        end_column: Column after the last one to include

    Returns:
        Tuple of (start, end) with 0 <= start <= end <= column count
    """
    column_count = min(len(report.change_lists), len(report.timestamps))
    start = min(max(start_column, 0), column_count)
    end = min(max(end_column, 0), column_count)

    if (start, end) != (start_column, end_column):
        logger.warning(
            f"Column range [{start_column}, {end_column}) for job {report.name} "
            f"clamped to report columns [0, {column_count})"
        )

    if end < start:
        logger.warning(f"Empty column range [{start}, {end}) for job {report.name}")
        end = start

    return start, end


def _build_job_runs(
    report: JobReport,
    start: int,
    end: int,
    settings: Settings
) -> Tuple[Dict[str, JobRunResult], List[JobRunResult]]:
    """Create one job run per column, returning (runs by URL, runs by column offset)."""
    job_run_results: Dict[str, JobRunResult] = {}
    runs_by_column: List[JobRunResult] = []

    for column in range(start, end):
        change_list = report.change_lists[column]
        url = job_run_url(settings.PROW_VIEW_URL, report.query, change_list)
        run = job_run_results.setdefault(url, JobRunResult(
            column=column,
            change_list=change_list,
            timestamp=report.timestamps[column],
            url=url,
        ))
        runs_by_column.append(run)

    return job_run_results, runs_by_column


def _tally_outcomes(
    entry: TestResultEntry,
    outcomes: List[Outcome],
    runs_by_column: List[JobRunResult],
    start: int,
    end: int,
    is_overall: bool
) -> None:
    """
    Count the outcomes of one raw test that fall inside [start, end).

    Outcomes are laid out over the columns from column 0 onwards, each
    covering `count` consecutive columns.
    """
    column = 0
    for outcome in outcomes:
        if column >= end:
            break

        span = max(outcome.count, 0)
        for covered in range(max(column, start), min(column + span, end)):
            run = runs_by_column[covered - start]

            if outcome.value.is_success:
                entry.successes += 1
                if is_overall:
                    run.succeeded = True
            elif outcome.value.is_failure:
                entry.failures += 1
                if is_overall:
                    run.failed = True
                elif entry.name not in run.failed_test_names:
                    run.failed_test_names.append(entry.name)
            elif outcome.value.is_flake:
                entry.flakes += 1

        column += span


def build_job_result(
    report: JobReport,
    start_column: int,
    end_column: int,
    settings: Optional[Settings] = None
) -> AggregatedJobResult:
    """
    Aggregate a job report by canonical test name.

    All tests in the report are included regardless of the column range;
    the range only scopes the per-column tallies and job runs.

    Args:
        report: Job report to aggregate
        start_column: First report column to tally
        end_column: Column after the last one to tally
        settings: Settings to use (defaults to the cached application settings)

    Returns:
        A new AggregatedJobResult

    Raises:
        ValueError: If report is None
    """
    if report is None:
        raise ValueError("Job report is required")

    settings = settings or get_settings()
    start, end = resolve_column_range(report, start_column, end_column)
    job_run_results, runs_by_column = _build_job_runs(report, start, end, settings)

    result = AggregatedJobResult(
        job_name=report.name,
        query=report.query,
        start_column=start,
        end_column=end,
        job_run_results=job_run_results,
    )

    for raw_test in report.tests:
        canonical_name, substitutions = normalize_test_name(raw_test.name)
        result.substitutions += substitutions

        entry = result.test_results.get(canonical_name)
        if entry is None:
            entry = TestResultEntry(name=canonical_name)
            result.test_results[canonical_name] = entry

        entry.outcomes.extend(raw_test.outcomes)
        _tally_outcomes(
            entry,
            raw_test.outcomes,
            runs_by_column,
            start,
            end,
            is_overall=canonical_name == settings.OVERALL_TEST_NAME,
        )

    logger.info(
        f"Built job result for {report.name}: {len(report.tests)} tests -> "
        f"{len(result.test_results)} canonical names, {result.outcome_count} outcomes, "
        f"{result.substitutions} namespace substitutions, columns [{start}, {end})"
    )

    return result
