"""
Import service for dashboard job report files.

Bridges the JSON feed format with the job result builder: loads a report,
aggregates it, and returns the serialized result.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from testgrid_tracker.config import Settings
from testgrid_tracker.models.schemas import AggregatedJobResultSchema, JobDetailsSchema
from testgrid_tracker.parser.models import JobReport
from testgrid_tracker.services.job_result_builder import build_job_result

# Configure logger
logger = logging.getLogger(__name__)


def parse_job_report(data: Dict[str, Any], job_name: Optional[str] = None) -> JobReport:
    """
    Validate a decoded job table and convert it to a JobReport.

    Args:
        data: Decoded JSON job table
        job_name: Overrides the job name carried in the payload

    Returns:
        JobReport

    Raises:
        ValueError: If the payload does not match the job table schema
    """
    try:
        details = JobDetailsSchema.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid job report: {e}") from e

    report = details.to_job_report()
    if job_name:
        report.name = job_name

    if len(report.change_lists) != len(report.timestamps):
        logger.warning(
            f"Job {report.name} has {len(report.change_lists)} change lists "
            f"but {len(report.timestamps)} timestamps"
        )

    return report


def load_job_report(path: Union[str, Path], job_name: Optional[str] = None) -> JobReport:
    """
    Load a job report from a JSON file.

    The job is named after, in order: job_name, the payload's
    "test-group-name", the file name without extension.

    Args:
        path: Path to the JSON file
        job_name: Explicit job name

    Returns:
        JobReport

    Raises:
        ValueError: If the file cannot be read or is not a valid job report
    """
    path = Path(path)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to read job report {path}: {e}")
        raise ValueError(f"Cannot read job report {path}: {e}") from e

    if not isinstance(data, dict):
        logger.error(f"Job report {path} is not a JSON object")
        raise ValueError(f"Job report {path} must be a JSON object")

    try:
        report = parse_job_report(data, job_name)
    except ValueError:
        logger.error(f"Job report {path} failed validation")
        raise

    if not report.name:
        report.name = path.stem

    logger.info(f"Loaded job report {report.name}: {len(report.tests)} tests, {report.column_count} columns")
    return report


def convert_job_report(
    path: Union[str, Path],
    start_column: int = 0,
    end_column: Optional[int] = None,
    job_name: Optional[str] = None,
    settings: Optional[Settings] = None
) -> Dict[str, Any]:
    """
    Load, aggregate and serialize a job report file.

    Args:
        path: Path to the JSON job report
        start_column: First column to tally
        end_column: Column after the last one to tally (defaults to all columns)
        job_name: Explicit job name
        settings: Settings passed through to the builder

    Returns:
        JSON-ready dict of the aggregated result
    """
    report = load_job_report(path, job_name)
    if end_column is None:
        end_column = report.column_count

    result = build_job_result(report, start_column, end_column, settings)
    return AggregatedJobResultSchema.from_result(result).model_dump()
