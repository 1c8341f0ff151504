#!/usr/bin/env python3
"""
Aggregate a dashboard job report by canonical test name.

Reads a TestGrid job table JSON file, normalizes test names, merges results
that share a canonical name, and writes the aggregated result as JSON.

Usage:
    python scripts/convert_job_report.py REPORT [--start N] [--end N] [--job-name NAME] [--output FILE]

Examples:
    # Aggregate every column, print to stdout
    python scripts/convert_job_report.py periodic-e2e.json

    # Tally only the first 10 columns and save the result
    python scripts/convert_job_report.py periodic-e2e.json --end 10 --output result.json
"""
import sys
import json
import argparse
import logging
from pathlib import Path

# Add parent directory to path
SCRIPT_DIR = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(SCRIPT_DIR))

from testgrid_tracker.config import get_settings
from testgrid_tracker.services.import_service import convert_job_report

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description="Aggregate a dashboard job report by canonical test name"
    )
    parser.add_argument(
        'report',
        type=str,
        help='Path to the job report JSON file'
    )
    parser.add_argument(
        '--start',
        type=int,
        default=0,
        help='First column to tally (default: 0)'
    )
    parser.add_argument(
        '--end',
        type=int,
        default=None,
        help='Column after the last one to tally (default: all columns)'
    )
    parser.add_argument(
        '--job-name',
        type=str,
        default=None,
        help='Job name (default: from the report or its file name)'
    )
    parser.add_argument(
        '--output',
        type=str,
        default=None,
        help='Write the result to this file instead of stdout'
    )
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(),  # stderr, keeps stdout for the result
        ]
    )

    try:
        result = convert_job_report(
            args.report,
            start_column=args.start,
            end_column=args.end,
            job_name=args.job_name,
            settings=settings,
        )
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    output = json.dumps(result, indent=2)
    if args.output:
        Path(args.output).write_text(output + "\n", encoding='utf-8')
        logger.info(f"Wrote {len(result['test_results'])} test results to {args.output}")
    else:
        print(output)


if __name__ == "__main__":
    main()
