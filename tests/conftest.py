"""
Pytest configuration and fixtures for testing.
"""
import sys
from pathlib import Path
import pytest

# Add parent directory to path
TESTS_DIR = Path(__file__).resolve().parent
PROJECT_DIR = TESTS_DIR.parent
sys.path.insert(0, str(PROJECT_DIR))

from testgrid_tracker.config import Settings
from testgrid_tracker.parser.models import JobReport, Outcome, RawTest, TestStatus


THREESCALE_TEST_NAME = (
    '"Installing "Red Hat Integration - 3scale" operator in test-{ns}.'
    'Installing "Red Hat Integration - 3scale" operator in test-{ns} '
    'Installs Red Hat Integration - 3scale operator in test-{ns} '
    'and creates 3scale Backend Schema operand instance"'
)


def build_fake_job_report(test_names, outcomes=None, columns=1):
    """
    Build a job report with one test per name.

    Every test gets its own copy of `outcomes` (a single FAILURE by default).
    """
    if outcomes is None:
        outcomes = [Outcome(count=1, value=TestStatus.FAILURE)]

    return JobReport(
        name="mockName",
        query="mockQuery",
        change_lists=[f"mockChange{i}" for i in range(columns)],
        timestamps=[1000 + i for i in range(columns)],
        tests=[RawTest(name=name, outcomes=list(outcomes)) for name in test_names],
    )


@pytest.fixture
def test_settings():
    """Settings with a fixed job run base URL."""
    return Settings(PROW_VIEW_URL="https://prow.example.com/view/gs/")


@pytest.fixture
def sample_job_report():
    """
    A three column report mixing grouped, randomized and plain test names.

    Columns are ordered newest first, as the dashboard serves them.
    """
    return JobReport(
        name="periodic-ci-e2e-aws",
        query="origin-ci-test/logs/periodic-ci-e2e-aws",
        change_lists=["1003", "1002", "1001"],
        timestamps=[1700000300, 1700000200, 1700000100],
        tests=[
            RawTest(
                name="Overall",
                outcomes=[
                    Outcome(count=1, value=TestStatus.FAILURE),
                    Outcome(count=2, value=TestStatus.SUCCESS),
                ],
            ),
            RawTest(
                name="Operator results test operator install install_etcd",
                outcomes=[Outcome(count=3, value=TestStatus.SUCCESS)],
            ),
            RawTest(
                name="Operator results test operator upgrade_etcd",
                outcomes=[
                    Outcome(count=1, value=TestStatus.FAILURE),
                    Outcome(count=2, value=TestStatus.SUCCESS),
                ],
            ),
            RawTest(
                name=THREESCALE_TEST_NAME.format(ns="nbqyx"),
                outcomes=[
                    Outcome(count=1, value=TestStatus.FLAKE),
                    Outcome(count=2, value=TestStatus.NONE),
                ],
            ),
            RawTest(
                name=THREESCALE_TEST_NAME.format(ns="piiov"),
                outcomes=[
                    Outcome(count=1, value=TestStatus.NONE),
                    Outcome(count=1, value=TestStatus.FAILURE),
                    Outcome(count=1, value=TestStatus.NONE),
                ],
            ),
            RawTest(
                name="[sig-network] Services should serve endpoints",
                outcomes=[Outcome(count=3, value=TestStatus.SUCCESS)],
            ),
        ],
    )


@pytest.fixture
def job_report_payload():
    """Job table JSON as served by the dashboard."""
    return {
        "test-group-name": "periodic-ci-e2e-aws",
        "query": "origin-ci-test/logs/periodic-ci-e2e-aws",
        "changelists": ["1002", "1001"],
        "timestamps": [1700000200, 1700000100],
        "tests": [
            {
                "name": "Overall",
                "statuses": [{"count": 2, "value": 1}],
            },
            {
                "name": "Operator results test operator install install_etcd",
                "statuses": [{"count": 1, "value": 12}, {"count": 1, "value": 1}],
            },
            {
                "name": "Operator results test operator upgrade_etcd",
                "statuses": [{"count": 2, "value": 1}],
            },
            {
                "name": THREESCALE_TEST_NAME.format(ns="jopkv"),
                "statuses": [{"count": 2, "value": 13}],
            },
        ],
    }
