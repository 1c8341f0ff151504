"""
Data models for TestGrid job reports and their aggregated results.
"""
from dataclasses import dataclass, field
from typing import Dict, List
from enum import IntEnum


class TestStatus(IntEnum):
    """TestGrid cell status codes.

    Only SUCCESS, FAILURE and FLAKE feed the pass/fail tallies; the remaining
    codes are carried through untouched.
    """
    __test__ = False

    NONE = 0
    SUCCESS = 1
    PASS_WITH_ERRORS = 2
    PASS_WITH_SKIPS = 3
    RUNNING = 4
    CATEGORIZED_ABORT = 5
    UNKNOWN = 6
    CANCEL = 7
    BLOCKED = 8
    TIMED_OUT = 9
    CATEGORIZED_FAIL = 10
    BUILD_FAIL = 11
    FAILURE = 12
    FLAKE = 13
    TOOL_FAIL = 14
    BUILD_PASSED = 15

    @classmethod
    def from_value(cls, value: int) -> "TestStatus":
        """Convert a raw status code, mapping unrecognized codes to UNKNOWN."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN

    @property
    def is_success(self) -> bool:
        return self is TestStatus.SUCCESS

    @property
    def is_failure(self) -> bool:
        return self is TestStatus.FAILURE

    @property
    def is_flake(self) -> bool:
        return self is TestStatus.FLAKE


@dataclass(frozen=True)
class Outcome:
    """One status covering `count` consecutive report columns."""
    count: int
    value: TestStatus


@dataclass
class RawTest:
    """A test row exactly as reported by the dashboard."""
    name: str
    outcomes: List[Outcome] = field(default_factory=list)


@dataclass
class JobReport:
    """A single job's dashboard report.

    `change_lists` and `timestamps` describe the report columns and share
    the same length and order.
    """
    name: str
    query: str
    change_lists: List[str] = field(default_factory=list)
    timestamps: List[int] = field(default_factory=list)
    tests: List[RawTest] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        return len(self.change_lists)


@dataclass
class TestResultEntry:
    """Merged results for every raw test sharing one canonical name."""
    __test__ = False

    name: str
    outcomes: List[Outcome] = field(default_factory=list)
    successes: int = 0
    failures: int = 0
    flakes: int = 0

    @property
    def runs(self) -> int:
        """Number of counted runs within the built column range."""
        return self.successes + self.failures + self.flakes

    @property
    def pass_percentage(self) -> float:
        """Successes and flakes as a percentage of counted runs."""
        if self.runs == 0:
            return 0.0
        return round(((self.successes + self.flakes) / self.runs) * 100, 2)


@dataclass
class JobRunResult:
    """Outcome of one job run (one report column)."""
    column: int
    change_list: str
    timestamp: int
    url: str
    failed_test_names: List[str] = field(default_factory=list)
    succeeded: bool = False
    failed: bool = False


@dataclass
class AggregatedJobResult:
    """Normalized result table for one job report."""
    job_name: str
    query: str
    start_column: int = 0
    end_column: int = 0
    test_results: Dict[str, TestResultEntry] = field(default_factory=dict)
    job_run_results: Dict[str, JobRunResult] = field(default_factory=dict)
    substitutions: int = 0  # Random namespace rewrites across all test names

    @property
    def outcome_count(self) -> int:
        """Total outcome records across all entries."""
        return sum(len(entry.outcomes) for entry in self.test_results.values())
