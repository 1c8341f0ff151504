"""
Pydantic schemas for the dashboard feed and for aggregated output.

The input schemas mirror the TestGrid job table JSON; the output schemas
define the serialized form of an AggregatedJobResult.
"""
from typing import Dict, List
from pydantic import BaseModel, Field, field_validator

from testgrid_tracker.parser.models import (
    AggregatedJobResult,
    JobReport,
    Outcome,
    RawTest,
    TestResultEntry,
    TestStatus,
)


# Input Schemas

class StatusSchema(BaseModel):
    """Run-length encoded status cell."""
    count: int = Field(ge=1)
    value: int

    def to_outcome(self) -> Outcome:
        return Outcome(count=self.count, value=TestStatus.from_value(self.value))


class TestRowSchema(BaseModel):
    """One test row of a job table."""
    name: str
    statuses: List[StatusSchema] = []


class JobDetailsSchema(BaseModel):
    """Job table as served by the dashboard."""
    name: str = Field(default="", alias="test-group-name")
    query: str = ""
    changelists: List[str] = []
    timestamps: List[int] = []
    tests: List[TestRowSchema] = []

    class Config:
        populate_by_name = True

    @field_validator('timestamps')
    @classmethod
    def validate_timestamps(cls, v: List[int]) -> List[int]:
        """Reject negative timestamps."""
        if any(ts < 0 for ts in v):
            raise ValueError('Timestamps must be non-negative')
        return v

    def to_job_report(self) -> JobReport:
        """Convert to the data model consumed by the job result builder."""
        return JobReport(
            name=self.name,
            query=self.query,
            change_lists=list(self.changelists),
            timestamps=list(self.timestamps),
            tests=[
                RawTest(
                    name=test.name,
                    outcomes=[status.to_outcome() for status in test.statuses]
                )
                for test in self.tests
            ],
        )


# Output Schemas

class OutcomeSchema(BaseModel):
    """Schema for one outcome record."""
    count: int
    value: str  # TestStatus name, e.g. "FAILURE"

    @classmethod
    def from_outcome(cls, outcome: Outcome) -> "OutcomeSchema":
        return cls(count=outcome.count, value=outcome.value.name)


class TestResultEntrySchema(BaseModel):
    """Schema for the merged results of one canonical test name."""
    name: str
    outcomes: List[OutcomeSchema] = []
    successes: int = 0
    failures: int = 0
    flakes: int = 0
    pass_percentage: float = 0.0

    @classmethod
    def from_entry(cls, entry: TestResultEntry) -> "TestResultEntrySchema":
        return cls(
            name=entry.name,
            outcomes=[OutcomeSchema.from_outcome(o) for o in entry.outcomes],
            successes=entry.successes,
            failures=entry.failures,
            flakes=entry.flakes,
            pass_percentage=entry.pass_percentage,
        )


class JobRunResultSchema(BaseModel):
    """Schema for one job run."""
    column: int
    change_list: str
    timestamp: int
    url: str
    failed_test_names: List[str] = []
    succeeded: bool = False
    failed: bool = False

    class Config:
        from_attributes = True


class AggregatedJobResultSchema(BaseModel):
    """Schema for a complete aggregated job result."""
    job_name: str
    query: str
    start_column: int
    end_column: int
    substitutions: int = 0
    test_results: Dict[str, TestResultEntrySchema] = {}
    job_run_results: Dict[str, JobRunResultSchema] = {}

    @classmethod
    def from_result(cls, result: AggregatedJobResult) -> "AggregatedJobResultSchema":
        return cls(
            job_name=result.job_name,
            query=result.query,
            start_column=result.start_column,
            end_column=result.end_column,
            substitutions=result.substitutions,
            test_results={
                name: TestResultEntrySchema.from_entry(entry)
                for name, entry in result.test_results.items()
            },
            job_run_results={
                url: JobRunResultSchema.model_validate(run)
                for url, run in result.job_run_results.items()
            },
        )
