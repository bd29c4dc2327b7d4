from pydantic import BaseModel, ConfigDict
from typing import Dict, FrozenSet, List, Optional

class HistoricalRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    selected: bool              # False -> the test is stable and can be skipped
    avg_duration_millis: int = 0
    total_runs: int = 0

# test name -> record, last row wins on duplicates
StatisticsTable = Dict[str, HistoricalRecord]

class CandidateTest(BaseModel):
    name: str
    skip: str = ""          # non-empty on entry: already skipped elsewhere
    skip_details: str = ""
    # None = not configured, which is not the same as an empty set
    opt_out_suites: Optional[FrozenSet[str]] = None

    def opts_out_of(self, suite: str) -> bool:
        return self.opt_out_suites is not None and suite in self.opt_out_suites

class SelectionRequest(BaseModel):
    suite: str
    cloud: str
    tests: List[CandidateTest]

class SelectionResponse(BaseModel):
    selected_count: int
    tests: List[CandidateTest]
    error: Optional[str] = None  # set when selection was unavailable and everything runs
