from selective_tests.errors import (
    ObjectNotFoundError,
    SelectionError,
    StatisticsParseError,
    StatisticsReadError,
    StoreConnectionError,
)
from selective_tests.schema import CandidateTest, HistoricalRecord
from selective_tests.select_tests import apply_selection, read_tests_to_run, should_skip
from selective_tests.stats import load_statistics

__version__ = "0.1.0"
