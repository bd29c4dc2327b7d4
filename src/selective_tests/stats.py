import csv, io, logging, re
import pandas as pd

from selective_tests.errors import StatisticsParseError
from selective_tests.schema import HistoricalRecord, StatisticsTable

logger = logging.getLogger(__name__)

# csv columns:
# 0. TEST_NAME
# 1. SELECTED (yes/no)
# 2. AVG_DURATION
# 3. TOTAL_RUNS
COLUMNS = ["test_name", "selected", "avg_duration", "total_runs"]
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1
_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(cell: str) -> int:
    """Parse a base-10 integer cell; anything unparsable counts as 0."""
    if not _INT_RE.fullmatch(cell):
        return 0
    return min(max(int(cell), INT64_MIN), INT64_MAX)


def read_frame(body: bytes) -> pd.DataFrame:
    """Data rows of the statistics CSV, header dropped, every cell a string.

    pandas pads short rows instead of rejecting them, so the field count is
    checked on the raw records before framing.
    """
    try:
        # undecodable bytes are kept as surrogates rather than failing the load
        text = body.decode("utf-8", errors="surrogateescape")
        records = [r for r in csv.reader(io.StringIO(text), strict=True) if r]
    except csv.Error as err:
        raise StatisticsParseError(f"failed to read CSV data: {err}") from err
    for line, record in enumerate(records, start=1):
        if len(record) != len(COLUMNS):
            raise StatisticsParseError(
                f"failed to read CSV data: record {line} has {len(record)} fields, "
                f"expected {len(COLUMNS)}")
    return pd.DataFrame(records[1:], columns=COLUMNS, dtype=str)


def load_statistics(body: bytes) -> StatisticsTable:
    df = read_frame(body)
    df["selected"] = df["selected"] != "no"
    df["avg_duration"] = df["avg_duration"].map(parse_int)
    df["total_runs"] = df["total_runs"].map(parse_int)
    table: StatisticsTable = {}
    # plain dict assignment: a repeated name keeps its last row
    for name, selected, duration, runs in df.itertuples(index=False, name=None):
        table[name] = HistoricalRecord(
            selected=bool(selected),
            avg_duration_millis=int(duration),
            total_runs=int(runs),
        )
    logger.debug(f"loaded statistics for {len(table)} tests")
    return table
