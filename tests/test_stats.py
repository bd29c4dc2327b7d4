import pytest

from selective_tests.errors import StatisticsParseError
from selective_tests.schema import HistoricalRecord
from selective_tests.stats import load_statistics, parse_int

HEADER = b"TEST_NAME,SELECTED,AVG_DURATION,TOTAL_RUNS\n"


def test_header_only_is_empty():
    assert load_statistics(HEADER) == {}


def test_empty_payload_is_empty():
    assert load_statistics(b"") == {}


def test_rows_are_parsed():
    body = HEADER + b"acceptance/a,no,100,5\nacceptance/b,yes,2500,40\n"
    table = load_statistics(body)
    assert table == {
        "acceptance/a": HistoricalRecord(selected=False, avg_duration_millis=100, total_runs=5),
        "acceptance/b": HistoricalRecord(selected=True, avg_duration_millis=2500, total_runs=40),
    }


def test_anything_but_no_is_selected():
    body = HEADER + b"a,NO,1,1\nb,,1,1\nc,maybe,1,1\n"
    table = load_statistics(body)
    assert all(rec.selected for rec in table.values())


def test_unparsable_numbers_are_zero():
    body = HEADER + b"a,no,abc,1.5\n"
    rec = load_statistics(body)["a"]
    assert rec.avg_duration_millis == 0
    assert rec.total_runs == 0
    assert rec.selected is False


def test_duplicate_names_last_row_wins():
    body = HEADER + b"a,no,1,1\na,yes,2,2\n"
    assert load_statistics(body)["a"] == HistoricalRecord(
        selected=True, avg_duration_millis=2, total_runs=2)


def test_short_row_fails():
    body = HEADER + b"a,no,100,5\nb,no,100\n"
    with pytest.raises(StatisticsParseError):
        load_statistics(body)


def test_long_row_fails():
    body = HEADER + b"a,no,100,5\nb,no,100,5,extra\n"
    with pytest.raises(StatisticsParseError):
        load_statistics(body)


def test_three_column_table_fails():
    with pytest.raises(StatisticsParseError):
        load_statistics(b"TEST_NAME,SELECTED,AVG_DURATION\na,no,1\n")


@pytest.mark.parametrize("cell, expected", [
    ("42", 42),
    ("-7", -7),
    ("+3", 3),
    ("", 0),
    (" 4", 0),
    ("1e3", 0),
    ("99999999999999999999", 2**63 - 1),
])
def test_parse_int(cell, expected):
    assert parse_int(cell) == expected


def test_undecodable_name_still_loads():
    table = load_statistics(HEADER + b"a\xff,no,1,1\nb,no,1,1\n")
    assert len(table) == 2
    assert table["b"].selected is False
    assert table[b"a\xff".decode("utf-8", errors="surrogateescape")].total_runs == 1


def test_bare_quote_is_kept_in_name():
    # unlike stricter CSV readers, a quote inside an unquoted cell is literal
    table = load_statistics(HEADER + b'a"b,no,1,1\n')
    assert list(table) == ['a"b']
