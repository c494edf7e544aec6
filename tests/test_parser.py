from datetime import date

import pytest

from reappearance.errors import DatasetFormatError
from reappearance.parser import parse_frame, parse_records

HEADER = "chart_week,current_week,title,performer,last_week,peak_pos,wks_on_chart\n"


def test_parse_records_basic(sample_csv):
    records = parse_records(sample_csv)

    assert len(records) == 5
    first = records[0]
    assert first.chart_week == date(2003, 1, 4)
    assert first.current_week_rank == 5
    assert first.title == "Y"
    assert first.performer == "A"
    assert first.previous_week_rank is None
    assert first.peak_rank == 5
    assert first.weeks_on_chart == 1

    assert records[2].previous_week_rank == 2
    assert records[4].performer == ""


def test_quoted_title_with_comma():
    text = HEADER + '2000-01-01,7,"Hello, Goodbye",The Beatles,NA,1,10\n'

    (record,) = parse_records(text)

    assert record.title == "Hello, Goodbye"
    assert record.previous_week_rank is None


@pytest.mark.parametrize("text", ["", "   \n", None])
def test_missing_header_raises(text):
    with pytest.raises(DatasetFormatError, match="No headers found"):
        parse_records(text)


def test_header_only_yields_no_records():
    assert parse_records(HEADER) == []


def test_malformed_values_become_none():
    text = HEADER + "not-a-date,x,T,P,?,1,2\n"

    (record,) = parse_records(text)

    assert record.chart_week is None
    assert record.current_week_rank is None
    assert record.previous_week_rank is None
    assert record.peak_rank == 1


def test_short_row_is_padded():
    text = HEADER + "2000-01-01,1,T,P\n"

    df = parse_frame(text)
    (record,) = parse_records(text)

    assert len(df) == 1
    assert record.performer == "P"
    assert record.weeks_on_chart is None


def test_row_with_extra_fields_keeps_leading_seven():
    text = HEADER + "2000-01-01,1,T,P,,1,1,extra\n2000-01-08,1,U,Q,,1,1\n"

    records = parse_records(text)

    assert len(records) == 2
    assert records[0].chart_week == date(2000, 1, 1)
    assert records[0].title == "T"
    assert records[0].performer == "P"
    assert records[0].weeks_on_chart == 1
    assert records[1].performer == "Q"
