from datetime import date

import pytest

from reappearance.models import ChartWeekRecord


SAMPLE_CSV = (
    "chart_week,current_week,title,performer,last_week,peak_pos,wks_on_chart\n"
    "2003-01-04,5,Y,A,,5,1\n"
    "2000-01-01,2,X,A,,2,1\n"
    "2000-01-08,1,X,A,2,1,2\n"
    "2000-01-01,1,Smooth,Santana Featuring Rob Thomas,1,1,23\n"
    "2000-01-01,3,Ghost,,,3,1\n"
)


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture
def make_record():
    """ChartWeekRecord 생성 헬퍼: make_record("A", "X", "2000-01-01", rank=1)."""

    def _make(performer, title, week, rank=1):
        return ChartWeekRecord(
            chart_week=date.fromisoformat(week) if week else None,
            current_week_rank=rank,
            title=title,
            performer=performer,
        )

    return _make
