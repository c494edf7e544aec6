"""Hot 100 CSV 원문을 ChartWeekRecord 목록으로 변환하는 모듈."""

from __future__ import annotations

import io
import logging
from typing import List, Optional

import pandas as pd

from .errors import DatasetFormatError
from .models import ChartWeekRecord

logger = logging.getLogger(__name__)


# 원본 CSV의 컬럼 순서 (헤더 이름과 무관하게 위치로 매핑)
COLUMNS = [
    "chart_week",
    "current_week",
    "title",
    "performer",
    "last_week",
    "peak_pos",
    "wks_on_chart",
]

INT_COLUMNS = ["current_week", "last_week", "peak_pos", "wks_on_chart"]

DATE_FORMAT = "%Y-%m-%d"


def _to_int(x) -> Optional[int]:
    """숫자로 변환된 셀을 int로, 결측/파싱 실패는 None으로 반환한다."""
    if pd.isna(x):
        return None
    return int(x)


def _to_date(x):
    if pd.isna(x):
        return None
    return x.date()


def _keep_leading_fields(fields: List[str]) -> List[str]:
    return fields[: len(COLUMNS)]


def parse_frame(text: str) -> pd.DataFrame:
    """
    CSV 원문을 타입이 지정된 DataFrame으로 변환한다.

    - 첫 행은 헤더로 간주하여 버린다 (없으면 DatasetFormatError)
    - chart_week는 날짜로, 순위/주수 컬럼은 10진 정수로 변환한다
    - 파싱할 수 없는 값은 행을 버리지 않고 결측값(NaT/NA)으로 남긴다

    Returns:
        COLUMNS 순서의 DataFrame
    """
    if not text or not text.strip():
        raise DatasetFormatError("No headers found")

    df = pd.read_csv(
        io.StringIO(text),
        header=None,
        names=COLUMNS,
        dtype=str,
        keep_default_na=False,
        index_col=False,
        skip_blank_lines=True,
        # 필드가 7개를 넘는 행도 버리지 않고 앞의 7개만 위치로 사용
        engine="python",
        on_bad_lines=_keep_leading_fields,
    )
    if df.empty:
        raise DatasetFormatError("No headers found")

    # 헤더 행 제거 (컬럼 이름은 사용하지 않음)
    df = df.iloc[1:].reset_index(drop=True)

    # 컬럼 수가 부족한 행은 빈 문자열로 채운다
    df = df.fillna("")

    df["chart_week"] = pd.to_datetime(df["chart_week"], format=DATE_FORMAT, errors="coerce")
    for col in INT_COLUMNS:
        df[col] = pd.to_numeric(df[col].str.strip(), errors="coerce")

    bad_dates = int(df["chart_week"].isna().sum())
    if bad_dates > 0:
        logger.warning("chart_week 파싱 실패 %d건 (레코드는 유지됨)", bad_dates)

    logger.info("CSV에서 %d개의 행을 읽었습니다.", len(df))
    return df


def parse_records(text: str) -> List[ChartWeekRecord]:
    """CSV 원문을 입력 순서 그대로의 ChartWeekRecord 리스트로 변환한다."""
    df = parse_frame(text)

    records: List[ChartWeekRecord] = []
    for row in df.itertuples(index=False):
        records.append(
            ChartWeekRecord(
                chart_week=_to_date(row.chart_week),
                current_week_rank=_to_int(row.current_week),
                title=row.title,
                performer=row.performer,
                previous_week_rank=_to_int(row.last_week),
                peak_rank=_to_int(row.peak_pos),
                weeks_on_chart=_to_int(row.wks_on_chart),
            )
        )
    return records
