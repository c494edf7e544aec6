"""레코드를 결정적인 시간순(주차 → 순위)으로 정렬하는 모듈."""

from __future__ import annotations

import logging
from typing import Iterable, List

from .models import ChartWeekRecord

logger = logging.getLogger(__name__)


def _sort_key(record: ChartWeekRecord):
    # 순위가 없는 레코드는 같은 주 안에서 맨 뒤로
    rank = record.current_week_rank
    return (record.chart_week, rank is None, rank if rank is not None else 0)


def sort_chronologically(records: Iterable[ChartWeekRecord]) -> List[ChartWeekRecord]:
    """
    chart_week 오름차순, 같은 주는 current_week_rank 오름차순으로 안정 정렬한다.

    chart_week가 없는 레코드는 시간축에 놓을 수 없으므로 제거한다.

    Returns:
        정렬된 새 리스트 (입력은 변경하지 않음)
    """
    records = list(records)
    dated = [r for r in records if r.chart_week is not None]
    removed = len(records) - len(dated)
    if removed > 0:
        logger.warning("chart_week 파싱 실패로 %d개 레코드를 제거했습니다.", removed)
    return sorted(dated, key=_sort_key)
