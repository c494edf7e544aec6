"""정렬된 레코드에서 곡별/아티스트별 최초 차트 진입을 추출하는 모듈."""

from __future__ import annotations

import logging
from typing import Dict, Iterable

from .models import ChartWeekRecord, FirstAppearances

logger = logging.getLogger(__name__)


def _is_earlier(candidate: ChartWeekRecord, current: ChartWeekRecord) -> bool:
    return candidate.chart_week < current.chart_week


def _set_if_earliest(
    mapping: Dict[str, ChartWeekRecord],
    key: str,
    record: ChartWeekRecord,
) -> bool:
    """key에 기록이 없거나 record가 더 이른 주차이면 저장하고 True를 반환한다."""
    existing = mapping.get(key)
    if existing is None or _is_earlier(record, existing):
        mapping[key] = record
        return True
    return False


def reduce_first_appearances(records: Iterable[ChartWeekRecord]) -> FirstAppearances:
    """
    레코드를 한 번 순회하며 최초 진입 레코드를 구한다.

    - performer가 비어 있는 레코드는 무시한다
    - (performer, title) 곡 키의 최초 레코드를 기록한다. 이미 기록된 곡이면
      더 이른 주차인 경우에만 교체하고, 그 외에는 해당 레코드를 건너뛴다
    - 곡의 최초 진입을 새로 기록한 레코드만 아티스트 최초 진입 후보가 된다

    입력이 정렬되어 있지 않아도 "가장 이른 주차 우선" 규칙으로 결과가 같다.
    """
    first = FirstAppearances()
    skipped = 0

    for record in records:
        if not record.performer:
            skipped += 1
            continue

        if not _set_if_earliest(first.songs, record.song_key, record):
            # 이미 본 곡
            continue

        _set_if_earliest(first.performers, record.performer, record)

    if skipped > 0:
        logger.debug("performer가 비어 있는 레코드 %d건을 건너뛰었습니다.", skipped)
    logger.info(
        "최초 진입 추출 완료: 아티스트 %d명, 곡 %d곡",
        first.num_performers,
        first.num_songs,
    )
    return first
