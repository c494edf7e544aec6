"""아티스트 첫 진입 이후 다른 곡이 처음 진입하기까지의 경과 연수를 집계하는 모듈."""

from __future__ import annotations

import logging
from datetime import date

from .models import FirstAppearances, Reappearance, YearGapHistogram

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365  # 윤년 보정 없는 고정 길이 연
DEFAULT_OUTLIER_YEARS = 40


def year_gap(earlier: date, later: date) -> int:
    """두 날짜 사이의 365일 단위 경과 연수(내림)를 반환한다."""
    return (later - earlier).days // DAYS_PER_YEAR


def aggregate_year_gaps(
    first: FirstAppearances,
    outlier_years: int = DEFAULT_OUTLIER_YEARS,
) -> YearGapHistogram:
    """
    곡별 최초 진입을 순회하며 연수 히스토그램을 만든다.

    - 아티스트의 최초 진입 곡(브레이크스루) 자체는 집계하지 않는다
    - 경과 연수가 outlier_years를 초과하면 진단용 Reappearance로 기록한다

    Returns:
        YearGapHistogram (counts는 버킷 생성 순서를 유지)
    """
    histogram = YearGapHistogram()

    for song in first.songs.values():
        breakthrough = first.performers[song.performer]
        if breakthrough is song:
            continue

        years = year_gap(breakthrough.chart_week, song.chart_week)
        histogram.add(years)

        if years > outlier_years:
            outlier = Reappearance(
                performer=song.performer,
                breakthrough=breakthrough,
                song=song,
                years=years,
            )
            histogram.outliers.append(outlier)
            logger.info("장기 재진입: %s", outlier.describe())

    logger.info(
        "연수 집계 완료: 재진입 %d곡, 버킷 %d개, 장기 재진입 %d건",
        histogram.total,
        len(histogram.counts),
        len(histogram.outliers),
    )
    return histogram
