"""집계 결과를 텍스트 라인으로 출력하는 모듈."""

from __future__ import annotations

from typing import Callable, Iterable, List

from .models import FirstAppearances, YearGapHistogram

HISTOGRAM_HEADER = "Years since first appearance by performer,# of reappearances"


def build_report_lines(
    first: FirstAppearances,
    histogram: YearGapHistogram,
    order: str = "year",
) -> List[str]:
    """
    리포트 라인 목록을 생성한다.

    순서: 장기 재진입 진단 라인 → 아티스트/곡 수 → 빈 줄 → 히스토그램 헤더 → 버킷별 라인
    """
    lines = [outlier.describe() for outlier in histogram.outliers]
    lines.append(f"# of performers: {first.num_performers}")
    lines.append(f"# of songs: {first.num_songs}")
    lines.append("")
    lines.append(HISTOGRAM_HEADER)
    for years, count in histogram.items(order):
        lines.append(f"{years},{count}")
    return lines


def print_report(lines: Iterable[str], out: Callable[[str], None] = print) -> None:
    """리포트 라인을 한 줄씩 출력한다 (기본: stdout)."""
    for line in lines:
        out(line)
