"""차트 주간 레코드와 집계 결과 데이터 모델 정의."""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional


# 레코드는 동일성(identity)으로 비교한다: 집계 단계에서 "같은 레코드인가"를 판단할 때 사용.
@dataclass(eq=False)
class ChartWeekRecord:
    """특정 주간 차트에 오른 곡 한 건."""
    chart_week: Optional[date]
    current_week_rank: Optional[int]
    title: str
    performer: str
    previous_week_rank: Optional[int] = None  # None = 전주 차트에 없었음
    peak_rank: Optional[int] = None
    weeks_on_chart: Optional[int] = None

    @property
    def song_key(self) -> str:
        """곡 고유 키 '{performer}:{title}'를 생성한다."""
        return f"{self.performer}:{self.title}"


@dataclass
class FirstAppearances:
    """곡별/아티스트별 최초 차트 진입 레코드."""
    songs: Dict[str, ChartWeekRecord] = field(default_factory=dict)
    performers: Dict[str, ChartWeekRecord] = field(default_factory=dict)

    @property
    def num_songs(self) -> int:
        return len(self.songs)

    @property
    def num_performers(self) -> int:
        return len(self.performers)


@dataclass
class Reappearance:
    """첫 진입 이후 오랜 시간이 지나 다시 차트에 오른 곡 (진단 출력용)."""
    performer: str
    breakthrough: ChartWeekRecord
    song: ChartWeekRecord
    years: int

    def describe(self) -> str:
        return (
            f"{self.performer} first appeared in {self.breakthrough.chart_week.year} "
            f'with "{self.breakthrough.title}", and reappeared in {self.song.chart_week.year} '
            f'with "{self.song.title}" ({self.years} years later)'
        )


@dataclass
class YearGapHistogram:
    """첫 진입 후 경과 연수 → 재진입 곡 수 히스토그램."""
    counts: Dict[int, int] = field(default_factory=dict)  # 버킷 생성 순서 유지
    outliers: List[Reappearance] = field(default_factory=list)

    def add(self, years: int) -> None:
        self.counts[years] = self.counts.get(years, 0) + 1

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def items(self, order: str = "year") -> List[tuple]:
        """
        (years, count) 목록을 반환한다.

        Args:
            order: "year" (연수 오름차순) | "insertion" (버킷 생성 순서)
        """
        if order == "insertion":
            return list(self.counts.items())
        if order == "year":
            return sorted(self.counts.items())
        raise ValueError(f"Unsupported histogram order: {order}")
