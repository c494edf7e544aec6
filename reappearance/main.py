"""Hot 100 재진입 분석 엔트리포인트.

인자 없이 실행하며 항상 같은 계산을 수행한다:
    python -m reappearance.main
"""

import logging
import sys
from typing import Callable, Optional, Tuple

from . import aggregator, normalizer, parser, provider, reducer, report
from .config import Settings, load_settings
from .errors import ReappearanceError
from .models import FirstAppearances, YearGapHistogram
from .utils import setup_logging

logger = logging.getLogger(__name__)


def run(
    settings: Settings,
    fetcher: Optional[provider.Fetcher] = None,
    out: Callable[[str], None] = print,
) -> Tuple[FirstAppearances, YearGapHistogram]:
    """데이터 확보 → 파싱 → 정렬 → 최초 진입 추출 → 연수 집계 → 출력."""
    text = provider.load_dataset(settings.cache_path, settings.source_url, fetcher)

    records = parser.parse_records(text)
    records = normalizer.sort_chronologically(records)

    first = reducer.reduce_first_appearances(records)
    histogram = aggregator.aggregate_year_gaps(first, outlier_years=settings.outlier_years)

    lines = report.build_report_lines(first, histogram, order=settings.histogram_order)
    report.print_report(lines, out=out)
    return first, histogram


def main() -> None:
    """Main CLI entrypoint."""
    try:
        settings = load_settings()
        setup_logging(settings.log_level)
        run(settings)
    except (ReappearanceError, OSError, ValueError) as e:
        logger.error("분석 실패: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
