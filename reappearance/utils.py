"""공통 유틸리티: 로깅 설정, 캐시 경로 준비."""

import logging
from pathlib import Path
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_log_level(level: Union[int, str]) -> int:
    """'INFO' 같은 레벨 이름 또는 정수를 logging 레벨 값으로 변환한다."""
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """루트 로거를 설정한다. 로그는 stderr로, 리포트는 stdout으로 분리된다."""
    logging.basicConfig(level=resolve_log_level(level), format=LOG_FORMAT)


def ensure_parent_dir(path: Path) -> Path:
    """파일 경로의 상위 디렉토리가 없으면 생성하고 원래 경로를 반환한다."""
    path.parent.mkdir(parents=True, exist_ok=True)
    return path
