"""분석 설정: 기본값 + 선택적 YAML 파일 + LOG_LEVEL 환경 변수."""

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Union

import yaml

from .aggregator import DEFAULT_OUTLIER_YEARS
from .provider import DATA_SOURCE, DEFAULT_CACHE_PATH

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("reappearance.yaml")
HISTOGRAM_ORDERS = ("year", "insertion")

# 설정 파일로 바꿀 수 있는 키. 리포트 내용에 영향을 주는 값은 코드에서만 지정한다.
FILE_KEYS = ("cache_path", "log_level")


@dataclass(frozen=True)
class Settings:
    """파이프라인 실행 설정."""
    source_url: str = DATA_SOURCE
    cache_path: Path = DEFAULT_CACHE_PATH
    outlier_years: int = DEFAULT_OUTLIER_YEARS
    histogram_order: str = "year"  # "year" | "insertion"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.histogram_order not in HISTOGRAM_ORDERS:
            raise ValueError(
                f"histogram_order must be one of {HISTOGRAM_ORDERS}, "
                f"got {self.histogram_order!r}"
            )
        if not isinstance(self.cache_path, Path):
            object.__setattr__(self, "cache_path", Path(self.cache_path))


def load_config(config_path: Union[str, Path]) -> dict:
    """YAML 설정 파일을 로드한다."""
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_settings(config_path: Optional[Union[str, Path]] = DEFAULT_CONFIG_PATH) -> Settings:
    """
    Settings를 구성한다.

    - config_path 파일이 있으면 FILE_KEYS에 해당하는 값만 덮어쓴다 (없으면 기본값)
    - LOG_LEVEL 환경 변수가 있으면 log_level보다 우선한다

    Raises:
        ValueError: FILE_KEYS 외의 키
    """
    settings = Settings()

    if config_path is not None and Path(config_path).exists():
        overrides = load_config(config_path)
        if not isinstance(overrides, dict):
            raise ValueError(f"Config root must be a mapping: {config_path}")
        unknown = sorted(set(overrides) - set(FILE_KEYS))
        if unknown:
            raise ValueError(f"Unknown config keys in {config_path}: {unknown}")
        settings = replace(settings, **overrides)
        logger.debug("설정 파일 적용: %s", config_path)

    env_level = os.getenv("LOG_LEVEL")
    if env_level:
        settings = replace(settings, log_level=env_level.upper())

    return settings
