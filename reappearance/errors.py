"""분석 파이프라인에서 사용하는 예외 정의."""

from typing import Optional


class ReappearanceError(Exception):
    """reappearance 패키지 공통 기본 예외."""


class DatasetFetchError(ReappearanceError):
    """원격 데이터셋 요청이 성공 응답을 받지 못한 경우."""

    def __init__(self, reason: str, status_code: Optional[int] = None):
        super().__init__(f"Failed to fetch data: {reason}")
        self.reason = reason
        self.status_code = status_code


class DatasetFormatError(ReappearanceError, ValueError):
    """CSV 원본이 기대한 형식이 아닌 경우 (헤더 누락 등)."""
