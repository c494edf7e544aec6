"""Hot 100 CSV 데이터셋 제공 모듈 - 로컬 캐시 우선, 없으면 원격에서 받아 캐시에 저장."""

import logging
from pathlib import Path
from typing import Optional, Union

import requests

from .errors import DatasetFetchError
from .utils import ensure_parent_dir

logger = logging.getLogger(__name__)

DATA_SOURCE = (
    "https://raw.githubusercontent.com/utdata/rwd-billboard-data/"
    "refs/heads/main/data-out/hot-100-current.csv"
)
DEFAULT_CACHE_PATH = Path("hot-100-current.csv")


class Fetcher:
    """원격 CSV를 가져오는 HTTP Fetcher (requests 기반, 재시도 없음)."""

    def __init__(self, timeout_sec: Optional[float] = None):
        """
        Fetcher를 초기화한다.

        Args:
            timeout_sec: 요청 타임아웃(초). None이면 타임아웃 없이 대기한다.
        """
        self.timeout = timeout_sec
        self._session: Optional[requests.Session] = None

    def _get_session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def fetch_text(self, url: str) -> str:
        """
        지정한 URL에 GET 요청을 한 번 보내고 응답 본문 전체를 반환한다.

        Raises:
            DatasetFetchError: 성공(2xx) 응답이 아닌 경우
        """
        response = self._get_session().get(url, timeout=self.timeout)
        if not response.ok:
            raise DatasetFetchError(response.reason, status_code=response.status_code)
        # raw.githubusercontent.com은 charset을 생략하는 경우가 있어 UTF-8로 고정
        response.encoding = "utf-8"
        return response.text

    def close(self):
        """HTTP 세션을 정리한다."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def read_cache(cache_path: Path) -> Optional[str]:
    """
    캐시 파일을 읽는다. 파일이 없으면 None을 반환한다.

    파일이 없는 경우 외의 읽기 오류(권한 등)는 그대로 전파된다.
    """
    try:
        # newline=""로 줄바꿈(CRLF 포함)을 파일 그대로 반환
        with open(cache_path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError:
        logger.debug("캐시 파일이 없습니다: %s", cache_path)
        return None


def write_cache(cache_path: Path, text: str) -> None:
    """받은 본문을 그대로 캐시 파일에 저장한다."""
    ensure_parent_dir(cache_path)
    # newline=""로 원본 줄바꿈을 변환 없이 보존
    with open(cache_path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
    logger.info("데이터셋을 캐시에 저장했습니다: %s (%d bytes)", cache_path, len(text))


def load_dataset(
    cache_path: Union[str, Path] = DEFAULT_CACHE_PATH,
    source_url: str = DATA_SOURCE,
    fetcher: Optional[Fetcher] = None,
) -> str:
    """
    CSV 원문을 반환한다.

    - 캐시 파일이 있고 비어 있지 않으면 그 내용을 그대로 반환 (네트워크 요청 없음)
    - 없으면 source_url에서 한 번 받아와 캐시에 기록한 뒤 반환

    Args:
        cache_path: 로컬 캐시 파일 경로
        source_url: 원격 CSV URL
        fetcher: 사용할 Fetcher (없으면 내부에서 생성 후 정리)

    Raises:
        DatasetFetchError: 원격 요청이 실패 응답을 받은 경우
        OSError: 캐시 읽기/쓰기 실패 (파일 없음 제외)
    """
    cache_path = Path(cache_path)

    cached = read_cache(cache_path)
    if cached:
        logger.info("캐시된 데이터셋 사용: %s", cache_path)
        return cached

    logger.info("Fetching data from source...")
    if fetcher is None:
        with Fetcher() as own_fetcher:
            text = own_fetcher.fetch_text(source_url)
    else:
        text = fetcher.fetch_text(source_url)

    write_cache(cache_path, text)
    return text
