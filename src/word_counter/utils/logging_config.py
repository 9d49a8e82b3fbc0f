"""로그 콘솔/핸들러 설정"""

import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

# 로그는 표준 에러로 (표준 출력은 결과 보고 전용)
_CONSOLE = Console(stderr=True)

_FILE_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"


def get_console() -> Console:
    return _CONSOLE


def setup_logging(level: int = logging.WARNING, log_dir: Path | None = None) -> Path | None:
    """루트 로거에 Rich 핸들러를 붙이고, log_dir이 있으면 실행별 로그 파일도 남긴다.

    루트 로거에 핸들러가 이미 있으면 아무것도 하지 않는다.
    생성한 로그 파일 경로를 반환한다 (없으면 None).
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return None

    root_logger.setLevel(level)
    console_handler = RichHandler(console=_CONSOLE, show_path=False, markup=False)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    if log_dir is None:
        return None

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"word_counter_{datetime.now():%Y%m%d_%H%M%S}.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    root_logger.addHandler(file_handler)

    root_logger.info("📝 로그 파일: %s", log_file)
    return log_file


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
