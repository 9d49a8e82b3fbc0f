"""입력 텍스트 파일을 줄 목록으로 읽어들이는 헬퍼입니다."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from word_counter.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class LoadedLines:
    """파일 읽기 결과. 읽기에 실패하면 lines는 비어 있고 error에 원인이 남습니다."""

    path: Path
    lines: list[str]
    error: Exception | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


def read_lines(path: Path, encoding: str) -> list[str]:
    """파일 전체를 메모리로 읽어 줄 목록으로 반환합니다.

    Raises:
        OSError: 파일이 없거나 읽을 수 없는 경우
        UnicodeDecodeError: 지정한 인코딩으로 해석할 수 없는 경우
    """
    with path.open("r", encoding=encoding) as handle:
        return [line.rstrip("\n") for line in handle]


def load_lines(path: Path, encoding: str) -> LoadedLines:
    """파일을 한 번만 읽어 보고, 실패하면 빈 줄 목록과 오류를 담아 반환합니다."""
    try:
        lines = read_lines(path, encoding)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("%s 파일을 읽을 수 없습니다: %s", path, exc)
        return LoadedLines(path=path, lines=[], error=exc)

    logger.info("📂 %s 파일에서 %d줄을 읽었습니다.", path, len(lines))
    return LoadedLines(path=path, lines=lines)
