"""단어 빈도 집계 실행 모듈.

입력 파일을 읽고, 선택된 실행 전략으로 빈도 맵을 만든 뒤 상위 단어를 선택한다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from word_counter.constants import DEFAULT_ENCODING, TOP_WORDS
from word_counter.corpus import load_lines
from word_counter.counting import ExecutionStrategy, RankedEntry, select_top
from word_counter.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class CountResult:
    """집계 결과

    Attributes:
        strategy: 사용한 실행 전략 이름
        entries: 카운트 내림차순 상위 항목
        unique_tokens: 고유 토큰 수
        total_tokens: 전체 토큰 수
        read_error: 파일 읽기 실패 원인 (성공하면 None)
    """

    strategy: str
    entries: list[RankedEntry] = field(default_factory=list)
    unique_tokens: int = 0
    total_tokens: int = 0
    read_error: Exception | None = None


def count_words(
    input_path: Path,
    strategy: ExecutionStrategy,
    top: int = TOP_WORDS,
    encoding: str = DEFAULT_ENCODING,
) -> CountResult:
    """파일의 단어 빈도를 집계하고 상위 항목을 선택한다.

    파일을 읽지 못하면 빈 빈도 맵으로 계속 진행하여 빈 결과를 반환한다.

    Args:
        input_path: 입력 텍스트 파일 경로
        strategy: 빈도 집계 실행 전략
        top: 선택할 상위 항목 수
        encoding: 입력 파일 인코딩

    Returns:
        집계 결과
    """
    loaded = load_lines(input_path, encoding)

    frequencies = strategy.aggregate(loaded.lines)
    entries = select_top(frequencies, top)

    total_tokens = sum(frequencies.values())
    logger.info("✅ [%s] 단어 빈도 집계 완료", strategy.get_name())
    logger.info("  └─ 총 토큰: %d개", total_tokens)
    logger.info("  └─ 고유 토큰: %d개", len(frequencies))

    return CountResult(
        strategy=strategy.get_name(),
        entries=entries,
        unique_tokens=len(frequencies),
        total_tokens=total_tokens,
        read_error=loaded.error,
    )
