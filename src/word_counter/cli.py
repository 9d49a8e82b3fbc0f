"""word-counter CLI 진입점 모듈.

텍스트 파일의 상위 빈도 단어를 출력하고 실행 시간을 보고한다.
결과는 표준 출력에, 로그와 오류 패널은 Rich 기반으로 표준 에러에 출력한다.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from time import perf_counter
from typing import Any

from rich.panel import Panel
from rich.table import Table

from word_counter.constants import CONCURRENT, ELAPSED_TEMPLATE, ERROR_CANNOT_BE_READ
from word_counter.counting import ExecutionStrategy, create_strategy, format_entries, resolve_mode
from word_counter.parser import parse_args, setup_parser
from word_counter.runner import count_words
from word_counter.utils.logging_config import get_console, get_logger, setup_logging

LOGGER_NAME = "word_counter.cli"


def emit(line: str) -> None:
    """결과 한 줄을 가공 없이 표준 출력에 쓴다."""
    print(line)


def build_strategy(args: argparse.Namespace) -> ExecutionStrategy:
    """CLI 인자로부터 실행 전략을 생성한다.

    Args:
        args: 파싱된 커맨드라인 인자

    Returns:
        생성된 ExecutionStrategy 객체
    """
    name = resolve_mode(args.mode)
    options: dict[str, Any] = {}
    if name == CONCURRENT:
        options = {"workers": args.workers, "chunk_size": args.chunk_size, "show_progress": args.progress}
    return create_strategy(name, **options)


def format_elapsed(elapsed: float) -> str:
    """경과 시간(초)을 보고 문구로 변환한다."""
    return ELAPSED_TEMPLATE.format(elapsed_ms=int(elapsed * 1000))


# Error categorization strategy
_ERROR_CATEGORIES = {
    ValueError: ("입력값 오류", "⚠️"),
}


def handle_error(error: Exception, logger: logging.Logger) -> None:
    """에러를 로깅하고 Rich 패널로 표준 에러에 출력한다.

    Args:
        error: 발생한 예외
        logger: 로거 객체
    """
    category, icon = _ERROR_CATEGORIES.get(type(error), ("예기치 않은 오류", "❌"))

    if type(error) in _ERROR_CATEGORIES:
        logger.error("%s: %s", category, error)
    else:
        logger.exception("실행 중 예기치 않은 오류 발생")

    error_table = Table(show_header=False, border_style="dim red", padding=(0, 1))
    error_table.add_column("항목", style="bold red", width=15)
    error_table.add_column("내용", style="white")
    error_table.add_row("카테고리", f"{icon} {category}")
    error_table.add_row("오류 타입", type(error).__name__)
    error_table.add_row("메시지", str(error))

    get_console().print(
        Panel(error_table, title="[bold red]❌ 실행 실패[/bold red]", border_style="red", padding=(1, 2))
    )


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 엔트리 포인트.

    상위 단어 목록을 출력한 뒤, 성공 여부와 관계없이 실행 시간 줄을 출력한다.
    파일을 읽지 못한 경우 고정 오류 문구를 출력하고 빈 결과로 정상 종료한다.

    Args:
        argv: 커맨드라인 인자 (None이면 sys.argv 사용)

    Returns:
        종료 코드 (0: 성공, 1: 오류, 130: 사용자 중단)
    """
    args = parse_args(setup_parser(get_console()), argv)
    setup_logging(getattr(logging, args.log_level), log_dir=args.log_dir)
    logger = get_logger(LOGGER_NAME)
    start = perf_counter()

    try:
        strategy = build_strategy(args)
        logger.info("[%s] 집계 시작: %s", strategy.get_name(), args.input)
        result = count_words(args.input, strategy, top=args.top, encoding=args.encoding)

        if result.read_error is not None:
            emit(ERROR_CANNOT_BE_READ)
        for line in format_entries(result.entries):
            emit(line)
        return 0

    except KeyboardInterrupt:
        logger.warning("사용자 요청으로 실행 중단됨")
        return 130

    except Exception as e:
        handle_error(e, logger)
        return 1

    finally:
        emit(format_elapsed(perf_counter() - start))


if __name__ == "__main__":
    raise SystemExit(main())
