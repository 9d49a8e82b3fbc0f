"""CLI 인자 파서 설정 모듈.

위치 인자 하나(실행 모드)와 입력/집계/로깅 옵션을 정의한다.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.panel import Panel

from word_counter.constants import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_ENCODING,
    DEFAULT_INPUT_FILE,
    PARALLEL_MODE_ARG,
    TOP_WORDS,
)


class CliHelpFormatter(argparse.ArgumentDefaultsHelpFormatter, argparse.RawTextHelpFormatter):
    """기본값 표시 + 원시 텍스트 도움말"""


class CliArgumentParser(argparse.ArgumentParser):
    """인자 오류를 표준 에러의 Rich 패널로 보여 주고 종료 코드 2로 끝내는 파서."""

    def __init__(self, console: Console | None = None, **kwargs: Any) -> None:
        self.console = console or Console(stderr=True)
        super().__init__(**kwargs)

    def error(self, message: str) -> None:
        self.console.print(
            Panel.fit(
                f"[bold red]인자 오류[/bold red]\n{message}\n\n[dim]도움말: word-counter --help[/dim]",
                title="word-counter",
                border_style="red",
            )
        )
        raise SystemExit(2)


def _bounded_int(value: str, minimum: int) -> int:
    try:
        parsed = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"정수가 아닙니다: {value!r}") from e
    if parsed < minimum:
        raise argparse.ArgumentTypeError(f"{minimum} 이상이어야 합니다: {parsed}")
    return parsed


def non_negative_int(value: str) -> int:
    return _bounded_int(value, 0)


def positive_int(value: str) -> int:
    return _bounded_int(value, 1)


def setup_parser(console: Console | None = None) -> CliArgumentParser:
    """word-counter 인자 파서를 만든다."""
    parser = CliArgumentParser(
        console,
        prog="word-counter",
        description="텍스트 파일의 상위 빈도 단어 집계 CLI",
        formatter_class=CliHelpFormatter,
    )
    parser.add_argument(
        "mode",
        nargs="?",
        default=None,
        help=f"'{PARALLEL_MODE_ARG}'이면 병렬 집계, 그 외 값이나 생략 시 단일 스레드 집계",
    )
    parser.add_argument("--input", type=Path, default=DEFAULT_INPUT_FILE, help="입력 텍스트 파일 경로")
    parser.add_argument("--encoding", default=DEFAULT_ENCODING, help="입력 파일 인코딩")
    parser.add_argument("--top", type=non_negative_int, default=TOP_WORDS, help="출력할 상위 단어 수")
    parser.add_argument("--workers", type=non_negative_int, default=0, help="병렬 집계 스레드 워커 수 (0이면 CPU 수)")
    parser.add_argument(
        "--chunk-size", type=positive_int, default=DEFAULT_CHUNK_SIZE, help="워커 작업 하나에 배정할 줄 수"
    )
    parser.add_argument("--progress", action="store_true", help="병렬 집계 진행바 표시")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="콘솔 로깅 레벨",
    )
    parser.add_argument("--log-dir", type=Path, default=None, help="로그 파일 저장 디렉토리 (생략 시 파일 로그 없음)")

    return parser


def parse_args(parser: argparse.ArgumentParser, argv: Sequence[str] | None = None) -> argparse.Namespace:
    """인자를 파싱한다.

    "-x"처럼 '-'로 시작하는 모드 값은 argparse가 옵션으로 오인하므로,
    모드가 비어 있을 때 인식되지 않은 첫 인자를 모드로 받아들인다.
    그 밖의 인식되지 않은 인자는 오류로 처리한다.
    """
    args, extras = parser.parse_known_args(argv)
    if extras and args.mode is None:
        args.mode = extras.pop(0)
    if extras:
        parser.error(f"인식할 수 없는 인자: {' '.join(extras)}")
    return args
