"""빈도 집계 실행 전략.

입력 줄 전체를 소비하여 완성된 빈도 맵을 만드는 공통 인터페이스와
순차(sequential) / 동시(concurrent) 두 가지 구현을 제공한다.
전략은 이름으로 등록되며 설정값으로 선택된다.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections import Counter
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from itertools import islice
from typing import Iterable, Iterator

from tqdm import tqdm

from word_counter.constants import CONCURRENT, DEFAULT_CHUNK_SIZE, PARALLEL_MODE_ARG, SEQUENTIAL

from word_counter.utils.logging_config import get_logger

from .aggregator import FrequencyMap, SharedFrequencyMap, count_tokens

logger = get_logger(__name__)

_STRATEGY_REGISTRY: dict[str, Callable[..., ExecutionStrategy]] = {}


def register_strategy(name: str) -> Callable:
    """전략 클래스를 레지스트리에 등록하는 데코레이터.

    Args:
        name: 전략 이름 (설정값)

    Returns:
        데코레이터 함수
    """
    def decorator(factory: Callable[..., ExecutionStrategy]) -> Callable:
        _STRATEGY_REGISTRY[name] = factory
        return factory
    return decorator


class ExecutionStrategy(ABC):
    """빈도 집계 실행 전략 인터페이스.

    모든 전략은 aggregate()와 get_name()을 구현해야 한다.
    어떤 전략을 쓰든 같은 입력에 대해 같은 키와 카운트를 갖는 빈도 맵을 반환한다.
    """

    @abstractmethod
    def aggregate(self, lines: Iterable[str]) -> FrequencyMap:
        """입력 줄 전체를 소비하여 완성된 빈도 맵을 반환한다.

        Args:
            lines: 입력 텍스트 줄 이터러블

        Returns:
            토큰별 출현 횟수를 담은 빈도 맵

        Raises:
            NotImplementedError: 서브클래스에서 구현되지 않은 경우
        """
        raise NotImplementedError

    @abstractmethod
    def get_name(self) -> str:
        """전략 이름을 반환한다."""
        raise NotImplementedError


@register_strategy(SEQUENTIAL)
class SequentialStrategy(ExecutionStrategy):
    """단일 작성자가 줄 순서대로 집계하는 전략.

    동시성 오버헤드가 없고, 동률 토큰의 순서가 실행마다 재현된다.
    """

    def aggregate(self, lines: Iterable[str]) -> FrequencyMap:
        return count_tokens(lines)

    def get_name(self) -> str:
        return SEQUENTIAL


@register_strategy(CONCURRENT)
class ConcurrentStrategy(ExecutionStrategy):
    """스레드 풀 워커들이 줄 청크를 나누어 공유 빈도 맵에 병합하는 전략.

    각 워커는 배정된 청크를 부분 빈도 맵으로 집계한 뒤 공유 맵의 락 구간 안에서 합산한다.
    최종 카운트는 순차 전략과 같지만, 동률 토큰의 순서는 실행마다 달라질 수 있다.

    Attributes:
        workers: 스레드 워커 수
        chunk_size: 워커 작업 하나에 배정할 줄 수
        show_progress: tqdm 진행바 표시 여부
    """

    def __init__(
        self,
        workers: int = 0,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        show_progress: bool = False,
    ) -> None:
        """동시 집계 전략을 생성한다.

        Args:
            workers: 스레드 워커 수 (0이면 CPU 수)
            chunk_size: 워커 작업 하나에 배정할 줄 수
            show_progress: tqdm 진행바 표시 여부
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size는 1 이상이어야 합니다: {chunk_size}")
        # 워커 수 계산
        if workers <= 0:
            workers = max(1, os.cpu_count() or 1)
        self.workers = workers
        self.chunk_size = chunk_size
        self.show_progress = show_progress

    def aggregate(self, lines: Iterable[str]) -> FrequencyMap:
        shared = SharedFrequencyMap()

        # 입력 줄 청크 분할
        def chunk_iter(source: Iterable[str]) -> Iterator[list[str]]:
            iterator = iter(source)
            while True:
                chunk = list(islice(iterator, self.chunk_size))
                if not chunk:
                    break
                yield chunk

        # 청크 단위 부분 집계 후 공유 맵에 병합
        def count_chunk(chunk: list[str]) -> int:
            partial = count_tokens(chunk, Counter())
            shared.merge(partial)
            return len(chunk)

        logger.debug("동시 집계 설정: workers=%d, chunk_size=%d", self.workers, self.chunk_size)
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            for _ in tqdm(
                executor.map(count_chunk, chunk_iter(lines)),
                desc="집계",
                unit="청크",
                disable=not self.show_progress,
            ):
                pass

        return shared.freeze()

    def get_name(self) -> str:
        return CONCURRENT


def available_strategies() -> list[str]:
    """등록된 전략 이름 목록을 반환한다."""
    return sorted(_STRATEGY_REGISTRY)


def create_strategy(name: str, **options: object) -> ExecutionStrategy:
    """이름에 해당하는 전략 객체를 생성한다.

    Args:
        name: 전략 이름
        **options: 전략 생성자 인자 (workers, chunk_size, show_progress)

    Returns:
        생성된 ExecutionStrategy 객체

    Raises:
        ValueError: 등록되지 않은 전략 이름인 경우
    """
    factory = _STRATEGY_REGISTRY.get(name)
    if factory is None:
        raise ValueError(f"'{name}'는 유효하지 않은 실행 전략입니다. 가능한 값: {', '.join(available_strategies())}")
    return factory(**options)


def resolve_mode(mode_arg: str | None) -> str:
    """CLI 위치 인자를 전략 이름으로 변환한다.

    "parallel"이면 동시 전략, 그 외 값이나 인자가 없으면 순차 전략을 선택한다.
    """
    return CONCURRENT if mode_arg == PARALLEL_MODE_ARG else SEQUENTIAL
