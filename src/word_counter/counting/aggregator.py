"""토큰 빈도 집계 모듈.

단일 작성자가 사용하는 배타적 집계와 여러 워커가 하나의 맵을 공유하는 동시 집계를 제공한다.
두 방식 모두 같은 입력에 대해 동일한 키와 카운트를 갖는 빈도 맵을 만든다.
"""

from __future__ import annotations

from collections import Counter
from threading import Lock
from typing import Iterable, Mapping

from .tokenizer import tokenize

# 토큰 -> 출현 횟수. Counter는 최초 삽입 순서를 보존한다.
FrequencyMap = Counter[str]


def count_tokens(lines: Iterable[str], counter: FrequencyMap | None = None) -> FrequencyMap:
    """줄 단위로 토큰을 세어 빈도 맵에 누적한다.

    Args:
        lines: 입력 텍스트 줄 이터러블
        counter: 누적 대상 빈도 맵 (None이면 새로 생성)

    Returns:
        누적이 끝난 빈도 맵
    """
    if counter is None:
        counter = Counter()
    for line in lines:
        counter.update(tokenize(line))
    return counter


class SharedFrequencyMap:
    """여러 워커가 동시에 갱신하는 공유 빈도 맵.

    맵 전체를 하나의 락으로 보호하며, 단일 토큰 증가와 부분 맵 병합은 각각 원자적으로 수행된다.
    동시 갱신 시 카운트는 항상 정확하지만 최초 삽입 순서는 스레드 스케줄링에 따라 달라진다.

    Attributes:
        lock: 맵 전체를 보호하는 락
    """

    def __init__(self) -> None:
        self.lock = Lock()
        self._counter: FrequencyMap = Counter()

    def increment(self, token: str, count: int = 1) -> None:
        """토큰 하나의 카운트를 원자적으로 증가시킨다."""
        if count < 0:
            raise ValueError("카운트는 감소할 수 없습니다.")
        with self.lock:
            self._counter[token] += count

    def merge(self, partial: Mapping[str, int]) -> None:
        """워커가 만든 부분 빈도 맵을 한 번의 락 구간에서 합산한다."""
        with self.lock:
            self._counter.update(partial)

    def __len__(self) -> int:
        with self.lock:
            return len(self._counter)

    def __getitem__(self, token: str) -> int:
        with self.lock:
            return self._counter[token]

    def freeze(self) -> FrequencyMap:
        """집계 완료 후 읽기 전용으로 넘길 빈도 맵 사본을 반환한다."""
        with self.lock:
            return Counter(self._counter)
