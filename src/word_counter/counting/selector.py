"""완성된 빈도 맵에서 상위 K개 항목을 선택한다."""

from __future__ import annotations

from typing import Mapping, NamedTuple


class RankedEntry(NamedTuple):
    """순위가 매겨진 (토큰, 카운트) 쌍"""

    token: str
    count: int

    def __str__(self) -> str:
        return f"{self.token} ({self.count})"


def select_top(frequencies: Mapping[str, int], k: int) -> list[RankedEntry]:
    """카운트 내림차순으로 상위 k개 항목을 반환한다.

    카운트가 같은 토큰은 빈도 맵에 처음 삽입된 순서를 유지한다 (안정 정렬).
    항목 수가 k보다 적으면 전체 항목을 반환한다.

    Args:
        frequencies: 집계가 끝난 빈도 맵
        k: 반환할 최대 항목 수

    Returns:
        카운트가 증가하지 않는 순서의 RankedEntry 리스트

    Raises:
        ValueError: k가 음수인 경우
    """
    if k < 0:
        raise ValueError(f"k는 0 이상이어야 합니다: {k}")
    rows = sorted(frequencies.items(), key=lambda item: -item[1])
    return [RankedEntry(token, count) for token, count in rows[:k]]


def format_entries(entries: list[RankedEntry]) -> list[str]:
    """RankedEntry를 "<token> (<count>)" 형식의 문자열로 변환한다."""
    return [str(entry) for entry in entries]
