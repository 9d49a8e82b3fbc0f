"""단어 토큰화, 빈도 집계, 상위 K개 선택 모듈.

입력 줄을 토큰으로 분리하고 실행 전략에 따라 빈도 맵을 구성한 뒤,
완성된 빈도 맵에서 상위 단어를 결정적 순서로 선택한다.
"""

from __future__ import annotations

from .aggregator import FrequencyMap, SharedFrequencyMap, count_tokens
from .selector import RankedEntry, format_entries, select_top
from .strategy import (
    ConcurrentStrategy,
    ExecutionStrategy,
    SequentialStrategy,
    available_strategies,
    create_strategy,
    resolve_mode,
)
from .tokenizer import tokenize

__all__ = [
    "ConcurrentStrategy",
    "ExecutionStrategy",
    "FrequencyMap",
    "RankedEntry",
    "SequentialStrategy",
    "SharedFrequencyMap",
    "available_strategies",
    "count_tokens",
    "create_strategy",
    "format_entries",
    "resolve_mode",
    "select_top",
    "tokenize",
]
