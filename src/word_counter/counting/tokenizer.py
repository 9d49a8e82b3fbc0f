"""한 줄의 텍스트를 정규화된 단어 토큰으로 분리한다."""

from __future__ import annotations

import re
from typing import Iterator

from word_counter.constants import DELIMITER_CLASS

# 구분자가 아닌 문자의 최대 연속 구간 하나가 토큰 하나
_TOKEN_RE = re.compile(rf"[^{DELIMITER_CLASS}]+", re.ASCII)


def tokenize(line: str) -> Iterator[str]:
    """줄을 소문자로 바꾼 뒤 구분자 기준으로 토큰을 지연 생성한다.

    연속된 구분자나 앞뒤 구분자는 빈 토큰을 만들지 않는다.
    호출할 때마다 입력 줄에서 새로 토큰을 계산하므로 내부 상태가 남지 않는다.

    Args:
        line: 토큰화할 텍스트 한 줄

    Returns:
        소문자로 정규화된 비어 있지 않은 토큰 이터레이터
    """
    for match in _TOKEN_RE.finditer(line.lower()):
        yield match.group(0)
