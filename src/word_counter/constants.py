"""중앙화된 상수 관리

이 모듈은 프로젝트 전체에서 사용되는 입력 경로, 토큰 구분자, 출력 문구를 중앙에서 관리한다.
모든 하드코딩된 값은 이 모듈의 상수를 참조해야 한다.
"""

from __future__ import annotations

from pathlib import Path

# ====================================================================
# 📁 입력 경로
# ====================================================================

DEFAULT_INPUT_FILE = Path("tempest.txt")
DEFAULT_ENCODING = "utf-8"

# ====================================================================
# 🔤 토큰화 규칙
# ====================================================================

# 단어 경계로 취급하는 문자 집합 (공백은 ASCII 공백류만 해당)
DELIMITER_CLASS = r"&.,:;!?\s\[\]"

# ====================================================================
# 📈 집계/선택 설정
# ====================================================================

TOP_WORDS = 10
DEFAULT_CHUNK_SIZE = 256

# ====================================================================
# ⚙️ 실행 전략
# ====================================================================

SEQUENTIAL = "sequential"
CONCURRENT = "concurrent"
PARALLEL_MODE_ARG = "parallel"

# ====================================================================
# 📝 출력 문구
# ====================================================================

ERROR_CANNOT_BE_READ = "File cannot be read"
ELAPSED_TEMPLATE = "Executed in {elapsed_ms} milliseconds"
