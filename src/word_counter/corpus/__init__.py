"""입력 텍스트 파일 로딩 모듈."""

from __future__ import annotations

from .reader import LoadedLines, load_lines, read_lines

__all__ = ["LoadedLines", "load_lines", "read_lines"]
