"""텍스트 단어 빈도 집계 패키지.

텍스트 파일을 단어 단위로 토큰화하여 출현 횟수를 세고, 가장 많이 등장한 상위 N개 단어를 보고한다.
단일 스레드 순차 집계와 스레드 풀 기반 병렬 집계 두 가지 실행 전략을 제공한다.
"""

__version__ = "0.1.0"
