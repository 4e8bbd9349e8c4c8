"""테스트 자산(데이터) 레이어

규칙:
- 로직 없음 (단순 dict/list/primitive)
- 네트워크 의존 없음
"""

from .datasets import BOOKS_RAW, DICTIONARY_RAW, ENCYCLOPEDIA_RAW, LIBRARY_RAW

__all__ = [
    "DICTIONARY_RAW",
    "BOOKS_RAW",
    "LIBRARY_RAW",
    "ENCYCLOPEDIA_RAW",
]
