"""텍스트 매칭 헬퍼"""
import re
from collections import Counter
from typing import Any, Iterable, Optional

_WORD_START = re.compile(r"\b\w", re.ASCII)


def to_display_name(key: str) -> str:
    """
    키를 사람이 읽는 이름으로 변환 ("_" -> 공백, 각 단어 첫 글자 대문자)

    나머지 글자는 그대로 둡니다 (str.title()과 다름).

    Examples:
        >>> to_display_name("thai_curries")
        'Thai Curries'
        >>> to_display_name("gemuese")
        'Gemuese'
    """
    return _WORD_START.sub(lambda m: m.group(0).upper(), key.replace("_", " "))


def contains_ci(haystack: Optional[Any], needle_lower: str) -> bool:
    """대소문자 무시 부분 문자열 포함 여부 (needle은 이미 소문자, 문자열이 아닌 값은 str로 비교)"""
    if haystack is None or haystack == "":
        return False
    return needle_lower in str(haystack).lower()


def any_contains_ci(values: Optional[Iterable[str]], needle_lower: str) -> bool:
    if not values:
        return False
    return any(contains_ci(v, needle_lower) for v in values)


def equals_as_str(value: Any, expected: str) -> bool:
    """숫자/문자열 필드를 문자열로 비교 (year, level, isbn)"""
    return value is not None and str(value) == expected


def count_by(values: Iterable[Any]) -> dict[str, int]:
    """값별 개수를 내림차순으로 (동률은 처음 나온 순서). 빈 값은 제외"""
    counter: Counter[str] = Counter(str(v) for v in values if v)
    return dict(counter.most_common())
