"""텍스트 매칭 헬퍼 테스트"""
import pytest

from ahaan_thai.utils.text import any_contains_ci, contains_ci, count_by, equals_as_str, to_display_name


class TestDisplayName:
    @pytest.mark.parametrize(
        "key,expected",
        [
            ("thai_curries", "Thai Curries"),
            ("gemuese", "Gemuese"),
            ("andreas_ayasse", "Andreas Ayasse"),
            ("mIxed_case", "MIxed Case"),
        ],
    )
    def test_to_display_name(self, key, expected):
        assert to_display_name(key) == expected


class TestMatching:
    def test_contains_ci(self):
        assert contains_ci("Green Curry", "curry")
        assert not contains_ci(None, "curry")
        assert not contains_ci("", "curry")
        assert contains_ci(2015, "201")
        assert not contains_ci(0.5, "curry")

    def test_any_contains_ci(self):
        assert any_contains_ci(["Soup", "Curry"], "cur")
        assert not any_contains_ci(None, "cur")
        assert not any_contains_ci([], "cur")

    def test_equals_as_str(self):
        assert equals_as_str(2010, "2010")
        assert equals_as_str("2010", "2010")
        assert not equals_as_str(None, "None")


class TestCountBy:
    def test_sorted_descending_skips_empty(self):
        result = count_by(["en", "de", "en", None, "", "th", "en", "de"])
        assert list(result.items()) == [("en", 3), ("de", 2), ("th", 1)]

    def test_numbers_are_stringified(self):
        assert count_by([3, "3", 4]) == {"3": 2, "4": 1}
