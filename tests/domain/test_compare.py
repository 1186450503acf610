# tests/domain/test_compare.py
import re

import pytest

from domain.compare import compare_values, strict_equal, stringify
from domain.path import UNDEFINED


class TestCompareValues:
    @pytest.mark.parametrize(
        "actual,op,expected,result",
        [
            (1, "eq", 1, True),
            (1, "eq", "1", False),
            (True, "eq", 1, False),
            ("a", "ne", "b", True),
            (5, "gt", 3, True),
            (3, "gte", 3, True),
            (2, "lt", 3, True),
            (4, "lte", 3, False),
            ("hello world", "contains", "world", True),
            (123, "contains", "2", False),
            ("abc", "startsWith", "ab", True),
            ("abc", "endsWith", "bc", True),
            ("order-42", "regex", r"^order-\d+$", True),
            (42, "regex", r"^\d+$", True),
        ],
    )
    def test_operator_table(self, actual, op, expected, result):
        assert compare_values(actual, op, expected) is result

    def test_default_operator_is_eq(self):
        assert compare_values("x", "", "x") is True

    def test_undefined_never_equals_none(self):
        assert compare_values(UNDEFINED, "eq", None) is False
        assert compare_values(UNDEFINED, "gt", 1) is False

    def test_ordering_mismatched_types_raises(self):
        with pytest.raises(TypeError):
            compare_values("abc", "gt", 5)

    def test_bad_regex_raises(self):
        with pytest.raises(re.error):
            compare_values("abc", "regex", "(")

    def test_unknown_operator_raises(self):
        with pytest.raises(ValueError, match="unknown operator"):
            compare_values(1, "between", 2)


def test_strict_equal_structures():
    assert strict_equal({"a": [1, 2]}, {"a": [1, 2]}) is True
    assert strict_equal(1, 1.0) is True


def test_stringify_uses_json_spelling():
    assert stringify("abc") == "abc"
    assert stringify(7) == "7"
    assert stringify(True) == "true"
    assert stringify(None) == "null"
    assert stringify({"a": 1}) == '{"a": 1}'
    assert stringify(UNDEFINED) == ""
