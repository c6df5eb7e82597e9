# Руководство к файлу (TESTS/unit/test_types_unit.py)
# Назначение:
# - Unit-тесты Result: ровно одно из полей title/error.

from __future__ import annotations

import pytest

from titlextractor.core.errors import describe_error
from titlextractor.core.types import Result, Title


def test_success_and_failure_constructors():
    ok = Result.success("http://a", 200, Title("A"))
    bad = Result.failure("http://b", "no such host")

    assert ok.ok and ok.error is None and ok.title == Title("A")
    assert not bad.ok and bad.title is None and bad.status == 0


def test_result_with_both_title_and_error_is_rejected():
    with pytest.raises(ValueError):
        Result(url="http://a", status=200, title=Title("A"), error="boom")


def test_result_with_neither_title_nor_error_is_rejected():
    with pytest.raises(ValueError):
        Result(url="http://a", status=200)


def test_describe_error_falls_back_to_class_name():
    assert describe_error(TimeoutError()) == "TimeoutError"
    assert describe_error(OSError("refused")) == "refused"
