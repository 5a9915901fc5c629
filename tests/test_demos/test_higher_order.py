"""Tests for langtour.demos.higher_order — execute and repeat."""
from __future__ import annotations

import pytest

from langtour.demos.higher_order import (
    REPEAT_COUNT,
    execute,
    inline_repeat,
    main,
    repeat,
    use_inline_repeat,
    use_repeat,
)


def test_execute_calls_once_immediately() -> None:
    calls: list[int] = []
    execute(lambda: calls.append(1))
    assert calls == [1]


@pytest.mark.parametrize("helper", [repeat, inline_repeat])
class TestRepeat:
    def test_repeats_given_count(self, helper) -> None:
        calls: list[int] = []
        helper(lambda: calls.append(len(calls)), 4)
        assert calls == [0, 1, 2, 3]

    def test_default_count_is_one(self, helper) -> None:
        calls: list[int] = []
        helper(lambda: calls.append(1))
        assert calls == [1]

    @pytest.mark.parametrize("times", [0, -3])
    def test_non_positive_count_calls_nothing(self, helper, times: int) -> None:
        calls: list[int] = []
        helper(lambda: calls.append(1), times)
        assert calls == []

    def test_count_by_keyword(self, helper) -> None:
        calls: list[int] = []
        helper(lambda: calls.append(1), times=2)
        assert calls == [1, 1]

    def test_function_is_required(self, helper) -> None:
        with pytest.raises(TypeError):
            helper()


def test_use_repeat_emits_ten_lines() -> None:
    lines: list[str] = []
    use_repeat(lines.append)
    assert lines == ["Repeat"] * REPEAT_COUNT


def test_use_inline_repeat_matches_use_repeat() -> None:
    first: list[str] = []
    second: list[str] = []
    use_repeat(first.append)
    use_inline_repeat(second.append)
    assert first == second


def test_use_repeat_defaults_to_print(capsys: pytest.CaptureFixture[str]) -> None:
    use_repeat()
    assert capsys.readouterr().out == "Repeat\n" * 10


def test_main_prints_one_line(capsys: pytest.CaptureFixture[str]) -> None:
    main()
    assert capsys.readouterr().out == "Repeat x10\n"
