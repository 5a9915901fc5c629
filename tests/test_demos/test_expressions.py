"""Tests for langtour.demos.expressions — conditionals that yield values."""
from __future__ import annotations

import pytest

from langtour.demos.expressions import (
    YesNo,
    convert_to_yes_no_expression,
    convert_to_yes_no_expression_inferred,
    convert_to_yes_no_full,
    convert_to_yes_no_if_expression,
    convert_to_yes_no_short,
    main,
    to_yes_no,
)

CONVERTERS = [
    convert_to_yes_no_full,
    convert_to_yes_no_if_expression,
    convert_to_yes_no_expression,
    convert_to_yes_no_expression_inferred,
    convert_to_yes_no_short,
]


@pytest.mark.parametrize("convert", CONVERTERS)
def test_every_form_agrees(convert) -> None:
    assert convert(True) == "Yes"
    assert convert(False) == "No"


class TestNullableConversion:
    def test_none_is_no(self) -> None:
        assert to_yes_no(None) == "No"

    def test_true_and_false(self) -> None:
        assert to_yes_no(True) == "Yes"
        assert to_yes_no(False) == "No"

    def test_property_form(self) -> None:
        assert YesNo(True).yes_no == "Yes"
        assert YesNo(None).yes_no == "No"


def test_main_prints_one_line(capsys: pytest.CaptureFixture[str]) -> None:
    main()
    assert capsys.readouterr().out == "Yes, No, No\n"
