"""Тесты для group (разделитель групп разрядов)."""

import pytest

from src.converter import group


class TestGroup:
    """Тесты для group"""

    def test_thousands(self) -> None:
        assert "".join(group(list("1000"), ",", 3)) == "1,000"

    def test_multiple_groups(self) -> None:
        assert "".join(group(list("1234567"), " ", 3)) == "1 234 567"

    def test_short_number_unchanged(self) -> None:
        assert group(list("12"), ",", 3) == ["1", "2"]

    def test_exact_multiple_has_no_leading_separator(self) -> None:
        assert "".join(group(list("123456"), ",", 3)) == "123,456"

    def test_leading_zeros_grouped(self) -> None:
        """Неудалённые ведущие нули участвуют в группировке"""
        assert "".join(group(list("0100"), ",", 3)) == "0,100"

    def test_indices(self) -> None:
        assert group([1, 0, 0, 0], ",", 2) == [1, 0, ",", 0, 0]

    def test_group_size_one(self) -> None:
        assert "".join(group(list("101"), "_", 1)) == "1_0_1"

    def test_empty(self) -> None:
        assert group([], ",", 3) == []

    def test_invalid_group_size(self) -> None:
        with pytest.raises(ValueError, match="group_size"):
            group(list("1000"), ",", 0)
