# tests/utilities/test_core_utilities.py
from __future__ import annotations

import pytest

from qif_csv.utilities.core_util import (
    is_hidden_name,
    open_for_read,
    open_for_write,
)


@pytest.mark.parametrize(
    "name, expected",
    [(".git", True), (".hidden.qif", True), ("visible.qif", False), (".", False), ("..", False)],
)
def test_is_hidden_name(name, expected):
    assert is_hidden_name(name) is expected


def test_open_for_write_creates_parents_and_round_trips(tmp_path):
    # Arrange
    target = tmp_path / "a" / "b" / "out.txt"
    # Act
    with open_for_write(target, encoding="utf-8") as f:
        f.write("hi")
    with open_for_read(target, binary=False, encoding="utf-8") as f:
        text = f.read()
    # Assert
    assert text == "hi"
