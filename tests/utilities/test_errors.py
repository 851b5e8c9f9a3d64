# tests/utilities/test_errors.py
from __future__ import annotations

import pytest

from qif_csv.utilities.errors import (
    AmountFormatError,
    DateFormatError,
    InvalidHeaderError,
    QifError,
    ReadFailureError,
)


@pytest.mark.parametrize(
    "cls", [InvalidHeaderError, DateFormatError, AmountFormatError, ReadFailureError]
)
def test_every_error_kind_is_a_qif_error_and_value_error(cls):
    err = cls("boom")
    assert isinstance(err, QifError)
    assert isinstance(err, ValueError)


def test_str_without_context_is_just_the_message():
    assert str(QifError("bad thing")) == "bad thing"


def test_str_includes_source_and_line():
    # Arrange
    err = DateFormatError("invalid date", source="a.qif", line_number=7)
    # Act / Assert
    assert str(err) == "'a.qif' line 7: invalid date"


def test_str_with_source_only():
    err = InvalidHeaderError("invalid qif header", source="b.qif")
    assert str(err) == "'b.qif': invalid qif header"


def test_with_context_fills_missing_fields_and_returns_self():
    # Arrange
    err = AmountFormatError("invalid amount")
    # Act
    out = err.with_context("c.qif", 3)
    # Assert
    assert out is err
    assert (err.source, err.line_number) == ("c.qif", 3)


def test_with_context_does_not_overwrite_existing_context():
    # Arrange
    err = ReadFailureError("read failed", source="first.qif", line_number=2)
    # Act
    err.with_context("second.qif", 9)
    # Assert
    assert (err.source, err.line_number) == ("first.qif", 2)
