# qif_csv/data_model/interfaces/i_entry.py
from __future__ import annotations

from typing import Tuple

from typing_extensions import Protocol, runtime_checkable

from .i_to_dict import IToDict


@runtime_checkable
class IEntry(IToDict, Protocol):
    """A completed transaction record, every field already normalized to text."""

    date: str
    reference: str
    note: str
    amount: str

    def as_row(self) -> Tuple[str, str, str, str]: ...
