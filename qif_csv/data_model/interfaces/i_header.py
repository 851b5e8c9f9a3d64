# qif_csv/data_model/interfaces/i_header.py
from __future__ import annotations

from typing_extensions import Protocol, runtime_checkable

from .i_to_dict import IToDict


@runtime_checkable
class IHeader(IToDict, Protocol):
    # data attributes
    code: str
    type: str
