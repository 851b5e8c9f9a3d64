# qif_csv/data_model/interfaces/i_to_dict.py
from __future__ import annotations

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class IToDict(Protocol):
    def to_dict(self) -> dict[str, str]: ...
