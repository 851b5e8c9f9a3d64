from __future__ import annotations

from dataclasses import astuple, dataclass, fields
from typing import TYPE_CHECKING, Tuple

from qif_csv.data_model.interfaces import IEntry, IToDict

CSV_COLUMNS: Tuple[str, str, str, str] = ("date", "reference", "note", "amount")


@dataclass
class QifEntry:
    """
    One QIF transaction record.

    Every field is text: ``date`` is an ISO-8601 midnight UTC timestamp and
    ``amount`` carries exactly two fraction digits. Unset fields stay empty.
    """

    date: str = ""
    reference: str = ""
    note: str = ""
    amount: str = ""

    def as_row(self) -> Tuple[str, str, str, str]:
        return astuple(self)  # type: ignore[return-value]

    def to_dict(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


if TYPE_CHECKING:
    _is_i_entry: type[IEntry] = QifEntry
    _is_IToDict: type[IToDict] = QifEntry
