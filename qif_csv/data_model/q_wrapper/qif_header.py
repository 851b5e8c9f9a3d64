from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from qif_csv.data_model.interfaces import IHeader, IToDict

QIF_SECTION_PREFIX: Final[str] = "!Type:"


@dataclass(frozen=True)
class QifHeader:
    code: str
    type: str = ""

    @classmethod
    def from_line(cls, line: str) -> "QifHeader":
        """Build from a ``!Type:<name>`` line; caller has already checked the prefix."""
        return cls(code=line, type=line[len(QIF_SECTION_PREFIX):].strip())

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code, "type": self.type}


def is_section_header(line: str) -> bool:
    return line.startswith(QIF_SECTION_PREFIX)


if TYPE_CHECKING:
    _is_i_header: type[IHeader] = QifHeader
    _is_IToDict: type[IToDict] = QifHeader
