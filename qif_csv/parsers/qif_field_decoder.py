# qif_csv/parsers/qif_field_decoder.py
"""
Decode one QIF line into a field code and a normalized value.

Dispatch goes through ``FIELD_SPECS``, a table keyed by :class:`FieldCode`
that maps each code to the record attribute it sets and the normalizer that
validates and reformats the raw text. Adding a code means adding a row.

===========  ===========  ===========================================
Code         Attribute    Normalization
===========  ===========  ===========================================
``D``        date         ``DD/MM/YYYY`` -> ``YYYY-MM-DDT00:00:00Z``
``N``        reference    verbatim
``M``        note         verbatim
``T``        amount       strip ``,`` then two fraction digits
``^``        (none)       record terminator
===========  ===========  ===========================================

Any other code decodes to an *unknown* line that sets nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Tuple

from qif_csv.data_model.interfaces import FieldCode
from qif_csv.utilities.converters_scalar import to_amount_string, to_iso_midnight


def _verbatim(value: str) -> str:
    return value


@dataclass(frozen=True)
class FieldSpec:
    attribute: str
    normalize: Callable[[str], str] = _verbatim


FIELD_SPECS: Mapping[FieldCode, FieldSpec] = {
    FieldCode.DATE: FieldSpec("date", to_iso_midnight),
    FieldCode.REFERENCE: FieldSpec("reference"),
    FieldCode.NOTE: FieldSpec("note"),
    FieldCode.AMOUNT: FieldSpec("amount", to_amount_string),
}


@dataclass(frozen=True)
class DecodedLine:
    code: str
    raw: str
    field_code: Optional[FieldCode] = None
    attribute: Optional[str] = None
    value: str = ""

    @property
    def is_terminator(self) -> bool:
        return self.field_code is FieldCode.TERMINATOR

    @property
    def is_known(self) -> bool:
        return self.field_code is not None


def split_line(line: str) -> Tuple[str, str]:
    """``"T1,234.50"`` -> ``("T", "1,234.50")``."""
    if not line:
        raise ValueError("Cannot split an empty QIF line")
    return line[0], line[1:]


def decode_line(line: str) -> DecodedLine:
    """
    Decode a trimmed, non-empty QIF line.

    Raises ``DateFormatError`` / ``AmountFormatError`` (without source context)
    when a ``D`` or ``T`` value is malformed.
    """
    code, raw = split_line(line)
    field_code = FieldCode.from_char(code)
    if field_code is None or field_code is FieldCode.TERMINATOR:
        return DecodedLine(code=code, raw=raw, field_code=field_code)
    field_spec = FIELD_SPECS[field_code]
    return DecodedLine(
        code=code,
        raw=raw,
        field_code=field_code,
        attribute=field_spec.attribute,
        value=field_spec.normalize(raw),
    )
