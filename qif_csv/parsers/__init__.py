from .qif_field_decoder import FIELD_SPECS, DecodedLine, FieldSpec, decode_line, split_line
from .qif_record_parser import (
    QifLineReader,
    QifRecordParser,
    RecordAccumulator,
    parse_qif_lines,
    parse_qif_text,
    read_header,
)

__all__ = [
    "FIELD_SPECS",
    "DecodedLine",
    "FieldSpec",
    "decode_line",
    "split_line",
    "QifLineReader",
    "QifRecordParser",
    "RecordAccumulator",
    "parse_qif_lines",
    "parse_qif_text",
    "read_header",
]
