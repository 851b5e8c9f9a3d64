"""Convert QIF transaction records to CSV."""

from .controllers import (
    ConversionOptions,
    ConversionResult,
    CsvRecordSink,
    convert_source,
    convert_sources,
    find_qif_files,
    load_entries,
    open_csv_sink,
)
from .data_model import QifEntry, QifHeader
from .parsers import QifRecordParser, parse_qif_lines, parse_qif_text, read_header
from .utilities import (
    AmountFormatError,
    DateFormatError,
    InvalidHeaderError,
    QifError,
    ReadFailureError,
)

__version__ = "0.1.0"

__all__ = [
    "ConversionOptions",
    "ConversionResult",
    "CsvRecordSink",
    "convert_source",
    "convert_sources",
    "find_qif_files",
    "load_entries",
    "open_csv_sink",
    "QifEntry",
    "QifHeader",
    "QifRecordParser",
    "parse_qif_lines",
    "parse_qif_text",
    "read_header",
    "QifError",
    "InvalidHeaderError",
    "DateFormatError",
    "AmountFormatError",
    "ReadFailureError",
]
